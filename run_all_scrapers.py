#!/usr/bin/env python3
"""
Unified Dining Scraper Runner
Scrapes every Princeton dining hall for one date and combines the results
"""

import argparse
import json
import os
from concurrent.futures import ThreadPoolExecutor, wait
from typing import Dict, Optional

import config
from meal_periods import resolve_date
from scrapers.base_scraper import BaseScraper
from scrapers.princeton.scraper import DINING_HALLS, AccordionMenuScraper, MenuTableScraper
from scrapers.shared import AllHallsMenu, MealMenu, count_items


def scrape_hall(location_id: str, date: str, primary: BaseScraper, secondary: BaseScraper) -> Optional[MealMenu]:
    """
    Menu for one hall: the primary layout if it found any meal period,
    otherwise the secondary layout, otherwise None.

    The secondary page is only requested when the primary comes back empty
    or raises.
    """
    try:
        menu = primary.scrape(location_id, date)
    except Exception as e:
        print(f"   ❌ {primary.name} failed for location {location_id}: {e}")
        menu = {}
    if menu:
        return menu

    menu = secondary.scrape(location_id, date)
    if menu:
        return menu

    return None


def ingest_all_halls(
    date: str,
    primary: BaseScraper = None,
    secondary: BaseScraper = None,
    halls: Dict[str, str] = None,
    max_workers: int = None
) -> AllHallsMenu:
    """
    Scrape all halls concurrently for a MM/DD/YYYY date.

    A hall that fails or yields nothing from both layouts is left out.
    """
    primary = primary or AccordionMenuScraper()
    secondary = secondary or MenuTableScraper()
    halls = DINING_HALLS if halls is None else halls
    if max_workers is None:
        max_workers = config.MAX_SCRAPE_WORKERS or len(halls) or 1

    print(f"\n🍽️  Fetching menus for date: {date}")

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            location_id: executor.submit(scrape_hall, location_id, date, primary, secondary)
            for location_id in halls
        }
        wait(futures.values())

    all_menus = {}
    for location_id, hall_name in halls.items():
        try:
            menu = futures[location_id].result()
        except Exception as e:
            print(f"   ❌ Failed to scrape {hall_name}: {e}")
            continue

        if menu:
            all_menus[hall_name] = menu
            print(f"   ✅ {hall_name}: {len(menu)} meal periods, {count_items(menu)} items")
        else:
            print(f"   ⚠️  {hall_name}: no menu found")

    return all_menus


def print_summary(all_menus: AllHallsMenu, date: str, output_file: str = None) -> None:
    """Print a per-hall summary of an ingestion run"""
    print("\n" + "=" * 60)
    print("📊 SUMMARY")
    print("=" * 60)

    total_items = 0
    for hall_name in DINING_HALLS.values():
        menu = all_menus.get(hall_name)
        if not menu:
            print(f"  🔴 {hall_name}: no menu")
            continue
        items = count_items(menu)
        total_items += items
        print(f"  🟢 {hall_name}: {', '.join(menu.keys())} ({items} items)")

    print(f"\n📌 TOTAL")
    print(f"  Date: {date}")
    print(f"  Halls with menus: {len(all_menus)}/{len(DINING_HALLS)}")
    print(f"  Total menu items: {total_items}")
    if output_file:
        print(f"  Saved to: {output_file}")
    print("=" * 60 + "\n")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Scrape all Princeton dining hall menus for one day")
    parser.add_argument('--day', help="Weekday name (defaults to today)")
    parser.add_argument(
        '--output',
        default=os.path.join(os.path.dirname(os.path.abspath(__file__)), 'menu_data.json'),
        help="Where to write the combined JSON"
    )
    args = parser.parse_args(argv)

    date = resolve_date(args.day)
    all_menus = ingest_all_halls(date)

    if not all_menus:
        print("\n❌ No data scraped. Site structure may have changed.")
        print_summary(all_menus, date)
        return 1

    with open(args.output, 'w') as f:
        json.dump(all_menus, f, indent=2)

    print_summary(all_menus, date, args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
