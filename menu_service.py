"""
menu_service.py - Cache-or-scrape access to menus, shared by the API routes
"""

from typing import Callable, List, Tuple

from fallback_menu import get_sample_data
from meal_periods import day_label_for, resolve_date
from menu_cache import MenuCache
from run_all_scrapers import ingest_all_halls
from scrapers.shared import AllHallsMenu
from search import MissingQueryError, SearchResult, search_menus


class MenuService:
    """
    Serves menus for a day label, scraping on a cache miss.

    Two requests missing on the same date both scrape; the later write wins.
    """

    def __init__(
        self,
        cache: MenuCache,
        ingest: Callable[[str], AllHallsMenu] = ingest_all_halls,
        fallback: Callable[[], AllHallsMenu] = get_sample_data
    ):
        self.cache = cache
        self.ingest = ingest
        self.fallback = fallback

    def menus_for_date(self, date: str) -> AllHallsMenu:
        cached = self.cache.get(date)
        if cached is not None:
            print(f"📦 Returning cached menu data for {date}")
            return cached

        all_menus = self.ingest(date)
        if not all_menus:
            # Not cached so the next request tries the site again
            print(f"⚠️ No halls scraped for {date}, serving sample data")
            return self.fallback()

        self.cache.put(date, all_menus)
        return all_menus

    def get_menus(self, day: str = None) -> AllHallsMenu:
        """All halls' menus for a weekday name (None for today)"""
        return self.menus_for_date(resolve_date(day))

    def search(self, query: str, day: str = None) -> List[SearchResult]:
        """
        Items whose names contain the query, across every hall.

        Raises MissingQueryError for an empty query before touching the cache.
        """
        if not query:
            raise MissingQueryError()

        all_menus = self.get_menus(day)
        return search_menus(all_menus, query, day_label_for(day))

    def refresh(self, day: str = None) -> Tuple[str, int]:
        """Drop the cached entry for a day and scrape it again"""
        date = resolve_date(day)
        self.cache.invalidate(date)
        self.menus_for_date(date)
        # Sample data is never cached, so a failed scrape reports 0 halls
        return date, len(self.cache.get(date) or {})
