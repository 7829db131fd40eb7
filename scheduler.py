#!/usr/bin/env python3
"""
Background cache warmer
Scrapes today's menus once at startup and then daily, so the first
visitor of the day doesn't wait on the dining site.
"""

import threading
import time
from datetime import datetime

import schedule

import config


def warm_cache(service):
    """Scrape today's menus into the cache"""
    print(f"\n{'='*60}")
    print(f"🕐 Cache warm-up at {datetime.now().strftime('%I:%M %p')}")
    print(f"{'='*60}\n")

    try:
        date, hall_count = service.refresh()
        if hall_count:
            print(f"✅ Cached {hall_count} halls for {date}")
        else:
            print(f"⚠️ No halls scraped for {date}; requests will retry")
    except Exception as e:
        print(f"❌ Error: {e}")


def run_scheduler(service, at: str = None, scheduler: schedule.Scheduler = None):
    """Warm now, then every day at `at` (HH:MM). Never returns."""
    scheduler = scheduler or schedule.Scheduler()
    at = at or config.WARM_CACHE_AT

    print("🚀 Scheduler thread starting...")
    warm_cache(service)

    scheduler.every().day.at(at).do(warm_cache, service)
    print(f"⏰ Cache warm-up scheduled at {at} daily\n")

    while True:
        scheduler.run_pending()
        time.sleep(60)


def start_scheduler_thread(service, at: str = None) -> threading.Thread:
    """Run the scheduler loop on a daemon thread"""
    thread = threading.Thread(target=run_scheduler, args=(service, at), daemon=True)
    thread.start()
    return thread
