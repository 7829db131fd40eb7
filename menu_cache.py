"""
menu_cache.py - In-memory menu cache keyed by resolved date

One instance is created at startup and shared by every request. Entries
expire a fixed number of seconds after they were written; expiry is checked
on read.
"""

import threading
import time
from typing import Callable, Dict, Optional, Tuple

import config
from scrapers.shared import AllHallsMenu


class MenuCache:
    """Per-date TTL cache for scraped menus"""

    def __init__(self, ttl: Optional[int] = None, clock: Callable[[], float] = time.monotonic):
        self.ttl = config.CACHE_TTL_SECONDS if ttl is None else ttl
        self._clock = clock
        self._entries: Dict[str, Tuple[AllHallsMenu, float]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def cache_key(date: str) -> str:
        return f"menus_{date}"

    def get(self, date: str) -> Optional[AllHallsMenu]:
        """Cached menus for a date, or None if missing or expired"""
        key = self.cache_key(date)
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None

            menus, stored_at = entry
            if self._clock() - stored_at >= self.ttl:
                del self._entries[key]
                return None
            return menus

    def put(self, date: str, menus: AllHallsMenu) -> None:
        """Store menus for a date, replacing any previous entry"""
        with self._lock:
            self._entries[self.cache_key(date)] = (menus, self._clock())

    def invalidate(self, date: str) -> bool:
        with self._lock:
            return self._entries.pop(self.cache_key(date), None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def cached_dates(self):
        """Dates with a live (unexpired) entry"""
        now = self._clock()
        with self._lock:
            return [
                key[len("menus_"):]
                for key, (_, stored_at) in self._entries.items()
                if now - stored_at < self.ttl
            ]

    def __len__(self):
        return len(self.cached_dates())
