#!/usr/bin/env python3
"""
Base Scraper
Common functionality for the menu page extraction strategies.
"""

import requests
from abc import ABC, abstractmethod
from typing import Dict, Optional

import config
from scrapers.shared import MealMenu, empty_categories

USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36'


class BaseScraper(ABC):
    """
    Abstract base class for menu extraction strategies.
    Each strategy names its endpoint and filter parameter and must
    implement extract().
    """

    name = "base"
    endpoint = ""
    # Endpoint-specific meal/station filter, always sent empty
    filter_param = ""

    def __init__(self, session: Optional[requests.Session] = None, timeout: Optional[int] = None):
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': USER_AGENT,
        })

    def build_params(self, location_id: str, date: str) -> Dict[str, str]:
        """Query string for one hall on one date (date is MM/DD/YYYY)"""
        params = {
            'locationNum': location_id,
            'dtdate': date,
        }
        if self.filter_param:
            params[self.filter_param] = ''
        return params

    def fetch_html(self, location_id: str, date: str) -> str:
        """Fetch the raw menu page. Raises requests.RequestException on failure."""
        response = self.session.get(
            self.endpoint,
            params=self.build_params(location_id, date),
            timeout=self.timeout
        )
        response.raise_for_status()
        return response.text

    @abstractmethod
    def extract(self, html: Optional[str], location_id: str) -> MealMenu:
        """
        Parse one hall's page into {meal: {category: [items]}}.

        Must not raise on empty or malformed markup; returns {} instead.
        """
        pass

    def scrape(self, location_id: str, date: str) -> MealMenu:
        """Fetch and extract one hall's menu; transport errors yield {}"""
        try:
            html = self.fetch_html(location_id, date)
        except requests.RequestException as e:
            print(f"   ❌ {self.name} fetch failed for location {location_id}: {e}")
            return {}
        return self.extract(html, location_id)

    @staticmethod
    def ensure_meal(menu: MealMenu, meal_name: str):
        """Get (creating if needed) the buckets for a meal period"""
        if meal_name not in menu:
            menu[meal_name] = empty_categories()
        return menu[meal_name]
