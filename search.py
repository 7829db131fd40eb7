"""
search.py - Substring search over scraped menus
"""

from dataclasses import asdict, dataclass
from typing import List

from scrapers.shared import AllHallsMenu


class MissingQueryError(ValueError):
    """Raised when a search is attempted without a query"""

    def __init__(self, message="Query parameter is required"):
        super().__init__(message)


@dataclass
class SearchResult:
    item: str
    hall: str
    meal: str
    category: str
    day: str

    def to_dict(self):
        return asdict(self)


def search_menus(all_menus: AllHallsMenu, query: str, day_label: str = 'today') -> List[SearchResult]:
    """
    Case-insensitive substring match against every item name.

    Results follow hall -> meal -> category -> item order of the menu data.
    """
    if not query:
        raise MissingQueryError()

    search_term = query.lower()
    results = []

    for hall, meals in all_menus.items():
        for meal, categories in meals.items():
            for category, items in categories.items():
                for item in items:
                    if search_term in item.lower():
                        results.append(SearchResult(
                            item=item,
                            hall=hall,
                            meal=meal,
                            category=category,
                            day=day_label
                        ))

    return results
