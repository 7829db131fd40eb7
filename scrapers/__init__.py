"""
scrapers package

Menu page extraction strategies. `base_scraper` holds the shared interface,
`shared` the menu structures and category rules, and each school lives in
its own subpackage.
"""

__all__ = ["base_scraper", "shared", "princeton"]
