"""
Shared menu structures and category classification for dining scrapers
"""

import re
from typing import Dict, List

# Fixed category buckets, in the order they appear in every meal
CATEGORIES = ("entrees", "sides", "desserts", "other")

# {category: [item, ...]}
CategoryBuckets = Dict[str, List[str]]
# {meal period: CategoryBuckets}; meal names are whatever the page says
MealMenu = Dict[str, CategoryBuckets]
# {hall name: MealMenu}
AllHallsMenu = Dict[str, MealMenu]

# Checked in order, first match wins
CATEGORY_TITLE_RULES = [
    ("entrees", ("entree", "grill", "main")),
    ("sides", ("side", "vegetable")),
    ("desserts", ("dessert", "sweet")),
]

ITEM_KEYWORD_RULES = [
    ("entrees", re.compile(r"chicken|beef|fish|pork|turkey|salmon|steak|burger|pizza|pasta")),
    ("desserts", re.compile(r"cake|pie|cookie|ice cream|brownie|pudding|dessert")),
    ("sides", re.compile(r"salad|vegetable|potato|rice|fries|beans")),
]


def empty_categories() -> CategoryBuckets:
    """Fresh set of empty buckets for a meal period"""
    return {category: [] for category in CATEGORIES}


def classify_category_title(title: str) -> str:
    """Bucket for an item based on the station/category heading it sits under"""
    title = (title or "").lower()
    for category, keywords in CATEGORY_TITLE_RULES:
        if any(keyword in title for keyword in keywords):
            return category
    return "other"


def classify_item_name(name: str) -> str:
    """Bucket for an item based on keywords in its own name"""
    name = (name or "").lower()
    for category, pattern in ITEM_KEYWORD_RULES:
        if pattern.search(name):
            return category
    return "other"


def count_items(meals: MealMenu) -> int:
    """Total number of items across every meal and bucket"""
    return sum(
        len(items)
        for categories in meals.values()
        for items in categories.values()
    )
