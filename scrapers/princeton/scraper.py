#!/usr/bin/env python3
"""
Princeton Dining Scraper
Reads the FoodPro online menu pages at menus.princeton.edu.

Two page layouts are handled:
  - AccordionMenuScraper: location menu page, one accordion per meal period
  - MenuTableScraper: direct menu page, one table/section per meal period
The orchestrator only falls back to the table layout when the accordion
layout yields nothing.
"""

import re
from typing import Optional

from bs4 import BeautifulSoup

from scrapers.base_scraper import BaseScraper
from scrapers.shared import MealMenu, classify_category_title, classify_item_name

FOODPRO_BASE = "https://menus.princeton.edu/dining/_Foodpro/online-menu"

# FoodPro location numbers
DINING_HALLS = {
    '1': 'Frist',
    '2': 'Whitman',
    '3': 'Butler',
    '4': 'CJL',
    '5': 'Forbes',
    '640': 'Graduate College'
}

# Labels and headings that show up in the table layout's cells
LABEL_PREFIX = re.compile(r'^(Entree|Side|Dessert|Breakfast|Lunch|Dinner)', re.IGNORECASE)


def _text(elements) -> str:
    """Concatenated text of a selection, like jQuery's .text()"""
    return "".join(el.get_text() for el in elements)


class AccordionMenuScraper(BaseScraper):
    """Primary layout: meal names come verbatim from the accordion headers"""

    name = "accordion"
    endpoint = f"{FOODPRO_BASE}/indexlocationmenu.asp"
    filter_param = "mealName"

    def extract(self, html: Optional[str], location_id: str) -> MealMenu:
        if not html:
            return {}

        soup = BeautifulSoup(html, 'html.parser')
        menu: MealMenu = {}

        for accordion in soup.select('.accordion'):
            meal_name = _text(accordion.select('.accordion-toggle')).strip().lower()
            meal = self.ensure_meal(menu, meal_name)

            for item in accordion.select('.menu-item, .item'):
                item_name = item.get_text().strip()
                if not item_name:
                    continue

                if 'menu-category' in item.get('class', []):
                    category_block = item
                else:
                    category_block = item.find_parent(class_='menu-category')
                title = _text(category_block.select('.category-title')) if category_block else ''
                meal[classify_category_title(title.strip())].append(item_name)

        return menu


class MenuTableScraper(BaseScraper):
    """Secondary layout: meal period guessed from headings, category from item names"""

    name = "menu-table"
    endpoint = f"{FOODPRO_BASE}/menupage.asp"
    filter_param = "sName"

    @staticmethod
    def meal_from_header(header: str) -> str:
        header = header.lower()
        if 'breakfast' in header:
            return 'breakfast'
        elif 'lunch' in header or 'brunch' in header:
            return 'lunch'
        elif 'dinner' in header:
            return 'dinner'
        elif 'late' in header:
            return 'late night'
        return 'lunch'

    @staticmethod
    def is_menu_item(text: str) -> bool:
        return len(text) > 2 and not LABEL_PREFIX.match(text)

    def extract(self, html: Optional[str], location_id: str) -> MealMenu:
        if not html:
            return {}

        soup = BeautifulSoup(html, 'html.parser')
        menu: MealMenu = {}

        for section in soup.select('table.menu-table, div.menu-section'):
            header = section.select_one('h2, h3, .meal-name')
            header_text = header.get_text().strip() if header else ''
            meal = self.ensure_meal(menu, self.meal_from_header(header_text))

            for item in section.select('td, div.item, span.item-name'):
                item_name = item.get_text().strip()
                if not self.is_menu_item(item_name):
                    continue
                meal[classify_item_name(item_name)].append(item_name)

        return menu

