"""
fallback_menu.py - Canned menu served when no hall could be scraped
"""

import copy

SAMPLE_MENUS = {
    "Frist": {
        "breakfast": {
            "entrees": ["Scrambled Eggs", "Bacon", "Pancakes"],
            "sides": ["Hash Browns", "Fresh Fruit"],
            "desserts": ["Yogurt"],
            "other": []
        },
        "lunch": {
            "entrees": ["Chicken Sandwich", "Grilled Chicken"],
            "sides": ["Caesar Salad", "French Fries"],
            "desserts": ["Apple Pie"],
            "other": ["Tomato Soup"]
        },
        "dinner": {
            "entrees": ["Grilled Salmon", "Roast Chicken", "Pasta Primavera"],
            "sides": ["Steamed Broccoli"],
            "desserts": ["Tiramisu"],
            "other": []
        }
    },
    "Whitman": {
        "breakfast": {
            "entrees": ["Omelets", "Sausage", "French Toast"],
            "sides": ["Bagels", "Oatmeal"],
            "desserts": [],
            "other": ["Fresh Juice"]
        },
        "lunch": {
            "entrees": ["Grilled Chicken", "Turkey Wrap"],
            "sides": ["Greek Salad", "Roasted Vegetables"],
            "desserts": ["Chocolate Cake"],
            "other": ["Minestrone Soup"]
        },
        "dinner": {
            "entrees": ["Beef Tenderloin", "Baked Cod", "Vegetable Lasagna"],
            "sides": ["Green Beans"],
            "desserts": ["Cheesecake"],
            "other": []
        }
    }
}


def get_sample_data():
    """Fresh copy of the canned menu so callers can't mutate SAMPLE_MENUS"""
    return copy.deepcopy(SAMPLE_MENUS)
