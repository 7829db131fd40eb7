"""
meal_periods.py - Date resolution for the Princeton menu site

The FoodPro pages take a `dtdate` parameter in MM/DD/YYYY format. Clients ask
for a weekday name ("monday") or nothing at all ("today").
"""

from datetime import date, datetime, timedelta
from zoneinfo import ZoneInfo

import config

DINING_TZ = ZoneInfo(config.DINING_TIMEZONE)

# Index matches datetime.weekday(): Monday is 0
WEEKDAYS = ['monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday']

# Static reference table; ingestion requests every meal at once with an empty filter
MEAL_PERIODS = {
    '0': 'breakfast',
    '1': 'lunch',
    '2': 'dinner',
    '3': 'late night'
}

DATE_FORMAT = '%m/%d/%Y'


def today_local():
    """Get today's calendar date in the dining timezone"""
    return datetime.now(DINING_TZ).date()


def format_site_date(value: date) -> str:
    """Format a date the way the menu site expects it (MM/DD/YYYY)"""
    return value.strftime(DATE_FORMAT)


def get_current_date():
    """
    Get today's date string in MM/DD/YYYY format (dining timezone)

    Returns:
        str: Date in MM/DD/YYYY format
    """
    return format_site_date(today_local())


def resolve_date(day_label=None, today=None):
    """
    Map a weekday name to the next matching calendar date.

    Args:
        day_label: weekday name, any case. None, empty or unrecognized
                   labels fall back to today.
        today: reference date (defaults to today in the dining timezone)

    Returns:
        str: Date in MM/DD/YYYY format, 0-6 days from today
    """
    if today is None:
        today = today_local()

    if not day_label:
        return format_site_date(today)

    label = str(day_label).lower()
    if label not in WEEKDAYS:
        return format_site_date(today)

    days_ahead = (WEEKDAYS.index(label) - today.weekday() + 7) % 7
    return format_site_date(today + timedelta(days=days_ahead))


def day_label_for(day_label):
    """Label echoed back in search results"""
    return day_label or 'today'


if __name__ == "__main__":
    print(f"Current date: {get_current_date()}")
    for name in WEEKDAYS:
        print(f"{name.title():<10} -> {resolve_date(name)}")
