"""
config.py - Runtime settings for the dining menus backend

Every value can be overridden through an environment variable of the same name.
"""

import os


def _env_int(name, default):
    value = os.environ.get(name)
    if value is None or value.strip() == "":
        return default
    return int(value)


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# HTTP server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = _env_int("PORT", 3000)

# Menu data is cached for 1 hour per resolved date
CACHE_TTL_SECONDS = _env_int("CACHE_TTL_SECONDS", 3600)

# Seconds before an upstream request is abandoned
REQUEST_TIMEOUT = _env_int("REQUEST_TIMEOUT", 10)

# None means one worker per dining hall
MAX_SCRAPE_WORKERS = _env_int("MAX_SCRAPE_WORKERS", None)

# Princeton is on Eastern time; "today" is resolved here, not on the host clock
DINING_TIMEZONE = os.environ.get("DINING_TIMEZONE", "America/New_York")

# Background cache warming (off unless explicitly enabled)
WARM_CACHE = _env_flag("WARM_CACHE")
WARM_CACHE_AT = os.environ.get("WARM_CACHE_AT", "05:00")
