from menu_cache import MenuCache


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


MENUS = {"Frist": {"lunch": {"entrees": ["Cheese Pizza"], "sides": [], "desserts": [], "other": []}}}


def test_get_returns_what_was_put():
    cache = MenuCache(ttl=3600, clock=FakeClock())
    cache.put("10/19/2026", MENUS)

    assert cache.get("10/19/2026") is MENUS
    assert cache.get("10/20/2026") is None


def test_default_ttl_is_one_hour():
    assert MenuCache().ttl == 3600


def test_entry_expires_after_ttl():
    clock = FakeClock()
    cache = MenuCache(ttl=3600, clock=clock)
    cache.put("10/19/2026", MENUS)

    clock.advance(3599)
    assert cache.get("10/19/2026") is MENUS

    clock.advance(1)
    assert cache.get("10/19/2026") is None
    assert len(cache) == 0


def test_expiry_is_per_key():
    clock = FakeClock()
    cache = MenuCache(ttl=100, clock=clock)
    cache.put("10/19/2026", MENUS)
    clock.advance(60)
    cache.put("10/20/2026", MENUS)
    clock.advance(50)

    assert cache.get("10/19/2026") is None
    assert cache.get("10/20/2026") is MENUS


def test_put_replaces_existing_entry_and_restarts_ttl():
    clock = FakeClock()
    cache = MenuCache(ttl=100, clock=clock)
    cache.put("10/19/2026", {"Old": {}})
    clock.advance(90)
    cache.put("10/19/2026", MENUS)
    clock.advance(50)

    assert cache.get("10/19/2026") is MENUS


def test_invalidate_and_clear():
    cache = MenuCache(ttl=100, clock=FakeClock())
    cache.put("10/19/2026", MENUS)
    cache.put("10/20/2026", MENUS)

    assert cache.invalidate("10/19/2026") is True
    assert cache.invalidate("10/19/2026") is False
    assert cache.cached_dates() == ["10/20/2026"]

    cache.clear()
    assert len(cache) == 0
