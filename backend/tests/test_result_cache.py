"""
Tests for ExpiringCache with an injected clock.
"""
import pytest

from app.services.compliance.result_cache import ExpiringCache


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def cache(clock):
    return ExpiringCache(ttl_seconds=60, clock=clock)


class TestExpiringCache:

    def test_get_before_expiry(self, cache, clock):
        cache.set("a", {"score": 80})
        clock.advance(59)

        assert cache.get("a") == {"score": 80}
        assert "a" in cache

    def test_expires_at_ttl(self, cache, clock):
        cache.set("a", 1)
        clock.advance(60)

        assert cache.get("a") is None
        assert "a" not in cache
        assert len(cache) == 0

    def test_set_refreshes_expiry(self, cache, clock):
        cache.set("a", 1)
        clock.advance(50)
        cache.set("a", 2)
        clock.advance(50)

        assert cache.get("a") == 2

    def test_invalidate(self, cache):
        cache.set("a", 1)

        assert cache.invalidate("a") is True
        assert cache.invalidate("a") is False
        assert cache.get("a", "missing") == "missing"

    def test_clear(self, cache):
        cache.set("a", 1)
        cache.set("b", 2)
        cache.clear()

        assert len(cache) == 0

    def test_len_counts_live_entries_only(self, cache, clock):
        cache.set("old", 1)
        clock.advance(30)
        cache.set("new", 2)
        clock.advance(31)

        assert len(cache) == 1

    def test_rejects_non_positive_ttl(self):
        with pytest.raises(ValueError):
            ExpiringCache(ttl_seconds=0)
