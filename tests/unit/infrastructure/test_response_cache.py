"""Tests for the in-memory ResponseCache."""

from __future__ import annotations

import pytest

from kinolens.domain.entities.cache import CacheKey
from kinolens.infrastructure.cache.memory_adapter import ResponseCache


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(clock: FakeClock) -> ResponseCache:
    return ResponseCache(clock=clock)


_KEY: CacheKey[str] = CacheKey("movie:301")


class TestGet:
    def test_missing_key(self, cache: ResponseCache) -> None:
        lookup = cache.get(_KEY)
        assert lookup.found is False
        assert lookup.hit is False

    def test_fresh_positive_entry(self, cache: ResponseCache) -> None:
        cache.put(_KEY, "matrix", ttl=60)
        lookup = cache.get(_KEY)
        assert lookup.hit is True
        assert lookup.payload == "matrix"

    def test_fresh_negative_entry(self, cache: ResponseCache) -> None:
        cache.put(_KEY, None, ttl=60)
        lookup = cache.get(_KEY)
        assert lookup.hit is True
        assert lookup.payload is None

    def test_entry_valid_until_just_before_expiry(
        self, cache: ResponseCache, clock: FakeClock
    ) -> None:
        cache.put(_KEY, "matrix", ttl=60)
        clock.now += 59.999
        assert cache.get(_KEY).hit is True

    def test_expired_entry_is_evicted(
        self, cache: ResponseCache, clock: FakeClock
    ) -> None:
        cache.put(_KEY, "matrix", ttl=60)
        clock.now += 60

        lookup = cache.get(_KEY)

        assert lookup.found is True
        assert lookup.fresh is False
        assert lookup.payload is None
        assert _KEY not in cache
        assert len(cache) == 0
        # Second read sees nothing at all.
        assert cache.get(_KEY).found is False

    def test_expiry_does_not_touch_other_keys(
        self, cache: ResponseCache, clock: FakeClock
    ) -> None:
        other: CacheKey[str] = CacheKey("movie:302")
        cache.put(_KEY, "a", ttl=10)
        cache.put(other, "b", ttl=100)
        clock.now += 50

        cache.get(_KEY)

        assert other in cache
        assert cache.get(other).payload == "b"


class TestPut:
    def test_last_writer_wins(self, cache: ResponseCache) -> None:
        cache.put(_KEY, None, ttl=60)
        cache.put(_KEY, "matrix", ttl=60)
        assert cache.get(_KEY).payload == "matrix"

    def test_positive_replaced_by_negative(self, cache: ResponseCache) -> None:
        cache.put(_KEY, "matrix", ttl=60)
        cache.put(_KEY, None, ttl=60)
        lookup = cache.get(_KEY)
        assert lookup.hit is True
        assert lookup.payload is None

    def test_rewrite_refreshes_expiry(
        self, cache: ResponseCache, clock: FakeClock
    ) -> None:
        cache.put(_KEY, "old", ttl=10)
        clock.now += 9
        cache.put(_KEY, "new", ttl=10)
        clock.now += 9
        assert cache.get(_KEY).payload == "new"

    @pytest.mark.parametrize("ttl", [0, -1])
    def test_non_positive_ttl_rejected(self, cache: ResponseCache, ttl: float) -> None:
        with pytest.raises(ValueError, match="ttl"):
            cache.put(_KEY, "x", ttl=ttl)


class TestHousekeeping:
    def test_len_and_contains(self, cache: ResponseCache) -> None:
        cache.put(_KEY, "x", ttl=1)
        assert len(cache) == 1
        assert _KEY in cache
        assert "movie:301" in cache
        assert "movie:999" not in cache

    def test_clear(self, cache: ResponseCache) -> None:
        cache.put(_KEY, "x", ttl=1)
        cache.clear()
        assert len(cache) == 0
