"""Response Cache Port - process-wide store for lookup outcomes."""

from __future__ import annotations

from typing import Protocol, TypeVar

from kinolens.domain.entities.cache import CacheKey, CacheLookup

T = TypeVar("T")


class ResponseCachePort(Protocol):
    """Key -> (payload | known-absent, expiry) store.

    Expired entries are evicted lazily when observed by ``get``.
    Last writer for a key wins.
    """

    def get(self, key: CacheKey[T]) -> CacheLookup[T]:
        """Look up *key*. See ``CacheLookup`` for the three possible states."""
        ...

    def put(self, key: CacheKey[T], payload: T | None, *, ttl: float) -> None:
        """Store *payload* (None = confirmed absent) for *ttl* seconds."""
        ...

    def clear(self) -> None:
        ...

    def __len__(self) -> int: ...
