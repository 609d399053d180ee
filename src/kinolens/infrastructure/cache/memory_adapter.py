"""In-memory response cache shared by all lookups of one process."""

from __future__ import annotations

import time
from typing import Any, Callable, TypeVar

import structlog

from kinolens.domain.entities.cache import CacheEntry, CacheKey, CacheLookup

log = structlog.get_logger(__name__)

T = TypeVar("T")


class ResponseCache:
    """Process-wide key -> ``CacheEntry`` store with lazy expiry.

    - Entries are replaced, never mutated; last writer wins.
    - Expired entries are evicted when ``get`` observes them (no sweeper).
    - Nothing is persisted across restarts.

    Thread-safety note: not thread-safe, but safe for single-threaded
    asyncio: ``get``/``put`` contain no await points, so no other
    coroutine can interleave within one call.

    Args:
        clock: Monotonic seconds source (injectable for tests).
    """

    def __init__(self, *, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, CacheEntry[Any]] = {}

    def get(self, key: CacheKey[T]) -> CacheLookup[T]:
        entry = self._entries.get(key.value)
        if entry is None:
            return CacheLookup()

        if entry.expires_at <= self._clock():
            # Only evict the entry we looked at; a concurrent put may have
            # already replaced it.
            if self._entries.get(key.value) is entry:
                del self._entries[key.value]
            log.debug("response_cache_evicted", key=key.value)
            return CacheLookup(found=True, fresh=False)

        return CacheLookup(payload=entry.payload, found=True, fresh=True)

    def put(self, key: CacheKey[T], payload: T | None, *, ttl: float) -> None:
        if ttl <= 0:
            raise ValueError("ttl must be > 0")
        self._entries[key.value] = CacheEntry(
            payload=payload,
            expires_at=self._clock() + ttl,
        )
        log.debug(
            "response_cache_put",
            key=key.value,
            ttl=ttl,
            negative=payload is None,
        )

    def clear(self) -> None:
        self._entries.clear()
        log.info("response_cache_cleared")

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        if isinstance(key, CacheKey):
            return key.value in self._entries
        return key in self._entries
