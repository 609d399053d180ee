"""Value objects for the response cache."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CacheKey(Generic[T]):
    """Cache key tagged with the payload type stored under it.

    The type parameter is never inspected at runtime; it lets
    ``ResponseCachePort.get`` return a statically typed payload.
    """

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """Stored outcome: a payload, or None for a confirmed absence."""

    payload: T | None
    expires_at: float

    @property
    def negative(self) -> bool:
        return self.payload is None


@dataclass(frozen=True)
class CacheLookup(Generic[T]):
    """Result of ``ResponseCachePort.get``.

    - ``found=False``: nothing stored.
    - ``found=True, fresh=False``: an expired entry was observed (and evicted).
    - ``found=True, fresh=True``: usable; ``payload`` None means known absent.
    """

    payload: T | None = None
    found: bool = False
    fresh: bool = False

    @property
    def hit(self) -> bool:
        return self.found and self.fresh
