"""Outcome values returned by catalog lookups.

Every expected condition (missing key, rate limit, 404, timeouts, ...) is a
``LookupResult`` with a ``LookupStatus`` rather than an exception.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class LookupKind(str, Enum):
    """The three request kinds served by the catalog client."""

    SEARCH = "search"
    ITEM = "item"
    SEASON = "season"


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    UNCONFIGURED = "unconfigured"
    RATE_LIMITED = "rate_limited"
    TRANSPORT_FAILURE = "transport_failure"
    DECODE_FAILURE = "decode_failure"
    CANCELLED = "cancelled"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class LookupResult(Generic[T]):
    """Outcome of one lookup.

    ``payload`` is set only for ``FOUND``.  ``message`` carries the upstream
    message for rate limits and a short reason for failures.  ``cached`` is
    True when the answer was served from the response cache.
    """

    status: LookupStatus
    payload: T | None = None
    message: str = ""
    status_code: int | None = None
    cached: bool = False

    @property
    def found(self) -> bool:
        return self.status is LookupStatus.FOUND

    @property
    def unavailable(self) -> bool:
        """True when the catalog could not answer (neither found nor absent)."""
        return self.status not in (LookupStatus.FOUND, LookupStatus.NOT_FOUND)

    @classmethod
    def hit(cls, payload: T, *, cached: bool = False) -> LookupResult[T]:
        return cls(status=LookupStatus.FOUND, payload=payload, cached=cached)

    @classmethod
    def not_found(
        cls, *, cached: bool = False, status_code: int | None = 404
    ) -> LookupResult[T]:
        return cls(status=LookupStatus.NOT_FOUND, status_code=status_code, cached=cached)

    @classmethod
    def failure(
        cls,
        status: LookupStatus,
        message: str = "",
        *,
        status_code: int | None = None,
    ) -> LookupResult[T]:
        return cls(status=status, message=message, status_code=status_code)
