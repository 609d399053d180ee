"""Port for reporting lookup outcomes to an observability sink."""

from __future__ import annotations

from typing import Any, Protocol

from kinolens.domain.entities.lookup import LookupKind, LookupStatus


class LookupObserverPort(Protocol):
    """Receives every lookup outcome, including cache hits and failures.

    ``params`` identify the request (title/year, id, or parent id/season
    number) and never contain the API key.
    """

    def record(
        self,
        kind: LookupKind,
        status: LookupStatus,
        *,
        cached: bool = False,
        duration_ns: int = 0,
        **params: Any,
    ) -> None: ...
