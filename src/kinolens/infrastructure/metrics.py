"""Zero-impact in-memory lookup metrics.

All counters are plain Python integers manipulated inside the single-threaded
async event loop: no locks, no I/O, no external dependencies.

``time.perf_counter_ns()`` is used for timing (monotonic, nanosecond
resolution, near-zero overhead).
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

from kinolens.domain.entities.lookup import LookupKind, LookupStatus


@dataclass
class KindStats:
    """Accumulated statistics for one lookup kind."""

    lookups: int = 0
    cache_hits: int = 0
    network_calls: int = 0
    total_network_ns: int = 0
    statuses: dict[LookupStatus, int] = field(default_factory=dict)

    def snapshot(self) -> dict[str, object]:
        """Return a JSON-serializable summary."""
        avg_ms = (
            round(self.total_network_ns / self.network_calls / 1_000_000, 1)
            if self.network_calls
            else 0.0
        )
        return {
            "lookups": self.lookups,
            "cache_hits": self.cache_hits,
            "network_calls": self.network_calls,
            "avg_network_ms": avg_ms,
            "statuses": {s.value: n for s, n in sorted(self.statuses.items())},
        }


@dataclass
class LookupMetrics:
    """Observability sink for catalog lookups (implements LookupObserverPort).

    Identifying parameters are accepted for interface symmetry with the
    log events but not retained, so memory stays bounded.
    """

    _kinds: dict[LookupKind, KindStats] = field(default_factory=dict)
    _start_ns: int = field(default_factory=time.perf_counter_ns)

    def record(
        self,
        kind: LookupKind,
        status: LookupStatus,
        *,
        cached: bool = False,
        duration_ns: int = 0,
        **params: Any,
    ) -> None:
        stats = self._kinds.setdefault(kind, KindStats())
        stats.lookups += 1
        stats.statuses[status] = stats.statuses.get(status, 0) + 1
        if cached:
            stats.cache_hits += 1
        elif duration_ns:
            stats.network_calls += 1
            stats.total_network_ns += duration_ns

    def count(self, kind: LookupKind, status: LookupStatus | None = None) -> int:
        """Lookups of *kind*, optionally restricted to one status."""
        stats = self._kinds.get(kind)
        if stats is None:
            return 0
        if status is None:
            return stats.lookups
        return stats.statuses.get(status, 0)

    def snapshot(self) -> dict[str, object]:
        uptime_s = round((time.perf_counter_ns() - self._start_ns) / 1e9, 1)
        return {
            "uptime_seconds": uptime_s,
            "kinds": {k.value: s.snapshot() for k, s in sorted(self._kinds.items())},
        }

    def reset(self) -> None:
        self._kinds.clear()
        self._start_ns = time.perf_counter_ns()
