"""Single-holder gate serializing outbound catalog requests.

All lookups share one gate, so however many metadata lookups run
concurrently, at most one HTTP request is in flight against the API.
The gate only serializes; it does not count requests per day.
"""

from __future__ import annotations

import asyncio
from contextlib import suppress

import structlog

log = structlog.get_logger(__name__)


class RequestGate:
    """Async mutex whose acquisition honours a caller cancellation event.

    Usage::

        if not await gate.acquire(cancel):
            ...  # cancelled while waiting
        try:
            ...  # outbound request
        finally:
            gate.release()
    """

    def __init__(self) -> None:
        self._lock = asyncio.Lock()
        self._waiting = 0

    @property
    def locked(self) -> bool:
        return self._lock.locked()

    @property
    def waiting(self) -> int:
        """Number of callers currently blocked in :meth:`acquire`."""
        return self._waiting

    async def acquire(self, cancel: asyncio.Event | None = None) -> bool:
        """Block until this caller is the sole holder.

        Returns ``False`` without holding the gate when *cancel* is (or
        becomes) set before acquisition completes.
        """
        if cancel is None:
            self._waiting += 1
            try:
                await self._lock.acquire()
            finally:
                self._waiting -= 1
            return True
        if cancel.is_set():
            return False

        self._waiting += 1
        acquire_task = asyncio.ensure_future(self._lock.acquire())
        cancel_task = asyncio.ensure_future(cancel.wait())
        try:
            await asyncio.wait(
                {acquire_task, cancel_task},
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            await self._abandon(acquire_task)
            raise
        finally:
            self._waiting -= 1
            cancel_task.cancel()

        if cancel.is_set():
            await self._abandon(acquire_task)
            log.debug("request_gate_acquire_cancelled")
            return False
        return True

    def release(self) -> None:
        """Hand the gate to the next waiter. Raises RuntimeError if unheld."""
        self._lock.release()

    async def _abandon(self, acquire_task: asyncio.Future[bool]) -> None:
        """Cancel a pending acquisition; release the lock if it won the race."""
        if not acquire_task.done():
            acquire_task.cancel()
            with suppress(asyncio.CancelledError):
                await acquire_task
        if (
            acquire_task.done()
            and not acquire_task.cancelled()
            and acquire_task.exception() is None
        ):
            self._lock.release()
