"""PoiskKino API client: async httpx implementation with caching.

One instance is shared by every metadata lookup of the process.  Lookups
are answered from the response cache when fresh; otherwise they queue on
the request gate so that only one request is in flight against the
rate-limited API at any time.
"""

from __future__ import annotations

import asyncio
import time
from contextlib import suppress
from typing import Any, Callable, TypeVar

import httpx
import structlog
from pydantic import ValidationError

from kinolens.domain.entities.cache import CacheKey
from kinolens.domain.entities.catalog import ItemDetail, SearchPage, SeasonDetail
from kinolens.domain.entities.lookup import LookupKind, LookupResult, LookupStatus
from kinolens.domain.ports.lookup_observer import LookupObserverPort
from kinolens.domain.ports.response_cache import ResponseCachePort
from kinolens.infrastructure.cache.keys import item_key, search_key, season_key
from kinolens.infrastructure.poiskkino.adapters import (
    to_domain_item_detail,
    to_domain_search_page,
    to_domain_season,
)
from kinolens.infrastructure.poiskkino.errors import extract_error_message
from kinolens.infrastructure.poiskkino.gate import RequestGate
from kinolens.infrastructure.poiskkino.schema import (
    MovieModel,
    SearchResponseModel,
    SeasonResponseModel,
)

log = structlog.get_logger(__name__)

T = TypeVar("T")

DEFAULT_BASE_URL = "https://api.poiskkino.dev"
DEFAULT_API_VERSION = "v1.4"
DEFAULT_USER_AGENT = "Kinolens/0.1.0"

# Cache TTLs (seconds)
_TTL_FOUND = 86_400  # 24 hours
_TTL_NOT_FOUND = 3_600  # 1 hour

_TIMEOUT_SECONDS = 120.0
_SEARCH_LIMIT = 3


def _decode_search(response: httpx.Response) -> SearchPage:
    return to_domain_search_page(SearchResponseModel.model_validate(response.json()))


def _decode_item(response: httpx.Response) -> ItemDetail:
    return to_domain_item_detail(MovieModel.model_validate(response.json()))


def _decode_season(response: httpx.Response) -> SeasonDetail | None:
    """The season endpoint returns a page of seasons; only the first is used."""
    page = SeasonResponseModel.model_validate(response.json())
    if not page.docs:
        return None
    return to_domain_season(page.docs[0])


class PoiskKinoClient:
    """Async PoiskKino client using httpx + ResponseCachePort + RequestGate.

    Implements ``CatalogClientPort`` from domain.ports.catalog.

    Args:
        http_client: Shared connection pool (not closed by this class).
        cache: Process-wide response cache.
        gate: Process-wide request gate.
        observer: Receives every outcome (optional).
        base_url: API root without version prefix.
        api_version: Version path segment.
        timeout_seconds: Upper bound for one request, gate wait excluded.
        search_limit: ``limit`` sent with search requests.
        positive_ttl: Seconds a found payload stays cached.
        negative_ttl: Seconds a confirmed absence (404) stays cached.
        user_agent: Client identification sent with every request.
    """

    def __init__(
        self,
        *,
        http_client: httpx.AsyncClient,
        cache: ResponseCachePort,
        gate: RequestGate,
        observer: LookupObserverPort | None = None,
        base_url: str = DEFAULT_BASE_URL,
        api_version: str = DEFAULT_API_VERSION,
        timeout_seconds: float = _TIMEOUT_SECONDS,
        search_limit: int = _SEARCH_LIMIT,
        positive_ttl: float = _TTL_FOUND,
        negative_ttl: float = _TTL_NOT_FOUND,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        self._http = http_client
        self._cache = cache
        self._gate = gate
        self._observer = observer
        self._api_root = f"{base_url.rstrip('/')}/{api_version.strip('/')}"
        self._timeout = timeout_seconds
        self._search_limit = search_limit
        self._positive_ttl = positive_ttl
        self._negative_ttl = negative_ttl
        self._user_agent = user_agent

    # ------------------------------------------------------------------
    # Public API (CatalogClientPort)
    # ------------------------------------------------------------------

    async def search(
        self,
        title: str,
        year: int | None,
        api_key: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> LookupResult[SearchPage]:
        """Search movies and series by title (up to ``search_limit`` hits)."""
        query: dict[str, Any] = {"query": title, "limit": self._search_limit}
        if year is not None:
            query["year"] = year
        return await self._lookup(
            LookupKind.SEARCH,
            search_key(title, year),
            "/movie/search",
            query,
            api_key,
            cancel,
            _decode_search,
            {"title": title, "year": year},
        )

    async def get_by_id(
        self,
        item_id: int,
        api_key: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> LookupResult[ItemDetail]:
        """Fetch the full record of a movie or series."""
        return await self._lookup(
            LookupKind.ITEM,
            item_key(item_id),
            f"/movie/{item_id}",
            {},
            api_key,
            cancel,
            _decode_item,
            {"item_id": item_id},
        )

    async def get_season(
        self,
        parent_id: int,
        season_number: int,
        api_key: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> LookupResult[SeasonDetail]:
        """Fetch one season with its episodes.

        An empty ``docs`` page is reported as NOT_FOUND without caching.
        """
        return await self._lookup(
            LookupKind.SEASON,
            season_key(parent_id, season_number),
            "/season",
            {"movieId": parent_id, "number": season_number},
            api_key,
            cancel,
            _decode_season,
            {"parent_id": parent_id, "season_number": season_number},
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    async def _lookup(
        self,
        kind: LookupKind,
        key: CacheKey[T],
        path: str,
        query: dict[str, Any],
        api_key: str,
        cancel: asyncio.Event | None,
        decode: Callable[[httpx.Response], T | None],
        params: dict[str, Any],
    ) -> LookupResult[T]:
        if not api_key or not api_key.strip():
            log.warning("poiskkino_api_key_missing", kind=kind.value, **params)
            return self._report(
                kind,
                LookupResult.failure(
                    LookupStatus.UNCONFIGURED, "API key is not configured"
                ),
                params,
            )

        started = time.perf_counter_ns()
        try:
            cached = self._cache.get(key)
            if cached.hit:
                log.debug(
                    "poiskkino_cache_hit",
                    kind=kind.value,
                    negative=cached.payload is None,
                    **params,
                )
                if cached.payload is None:
                    result: LookupResult[T] = LookupResult.not_found(cached=True)
                else:
                    result = LookupResult.hit(cached.payload, cached=True)
            else:
                result = await self._fetch(
                    kind, key, path, query, api_key, cancel, decode, params
                )
        except Exception:
            log.error("poiskkino_unexpected_error", kind=kind.value, **params, exc_info=True)
            result = LookupResult.failure(LookupStatus.TRANSPORT_FAILURE, "unexpected")

        duration_ns = 0 if result.cached else time.perf_counter_ns() - started
        return self._report(kind, result, params, duration_ns=duration_ns)

    async def _fetch(
        self,
        kind: LookupKind,
        key: CacheKey[T],
        path: str,
        query: dict[str, Any],
        api_key: str,
        cancel: asyncio.Event | None,
        decode: Callable[[httpx.Response], T | None],
        params: dict[str, Any],
    ) -> LookupResult[T]:
        if not await self._gate.acquire(cancel):
            log.info("poiskkino_request_cancelled", kind=kind.value, stage="gate", **params)
            return LookupResult.failure(LookupStatus.CANCELLED, "cancelled by caller")

        try:
            outcome = await self._send(path, query, api_key, cancel)
            if isinstance(outcome, LookupResult):
                self._log_send_failure(kind, outcome, params)
                return outcome
            return self._classify(kind, key, outcome, decode, params)
        finally:
            self._gate.release()

    async def _send(
        self,
        path: str,
        query: dict[str, Any],
        api_key: str,
        cancel: asyncio.Event | None,
    ) -> httpx.Response | LookupResult[Any]:
        """Issue the request; a LookupResult means no usable response."""
        if cancel is not None and cancel.is_set():
            return LookupResult.failure(LookupStatus.CANCELLED, "cancelled by caller")

        request = self._http.build_request(
            "GET",
            f"{self._api_root}{path}",
            params=query,
            headers={
                "X-API-KEY": api_key,
                "Accept": "application/json",
                "User-Agent": self._user_agent,
            },
            timeout=httpx.Timeout(self._timeout),
        )
        send_task = asyncio.ensure_future(self._http.send(request))
        waiters: set[asyncio.Future[Any]] = {send_task}
        cancel_task = None
        if cancel is not None:
            cancel_task = asyncio.ensure_future(cancel.wait())
            waiters.add(cancel_task)

        try:
            done, _ = await asyncio.wait(
                waiters,
                timeout=self._timeout,
                return_when=asyncio.FIRST_COMPLETED,
            )
        except asyncio.CancelledError:
            await self._discard(send_task)
            raise
        finally:
            if cancel_task is not None:
                cancel_task.cancel()

        # Caller cancellation wins over any other outcome.
        if cancel is not None and cancel.is_set():
            await self._discard(send_task)
            return LookupResult.failure(LookupStatus.CANCELLED, "cancelled by caller")
        if send_task not in done:
            await self._discard(send_task)
            return LookupResult.failure(
                LookupStatus.TIMED_OUT, f"no response within {self._timeout:g}s"
            )

        try:
            return send_task.result()
        except httpx.TimeoutException:
            return LookupResult.failure(
                LookupStatus.TIMED_OUT, f"no response within {self._timeout:g}s"
            )
        except httpx.HTTPError as exc:
            return LookupResult.failure(
                LookupStatus.TRANSPORT_FAILURE, f"{type(exc).__name__}: {exc}"
            )

    @staticmethod
    async def _discard(task: asyncio.Future[httpx.Response]) -> None:
        task.cancel()
        with suppress(asyncio.CancelledError, Exception):
            await task

    def _classify(
        self,
        kind: LookupKind,
        key: CacheKey[T],
        response: httpx.Response,
        decode: Callable[[httpx.Response], T | None],
        params: dict[str, Any],
    ) -> LookupResult[T]:
        status = response.status_code

        if status in (429, 403):
            message = extract_error_message(response)
            log.warning(
                "poiskkino_rate_limited",
                kind=kind.value,
                status=status,
                message=message,
                **params,
            )
            return LookupResult.failure(
                LookupStatus.RATE_LIMITED, message, status_code=status
            )

        if status == 404:
            log.debug("poiskkino_not_found", kind=kind.value, **params)
            self._cache.put(key, None, ttl=self._negative_ttl)
            return LookupResult.not_found()

        if not response.is_success:
            log.warning(
                "poiskkino_http_error",
                kind=kind.value,
                status=status,
                url=str(response.request.url),
                body=response.text[:500],
                **params,
            )
            return LookupResult.failure(
                LookupStatus.TRANSPORT_FAILURE, f"HTTP {status}", status_code=status
            )

        try:
            payload = decode(response)
        except (ValueError, ValidationError) as exc:
            log.warning(
                "poiskkino_decode_failed",
                kind=kind.value,
                error=str(exc)[:500],
                **params,
            )
            return LookupResult.failure(
                LookupStatus.DECODE_FAILURE, "unexpected response shape", status_code=status
            )

        if payload is None:
            log.debug("poiskkino_empty_page", kind=kind.value, **params)
            return LookupResult.not_found(status_code=status)

        self._cache.put(key, payload, ttl=self._positive_ttl)
        log.debug("poiskkino_fetched", kind=kind.value, **params)
        return LookupResult.hit(payload)

    @staticmethod
    def _log_send_failure(
        kind: LookupKind, result: LookupResult[Any], params: dict[str, Any]
    ) -> None:
        if result.status is LookupStatus.CANCELLED:
            log.info("poiskkino_request_cancelled", kind=kind.value, stage="request", **params)
        elif result.status is LookupStatus.TIMED_OUT:
            log.warning("poiskkino_request_timeout", kind=kind.value, message=result.message, **params)
        else:
            log.error("poiskkino_network_error", kind=kind.value, message=result.message, **params)

    def _report(
        self,
        kind: LookupKind,
        result: LookupResult[T],
        params: dict[str, Any],
        *,
        duration_ns: int = 0,
    ) -> LookupResult[T]:
        if self._observer is not None:
            try:
                self._observer.record(
                    kind,
                    result.status,
                    cached=result.cached,
                    duration_ns=duration_ns,
                    **params,
                )
            except Exception:
                log.error(
                    "poiskkino_observer_failed",
                    kind=kind.value,
                    status=result.status.value,
                    **params,
                    exc_info=True,
                )
        return result
