"""Composition root: explicit construction of the shared catalog core."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
import structlog

from kinolens.application.use_cases.metadata_resolution import MetadataResolver
from kinolens.infrastructure.cache.memory_adapter import ResponseCache
from kinolens.infrastructure.config.schema import AppConfig
from kinolens.infrastructure.metrics import LookupMetrics
from kinolens.infrastructure.poiskkino.client import PoiskKinoClient
from kinolens.infrastructure.poiskkino.gate import RequestGate
from kinolens.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(
    config: AppConfig,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AsyncIterator[AppState]:
    """Build every process-wide resource, yield them, then release them.

    Args:
        config: Validated application configuration.
        transport: Optional httpx transport (tests inject a mock here).
    """
    settings = config.poiskkino

    # 1) Metrics
    metrics = LookupMetrics()

    # 2) Response cache + request gate (one of each per process)
    cache = ResponseCache()
    gate = RequestGate()

    # 3) HTTP client
    http_client = httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(settings.timeout_seconds),
    )
    log.info(
        "http_client_initialized",
        base_url=settings.base_url,
        api_version=settings.api_version,
        timeout_seconds=settings.timeout_seconds,
    )

    # 4) Catalog client + use case
    catalog = PoiskKinoClient(
        http_client=http_client,
        cache=cache,
        gate=gate,
        observer=metrics,
        base_url=settings.base_url,
        api_version=settings.api_version,
        timeout_seconds=settings.timeout_seconds,
        search_limit=settings.search_limit,
        positive_ttl=settings.positive_ttl_seconds,
        negative_ttl=settings.negative_ttl_seconds,
        user_agent=settings.user_agent,
    )
    resolver = MetadataResolver(catalog, settings.api_key)
    if not settings.configured:
        log.warning("poiskkino_api_key_missing", hint="set KINOLENS_API_KEY")

    state = AppState(
        config=config,
        http_client=http_client,
        cache=cache,
        gate=gate,
        metrics=metrics,
        catalog=catalog,
        resolver=resolver,
    )
    log.info("app_startup_complete")

    try:
        yield state
    finally:
        await http_client.aclose()
        log.info("http_client_closed")

        cache.clear()
        log.info("app_shutdown_complete", metrics=metrics.snapshot())
