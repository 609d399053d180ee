"""Application state container for the composed catalog core."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

from kinolens.application.use_cases.metadata_resolution import MetadataResolver
from kinolens.infrastructure.cache.memory_adapter import ResponseCache
from kinolens.infrastructure.config import AppConfig
from kinolens.infrastructure.metrics import LookupMetrics
from kinolens.infrastructure.poiskkino.client import PoiskKinoClient
from kinolens.infrastructure.poiskkino.gate import RequestGate


@dataclass
class AppState:
    """All process-wide resources, built once by composition.py::lifespan().

    There is exactly one cache and one gate per state; every lookup of
    the process must go through ``catalog`` (or ``resolver``).
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    http_client: httpx.AsyncClient
    cache: ResponseCache
    gate: RequestGate

    # Metrics (zero-impact in-memory counters)
    metrics: LookupMetrics

    # Catalog access
    catalog: PoiskKinoClient
    resolver: MetadataResolver
