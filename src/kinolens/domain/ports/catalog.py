"""Port for PoiskKino catalog lookups."""

from __future__ import annotations

import asyncio
from typing import Protocol, runtime_checkable

from kinolens.domain.entities.catalog import ItemDetail, SearchPage, SeasonDetail
from kinolens.domain.entities.lookup import LookupResult


@runtime_checkable
class CatalogClientPort(Protocol):
    """Async interface for the three catalog lookups.

    Implementations never raise for expected conditions; every outcome is a
    ``LookupResult``.  Setting *cancel* aborts a pending or in-flight call
    with ``LookupStatus.CANCELLED``.
    """

    async def search(
        self,
        title: str,
        year: int | None,
        api_key: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> LookupResult[SearchPage]:
        """Search movies and series by title (and optional release year)."""
        ...

    async def get_by_id(
        self,
        item_id: int,
        api_key: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> LookupResult[ItemDetail]:
        """Fetch the full record of a movie or series."""
        ...

    async def get_season(
        self,
        parent_id: int,
        season_number: int,
        api_key: str,
        *,
        cancel: asyncio.Event | None = None,
    ) -> LookupResult[SeasonDetail]:
        """Fetch one season of a series with its episodes."""
        ...
