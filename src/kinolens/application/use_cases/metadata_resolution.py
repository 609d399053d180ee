"""Metadata resolution use case for movie/series/season/episode/image lookups.

Turns what a media library knows about an item (title, year, maybe a
catalog id) into catalog records.  Every lookup goes through the injected
``CatalogClientPort``; failures degrade to empty results.
"""

from __future__ import annotations

import asyncio
from typing import Iterable

import structlog

from kinolens.domain.entities.catalog import (
    Artwork,
    Episode,
    Image,
    ItemDetail,
    PersonKind,
    SearchItem,
    SeasonDetail,
)
from kinolens.domain.entities.lookup import LookupResult
from kinolens.domain.ports.catalog import CatalogClientPort

log = structlog.get_logger(__name__)

# Checked in order; first keyword found wins.
_PROFESSION_KEYWORDS: tuple[tuple[PersonKind, tuple[str, ...]], ...] = (
    (PersonKind.DIRECTOR, ("режиссер", "director")),
    (PersonKind.ACTOR, ("актер", "актриса", "actor", "actress")),
    (PersonKind.PRODUCER, ("продюсер", "producer")),
    (PersonKind.WRITER, ("сценарист", "writer", "screenplay")),
    (PersonKind.COMPOSER, ("композитор", "composer")),
)


def classify_person(profession: str | None) -> PersonKind:
    """Map a free-text profession (Russian or English) to a PersonKind.

    Unknown or empty professions count as actors.
    """
    if not profession:
        return PersonKind.ACTOR
    text = profession.lower()
    for kind, keywords in _PROFESSION_KEYWORDS:
        if any(k in text for k in keywords):
            return kind
    return PersonKind.ACTOR


def _normalize(value: str | None) -> str:
    return (value or "").strip().lower()


def best_match(
    items: Iterable[SearchItem], title: str, year: int | None = None
) -> SearchItem | None:
    """Pick the most plausible search hit.

    Ranking: matching year first, then an exact (case-insensitive) title
    match on any of the item's names; ties keep API order.
    """
    wanted = _normalize(title)

    def rank(item: SearchItem) -> tuple[bool, bool]:
        names = {_normalize(item.name), _normalize(item.alternative_name), _normalize(item.en_name)}
        return (year is not None and item.year == year, bool(wanted) and wanted in names)

    # max() returns the first maximal element, preserving API order on ties.
    return max(items, key=rank, default=None)


def _artwork(poster: Image | None, backdrop: Image | None) -> Artwork:
    """Keep only images that carry a URL."""
    return Artwork(
        poster=poster if poster is not None and poster.url else None,
        backdrop=backdrop if backdrop is not None and backdrop.url else None,
    )


class MetadataResolver:
    """Resolve catalog records for library items.

    Args:
        client: Catalog client (usually the process-wide PoiskKinoClient).
        api_key: Key passed to every lookup; empty means unconfigured.
    """

    def __init__(self, client: CatalogClientPort, api_key: str) -> None:
        self._client = client
        self._api_key = api_key

    @property
    def configured(self) -> bool:
        return bool(self._api_key.strip())

    async def search(
        self,
        title: str,
        year: int | None = None,
        *,
        is_series: bool = False,
        cancel: asyncio.Event | None = None,
    ) -> list[SearchItem]:
        """Search hits of the requested kind (series or movies).

        Returns an empty list for a blank title, a missing key, or any
        lookup that did not succeed.
        """
        if not title.strip() or not self.configured:
            return []

        result = await self._client.search(title, year, self._api_key, cancel=cancel)
        if not result.found or result.payload is None:
            self._log_miss("search", result, title=title, year=year)
            return []

        return [
            item
            for item in result.payload.items
            if (item.is_series is True) == is_series
        ]

    async def resolve_item(
        self,
        title: str,
        year: int | None = None,
        *,
        item_id: int | None = None,
        is_series: bool = False,
        cancel: asyncio.Event | None = None,
    ) -> ItemDetail | None:
        """Full record for a library item.

        A known catalog id is tried first; otherwise (or when that lookup
        yields nothing) the best search hit is fetched by id.
        """
        if not self.configured:
            return None

        if item_id is not None:
            detail = await self._detail(item_id, cancel)
            if detail is not None:
                return detail
            if cancel is not None and cancel.is_set():
                return None

        candidate = best_match(
            await self.search(title, year, is_series=is_series, cancel=cancel),
            title,
            year,
        )
        if candidate is None:
            log.debug("metadata_no_candidate", title=title, year=year, is_series=is_series)
            return None
        if candidate.id == item_id:
            return None
        return await self._detail(candidate.id, cancel)

    async def resolve_season(
        self,
        series_id: int,
        season_number: int | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> SeasonDetail | None:
        """Season record; the season number defaults to 1."""
        if not self.configured:
            return None
        number = season_number if season_number is not None else 1

        result = await self._client.get_season(
            series_id, number, self._api_key, cancel=cancel
        )
        if not result.found:
            self._log_miss("season", result, series_id=series_id, season_number=number)
            return None
        return result.payload

    async def resolve_episode(
        self,
        series_id: int,
        season_number: int | None = None,
        episode_number: int | None = None,
        *,
        cancel: asyncio.Event | None = None,
    ) -> Episode | None:
        """Episode record from its season; season and episode default to 1."""
        season = await self.resolve_season(series_id, season_number, cancel=cancel)
        if season is None:
            return None
        number = episode_number if episode_number is not None else 1
        episode = season.episode(number)
        if episode is None:
            log.debug(
                "metadata_episode_missing",
                series_id=series_id,
                season_number=season.number,
                episode_number=number,
            )
        return episode

    async def resolve_images(
        self,
        title: str,
        year: int | None = None,
        *,
        item_id: int | None = None,
        is_series: bool = False,
        is_season: bool = False,
        cancel: asyncio.Event | None = None,
    ) -> Artwork:
        """Poster and backdrop for a library item.

        Order of attempts:
        1. Detail record of the known catalog id.
        2. Best search hit (skipped for seasons), fetched by id.
        3. The poster and backdrop carried by that search hit itself.
        """
        if not self.configured:
            return Artwork()

        detail = None
        if item_id is not None:
            detail = await self._detail(item_id, cancel)

        if detail is None and not is_season:
            if cancel is not None and cancel.is_set():
                return Artwork()
            candidate = best_match(
                await self.search(title, year, is_series=is_series, cancel=cancel),
                title,
                year,
            )
            if candidate is None:
                log.debug("metadata_no_image_candidate", title=title, year=year)
                return Artwork()
            if candidate.id != item_id:
                detail = await self._detail(candidate.id, cancel)
            if detail is None:
                return _artwork(candidate.poster, candidate.backdrop)

        if detail is None:
            return Artwork()
        return _artwork(detail.poster, detail.backdrop)

    async def _detail(
        self, item_id: int, cancel: asyncio.Event | None
    ) -> ItemDetail | None:
        result = await self._client.get_by_id(item_id, self._api_key, cancel=cancel)
        if not result.found:
            self._log_miss("item", result, item_id=item_id)
            return None
        return result.payload

    @staticmethod
    def _log_miss(kind: str, result: LookupResult[object], **params: object) -> None:
        if result.unavailable:
            log.warning(
                "metadata_lookup_unavailable",
                kind=kind,
                status=result.status.value,
                message=result.message,
                **params,
            )
        else:
            log.debug("metadata_lookup_not_found", kind=kind, **params)
