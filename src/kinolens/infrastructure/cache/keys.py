"""Deterministic cache keys per lookup kind.

Each kind has its own prefix so keys never collide across kinds:

    search:<year or ->:<trimmed lower-case title>
    movie:<id>
    season:<parent id>:<season number>

The year segment precedes the title because titles may contain ``:``.
"""

from __future__ import annotations

from kinolens.domain.entities.cache import CacheKey
from kinolens.domain.entities.catalog import ItemDetail, SearchPage, SeasonDetail


def normalize_title(title: str) -> str:
    return title.strip().lower()


def search_key(title: str, year: int | None = None) -> CacheKey[SearchPage]:
    year_part = "-" if year is None else str(year)
    return CacheKey(f"search:{year_part}:{normalize_title(title)}")


def item_key(item_id: int) -> CacheKey[ItemDetail]:
    return CacheKey(f"movie:{item_id}")


def season_key(parent_id: int, season_number: int) -> CacheKey[SeasonDetail]:
    return CacheKey(f"season:{parent_id}:{season_number}")
