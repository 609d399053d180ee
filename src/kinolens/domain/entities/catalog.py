"""Domain entities for PoiskKino catalog payloads.

Pure value objects without framework dependencies or I/O.  Collections are
tuples so cached instances can be shared between callers without copying;
use ``dataclasses.replace`` to derive adapted copies.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


def _parse_air_date(value: str | None) -> datetime | None:
    """Parse an ISO-8601 air date (``2019-03-31T00:00:00.000Z``) leniently."""
    if not value:
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


class PersonKind(str, Enum):
    """Role of a person in a title's credits."""

    ACTOR = "actor"
    DIRECTOR = "director"
    PRODUCER = "producer"
    WRITER = "writer"
    COMPOSER = "composer"


@dataclass(frozen=True)
class Image:
    url: str | None = None
    preview_url: str | None = None


@dataclass(frozen=True)
class ExternalIds:
    """Cross-references to other catalogs."""

    imdb: str | None = None
    tmdb: int | None = None
    kp_hd: str | None = None


@dataclass(frozen=True)
class Rating:
    kinopoisk: float | None = None
    imdb: float | None = None
    tmdb: float | None = None
    film_critics: float | None = None
    russian_film_critics: float | None = None
    awaited: float | None = None


@dataclass(frozen=True)
class Votes:
    kp: int | None = None
    imdb: int | None = None
    tmdb: int | None = None
    film_critics: int | None = None
    russian_film_critics: int | None = None
    awaited: int | None = None


@dataclass(frozen=True)
class Person:
    id: int
    name: str | None = None
    en_name: str | None = None
    photo: str | None = None
    description: str | None = None
    profession: str | None = None
    en_profession: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.en_name or ""


@dataclass(frozen=True)
class Video:
    url: str | None = None
    site: str | None = None
    name: str | None = None
    type: str | None = None


@dataclass(frozen=True)
class SeasonSummary:
    """Entry of ``seasonsInfo`` on a detail record."""

    number: int | None = None
    episodes_count: int | None = None


@dataclass(frozen=True)
class SearchItem:
    """A single hit of ``/movie/search``."""

    id: int
    name: str | None = None
    alternative_name: str | None = None
    en_name: str | None = None
    type: str | None = None
    year: int | None = None
    description: str | None = None
    short_description: str | None = None
    movie_length: int | None = None
    external_id: ExternalIds | None = None
    poster: Image | None = None
    backdrop: Image | None = None
    rating: Rating | None = None
    votes: Votes | None = None
    genres: tuple[str, ...] = ()
    countries: tuple[str, ...] = ()
    is_series: bool | None = None
    series_length: int | None = None
    total_series_length: int | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.en_name or ""


@dataclass(frozen=True)
class SearchPage:
    """Search results with paging metadata."""

    items: tuple[SearchItem, ...] = ()
    total: int = 0
    limit: int = 0
    page: int = 0
    pages: int = 0


@dataclass(frozen=True)
class ItemDetail:
    """Full record of ``/movie/{id}`` (movie or series)."""

    id: int
    name: str | None = None
    en_name: str | None = None
    alternative_name: str | None = None
    type: str | None = None
    year: int | None = None
    description: str | None = None
    short_description: str | None = None
    slogan: str | None = None
    rating: Rating | None = None
    votes: Votes | None = None
    external_id: ExternalIds | None = None
    poster: Image | None = None
    backdrop: Image | None = None
    genres: tuple[str, ...] = ()
    countries: tuple[str, ...] = ()
    persons: tuple[Person, ...] = ()
    trailers: tuple[Video, ...] = ()
    seasons_info: tuple[SeasonSummary, ...] = ()
    movie_length: int | None = None
    series_length: int | None = None
    total_series_length: int | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.en_name or ""


@dataclass(frozen=True)
class Episode:
    number: int
    name: str | None = None
    en_name: str | None = None
    air_date: str | None = None
    description: str | None = None
    en_description: str | None = None
    still: Image | None = None

    @property
    def air_date_parsed(self) -> datetime | None:
        return _parse_air_date(self.air_date)


@dataclass(frozen=True)
class SeasonDetail:
    """Single season record with its episodes."""

    movie_id: int
    number: int
    episodes_count: int | None = None
    episodes: tuple[Episode, ...] = ()
    poster: Image | None = None
    name: str | None = None
    en_name: str | None = None
    duration: int | None = None
    description: str | None = None
    en_description: str | None = None
    air_date: str | None = None

    @property
    def air_date_parsed(self) -> datetime | None:
        return _parse_air_date(self.air_date)

    def episode(self, number: int) -> Episode | None:
        """Return the episode with *number*, or None."""
        for ep in self.episodes:
            if ep.number == number:
                return ep
        return None


@dataclass(frozen=True)
class Artwork:
    """Poster and backdrop picked for a library item; missing images are None."""

    poster: Image | None = None
    backdrop: Image | None = None

    @property
    def empty(self) -> bool:
        return self.poster is None and self.backdrop is None
