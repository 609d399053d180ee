"""Pydantic validation models for PoiskKino API v1.4 responses.

Field names match case-insensitively: incoming JSON keys are folded to
lower case before validation and every field's alias is its name with
underscores removed (``en_name`` <- ``enName``/``ENNAME``/``enname``).
"""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, model_validator


def _fold_alias(name: str) -> str:
    return name.replace("_", "").lower()


def _fold_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            (k.lower() if isinstance(k, str) else k): v for k, v in value.items()
        }
    return value


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_fold_alias,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _casefold(cls, data: Any) -> Any:
        return _fold_keys(data)


class ImageModel(_WireModel):
    url: Optional[str] = None
    preview_url: Optional[str] = None


class ExternalIdModel(_WireModel):
    imdb: Optional[str] = None
    tmdb: Optional[int] = None
    kp_hd: Optional[str] = None


class RatingModel(_WireModel):
    kinopoisk: Optional[float] = None
    imdb: Optional[float] = None
    tmdb: Optional[float] = None
    film_critics: Optional[float] = None
    russian_film_critics: Optional[float] = None
    await_: Optional[float] = None


class VotesModel(_WireModel):
    kp: Optional[int] = None
    imdb: Optional[int] = None
    tmdb: Optional[int] = None
    film_critics: Optional[int] = None
    russian_film_critics: Optional[int] = None
    await_: Optional[int] = None


class NamedModel(_WireModel):
    """Genre or country entry."""

    name: Optional[str] = None


class PersonModel(_WireModel):
    id: int = 0
    name: Optional[str] = None
    en_name: Optional[str] = None
    photo: Optional[str] = None
    description: Optional[str] = None
    profession: Optional[str] = None
    en_profession: Optional[str] = None


class VideoModel(_WireModel):
    url: Optional[str] = None
    site: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None


class VideosModel(_WireModel):
    trailers: Optional[List[VideoModel]] = None


class SeasonInfoModel(_WireModel):
    number: Optional[int] = None
    episodes_count: Optional[int] = None


class SearchItemModel(_WireModel):
    id: int = 0
    name: Optional[str] = None
    alternative_name: Optional[str] = None
    en_name: Optional[str] = None
    type: Optional[str] = None
    year: Optional[int] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    movie_length: Optional[int] = None
    external_id: Optional[ExternalIdModel] = None
    poster: Optional[ImageModel] = None
    backdrop: Optional[ImageModel] = None
    rating: Optional[RatingModel] = None
    votes: Optional[VotesModel] = None
    genres: Optional[List[NamedModel]] = None
    countries: Optional[List[NamedModel]] = None
    is_series: Optional[bool] = None
    series_length: Optional[int] = None
    total_series_length: Optional[int] = None


class SearchResponseModel(_WireModel):
    docs: Optional[List[SearchItemModel]] = None
    total: int = 0
    limit: int = 0
    page: int = 0
    pages: int = 0


class MovieModel(_WireModel):
    """``/v1.4/movie/{id}`` record."""

    id: int = 0
    name: Optional[str] = None
    en_name: Optional[str] = None
    alternative_name: Optional[str] = None
    type: Optional[str] = None
    year: Optional[int] = None
    description: Optional[str] = None
    short_description: Optional[str] = None
    slogan: Optional[str] = None
    rating: Optional[RatingModel] = None
    votes: Optional[VotesModel] = None
    external_id: Optional[ExternalIdModel] = None
    poster: Optional[ImageModel] = None
    backdrop: Optional[ImageModel] = None
    genres: Optional[List[NamedModel]] = None
    countries: Optional[List[NamedModel]] = None
    persons: Optional[List[PersonModel]] = None
    videos: Optional[VideosModel] = None
    seasons_info: Optional[List[SeasonInfoModel]] = None
    movie_length: Optional[int] = None
    series_length: Optional[int] = None
    total_series_length: Optional[int] = None


class EpisodeModel(_WireModel):
    number: int = 0
    name: Optional[str] = None
    en_name: Optional[str] = None
    air_date: Optional[str] = None
    description: Optional[str] = None
    en_description: Optional[str] = None
    still: Optional[ImageModel] = None


class SeasonModel(_WireModel):
    movie_id: int = 0
    number: int = 0
    episodes_count: Optional[int] = None
    episodes: Optional[List[EpisodeModel]] = None
    poster: Optional[ImageModel] = None
    name: Optional[str] = None
    en_name: Optional[str] = None
    duration: Optional[int] = None
    description: Optional[str] = None
    en_description: Optional[str] = None
    air_date: Optional[str] = None


class SeasonResponseModel(_WireModel):
    """``/v1.4/season`` paged collection."""

    docs: Optional[List[SeasonModel]] = None
    total: int = 0
    limit: int = 0
    page: int = 0
    pages: int = 0
