"""Shared test fixtures for the Kinolens test suite."""

from __future__ import annotations

import os
from typing import Any

import pytest

# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_kinolens_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer KINOLENS_* variables out of every test."""
    for name in list(os.environ):
        if name.upper().startswith("KINOLENS_"):
            monkeypatch.delenv(name)


# ---------------------------------------------------------------------------
# PoiskKino JSON payloads (camelCase, as served by the API)
# ---------------------------------------------------------------------------


@pytest.fixture()
def search_payload() -> dict[str, Any]:
    return {
        "docs": [
            {
                "id": 464963,
                "name": "Игра престолов",
                "alternativeName": "Game of Thrones",
                "enName": None,
                "type": "tv-series",
                "year": 2011,
                "shortDescription": "Борьба за Железный трон",
                "isSeries": True,
                "seriesLength": 55,
                "externalId": {"imdb": "tt0944947", "tmdb": 1399, "kpHD": "4b1c"},
                "rating": {"kp": 9.0, "kinopoisk": 9.0, "imdb": 9.2, "await": None},
                "votes": {"kp": 780000, "imdb": 2200000, "await": 15},
                "poster": {
                    "url": "https://image.openmoviedb.com/poster.jpg",
                    "previewUrl": "https://image.openmoviedb.com/poster-small.jpg",
                },
                "genres": [{"name": "фэнтези"}, {"name": "драма"}],
                "countries": [{"name": "США"}],
            },
            {
                "id": 1111,
                "name": "Игра престолов: Фильм",
                "type": "movie",
                "year": 2019,
                "isSeries": False,
                "movieLength": 90,
            },
        ],
        "total": 2,
        "limit": 3,
        "page": 1,
        "pages": 1,
    }


@pytest.fixture()
def movie_payload() -> dict[str, Any]:
    return {
        "id": 301,
        "name": "Матрица",
        "alternativeName": "The Matrix",
        "type": "movie",
        "year": 1999,
        "description": "Жизнь Томаса Андерсона разделена на две части...",
        "slogan": "Добро пожаловать в реальный мир",
        "movieLength": 136,
        "isSeries": False,
        "rating": {"kp": 8.5, "imdb": 8.7, "filmCritics": 7.8, "await": None},
        "votes": {"kp": 900000, "imdb": 2100000},
        "externalId": {"imdb": "tt0133093", "tmdb": 603},
        "genres": [{"name": "фантастика"}, {"name": "боевик"}],
        "countries": [{"name": "США"}, {"name": "Австралия"}],
        "persons": [
            {
                "id": 7727,
                "name": "Киану Ривз",
                "enName": "Keanu Reeves",
                "photo": "https://st.kp.yandex.net/images/actor_iphone/iphone360_7727.jpg",
                "profession": "актеры",
                "enProfession": "actor",
            },
            {
                "id": 30770,
                "name": "Лана Вачовски",
                "enName": "Lana Wachowski",
                "profession": "режиссеры",
                "enProfession": "director",
            },
        ],
        "videos": {
            "trailers": [
                {
                    "url": "https://www.youtube.com/embed/abc",
                    "site": "youtube",
                    "name": "Трейлер",
                    "type": "TRAILER",
                }
            ]
        },
    }


@pytest.fixture()
def season_payload() -> dict[str, Any]:
    return {
        "docs": [
            {
                "movieId": 464963,
                "number": 1,
                "episodesCount": 2,
                "name": "Сезон 1",
                "airDate": "2011-04-17T00:00:00.000Z",
                "episodes": [
                    {
                        "number": 1,
                        "name": "Зима близко",
                        "enName": "Winter Is Coming",
                        "airDate": "2011-04-17T00:00:00.000Z",
                    },
                    {
                        "number": 2,
                        "name": "Королевский тракт",
                        "enName": "The Kingsroad",
                        "airDate": "not a date",
                    },
                ],
            }
        ],
        "total": 1,
        "limit": 10,
        "page": 1,
        "pages": 1,
    }
