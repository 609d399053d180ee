"""Tests for catalog payload entities."""

from __future__ import annotations

from dataclasses import FrozenInstanceError, replace
from datetime import datetime, timezone

import pytest

from kinolens.domain.entities.catalog import (
    Episode,
    ItemDetail,
    Person,
    SearchItem,
    SeasonDetail,
)


class TestDisplayName:
    def test_prefers_localized_name(self) -> None:
        item = SearchItem(id=1, name="Матрица", en_name="The Matrix")
        assert item.display_name == "Матрица"

    def test_falls_back_to_english_name(self) -> None:
        assert ItemDetail(id=1, en_name="The Matrix").display_name == "The Matrix"

    def test_empty_when_unnamed(self) -> None:
        assert Person(id=7).display_name == ""


class TestAirDate:
    def test_parses_iso_timestamp_with_z(self) -> None:
        ep = Episode(number=1, air_date="2011-04-17T00:00:00.000Z")
        assert ep.air_date_parsed == datetime(2011, 4, 17, tzinfo=timezone.utc)

    def test_invalid_date_is_none(self) -> None:
        assert Episode(number=1, air_date="soon").air_date_parsed is None

    def test_missing_date_is_none(self) -> None:
        assert SeasonDetail(movie_id=1, number=1).air_date_parsed is None


class TestSeasonDetail:
    def test_episode_lookup(self) -> None:
        season = SeasonDetail(
            movie_id=10,
            number=2,
            episodes=(Episode(number=1, name="A"), Episode(number=2, name="B")),
        )
        assert season.episode(2) is not None
        assert season.episode(2).name == "B"  # type: ignore[union-attr]
        assert season.episode(3) is None

    def test_entities_are_immutable(self) -> None:
        season = SeasonDetail(movie_id=10, number=2)
        with pytest.raises(FrozenInstanceError):
            season.number = 3  # type: ignore[misc]

    def test_replace_derives_adapted_copy(self) -> None:
        season = SeasonDetail(movie_id=10, number=2, name="Сезон 2")
        adapted = replace(season, name="Season 2")
        assert adapted.name == "Season 2"
        assert season.name == "Сезон 2"
