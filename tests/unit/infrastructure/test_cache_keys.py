"""Tests for cache key derivation."""

from __future__ import annotations

from kinolens.infrastructure.cache.keys import (
    item_key,
    normalize_title,
    search_key,
    season_key,
)


class TestSearchKey:
    def test_title_is_trimmed_and_lowercased(self) -> None:
        assert search_key("  The Matrix ", 1999) == search_key("the matrix", 1999)
        assert str(search_key("The Matrix", 1999)) == "search:1999:the matrix"

    def test_missing_year(self) -> None:
        assert search_key("Matrix").value == "search:-:matrix"

    def test_year_distinguishes_keys(self) -> None:
        assert search_key("Matrix", 1999) != search_key("Matrix", 2021)
        assert search_key("Matrix", 1999) != search_key("Matrix")

    def test_title_with_colon_cannot_collide_with_year(self) -> None:
        # "2001:x" without a year vs "x" in 2001
        assert search_key("2001:x") != search_key("x", 2001)

    def test_cyrillic_titles_are_case_folded(self) -> None:
        assert normalize_title("МАТРИЦА") == "матрица"


class TestKindPrefixes:
    def test_item_key(self) -> None:
        assert item_key(301).value == "movie:301"

    def test_season_key(self) -> None:
        assert season_key(464963, 2).value == "season:464963:2"

    def test_kinds_never_collide(self) -> None:
        keys = {
            search_key("301").value,
            item_key(301).value,
            season_key(301, 1).value,
        }
        assert len(keys) == 3
