"""Unit tests for filter-term parsing and limit coercion."""

from __future__ import annotations

import pytest

from src.utils.text_normalizer import parse_limit, parse_terms, serialize_terms


# ======================================================================
# parse_terms
# ======================================================================


class TestParseTerms:
    """Tests for the parse_terms function."""

    def test_none_yields_empty_set(self) -> None:
        assert parse_terms(None) == frozenset()

    def test_empty_string_yields_empty_set(self) -> None:
        assert parse_terms("") == frozenset()

    def test_delimiters_only_yield_empty_set(self) -> None:
        assert parse_terms(" ,; \n\t,,") == frozenset()

    def test_splits_on_commas(self) -> None:
        assert parse_terms("nightmares,hablamos") == {"nightmares", "hablamos"}

    def test_splits_on_semicolons_and_whitespace(self) -> None:
        result = parse_terms("speedrun; chill\tcozy\nretro  indie")
        assert result == {"speedrun", "chill", "cozy", "retro", "indie"}

    def test_lowercases_terms(self) -> None:
        assert parse_terms("NightMares") == {"nightmares"}

    def test_removes_duplicates_after_folding(self) -> None:
        assert parse_terms("Español,español,ESPAÑOL") == {"español"}

    def test_unicode_aware_folding(self) -> None:
        assert parse_terms("ÉTÉ") == {"été"}
        assert parse_terms("СТРИМ") == {"стрим"}

    def test_casefold_handles_sharp_s(self) -> None:
        assert parse_terms("Straße") == {"strasse"}

    def test_returns_frozenset(self) -> None:
        assert isinstance(parse_terms("a,b"), frozenset)

    @pytest.mark.parametrize(
        "raw",
        ["nightmares,hablamos", "  A ;b\tC ", "Español, ESPAÑOL; Ñandú", "", "x"],
    )
    def test_parsing_is_idempotent(self, raw: str) -> None:
        once = parse_terms(raw)
        assert parse_terms(serialize_terms(once)) == once


# ======================================================================
# parse_limit
# ======================================================================


class TestParseLimit:
    """Tests for the parse_limit function."""

    def test_absent_uses_default(self) -> None:
        assert parse_limit(None) == 20

    def test_blank_uses_default(self) -> None:
        assert parse_limit("   ") == 20

    def test_custom_default(self) -> None:
        assert parse_limit(None, default=12) == 12

    def test_plain_integer(self) -> None:
        assert parse_limit("24") == 24

    def test_surrounding_whitespace_ignored(self) -> None:
        assert parse_limit(" 7 ") == 7

    def test_leading_digits_win(self) -> None:
        assert parse_limit("24abc") == 24

    def test_non_numeric_coerced_to_one(self) -> None:
        assert parse_limit("abc") == 1

    def test_zero_coerced_to_one(self) -> None:
        assert parse_limit("0") == 1

    def test_negative_coerced_to_one(self) -> None:
        assert parse_limit("-5") == 1
