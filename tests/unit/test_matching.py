"""Unit tests for the keyword and tag predicates."""

from __future__ import annotations

from src.models.stream import StreamRecord
from src.utils.matching import accepts, matches_keywords, matches_tags
from src.utils.text_normalizer import parse_terms


class TestMatchesKeywords:
    def test_empty_terms_always_match(self) -> None:
        assert matches_keywords(frozenset(), "") is True
        assert matches_keywords(frozenset(), "anything at all") is True

    def test_substring_match(self) -> None:
        assert matches_keywords(frozenset({"speed"}), "Speedrunning Celeste") is True

    def test_case_insensitive(self) -> None:
        assert matches_keywords(parse_terms("HABLAMOS"), "Hoy hablamos de Godot") is True

    def test_any_term_suffices(self) -> None:
        terms = parse_terms("nightmares,hablamos")
        assert matches_keywords(terms, "Little Nightmares II") is True

    def test_no_term_present(self) -> None:
        assert matches_keywords(parse_terms("nightmares,hablamos"), "Chill coding") is False

    def test_unicode_title(self) -> None:
        assert matches_keywords(parse_terms("ÉTÉ"), "Stream d'été") is True


class TestMatchesTags:
    def test_empty_terms_always_match(self) -> None:
        assert matches_tags(frozenset(), []) is True
        assert matches_tags(frozenset(), ["English"]) is True

    def test_exact_match_case_insensitive(self) -> None:
        assert matches_tags(parse_terms("español"), ["Español", "Speedrun"]) is True

    def test_substring_is_not_enough(self) -> None:
        assert matches_tags(parse_terms("english"), ["EnglishLearning"]) is False

    def test_no_tags_on_record(self) -> None:
        assert matches_tags(parse_terms("english"), []) is False

    def test_any_term_suffices(self) -> None:
        assert matches_tags(parse_terms("french,english"), ["English"]) is True


class TestAccepts:
    def _record(self, title: str, tags: list[str]) -> StreamRecord:
        return StreamRecord(user_login="someone", user_name="Someone", title=title, tags=tags)

    def test_both_filters_must_hold(self) -> None:
        record = self._record("Hablamos de todo", ["Español"])
        assert accepts(record, parse_terms("hablamos"), parse_terms("español")) is True

    def test_keyword_fail_rejects(self) -> None:
        record = self._record("Chill", ["Español"])
        assert accepts(record, parse_terms("hablamos"), parse_terms("español")) is False

    def test_tag_fail_rejects(self) -> None:
        record = self._record("Hablamos de todo", ["English"])
        assert accepts(record, parse_terms("hablamos"), parse_terms("español")) is False

    def test_no_filters_accept_everything(self) -> None:
        assert accepts(self._record("", []), frozenset(), frozenset()) is True
