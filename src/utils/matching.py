"""Per-record filter predicates for live streams.

Both predicates treat an empty term set as a pass-through.  Terms are
expected to be case-folded already (see :func:`parse_terms`); the record
side is case-folded here.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.models.stream import StreamRecord


def matches_keywords(terms: frozenset[str], title: str) -> bool:
    """Return ``True`` if any term occurs anywhere in *title*.

    Substring match, not whole word: "speed" matches "Speedrunning".
    """
    if not terms:
        return True
    haystack = title.casefold()
    return any(term in haystack for term in terms)


def matches_tags(terms: frozenset[str], tags: Iterable[str]) -> bool:
    """Return ``True`` if any term equals one of *tags* exactly.

    Tags are a controlled vocabulary, so "english" does not match
    "EnglishLearning".
    """
    if not terms:
        return True
    folded = {tag.casefold() for tag in tags}
    return not terms.isdisjoint(folded)


def accepts(
    record: StreamRecord,
    keyword_terms: frozenset[str],
    tag_terms: frozenset[str],
) -> bool:
    """A record passes when both the keyword and the tag filter hold."""
    return matches_keywords(keyword_terms, record.title) and matches_tags(
        tag_terms, record.tags
    )
