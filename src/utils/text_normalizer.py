"""Query-string normalization for the streams endpoint.

Two concerns live here:

1. **Term parsing** -- turns a free-form filter string such as
   ``"nightmares, Hablamos;speedrun"`` into a set of case-folded match
   terms.  Commas, semicolons and any whitespace separate terms.

2. **Limit coercion** -- reads the ``limit`` parameter the way a lenient
   form handler would: leading digits win, garbage counts as zero, and
   the result is never below one.
"""

import re

_TERM_SPLIT_RE = re.compile(r"[\s,;]+")
_LEADING_INT_RE = re.compile(r"^[+-]?\d+")

DEFAULT_LIMIT = 20


def parse_terms(raw: str | None) -> frozenset[str]:
    """Parse a delimiter-separated filter string into match terms.

    Uses ``str.casefold`` rather than ``lower`` so that non-Latin and
    accented terms compare correctly ("ESPAÑOL" -> "español",
    "Straße" -> "strasse").

    Args:
        raw: The raw query-string value, or ``None`` when absent.

    Returns:
        A frozenset of non-empty case-folded terms.  Empty when *raw* is
        ``None``, empty, or contains only delimiters -- callers treat an
        empty set as "no filter".
    """
    if not raw:
        return frozenset()
    return frozenset(
        part.casefold() for part in _TERM_SPLIT_RE.split(raw) if part
    )


def parse_limit(raw: str | None, default: int = DEFAULT_LIMIT) -> int:
    """Coerce the ``limit`` query parameter to a positive integer.

    ``None`` or a blank string yields *default*.  Otherwise the leading
    integer of the trimmed value is used (``"24abc"`` -> 24, ``"abc"`` -> 0)
    and the result is clamped to at least 1.
    """
    if raw is None or not raw.strip():
        return max(1, default)
    match = _LEADING_INT_RE.match(raw.strip())
    value = int(match.group(0)) if match else 0
    return max(1, value)


def serialize_terms(terms: frozenset[str]) -> str:
    """Render a term set back to a comma-separated string, sorted."""
    return ",".join(sorted(terms))
