"""Page configuration for the embeddable carousel widget.

Resolves the filter values and color palette the widget starts with.
Filters fall back to the configured defaults when the page URL leaves them
blank.  Color overrides are accepted only in a few safe CSS forms because
they end up inside a ``style`` attribute:

- hex: ``#abc`` .. ``#aabbccdd``
- functional: ``rgb()``, ``rgba()``, ``hsl()``, ``hsla()`` with digits,
  ``%``, ``.``, ``,`` and spaces only
- named: letters only (``rebeccapurple``)
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

_HEX_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{3,8}$")
_FUNC_COLOR_RE = re.compile(r"^(?:rgb|rgba|hsl|hsla)\([0-9%.,\s]+\)$", re.IGNORECASE)
_NAMED_COLOR_RE = re.compile(r"^[a-zA-Z]+$")

DEFAULT_COLORS: dict[str, str] = {
    "pageBg": "#25252D",
    "pageText": "#e6e6e6",
    "cardBg": "#151924",
    "cardText": "#cbd5e1",
    "tagBg": "#22283a",
    "tagText": "#c3d1ff",
}

# palette key -> query-string parameter that overrides it
COLOR_PARAMS: dict[str, str] = {
    "pageBg": "background_color",
    "pageText": "text_color",
    "cardBg": "card_background_color",
    "cardText": "card_text_color",
    "tagBg": "tag_background_color",
    "tagText": "tag_text_color",
}

CSS_VARIABLES: dict[str, str] = {
    "pageBg": "--page-bg",
    "pageText": "--page-text",
    "cardBg": "--card-bg",
    "cardText": "--card-text",
    "tagBg": "--tag-bg",
    "tagText": "--tag-text",
}


def sanitize_color(value: str | None) -> str:
    """Return *value* trimmed if it is an accepted CSS color, else ``""``."""
    value = (value or "").strip()
    if not value:
        return ""
    for pattern in (_HEX_COLOR_RE, _FUNC_COLOR_RE, _NAMED_COLOR_RE):
        if pattern.match(value):
            return value
    return ""


class CarouselConfigService:
    """Builds the widget configuration for one page view.

    Parameters
    ----------
    default_game_id, default_keywords, default_tags:
        Used when the corresponding query value is blank.
    colors:
        Default palette; missing keys fall back to :data:`DEFAULT_COLORS`.
    streams_endpoint:
        URL the widget should fetch streams from.
    """

    def __init__(
        self,
        default_game_id: str = "",
        default_keywords: str = "",
        default_tags: str = "",
        colors: Mapping[str, str] | None = None,
        streams_endpoint: str = "/api/streams",
    ) -> None:
        self._default_game_id = default_game_id.strip()
        self._default_keywords = default_keywords.strip()
        self._default_tags = default_tags.strip()
        self._colors = {**DEFAULT_COLORS, **(colors or {})}
        self._streams_endpoint = streams_endpoint

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> CarouselConfigService:
        """Build from the merged dict returned by :func:`load_config`."""
        carousel = config.get("carousel", {}) or {}
        return cls(
            default_game_id=str(carousel.get("default_game_id", "") or ""),
            default_keywords=str(carousel.get("default_title_keywords", "") or ""),
            default_tags=str(carousel.get("default_tag_keywords", "") or ""),
            colors=carousel.get("colors") or None,
            streams_endpoint=carousel.get("streams_endpoint", "/api/streams"),
        )

    @staticmethod
    def _resolve(value: str | None, default: str) -> str:
        value = (value or "").strip()
        return value or default

    def resolve(self, params: Mapping[str, str]) -> dict[str, Any]:
        """Resolve filters and palette from the page's query parameters."""
        colors = {}
        for key, default in self._colors.items():
            override = sanitize_color(params.get(COLOR_PARAMS.get(key, "")))
            colors[key] = override or default

        return {
            "game_id": self._resolve(params.get("game_id"), self._default_game_id),
            "keywords": self._resolve(params.get("keywords"), self._default_keywords),
            "tags": self._resolve(params.get("tags"), self._default_tags),
            "colors": colors,
            "css_variables": {key: CSS_VARIABLES[key] for key in colors if key in CSS_VARIABLES},
            "streams_endpoint": self._streams_endpoint,
        }
