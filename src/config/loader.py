"""YAML configuration loader with environment variable overrides.

# ─── CONFIGURATION HIERARCHY ───────────────────────────────────────────
#
# The carousel page configuration is loaded in layers (later layers
# override earlier):
#
#   1. config/config.yaml  -- Static defaults checked into the repo
#                             (color palette, streams endpoint)
#   2. .env file           -- Local developer overrides (not committed)
#   3. Environment vars    -- Set at deploy time
#
# load_config() reads the YAML file first, then deep-merges the
# TWITCH_CAROUSEL_* settings on top:
#   base = {"carousel": {"colors": {"pageBg": "#25252D"}}}
#   overrides = {"carousel": {"default_game_id": "509658"}}
#   result = {"carousel": {"colors": {...}, "default_game_id": "509658"}}
#
# Everything else (upstream, cache, logging) is read straight from
# Settings by src/main.py.
# ──────────────────────────────────────────────────────────────────────
"""

from pathlib import Path

import yaml

from src.config.settings import Settings


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge the carousel defaults from Settings.

    Environment variables (via Settings) override YAML values where keys overlap.

    Args:
        path: Path to the YAML configuration file.
        settings: Settings to merge.  A fresh ``Settings()`` is read when omitted.

    Returns:
        Configuration dictionary with a ``carousel`` section, as consumed by
        :meth:`CarouselConfigService.from_config`.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    settings = settings or Settings()
    env_overrides = {
        "carousel": {
            "default_game_id": settings.twitch_carousel_default_game_id,
            "default_title_keywords": settings.twitch_carousel_default_title_keywords,
            "default_tag_keywords": settings.twitch_carousel_default_tag_keywords,
        },
    }

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
