"""Unit tests for Settings and the YAML config loader."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from src.config.loader import load_config
from src.config.settings import Settings


class TestSettings:
    def test_page_size_clamped_to_helix_max(self) -> None:
        assert Settings(twitch_default_first=500).twitch_default_first == 100

    def test_page_size_at_least_one(self) -> None:
        assert Settings(twitch_default_first=0).twitch_default_first == 1

    def test_max_pages_at_least_one(self) -> None:
        assert Settings(twitch_max_pages=-3).twitch_max_pages == 1

    def test_unknown_cache_backend_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Settings(cache_backend="memcached")

    def test_log_disabled_raises_floor(self) -> None:
        assert Settings(log_level="DEBUG", log_enabled=False).effective_log_level() == "WARNING"
        assert Settings(log_level="DEBUG", log_enabled=True).effective_log_level() == "DEBUG"

    def test_env_vars_read(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CACHE_BACKEND", "redis")
        monkeypatch.setenv("REDIS_PORT", "6380")
        settings = Settings()
        assert settings.cache_backend == "redis"
        assert settings.redis_port == 6380


class TestLoadConfig:
    def test_repo_config_loads(self, project_root: Path) -> None:
        config = load_config(
            str(project_root / "config" / "config.yaml"),
            settings=Settings(twitch_carousel_default_game_id="509658"),
        )
        assert config["carousel"]["streams_endpoint"] == "/api/streams"
        assert config["carousel"]["colors"]["pageBg"] == "#25252D"
        assert config["carousel"]["default_game_id"] == "509658"

    def test_only_carousel_section_merged(self, project_root: Path) -> None:
        config = load_config(str(project_root / "config" / "config.yaml"), settings=Settings())
        assert set(config) == {"carousel"}

    def test_missing_file_uses_settings_only(self, tmp_path: Path) -> None:
        config = load_config(
            str(tmp_path / "absent.yaml"),
            settings=Settings(twitch_carousel_default_title_keywords="godot"),
        )
        assert config["carousel"]["default_title_keywords"] == "godot"
        assert "colors" not in config["carousel"]

    def test_env_overrides_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text(
            "carousel:\n  default_game_id: '1'\n  streams_endpoint: /custom\n", encoding="utf-8"
        )
        config = load_config(str(path), settings=Settings(twitch_carousel_default_game_id="42"))
        assert config["carousel"]["default_game_id"] == "42"
        assert config["carousel"]["streams_endpoint"] == "/custom"

    def test_empty_yaml_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("", encoding="utf-8")
        config = load_config(str(path), settings=Settings())
        assert "default_game_id" in config["carousel"]
