"""Configuration module -- exports Settings and load_config."""

from src.config.loader import load_config
from src.config.settings import HELIX_MAX_PAGE_SIZE, Settings

__all__ = ["HELIX_MAX_PAGE_SIZE", "Settings", "load_config"]
