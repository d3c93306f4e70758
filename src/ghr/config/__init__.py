"""Configuration for ghr."""

from ghr.config.loader import Config, load_config
from ghr.config.settings import Settings, get_settings

__all__ = ["Config", "Settings", "get_settings", "load_config"]
