"""Configuration management for cvblog."""

from .loader import Config, load_config, save_config
from .models import BuildDefaults, ConfigModel, ContentConfig, SiteConfig

__all__ = [
    "Config",
    "ConfigModel",
    "ContentConfig",
    "SiteConfig",
    "BuildDefaults",
    "load_config",
    "save_config",
]
