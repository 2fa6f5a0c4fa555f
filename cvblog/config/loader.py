"""Configuration loader."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from ..taxonomy import CategoryTable
from .models import ConfigModel

DEFAULT_CONFIG_NAME = "cvblog.yaml"
CONTENT_DIR_ENV = "CVBLOG_CONTENT_DIR"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        self._explicit = config_path is not None
        if config_path is None:
            config_path = Path.cwd() / DEFAULT_CONFIG_NAME
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config. Falls back to defaults when no default file exists."""
        if self._config is None:
            if not self._explicit and not self.config_path.exists():
                self._config = ConfigModel()
            else:
                self._config = load_config(self.config_path)
        return self._config

    @property
    def content_dir(self) -> Path:
        """Content directory, overridable via CVBLOG_CONTENT_DIR."""
        override = os.environ.get(CONTENT_DIR_ENV)
        if override:
            return Path(override).expanduser()
        return self._resolve(self.config.content.content_dir)

    @property
    def output_dir(self) -> Path:
        """Build output directory."""
        return self._resolve(self.config.build.output_dir)

    def category_table(self) -> CategoryTable:
        """Category lookup for one run, bound to the configured base path."""
        return CategoryTable(base_path=self.config.site.category_base_path)

    def _resolve(self, value: str) -> Path:
        path = Path(value).expanduser()
        if path.is_absolute():
            return path
        return self.config_path.parent / path


def load_config(config_path: Path) -> ConfigModel:
    """Load configuration from YAML file."""
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            config_data = {}

        return ConfigModel(**config_data)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in config file: {e}")
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}")
    except TypeError as e:
        raise ValueError(f"Invalid configuration: {e}")


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
