"""Configuration loader."""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import ValidationError

from .models import ConfigModel, RankingConfig

logger = logging.getLogger(__name__)

CONFIG_PATH_ENV = "FEEDRANK_CONFIG"


def default_config_path() -> Path:
    """Return the config path from the environment or the user config dir."""
    env_path = os.environ.get(CONFIG_PATH_ENV)
    if env_path:
        return Path(env_path).expanduser()
    return Path.home() / ".config" / "feedrank" / "config.yaml"


class Config:
    """Configuration manager."""

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """Initialize config manager."""
        # Only the user config dir may be absent; explicit paths must exist
        self._required = config_path is not None or bool(os.environ.get(CONFIG_PATH_ENV))
        if config_path is None:
            config_path = default_config_path()
        self.config_path = config_path
        self._config: Optional[ConfigModel] = None

    @property
    def config(self) -> ConfigModel:
        """Get loaded config, falling back to defaults when no user config exists."""
        if self._config is None:
            if self._required or self.config_path.exists():
                self._config = load_config(self.config_path)
            else:
                logger.debug("No config at %s, using defaults", self.config_path)
                self._config = ConfigModel()
        return self._config

    @property
    def ranking(self) -> RankingConfig:
        """Get ranking configuration."""
        return self.config.ranking


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


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to YAML file."""
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, "w") as f:
        yaml.dump(config.model_dump(), f, default_flow_style=False, sort_keys=False)
