"""Configuration management for the feed ranking engine."""

from .loader import Config, default_config_path, load_config, save_config
from .models import DEFAULT_CONFIG, ConfigModel, DisplayConfig, RankingConfig, RankingWeights

__all__ = [
    "Config",
    "ConfigModel",
    "DisplayConfig",
    "RankingConfig",
    "RankingWeights",
    "DEFAULT_CONFIG",
    "default_config_path",
    "load_config",
    "save_config",
]
