"""Configuration package for gradepoint."""

from gradepoint.config.app_config import (
    AppConfig,
    ServerConfig,
    StoreConfig,
    clear_config_cache,
    load_app_config,
)

__all__ = [
    "AppConfig",
    "ServerConfig",
    "StoreConfig",
    "clear_config_cache",
    "load_app_config",
]
