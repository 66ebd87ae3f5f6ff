"""Application configuration loader.

Loads configuration from data/config/app_config_v1.yaml (or the file named
by the GRADEPOINT_CONFIG environment variable), falling back to built-in
defaults when no file exists.

Usage:
    from gradepoint.config.app_config import load_app_config

    config = load_app_config()
    port = config.server.port
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import structlog
import yaml

logger = structlog.get_logger(__name__)

# Config file path (relative to project root)
CONFIG_FILE = Path("data/config/app_config_v1.yaml")
CONFIG_ENV_VAR = "GRADEPOINT_CONFIG"


@dataclass
class ServerConfig:
    """HTTP server settings."""

    host: str = "127.0.0.1"
    port: int = 5000
    cors_origins: list[str] = field(default_factory=lambda: ["*"])


@dataclass
class StoreConfig:
    """Record store settings."""

    default_semester_name: str = "Unsorted"
    owner_id: int = 1  # placeholder owner, no auth


@dataclass
class AppConfig:
    """Application-wide configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    store: StoreConfig = field(default_factory=StoreConfig)


# Module-level cache
_cached_config: AppConfig | None = None


def _get_defaults() -> dict[str, Any]:
    """Get default configuration values."""
    return {
        "server": {
            "host": "127.0.0.1",
            "port": 5000,
            "cors_origins": ["*"],
        },
        "store": {
            "default_semester_name": "Unsorted",
            "owner_id": 1,
        },
    }


def _parse_cors_origins(value: Any) -> list[str]:
    # "a, b" or ["a", "b"]
    if isinstance(value, str):
        return [s.strip() for s in value.split(",") if s.strip()]
    return list(value or [])


def _parse_config(data: dict[str, Any]) -> AppConfig:
    """Parse configuration dictionary into AppConfig object."""
    defaults = _get_defaults()

    server_data = {**defaults["server"], **(data.get("server") or {})}
    server = ServerConfig(
        host=str(server_data["host"]),
        port=int(server_data["port"]),
        cors_origins=_parse_cors_origins(server_data["cors_origins"]),
    )

    store_data = {**defaults["store"], **(data.get("store") or {})}
    store = StoreConfig(
        default_semester_name=str(store_data["default_semester_name"]),
        owner_id=int(store_data["owner_id"]),
    )

    return AppConfig(server=server, store=store)


def get_config_path() -> Path:
    """Resolve the config file path, honoring GRADEPOINT_CONFIG."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return CONFIG_FILE


def load_app_config(force_reload: bool = False) -> AppConfig:
    """Load application config.

    Args:
        force_reload: If True, ignore cached config and reload from file.

    Returns:
        AppConfig object with all settings.
    """
    global _cached_config

    if _cached_config is not None and not force_reload:
        return _cached_config

    config_path = get_config_path()

    if config_path.exists():
        logger.debug("loading_app_config", source=str(config_path))
        data = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    else:
        logger.info("using_default_config", missing=str(config_path))
        data = _get_defaults()

    _cached_config = _parse_config(data)
    return _cached_config


def clear_config_cache() -> None:
    """Clear the configuration cache.

    Useful for testing or when config is modified at runtime.
    """
    global _cached_config
    _cached_config = None
