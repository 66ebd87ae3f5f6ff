"""Tests for app configuration.

Tests the configuration loading, env override and fallbacks.
"""

import pytest

from gradepoint.config.app_config import (
    CONFIG_ENV_VAR,
    AppConfig,
    ServerConfig,
    StoreConfig,
    clear_config_cache,
    get_config_path,
    load_app_config,
)


@pytest.fixture(autouse=True)
def fresh_cache():
    clear_config_cache()
    yield
    clear_config_cache()


class TestLoadAppConfig:
    """Tests for load_app_config function."""

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        """Falls back to defaults when no config file exists."""
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
        config = load_app_config()
        assert isinstance(config, AppConfig)
        assert config.server.port == 5000
        assert config.store.default_semester_name == "Unsorted"
        assert config.store.owner_id == 1

    def test_load_from_yaml(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "server:\n"
            "  port: 8080\n"
            "  cors_origins: http://a.test, http://b.test\n"
            "store:\n"
            "  default_semester_name: Inbox\n"
        )
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))

        config = load_app_config()
        assert config.server.port == 8080
        assert config.server.host == "127.0.0.1"
        assert config.server.cors_origins == ["http://a.test", "http://b.test"]
        assert config.store.default_semester_name == "Inbox"
        assert config.store.owner_id == 1

    def test_empty_yaml_uses_defaults(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert load_app_config().server.port == 5000

    def test_cached(self, tmp_path, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
        assert load_app_config() is load_app_config()

    def test_force_reload(self, tmp_path, monkeypatch):
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 7000\n")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(config_file))
        assert load_app_config().server.port == 7000

        config_file.write_text("server:\n  port: 7001\n")
        assert load_app_config().server.port == 7000
        assert load_app_config(force_reload=True).server.port == 7001


class TestConfigPath:
    """Tests for get_config_path."""

    def test_default_path(self, monkeypatch):
        monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
        assert str(get_config_path()).endswith("app_config_v1.yaml")

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv(CONFIG_ENV_VAR, "/etc/gradepoint.yaml")
        assert str(get_config_path()) == "/etc/gradepoint.yaml"


class TestDataclassDefaults:
    """Tests for config dataclass defaults."""

    def test_server_defaults(self):
        server = ServerConfig()
        assert server.host == "127.0.0.1"
        assert server.cors_origins == ["*"]

    def test_store_defaults(self):
        assert StoreConfig().default_semester_name == "Unsorted"
