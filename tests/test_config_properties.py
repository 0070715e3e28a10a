"""
Tests for ConfigProperties: file parsing, defaults and environment overrides.
"""

import pytest

from task_store.config import ConfigProperties
from task_store.utils.exceptions import ConfigurationError


@pytest.fixture
def properties_file(tmp_path):
    path = tmp_path / "config.properties"
    path.write_text(
        "# comment\n"
        "! also a comment\n"
        "\n"
        "server.host = 127.0.0.1\n"
        "server.port: 4000\n"
        "cors.allow_origins=http://a.test, http://b.test\n"
        "logging.level=debug\n"
        "custom.key=value=with=equals\n",
        encoding="utf-8",
    )
    ConfigProperties.reload(str(path))
    return path


class TestDefaults:

    def setup_method(self):
        ConfigProperties.reload("/nonexistent/config.properties")

    def test_builtin_defaults(self):
        assert ConfigProperties.get_server_host() == "0.0.0.0"
        assert ConfigProperties.get_server_port() == 3000
        assert ConfigProperties.get_cors_origins() == ["*"]
        assert ConfigProperties.get_seed_enabled() is True

    def test_logging_defaults(self):
        cfg = ConfigProperties.get_logging_config()
        assert cfg["log_level"] == "INFO"
        assert cfg["enable_console"] is True
        assert cfg["enable_file"] is False
        assert cfg["max_bytes"] == 10485760
        assert cfg["backup_count"] == 5

    def test_unknown_key_uses_default(self):
        assert ConfigProperties.get("no.such.key") is None
        assert ConfigProperties.get("no.such.key", "fallback") == "fallback"


class TestFileValues:

    def test_parses_both_separators(self, properties_file):
        assert ConfigProperties.get_server_host() == "127.0.0.1"
        assert ConfigProperties.get_server_port() == 4000

    def test_comments_are_skipped(self, properties_file):
        assert all(not key.startswith(("#", "!")) for key in ConfigProperties.all_properties())

    def test_value_keeps_later_separators(self, properties_file):
        assert ConfigProperties.get("custom.key") == "value=with=equals"

    def test_origin_list(self, properties_file):
        assert ConfigProperties.get_cors_origins() == ["http://a.test", "http://b.test"]

    def test_log_level_is_upper_cased(self, properties_file):
        assert ConfigProperties.get_logging_config()["log_level"] == "DEBUG"

    def test_get_section(self, properties_file):
        assert ConfigProperties.get_section("server") == {"host": "127.0.0.1", "port": "4000"}


class TestEnvironmentOverrides:

    def test_env_beats_file(self, properties_file, monkeypatch):
        monkeypatch.setenv("TASK_STORE_PORT", "8080")
        monkeypatch.setenv("TASK_STORE_SEED_ENABLED", "no")
        assert ConfigProperties.get_server_port() == 8080
        assert ConfigProperties.get_seed_enabled() is False

    def test_invalid_port(self, monkeypatch):
        monkeypatch.setenv("TASK_STORE_PORT", "http")
        with pytest.raises(ConfigurationError) as exc_info:
            ConfigProperties.get_server_port()
        assert exc_info.value.setting_name == "server.port"
        assert exc_info.value.error_code == "CONFIG_ERROR"

    def test_port_out_of_range(self, monkeypatch):
        monkeypatch.setenv("TASK_STORE_PORT", "70000")
        with pytest.raises(ConfigurationError):
            ConfigProperties.get_server_port()
