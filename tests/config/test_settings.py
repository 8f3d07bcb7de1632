"""
Tests for the Settings loader.
"""

import os

import pytest

from kibana_me_logs.config.settings import (
    DEFAULT_DASHBOARD_TEMPLATE,
    Settings,
)
from kibana_me_logs.exceptions import ConfigurationError

ENV_KEYS = (
    "CF_COMMAND",
    "CF_HOME",
    "CF_COMMAND_TIMEOUT",
    "KIBANA_SERVICE_LABEL",
    "KIBANA_URL_SCHEME",
    "KIBANA_DASHBOARD_TEMPLATE",
    "KIBANA_ROUTE_LABELS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


class TestSettings:
    """Test cases for Settings."""

    def test_defaults(self, clean_env):
        clean_env.setenv("HOME", "/home/me")
        settings = Settings()

        assert settings.cf_command == "cf"
        assert settings.cf_command_timeout is None
        assert settings.service_label == "logstash14"
        assert settings.url_scheme == "http://"
        assert settings.dashboard_template == DEFAULT_DASHBOARD_TEMPLATE
        assert settings.route_labels == ("urls:",)
        assert settings.cf_config_path == os.path.join("/home/me", ".cf", "config.json")

    def test_cf_home_overrides_config_location(self, clean_env, tmp_path):
        clean_env.setenv("CF_HOME", str(tmp_path))

        assert Settings().cf_config_path == str(tmp_path / ".cf" / "config.json")

    def test_overrides(self, clean_env):
        clean_env.setenv("CF_COMMAND", "cf7")
        clean_env.setenv("CF_COMMAND_TIMEOUT", "30")
        clean_env.setenv("KIBANA_SERVICE_LABEL", "logstash")
        clean_env.setenv("KIBANA_URL_SCHEME", "https://")

        settings = Settings()

        assert settings.cf_command == "cf7"
        assert settings.cf_command_timeout == 30.0
        assert settings.service_label == "logstash"
        assert settings.url_scheme == "https://"

    @pytest.mark.parametrize("value", ["soon", "0", "-5"])
    def test_invalid_timeout(self, clean_env, value):
        clean_env.setenv("CF_COMMAND_TIMEOUT", value)

        with pytest.raises(ConfigurationError, match="CF_COMMAND_TIMEOUT"):
            Settings()

    def test_template_requires_guid_placeholder(self, clean_env):
        clean_env.setenv("KIBANA_DASHBOARD_TEMPLATE", "/#/dashboard/file/logs.json")

        with pytest.raises(ConfigurationError, match="guid"):
            Settings()

    def test_route_labels(self, clean_env):
        clean_env.setenv("KIBANA_ROUTE_LABELS", "urls:, routes: ")

        assert Settings().route_labels == ("urls:", "routes:")

    def test_route_labels_must_not_be_empty(self, clean_env):
        clean_env.setenv("KIBANA_ROUTE_LABELS", " , ")

        with pytest.raises(ConfigurationError, match="KIBANA_ROUTE_LABELS"):
            Settings()

    def test_module_import_does_not_read_environment(self):
        import kibana_me_logs.config.settings as settings_module

        assert not hasattr(settings_module, "settings")
