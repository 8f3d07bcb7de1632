"""
Configuration settings for the application.
"""

import os
from typing import Optional

from dotenv import load_dotenv

from kibana_me_logs.exceptions import ConfigurationError

# Load environment variables from .env file
_ = load_dotenv()

DEFAULT_SERVICE_LABEL = "logstash14"
DEFAULT_URL_SCHEME = "http://"
DEFAULT_DASHBOARD_TEMPLATE = "/#/dashboard/file/app-logs-{guid}.json"
DEFAULT_ROUTE_LABELS = ("urls:",)


class Settings:
    """Application settings loaded from environment variables."""

    def __init__(self):
        self.cf_command: str = self._get_env("CF_COMMAND", "cf")
        self.cf_home: Optional[str] = os.getenv("CF_HOME") or None
        self.cf_command_timeout: Optional[float] = self._get_optional_float(
            "CF_COMMAND_TIMEOUT"
        )
        self.service_label: str = self._get_env(
            "KIBANA_SERVICE_LABEL", DEFAULT_SERVICE_LABEL
        )
        self.url_scheme: str = self._get_env("KIBANA_URL_SCHEME", DEFAULT_URL_SCHEME)
        self.dashboard_template: str = self._get_env(
            "KIBANA_DASHBOARD_TEMPLATE", DEFAULT_DASHBOARD_TEMPLATE
        )
        if "{guid}" not in self.dashboard_template:
            raise ConfigurationError(
                "KIBANA_DASHBOARD_TEMPLATE must contain a '{guid}' placeholder"
            )
        self.route_labels: tuple[str, ...] = self._get_labels(
            "KIBANA_ROUTE_LABELS", DEFAULT_ROUTE_LABELS
        )

    @property
    def cf_config_path(self) -> str:
        """Location of the cf CLI config file (honours CF_HOME like the cf CLI)."""
        base = self.cf_home or os.path.expanduser("~")
        return os.path.join(base, ".cf", "config.json")

    def _get_env(self, key: str, default: str) -> str:
        """Get an environment variable with a default value."""
        return os.getenv(key) or default

    def _get_labels(self, key: str, default: tuple[str, ...]) -> tuple[str, ...]:
        """Get a comma-separated list of route labels, e.g. 'urls:,routes:'."""
        raw = os.getenv(key)
        if not raw:
            return default
        labels = tuple(label.strip() for label in raw.split(",") if label.strip())
        if not labels:
            raise ConfigurationError(f"Environment variable {key} lists no label")
        return labels

    def _get_optional_float(self, key: str) -> Optional[float]:
        """Get a positive float environment variable, None when unset."""
        raw = os.getenv(key)
        if not raw:
            return None
        try:
            value = float(raw)
        except ValueError:
            raise ConfigurationError(f"Environment variable {key} must be a number")
        if value <= 0:
            raise ConfigurationError(f"Environment variable {key} must be positive")
        return value

