"""
Tests for build_dashboard_url.
"""

import pytest

from kibana_me_logs.exceptions import InvalidInputError, NoRouteError
from kibana_me_logs.use_cases.dashboard.build_dashboard_url import build_dashboard_url


class TestBuildDashboardUrl:
    """Test cases for composing the dashboard URL."""

    def test_default_template(self):
        url = build_dashboard_url("http://dash.example.com", "guid-B")

        assert url == "http://dash.example.com/#/dashboard/file/app-logs-guid-B.json"

    def test_trailing_slash_on_base_url(self):
        url = build_dashboard_url("http://dash.example.com/", "guid-B")

        assert url == "http://dash.example.com/#/dashboard/file/app-logs-guid-B.json"

    def test_custom_template(self):
        url = build_dashboard_url(
            "https://kibana.example.com", "guid-B", "/app/kibana#/dashboard/{guid}"
        )

        assert url == "https://kibana.example.com/app/kibana#/dashboard/guid-B"

    def test_empty_base_url(self):
        with pytest.raises(NoRouteError):
            build_dashboard_url("", "guid-B")

    def test_empty_guid(self):
        with pytest.raises(InvalidInputError):
            build_dashboard_url("http://dash.example.com", "")
