"""
Pytest configuration and shared fixtures.
"""

import json
from unittest.mock import MagicMock

import pytest

from kibana_me_logs.entities.Space import Space
from kibana_me_logs.exceptions import PlatformCommandError
from kibana_me_logs.ports.platform.platform_command_port import PlatformCommandPort

SPACE_GUID = "space-1"


def apps_query(name: str) -> str:
    return f"/v2/spaces/{SPACE_GUID}/apps?q=name:{name}&inline-relations-depth=1"


def search_response(*guids: str) -> list[str]:
    """`cf curl` output of an app search returning the given GUIDs."""
    resources = [
        {"metadata": {"guid": g, "url": f"/v2/apps/{g}"}} for g in guids
    ]
    return json.dumps({"total_results": len(guids), "resources": resources}, indent=2).splitlines()


def env_response(services: dict) -> list[str]:
    """`cf curl` output of an app environment with the given VCAP_SERVICES."""
    return json.dumps(
        {
            "staging_env_json": {},
            "running_env_json": {},
            "environment_json": {},
            "system_env_json": {"VCAP_SERVICES": services},
        },
        indent=2,
    ).splitlines()


def logstash(name: str, **extra) -> dict:
    entry = {
        "name": name,
        "label": "logstash14",
        "tags": ["logstash14", "logs"],
        "plan": "free",
        "credentials": {"hostname": "10.0.0.5", "port": 5000},
    }
    entry.update(extra)
    return entry


def status_output(urls: str) -> list[str]:
    """`cf app` output as printed by the cf CLI 6.x."""
    return [
        "Showing health and status for app dash in org me / space dev as admin...",
        "OK",
        "",
        "requested state: started",
        "instances: 1/1",
        "usage: 512M x 1 instances",
        f"urls: {urls}",
        "last uploaded: Mon Jun 1 10:00:00 UTC 2015",
        "",
        "     state     since                    cpu    memory           disk",
        "#0   running   2015-06-01 10:01:00 AM   0.0%   120M of 512M     80M of 1G",
    ]


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def space():
    return Space(guid=SPACE_GUID, name="dev")


@pytest.fixture
def make_platform():
    """
    Build a platform port mock answering from a table of scripted commands.

    Keys are argument tuples such as ("app", "dash"); values are output lines or
    an exception to raise. Unknown commands fail like cf would.
    """

    def _make(responses: dict) -> MagicMock:
        platform = MagicMock(spec=PlatformCommandPort)

        def _run(*args):
            if args not in responses:
                raise PlatformCommandError(f"unexpected command: {' '.join(args)}")
            result = responses[args]
            if isinstance(result, Exception):
                raise result
            return list(result)

        platform.run.side_effect = _run
        return platform

    return _make


@pytest.fixture
def end_to_end_responses():
    """Two apps, dash (guid-A) and web1 (guid-B), sharing the 'shared-log' service."""
    return {
        ("app", "dash"): status_output("dash.example.com"),
        ("app", "web1"): status_output("web1.example.com"),
        ("curl", apps_query("dash")): search_response("guid-A"),
        ("curl", apps_query("web1")): search_response("guid-B"),
        ("curl", "/v2/apps/guid-A/env"): env_response({"logstash14": [logstash("shared-log")]}),
        ("curl", "/v2/apps/guid-B/env"): env_response({"logstash14": [logstash("shared-log")]}),
    }
