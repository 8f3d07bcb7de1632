"""
Dashboard link domain entity.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DashboardLink:
    """Outcome of a correlation run: where to find the target app's logs."""

    kibana_app: str
    app: str
    app_guid: str
    service_name: str
    base_url: str
    url: str
