"""
FastAPI dependency functions for retrieving use cases from the container.
"""

from typing import Optional

from kibana_me_logs.container import container
from kibana_me_logs.use_cases.dashboard.open_app_logs import OpenAppLogsUseCase


def get_open_app_logs_uc(service_label: Optional[str] = None) -> OpenAppLogsUseCase:
    """
    Get the open app logs use case from the container.

    Returns:
        OpenAppLogsUseCase: The use case instance
    """
    return container.get_open_app_logs_use_case(service_label=service_label)
