from kibana_me_logs.config.settings import DEFAULT_DASHBOARD_TEMPLATE
from kibana_me_logs.exceptions import InvalidInputError, NoRouteError


def build_dashboard_url(
    base_url: str, app_guid: str, template: str = DEFAULT_DASHBOARD_TEMPLATE
) -> str:
    """Deep link to the saved Kibana dashboard of `app_guid`."""
    if not base_url:
        raise NoRouteError("App has no route")
    if not app_guid:
        raise InvalidInputError("An app guid is required to build the dashboard URL")
    return base_url.rstrip("/") + template.format(guid=app_guid)
