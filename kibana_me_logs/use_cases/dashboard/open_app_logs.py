"""
Use case for opening the Kibana dashboard of an application.
"""

import logging
from typing import Optional

from kibana_me_logs.config.settings import (
    DEFAULT_DASHBOARD_TEMPLATE,
    DEFAULT_SERVICE_LABEL,
)
from kibana_me_logs.entities.DashboardLink import DashboardLink
from kibana_me_logs.exceptions import BaseAppError, LaunchError, NoRouteError
from kibana_me_logs.ports.browser.browser_launcher_port import BrowserLauncherPort
from kibana_me_logs.ports.routes.route_parser_port import RouteParserPort
from kibana_me_logs.use_cases.apps.resolve_application import (
    ResolveApplicationUseCase,
)
from kibana_me_logs.use_cases.dashboard.build_dashboard_url import build_dashboard_url
from kibana_me_logs.use_cases.services.correlate_bindings import (
    CorrelateBindingsUseCase,
)
from kibana_me_logs.use_cases.services.find_service_binding import (
    FindServiceBindingUseCase,
)


class OpenAppLogsUseCase:
    """
    Resolve both apps, check they share a logstash service, then open Kibana.

    Every step runs once, in order, and the first failure aborts the run.
    """

    def __init__(
        self,
        resolver: ResolveApplicationUseCase,
        binding_finder: FindServiceBindingUseCase,
        correlator: CorrelateBindingsUseCase,
        route_parser: RouteParserPort,
        launcher: BrowserLauncherPort,
        service_label: str = DEFAULT_SERVICE_LABEL,
        dashboard_template: str = DEFAULT_DASHBOARD_TEMPLATE,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._resolver = resolver
        self._binding_finder = binding_finder
        self._correlator = correlator
        self._route_parser = route_parser
        self._launcher = launcher
        self._service_label = service_label
        self._dashboard_template = dashboard_template
        self._logger = logger or logging.getLogger(__name__)

    def resolve(self, kibana_app_name: str, app_name: str) -> DashboardLink:
        """
        Compute the dashboard link without opening it.

        Args:
            kibana_app_name: Name of the Kibana application
            app_name: Name of the application whose logs are wanted

        Returns:
            The resolved DashboardLink

        Raises:
            BaseAppError: Any failed precondition, see kibana_me_logs.exceptions
        """
        kibana = self._resolver.execute(kibana_app_name, role="kibana app")
        app = self._resolver.execute(app_name, role="app")

        kibana_binding = self._binding_finder.execute(kibana.guid, self._service_label)
        app_binding = self._binding_finder.execute(app.guid, self._service_label)
        service_name = self._correlator.execute(kibana_binding, app_binding)

        base_urls = self._route_parser.parse_base_urls(kibana.status_lines)
        if not base_urls:
            raise NoRouteError(f"kibana app {kibana.name} has no route")
        url = build_dashboard_url(base_urls[0], app.guid, self._dashboard_template)
        self._logger.info(f"Dashboard URL for {app.name}: {url}")

        return DashboardLink(
            kibana_app=kibana.name,
            app=app.name,
            app_guid=app.guid,
            service_name=service_name,
            base_url=base_urls[0],
            url=url,
        )

    def execute(self, kibana_app_name: str, app_name: str) -> DashboardLink:
        """Resolve the dashboard link and open it in the browser."""
        link = self.resolve(kibana_app_name, app_name)
        try:
            self._launcher.open(link.url)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error opening browser: {e}")
            raise LaunchError(str(e))
        return link
