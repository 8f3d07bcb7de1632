"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from kibana_me_logs.adapters.browser.web_browser_launcher import WebBrowserLauncher
from kibana_me_logs.adapters.platform.cf_cli_adapter import CfCliAdapter
from kibana_me_logs.adapters.platform.cf_config_adapter import CfConfigAdapter
from kibana_me_logs.adapters.routes.status_text_route_parser import (
    StatusTextRouteParser,
)
from kibana_me_logs.config.settings import Settings
from kibana_me_logs.ports.browser.browser_launcher_port import BrowserLauncherPort
from kibana_me_logs.ports.platform.platform_command_port import PlatformCommandPort
from kibana_me_logs.ports.platform.session_config_port import SessionConfigPort
from kibana_me_logs.ports.routes.route_parser_port import RouteParserPort
from kibana_me_logs.use_cases.apps.resolve_application import (
    ResolveApplicationUseCase,
)
from kibana_me_logs.use_cases.dashboard.open_app_logs import OpenAppLogsUseCase
from kibana_me_logs.use_cases.services.correlate_bindings import (
    CorrelateBindingsUseCase,
)
from kibana_me_logs.use_cases.services.find_service_binding import (
    FindServiceBindingUseCase,
)


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get the settings, read from the environment on first use.

        Raises:
            ConfigurationError: If an environment variable is invalid
        """
        if self._settings is None:
            self._settings = Settings()
        return self._settings

    def get_platform(self) -> PlatformCommandPort:
        """
        Get the cf CLI adapter instance.

        Returns:
            PlatformCommandPort implementation
        """
        if "platform" not in self._instances:
            settings = self.get_settings()
            self._instances["platform"] = CfCliAdapter(
                command=settings.cf_command,
                timeout=settings.cf_command_timeout,
                logger=self._logger,
            )
        return self._instances["platform"]

    def get_session_config(self) -> SessionConfigPort:
        """
        Get the cf config reader instance.

        Returns:
            SessionConfigPort implementation
        """
        if "session_config" not in self._instances:
            self._instances["session_config"] = CfConfigAdapter(
                self.get_settings().cf_config_path, self._logger
            )
        return self._instances["session_config"]

    def get_route_parser(self) -> RouteParserPort:
        if "route_parser" not in self._instances:
            settings = self.get_settings()
            self._instances["route_parser"] = StatusTextRouteParser(
                scheme=settings.url_scheme,
                labels=settings.route_labels,
                logger=self._logger,
            )
        return self._instances["route_parser"]

    def get_browser_launcher(self) -> BrowserLauncherPort:
        if "browser_launcher" not in self._instances:
            self._instances["browser_launcher"] = WebBrowserLauncher(self._logger)
        return self._instances["browser_launcher"]

    def get_resolve_application_use_case(self) -> ResolveApplicationUseCase:
        """
        Build a resolver bound to the space targeted right now.

        The cf config is read on every call so a `cf target` between two
        requests is honoured.

        Returns:
            Configured ResolveApplicationUseCase

        Raises:
            ConfigurationError: If no space is targeted
        """
        space = self.get_session_config().current_space()
        return ResolveApplicationUseCase(self.get_platform(), space, self._logger)

    def get_find_service_binding_use_case(self) -> FindServiceBindingUseCase:
        if "find_service_binding_use_case" not in self._instances:
            self._instances["find_service_binding_use_case"] = (
                FindServiceBindingUseCase(self.get_platform(), self._logger)
            )
        return self._instances["find_service_binding_use_case"]

    def get_open_app_logs_use_case(
        self, service_label: Optional[str] = None
    ) -> OpenAppLogsUseCase:
        """
        Get the open app logs use case with injected dependencies.

        Args:
            service_label: Overrides the configured service label

        Returns:
            Configured OpenAppLogsUseCase
        """
        settings = self.get_settings()
        return OpenAppLogsUseCase(
            resolver=self.get_resolve_application_use_case(),
            binding_finder=self.get_find_service_binding_use_case(),
            correlator=CorrelateBindingsUseCase(self._logger),
            route_parser=self.get_route_parser(),
            launcher=self.get_browser_launcher(),
            service_label=service_label or settings.service_label,
            dashboard_template=settings.dashboard_template,
            logger=self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
