"""
Use case for extracting a bound service from an application's environment.
"""

import logging
from typing import Any, Optional

from kibana_me_logs.entities.ServiceBinding import ServiceBinding
from kibana_me_logs.exceptions import (
    BaseAppError,
    InvalidInputError,
    MalformedResponseError,
    NotBoundError,
)
from kibana_me_logs.ports.platform.platform_command_port import PlatformCommandPort
from kibana_me_logs.use_cases._json import decode_curl_output

ENV_QUERY = "/v2/apps/{guid}/env"


class FindServiceBindingUseCase:
    """Find the first service instance of a given label bound to an app."""

    def __init__(
        self,
        platform: PlatformCommandPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._platform = platform
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, app_guid: str, label: str) -> ServiceBinding:
        """
        Fetch the app environment and return its first `label` binding.

        When an app is bound to several instances of the label, the first one
        listed in VCAP_SERVICES wins.

        Raises:
            NotBoundError: If the app has no binding of that label
            MalformedResponseError: If the environment cannot be decoded
        """
        if not app_guid or not label:
            raise InvalidInputError("Both an app guid and a service label are required")
        try:
            self._logger.info(f"Looking up {label} binding of app {app_guid}")
            services = self._fetch_vcap_services(app_guid)
            group = services.get(label)
            if group is None or (isinstance(group, list) and not group):
                raise NotBoundError(f"app is not bound to a {label} service")
            if not isinstance(group, list):
                raise MalformedResponseError(
                    f"VCAP_SERVICES['{label}'] is not a list for app {app_guid}"
                )
            first = group[0]
            if not isinstance(first, dict):
                raise MalformedResponseError(
                    f"Unexpected {label} binding entry for app {app_guid}"
                )
            try:
                binding = ServiceBinding.from_vcap_entry(first, label)
            except TypeError as e:
                raise MalformedResponseError(f"Invalid {label} binding: {e}")
            self._logger.info(f"App {app_guid} is bound to {binding.get_details()}")
            return binding
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error reading environment of app {app_guid}: {e}")
            raise MalformedResponseError(
                f"Failed to read environment of app {app_guid}: {str(e)}"
            )

    def _fetch_vcap_services(self, app_guid: str) -> dict[str, Any]:
        path = ENV_QUERY.format(guid=app_guid)
        env = decode_curl_output(self._platform.run("curl", path), path)

        system_env = env.get("system_env_json")
        if not isinstance(system_env, dict):
            raise MalformedResponseError(f"Missing 'system_env_json' in response from {path}")
        services = system_env.get("VCAP_SERVICES", {})
        if not isinstance(services, dict):
            raise MalformedResponseError(f"'VCAP_SERVICES' is not an object in {path}")
        return services
