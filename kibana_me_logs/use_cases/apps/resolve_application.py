"""
Use case for resolving an application name into its platform identifier.
"""

import logging
from typing import Optional

from kibana_me_logs.entities.Application import Application
from kibana_me_logs.entities.Space import Space
from kibana_me_logs.exceptions import (
    BaseAppError,
    MalformedResponseError,
    NotFoundError,
    PlatformCommandError,
)
from kibana_me_logs.ports.platform.platform_command_port import PlatformCommandPort
from kibana_me_logs.use_cases._json import decode_curl_output

APPS_QUERY = "/v2/spaces/{space_guid}/apps?q=name:{name}&inline-relations-depth=1"


class ResolveApplicationUseCase:
    """Find an application by name in the targeted space."""

    def __init__(
        self,
        platform: PlatformCommandPort,
        space: Space,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            platform: Port used to run cf commands
            space: The space the lookup is restricted to
            logger: Logger instance to use for logging
        """
        self._platform = platform
        self._space = space
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, name: str, role: str = "app") -> Application:
        """
        Check that the application exists and resolve its GUID.

        Args:
            name: Application name
            role: How the app is referred to in error messages ("app", "kibana app")

        Returns:
            Application entity carrying the GUID and the `cf app` status output

        Raises:
            NotFoundError: If no application matches the name
            MalformedResponseError: If the search response cannot be decoded
            PlatformCommandError: If the search command fails
        """
        app = Application(name)
        try:
            self._logger.info(f"Resolving {role} '{app.name}' in space {self._space.guid}")
            status_lines = self._check_exists(app.name, role)
            guid = self.find_guid(app.name)
            self._logger.info(f"Resolved {role} '{app.name}' to {guid}")
            return Application(app.name, guid=guid, status_lines=status_lines)
        except BaseAppError:
            raise
        except Exception as e:
            self._logger.error(f"Error resolving {role} '{app.name}': {e}")
            raise PlatformCommandError(f"Failed to resolve {role} {app.name}: {str(e)}")

    def find_guid(self, name: str) -> str:
        """Return the GUID of the first application named `name` in the space."""
        path = APPS_QUERY.format(space_guid=self._space.guid, name=name)
        data = decode_curl_output(self._platform.run("curl", path), path)

        resources = data.get("resources")
        if not isinstance(resources, list):
            raise MalformedResponseError(f"Missing 'resources' list in response from {path}")
        if not resources:
            raise NotFoundError(f"No app named '{name}' found in this org/space")

        first = resources[0]
        metadata = first.get("metadata") if isinstance(first, dict) else None
        guid = metadata.get("guid") if isinstance(metadata, dict) else None
        if not guid or not isinstance(guid, str):
            raise MalformedResponseError(f"Search result for '{name}' has no guid")
        return guid

    def _check_exists(self, name: str, role: str) -> list[str]:
        try:
            return self._platform.run("app", name)
        except PlatformCommandError as e:
            self._logger.error(f"'cf app {name}' failed: {e}")
            raise NotFoundError(f"{role} does not exist in this org/space")
