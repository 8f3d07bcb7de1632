import json
import logging
import os
from typing import Any, Optional

from kibana_me_logs.entities.Space import Space
from kibana_me_logs.exceptions import ConfigurationError
from kibana_me_logs.ports.platform.session_config_port import SessionConfigPort


class CfConfigAdapter(SessionConfigPort):
    """Reads the targeted space from the cf CLI config file (~/.cf/config.json)."""

    def __init__(self, path: str, logger: Optional[logging.Logger] = None) -> None:
        self._path = path
        self._logger = logger or logging.getLogger(__name__)

    def current_space(self) -> Space:
        data = self._load()
        fields = data.get("SpaceFields")
        if not isinstance(fields, dict):
            raise ConfigurationError(
                "No space targeted, use 'cf target -s SPACE' to target a space"
            )
        guid = fields.get("GUID") or fields.get("Guid") or ""
        name = fields.get("Name") or ""
        space = Space(guid=str(guid), name=str(name))
        self._logger.info(f"Using targeted space: {space.name or space.guid}")
        return space

    def _load(self) -> dict[str, Any]:
        if not os.path.isfile(self._path):
            raise ConfigurationError(
                f"cf config not found at {self._path}, run 'cf login' first"
            )
        try:
            with open(self._path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigurationError(f"Cannot read cf config {self._path}: {e}")
        if not isinstance(data, dict):
            raise ConfigurationError(f"Unexpected cf config format in {self._path}")
        return data
