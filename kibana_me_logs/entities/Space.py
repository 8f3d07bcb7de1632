"""
Space domain entity.
"""

from kibana_me_logs.exceptions import ConfigurationError


class Space:
    """The Cloud Foundry space currently targeted by the cf CLI."""

    def __init__(self, guid: str, name: str = ""):
        if not guid or not isinstance(guid, str):
            raise ConfigurationError(
                "No space targeted, use 'cf target -s SPACE' to target a space"
            )
        self.guid = guid
        self.name = name or ""

    def __str__(self) -> str:
        return f"Space(name='{self.name}', guid='{self.guid}')"
