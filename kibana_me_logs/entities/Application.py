"""
Application domain entity.
"""

from typing import Optional

from kibana_me_logs.exceptions import InvalidInputError


class Application:
    """
    A Cloud Foundry application referenced by name within the targeted space.
    """

    def __init__(
        self,
        name: str,
        guid: Optional[str] = None,
        status_lines: Optional[list[str]] = None,
    ):
        """
        Initialize the Application entity.

        Args:
            name: Application name, unique within the space
            guid: Platform-assigned identifier, once resolved
            status_lines: Raw output of `cf app <name>`, when captured
        """
        if not name or not isinstance(name, str) or not name.strip():
            raise InvalidInputError("Application name must be a non-empty string")
        if name != name.strip():
            raise InvalidInputError(
                f"Application name {name!r} has leading or trailing whitespace"
            )

        self.name = name
        self.guid = guid or None
        self.status_lines = list(status_lines or [])

    def __str__(self) -> str:
        """String representation of the Application."""
        parts = [f"name='{self.name}'"]
        if self.guid:
            parts.append(f"guid='{self.guid}'")
        return f"Application({', '.join(parts)})"
