"""
Platform command port interface defining the contract for running cf commands.
"""

from abc import ABC, abstractmethod


class PlatformCommandPort(ABC):
    """Port interface for executing platform CLI commands."""

    @abstractmethod
    def run(self, *args: str) -> list[str]:
        """
        Execute a platform command and capture its output.

        Args:
            *args: Command arguments, e.g. ("app", "my-app")

        Returns:
            Captured standard output, one entry per line

        Raises:
            PlatformCommandError: If the command cannot be run or fails
        """
        pass
