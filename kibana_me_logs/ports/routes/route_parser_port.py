"""
Route parser port: turns `cf app` status output into base URLs.
"""

from abc import ABC, abstractmethod


class RouteParserPort(ABC):
    """Port interface for extracting routes from application status output."""

    @abstractmethod
    def parse_base_urls(self, status_lines: list[str]) -> list[str]:
        """
        Extract the base URLs of an application.

        Args:
            status_lines: Output of the status command, one entry per line

        Returns:
            Base URLs in the order they appear; empty when no route line exists

        Raises:
            NoRouteError: If the route line is present but lists no route
        """
        pass
