"""
Route parser for the human-readable `cf app` status output.
"""

import logging
from typing import Iterable, Optional

from kibana_me_logs.exceptions import NoRouteError
from kibana_me_logs.ports.routes.route_parser_port import RouteParserPort


class StatusTextRouteParser(RouteParserPort):
    """
    Extract base URLs from a `urls: a.example.com, b.example.com` status line.

    This depends on the exact formatting of the cf CLI; swap the parser if
    the output changes.
    """

    def __init__(
        self,
        scheme: str = "http://",
        labels: Iterable[str] = ("urls:",),
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._scheme = scheme
        self._labels = tuple(labels)
        self._logger = logger or logging.getLogger(__name__)

    def parse_base_urls(self, status_lines: list[str]) -> list[str]:
        urls: list[str] = []
        for line in status_lines:
            tokens = line.strip().split()
            if not tokens or tokens[0] not in self._labels:
                continue
            hosts = [t.strip(",").strip() for t in tokens[1:]]
            hosts = [h for h in hosts if h]
            if not hosts:
                raise NoRouteError("App has no route")
            urls.extend(self._scheme + h for h in hosts)
        self._logger.debug(f"Parsed base URLs: {urls}")
        return urls
