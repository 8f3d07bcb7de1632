import logging
import webbrowser
from typing import Optional

from kibana_me_logs.exceptions import LaunchError
from kibana_me_logs.ports.browser.browser_launcher_port import BrowserLauncherPort


class WebBrowserLauncher(BrowserLauncherPort):
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    def open(self, url: str) -> None:
        if not url:
            raise LaunchError("Cannot open an empty URL")
        try:
            ok = webbrowser.open(url)
        except webbrowser.Error as e:
            raise LaunchError(f"Failed to open browser: {e}")
        if not ok:
            raise LaunchError(f"No browser available to open {url}")
        self._logger.info(f"Opened browser at {url}")
