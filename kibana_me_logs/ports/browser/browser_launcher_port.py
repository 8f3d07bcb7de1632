from abc import ABC, abstractmethod


class BrowserLauncherPort(ABC):
    @abstractmethod
    def open(self, url: str) -> None:
        """
        Open the given URL in the user's browser.

        Raises:
            LaunchError: If no browser could be opened
        """
        pass
