from abc import ABC, abstractmethod

from kibana_me_logs.entities.Space import Space


class SessionConfigPort(ABC):
    @abstractmethod
    def current_space(self) -> Space:
        """
        Read the space targeted by the local cf CLI session.

        Raises:
            ConfigurationError: If no usable session config exists
        """
        pass
