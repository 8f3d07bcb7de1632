"""
Custom exceptions for the application.
"""


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class InvalidInputError(BaseAppError, ValueError):
    """Exception raised when a required name or label is empty."""

    pass


class PlatformCommandError(BaseAppError):
    """Exception raised when a cf command fails or cannot be run."""

    pass


class NotFoundError(BaseAppError):
    """Exception raised when no application matches a name in the space."""

    pass


class NotBoundError(BaseAppError):
    """Exception raised when an app has no binding for a service label."""

    pass


class CorrelationMismatchError(BaseAppError):
    """Exception raised when two apps do not share the same service instance."""

    pass


class MalformedResponseError(BaseAppError):
    """Exception raised for undecodable or unexpectedly shaped API responses."""

    pass


class NoRouteError(BaseAppError):
    """Exception raised when an application exposes no route."""

    pass


class LaunchError(BaseAppError):
    """Exception raised when the browser cannot be opened."""

    pass
