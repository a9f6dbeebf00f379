"""Exception types raised by logfacade."""

from __future__ import annotations


class LogFacadeError(Exception):
    """Base class for all logfacade errors."""


class ValidationError(LogFacadeError, ValueError):
    """A log call argument is missing, empty, or out of bounds.

    Raised synchronously to the caller before anything reaches the backend.
    These are never retried and never logged by the facade itself.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class ProviderResolutionError(LogFacadeError):
    """The configured provider identifier could not be turned into a provider.

    The underlying failure (unknown identifier, factory error) is available
    as ``__cause__``.
    """

    def __init__(self, identifier: str, message: str) -> None:
        super().__init__(message)
        self.identifier = identifier
