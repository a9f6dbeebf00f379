"""Base provider definitions for logfacade."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar

from ..config import LoggingSettings
from ..service import LogService

if TYPE_CHECKING:
    from .registry import ProviderRegistry


class LogProvider(ABC):
    """Abstract base class for log providers.

    A provider owns exactly one :class:`LogService` for its lifetime. The
    registry constructs one provider per identifier and hands the same
    instance to every caller until its cache is cleared.

    Implementations should:
    - set :attr:`name` to a stable, unique identifier (e.g. "stdlib")
    - accept the resolved :class:`LoggingSettings` in ``__init__``
    - implement :meth:`get_service`
    """

    name: ClassVar[str]

    def __init__(self, settings: LoggingSettings | None = None) -> None:
        self._settings = settings or LoggingSettings()
        self._registry: ProviderRegistry | None = None

    @property
    def settings(self) -> LoggingSettings:
        return self._settings

    @abstractmethod
    def get_service(self) -> LogService:
        """Return the log service owned by this provider."""

    def clear(self) -> None:
        """Drop every cached provider in the registry that produced this one.

        This provider and its service stay usable; the next lookup through
        the registry resolves afresh.
        """
        if self._registry is not None:
            self._registry.clear()

    def _bind(self, registry: ProviderRegistry) -> None:
        self._registry = registry
