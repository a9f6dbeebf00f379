"""Registry that resolves provider identifiers to cached provider instances."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from importlib import metadata
from threading import RLock
from typing import Any

from ..config import DEFAULT_PROVIDER, LoggingSettings
from ..errors import ProviderResolutionError
from .base import LogProvider
from .stdlib import StdlibLogProvider

_ENTRY_POINT_GROUP = "logfacade.providers"
_log = logging.getLogger(__name__)

ProviderFactory = type[LogProvider] | Callable[[LoggingSettings], LogProvider]


def _normalize(identifier: str) -> str:
    return identifier.strip().lower()


class ProviderRegistry:
    """Maps provider identifiers to factories and memoizes one instance per identifier.

    The built-in ``"stdlib"`` provider is always registered. Additional
    providers come from :meth:`register_provider` or from the
    ``logfacade.providers`` entry-point group.

    Example:
        ```python
        registry = ProviderRegistry()
        registry.register_provider("audit", AuditProvider)
        service = registry.get_provider("audit").get_service()
        ```
    """

    def __init__(self, settings: LoggingSettings | None = None, *, discover: bool = True) -> None:
        """Initialize the registry.

        Args:
            settings: Fixed settings for every resolution. When omitted the
                environment is read on each :meth:`get_provider` call.
            discover: Register providers published as entry points.
        """
        self._settings = settings
        self._factories: dict[str, ProviderFactory] = {}
        self._cache: dict[str, LogProvider] = {}
        self._lock: RLock = RLock()
        self._resolution_count = 0
        self.register_provider(DEFAULT_PROVIDER, StdlibLogProvider)
        if discover:
            self._discover_entry_points()

    @property
    def settings(self) -> LoggingSettings:
        """Settings used for the next resolution."""
        if self._settings is not None:
            return self._settings
        return LoggingSettings.from_env()

    @property
    def resolution_count(self) -> int:
        """Number of providers constructed on a cache miss so far."""
        with self._lock:
            return self._resolution_count

    def register_provider(self, identifier: str, factory: ProviderFactory) -> None:
        """Register a provider class or factory under the given identifier."""

        normalized = _normalize(identifier)
        if not normalized:
            raise ValueError("Provider identifier must be a non-empty string.")
        if isinstance(factory, type):
            if not issubclass(factory, LogProvider):
                raise TypeError("Provider classes must subclass LogProvider.")
        elif not callable(factory):
            raise TypeError("factory must be a LogProvider subclass or a callable.")
        with self._lock:
            existing = self._factories.get(normalized)
            if existing is not None and existing is not factory:
                raise ValueError(
                    f"Provider '{normalized}' is already registered to {_describe(existing)}."
                )
            self._factories[normalized] = factory

    def get_provider(self, identifier: str | None = None) -> LogProvider:
        """Return the cached provider for *identifier*, constructing it on a miss.

        Args:
            identifier: Provider to resolve. Defaults to the configured
                provider, then to ``"stdlib"``.

        Raises:
            ProviderResolutionError: If the identifier is not registered or
                its factory fails.
        """
        settings = self.settings
        requested = identifier if identifier is not None else settings.provider_identifier
        normalized = _normalize(requested) or DEFAULT_PROVIDER

        with self._lock:
            cached = self._cache.get(normalized)
            if cached is not None:
                return cached

            provider = self._construct(normalized, settings)
            provider._bind(self)
            self._cache[normalized] = provider
            self._resolution_count += 1
            _log.debug("Resolved log provider '%s' to %s.", normalized, type(provider).__name__)
            return provider

    def clear(self) -> None:
        """Drop all cached providers. Registrations are kept."""

        with self._lock:
            self._cache.clear()

    def list_providers(self) -> list[str]:
        """Return a sorted list of registered provider identifiers."""

        with self._lock:
            return sorted(self._factories.keys())

    def cached_providers(self) -> list[str]:
        """Return a sorted list of identifiers with a cached instance."""

        with self._lock:
            return sorted(self._cache.keys())

    def _construct(self, identifier: str, settings: LoggingSettings) -> LogProvider:
        factory = self._factories.get(identifier)
        if factory is None:
            available = ", ".join(self.list_providers())
            raise ProviderResolutionError(
                identifier,
                f"Log provider '{identifier}' is not registered. Available: [{available}]",
            ) from KeyError(identifier)

        try:
            provider = factory(settings)
        except Exception as e:
            raise ProviderResolutionError(
                identifier, f"Unable to construct log provider '{identifier}': {e}"
            ) from e

        if not isinstance(provider, LogProvider):
            raise ProviderResolutionError(
                identifier,
                f"Factory for '{identifier}' returned {type(provider).__name__}, "
                "not a LogProvider.",
            ) from TypeError(type(provider).__name__)
        return provider

    def _discover_entry_points(self) -> None:
        """Load and register providers from entry points."""

        try:
            entry_points = metadata.entry_points()
        except Exception:  # pragma: no cover - defensive for older importlib-metadata
            _log.debug("Failed to read log provider entry points.", exc_info=True)
            return

        for entry_point in self._select_entry_points(entry_points, _ENTRY_POINT_GROUP):
            try:
                factory = entry_point.load()
            except Exception:
                _log.debug(
                    "Failed to load log provider entry point '%s'.", entry_point.name, exc_info=True
                )
                continue

            try:
                self.register_provider(entry_point.name, factory)
            except (TypeError, ValueError):
                _log.debug(
                    "Failed to register log provider entry point '%s'.",
                    entry_point.name,
                    exc_info=True,
                )
                continue

    @staticmethod
    def _select_entry_points(entry_points: Any, group: str) -> Iterable[Any]:
        """Select entry points for *group* across importlib.metadata variants."""

        select = getattr(entry_points, "select", None)
        if callable(select):
            result: Iterable[Any] = select(group=group)
            return result

        # Compatibility with older `importlib_metadata` styles that return a mapping.
        if isinstance(entry_points, dict):
            result = entry_points.get(group, [])
            return result

        return []


def _describe(factory: ProviderFactory) -> str:
    return getattr(factory, "__name__", repr(factory))


_default_registry: ProviderRegistry | None = None
_default_lock = RLock()


def get_registry() -> ProviderRegistry:
    """Return the process-default registry, creating it on first use."""

    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = ProviderRegistry()
        return _default_registry


def set_registry(registry: ProviderRegistry | None) -> None:
    """Install *registry* as the process default. ``None`` resets it."""

    global _default_registry
    with _default_lock:
        _default_registry = registry


def get_provider(identifier: str | None = None) -> LogProvider:
    """Resolve a provider through the process-default registry."""

    return get_registry().get_provider(identifier)


def clear() -> None:
    """Clear the process-default registry's provider cache."""

    get_registry().clear()
