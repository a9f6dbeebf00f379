"""Log providers and registry utilities."""

from .base import LogProvider
from .registry import (
    ProviderFactory,
    ProviderRegistry,
    clear,
    get_provider,
    get_registry,
    set_registry,
)
from .stdlib import StdlibLogProvider

__all__ = [
    "LogProvider",
    "ProviderFactory",
    "ProviderRegistry",
    "StdlibLogProvider",
    "clear",
    "get_provider",
    "get_registry",
    "set_registry",
]
