"""logfacade package."""

from .backends import LogBackend, StdlibBackend
from .config import LoggingSettings, load_settings
from .errors import LogFacadeError, ProviderResolutionError, ValidationError
from .providers import (
    LogProvider,
    ProviderRegistry,
    StdlibLogProvider,
    clear,
    get_provider,
    get_registry,
    set_registry,
)
from .record import MAX_MESSAGE_LENGTH, MAX_OPERATION_NAME_LENGTH, LogRecord
from .sanitizer import (
    ChainSanitizer,
    ControlCharacterSanitizer,
    PassThroughSanitizer,
    RedactingSanitizer,
    Sanitizer,
    get_sanitizer,
)
from .service import LogService
from .severity import Severity, is_at_least

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "MAX_MESSAGE_LENGTH",
    "MAX_OPERATION_NAME_LENGTH",
    "ChainSanitizer",
    "ControlCharacterSanitizer",
    "LogBackend",
    "LogFacadeError",
    "LogProvider",
    "LogRecord",
    "LogService",
    "LoggingSettings",
    "PassThroughSanitizer",
    "ProviderRegistry",
    "ProviderResolutionError",
    "RedactingSanitizer",
    "Sanitizer",
    "Severity",
    "StdlibBackend",
    "StdlibLogProvider",
    "ValidationError",
    "clear",
    "get_provider",
    "get_registry",
    "get_sanitizer",
    "is_at_least",
    "load_settings",
    "set_registry",
]
