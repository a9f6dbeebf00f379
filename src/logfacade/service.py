"""
Log service: the validate, gate, sanitize, dispatch pipeline.

Every ``log_*`` call runs the same steps:

1. validate origin, operation name and message (and the error, when the
   error-attaching form is used)
2. ask the backend whether the severity is enabled for the origin, and
   return quietly if not
3. pass operation name and message through the current sanitizer
4. emit one record to the backend
"""

from __future__ import annotations

from threading import Lock
from typing import Any

from .backends.base import LogBackend
from .errors import ValidationError
from .record import LogRecord
from .sanitizer import PassThroughSanitizer, Sanitizer
from .severity import Severity


class _NoError:
    """Marker for "no error argument supplied"."""

    def __repr__(self) -> str:
        return "<no error>"


NO_ERROR: Any = _NoError()


class LogService:
    """Validating, sanitizing front end over a :class:`LogBackend`.

    Example:
        ```python
        service = get_provider().get_service()
        service.log_warning(Storage, "save", "disk full")
        service.log_failure(Storage, "save", "write failed", error=exc)
        ```

    ``origin`` may be a class, a module or a string. Passing ``error=None``
    explicitly to an error-attaching method is a validation failure.
    """

    def __init__(self, backend: LogBackend, sanitizer: Sanitizer | None = None) -> None:
        self._backend = backend
        self._sanitizer: Sanitizer = sanitizer or PassThroughSanitizer()
        self._sanitizer_lock = Lock()

    @property
    def backend(self) -> LogBackend:
        return self._backend

    @property
    def sanitizer(self) -> Sanitizer:
        """The sanitizer applied to subsequent calls."""
        with self._sanitizer_lock:
            return self._sanitizer

    def set_sanitizer(self, sanitizer: Sanitizer) -> None:
        """Replace the sanitizer for all subsequent calls on this service."""
        if sanitizer is None:
            raise ValidationError("sanitizer", "sanitizer must not be None")
        with self._sanitizer_lock:
            self._sanitizer = sanitizer

    def log_debug(self, origin: object, operation_name: str, message: str) -> None:
        self._log(Severity.DEBUG, origin, operation_name, message)

    def log_configuration(self, origin: object, operation_name: str, message: str) -> None:
        self._log(Severity.CONFIGURATION, origin, operation_name, message)

    def log_message(self, origin: object, operation_name: str, message: str) -> None:
        self._log(Severity.MESSAGE, origin, operation_name, message)

    def log_warning(
        self,
        origin: object,
        operation_name: str,
        message: str,
        error: BaseException | None = NO_ERROR,
    ) -> None:
        self._log(Severity.WARNING, origin, operation_name, message, error)

    def log_failure(
        self,
        origin: object,
        operation_name: str,
        message: str,
        error: BaseException | None = NO_ERROR,
    ) -> None:
        self._log(Severity.FAILURE, origin, operation_name, message, error)

    def log_security(
        self,
        origin: object,
        operation_name: str,
        message: str,
        error: BaseException | None = NO_ERROR,
    ) -> None:
        self._log(Severity.SECURITY, origin, operation_name, message, error)

    def _log(
        self,
        severity: Severity,
        origin: object,
        operation_name: str,
        message: str,
        error: Any = NO_ERROR,
    ) -> None:
        attached = error is not NO_ERROR
        record = LogRecord.build(
            origin,
            operation_name,
            message,
            severity,
            error if attached else None,
            require_error=attached,
        )

        if not self._backend.is_enabled(record.origin, record.severity):
            return

        sanitizer = self.sanitizer
        self._backend.emit(
            record.origin,
            sanitizer.sanitize(record.operation_name),
            record.severity,
            sanitizer.sanitize(record.message),
            record.error,
        )
