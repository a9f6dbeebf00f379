"""Per-call log record and argument validation."""

from __future__ import annotations

from collections.abc import Mapping
from types import ModuleType
from typing import Any

import pydantic
from pydantic import BaseModel, ConfigDict, Field

from .errors import ValidationError
from .severity import Severity

MAX_OPERATION_NAME_LENGTH = 64
MAX_MESSAGE_LENGTH = 256


def origin_name(origin: object) -> str:
    """Resolve the identifier of a calling unit.

    Classes resolve to ``module.QualName``, modules to their ``__name__`` and
    strings to themselves. ``None`` resolves to an empty identifier, which
    fails validation.
    """
    if origin is None:
        return ""
    if isinstance(origin, str):
        return origin
    if isinstance(origin, type):
        return f"{origin.__module__}.{origin.__qualname__}"
    if isinstance(origin, ModuleType):
        return origin.__name__
    cls = type(origin)
    return f"{cls.__module__}.{cls.__qualname__}"


class LogRecord(BaseModel):
    """A validated log call. Built per call and never retained."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    origin: str = Field(
        ..., min_length=1, strict=True, description="Identifier of the calling unit."
    )
    operation_name: str = Field(
        ...,
        min_length=1,
        max_length=MAX_OPERATION_NAME_LENGTH,
        strict=True,
        description="Call-site label, usually the calling function name.",
    )
    message: str = Field(..., min_length=1, max_length=MAX_MESSAGE_LENGTH, strict=True)
    severity: Severity
    error: BaseException | None = Field(default=None, description="Attached failure cause.")

    @classmethod
    def build(
        cls,
        origin: object,
        operation_name: str,
        message: str,
        severity: Severity,
        error: BaseException | None = None,
        *,
        require_error: bool = False,
    ) -> LogRecord:
        """Validate the call arguments and return a record.

        Fields are checked in order: origin, operation_name, message, error.
        Only the first violation is reported.

        Args:
            require_error: Set for the error-attaching call forms, where a
                missing error is a violation.

        Raises:
            ValidationError: If any field is missing, empty, or too long.
        """
        try:
            record = cls(
                # bytes go through unresolved so the strict str check rejects them
                origin=origin if isinstance(origin, (bytes, bytearray)) else origin_name(origin),
                operation_name=operation_name,
                message=message,
                severity=severity,
                error=error,
            )
        except pydantic.ValidationError as exc:
            first = exc.errors()[0]
            field = str(first["loc"][0]) if first["loc"] else "record"
            raise ValidationError(field, _describe(field, first)) from exc

        if require_error and record.error is None:
            raise ValidationError("error", "error must not be None")
        return record


def _describe(field: str, error: Mapping[str, Any]) -> str:
    kind = error.get("type", "")
    if kind == "string_too_long":
        limit = error.get("ctx", {}).get("max_length")
        return f"{field} must be at most {limit} characters"
    if kind in ("string_too_short", "missing"):
        return f"{field} must not be empty"
    if kind == "string_type":
        return f"{field} must be a non-empty string"
    if kind == "is_instance_of":
        return f"{field} must be an exception instance"
    return f"{field} is invalid: {error.get('msg', kind)}"
