"""
Output sanitizers for logfacade.

A sanitizer rewrites untrusted free text (operation names and messages) before
it reaches a backend. Every built-in sanitizer is safe to apply twice.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterable, Sequence
from typing import ClassVar

REDACTED = "[REDACTED]"

# (pattern, replacement) pairs, compiled case-insensitively.
DEFAULT_SECRET_PATTERNS: tuple[tuple[str, str], ...] = (
    # key=value style assignments (query strings, connection strings)
    (
        r"\b((?:password|passwd|pwd|secret|api_key|apikey|token|access_token)=)[^&\s;]+",
        r"\1" + REDACTED,
    ),
    # credentials embedded in URLs
    (r"(://[^:/\s]+:)[^@\s]+(@)", r"\1" + REDACTED + r"\2"),
    # Authorization headers
    (r"(\bbearer\s+)[A-Za-z0-9._~+/-]+=*", r"\1" + REDACTED),
    # Provider-style API keys
    (r"\bsk-[A-Za-z0-9_-]{16,}", REDACTED),
    (r"\bAKIA[A-Z0-9]{16}\b", REDACTED),
)

_ESCAPES = {"\r": "\\r", "\n": "\\n", "\t": "\\t"}
_CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f-\x9f]")


class Sanitizer(ABC):
    """Transforms an untrusted string into one that is safe to log.

    Implementations must accept any string and must not raise.
    """

    name: ClassVar[str]

    @abstractmethod
    def sanitize(self, untrusted: str) -> str:
        """Return a sanitized copy of *untrusted*."""


class PassThroughSanitizer(Sanitizer):
    """Identity sanitizer; the default for every log service."""

    name: ClassVar[str] = "passthrough"

    def sanitize(self, untrusted: str) -> str:
        return untrusted


class ControlCharacterSanitizer(Sanitizer):
    """Neutralizes log injection through line breaks and control characters.

    CR, LF and TAB become their escaped two-character forms so a message can
    never start a forged log line. Any other C0/C1 control character is
    replaced with ``replacement``.
    """

    name: ClassVar[str] = "control"

    def __init__(self, replacement: str = "?") -> None:
        self._replacement = replacement

    def sanitize(self, untrusted: str) -> str:
        return _CONTROL_CHARS.sub(self._replace, untrusted)

    def _replace(self, match: re.Match[str]) -> str:
        char = match.group(0)
        return _ESCAPES.get(char, self._replacement)


class RedactingSanitizer(Sanitizer):
    """Masks credentials and secret-looking tokens.

    Example:
        >>> RedactingSanitizer().sanitize("login password=hunter2")
        'login password=[REDACTED]'
    """

    name: ClassVar[str] = "redact"

    def __init__(self, extra_patterns: Iterable[tuple[str, str]] | None = None) -> None:
        patterns = (*DEFAULT_SECRET_PATTERNS, *(extra_patterns or ()))
        self._compiled = tuple(
            (re.compile(pattern, re.IGNORECASE), replacement) for pattern, replacement in patterns
        )

    def sanitize(self, untrusted: str) -> str:
        result = untrusted
        for pattern, replacement in self._compiled:
            result = pattern.sub(replacement, result)
        return result


class ChainSanitizer(Sanitizer):
    """Applies several sanitizers in order."""

    name: ClassVar[str] = "chain"

    def __init__(self, sanitizers: Sequence[Sanitizer]) -> None:
        self._sanitizers = tuple(sanitizers)

    @property
    def sanitizers(self) -> tuple[Sanitizer, ...]:
        return self._sanitizers

    def sanitize(self, untrusted: str) -> str:
        result = untrusted
        for sanitizer in self._sanitizers:
            result = sanitizer.sanitize(result)
        return result


_BUILTIN_SANITIZERS: dict[str, Callable[[], Sanitizer]] = {
    PassThroughSanitizer.name: PassThroughSanitizer,
    ControlCharacterSanitizer.name: ControlCharacterSanitizer,
    RedactingSanitizer.name: RedactingSanitizer,
}


def available_sanitizers() -> list[str]:
    """Return the sorted names accepted by :func:`get_sanitizer`."""
    return sorted(_BUILTIN_SANITIZERS)


def get_sanitizer(names: str | None) -> Sanitizer:
    """Build a sanitizer from a name or a comma-separated list of names.

    Args:
        names: e.g. ``"redact"`` or ``"control,redact"``. Empty or None
            yields the pass-through sanitizer.

    Returns:
        A single sanitizer, or a ChainSanitizer for more than one name.

    Raises:
        ValueError: If any name is unknown.
    """
    requested = [part.strip().lower() for part in (names or "").split(",") if part.strip()]
    if not requested:
        return PassThroughSanitizer()

    sanitizers: list[Sanitizer] = []
    for name in requested:
        factory = _BUILTIN_SANITIZERS.get(name)
        if factory is None:
            available = ", ".join(available_sanitizers())
            raise ValueError(f"Sanitizer '{name}' is not known. Available: [{available}]")
        sanitizers.append(factory())

    if len(sanitizers) == 1:
        return sanitizers[0]
    return ChainSanitizer(sanitizers)
