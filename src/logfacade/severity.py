"""
Severity model for logfacade.

Ranks line up with the stdlib ``logging`` numeric scheme so backends built on
``logging`` can use them as-is. ``SECURITY`` sits 1000 above the highest
standard level and is registered as a named level on import.
"""

from __future__ import annotations

import logging
from enum import IntEnum

# Highest level of the standard ladder (logging.CRITICAL).
STANDARD_MAX_LEVEL = logging.CRITICAL
CONFIG_LEVEL = 15
SECURITY_LEVEL = STANDARD_MAX_LEVEL + 1000


class Severity(IntEnum):
    """Ranked log severities, lowest to highest."""

    DEBUG = logging.DEBUG
    CONFIGURATION = CONFIG_LEVEL
    MESSAGE = logging.INFO
    WARNING = logging.WARNING
    FAILURE = STANDARD_MAX_LEVEL
    SECURITY = SECURITY_LEVEL

    @property
    def display_name(self) -> str:
        """Level name as rendered by the stdlib backend."""
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_name(cls, name: str) -> Severity:
        """Look up a severity by member name or common alias.

        Args:
            name: Name such as ``"warning"``, ``"info"``, ``"config"``.

        Returns:
            The matching Severity.

        Raises:
            ValueError: If the name is not recognised.
        """
        normalized = name.strip().lower()
        severity = _ALIASES.get(normalized)
        if severity is None:
            known = ", ".join(sorted(_ALIASES))
            raise ValueError(f"Unknown severity '{name}'. Known: [{known}]")
        return severity


_DISPLAY_NAMES: dict[Severity, str] = {
    Severity.DEBUG: "DEBUG",
    Severity.CONFIGURATION: "CONFIG",
    Severity.MESSAGE: "INFO",
    Severity.WARNING: "WARNING",
    Severity.FAILURE: "CRITICAL",
    Severity.SECURITY: "SECURITY",
}

_ALIASES: dict[str, Severity] = {
    **{member.name.lower(): member for member in Severity},
    "config": Severity.CONFIGURATION,
    "info": Severity.MESSAGE,
    "warn": Severity.WARNING,
    "error": Severity.FAILURE,
    "critical": Severity.FAILURE,
}


def is_at_least(requested: Severity, threshold: Severity) -> bool:
    """Return True if *requested* ranks at or above *threshold*."""
    return int(requested) >= int(threshold)


def register_level_names() -> None:
    """Teach the stdlib ``logging`` module the non-standard level names."""
    logging.addLevelName(CONFIG_LEVEL, _DISPLAY_NAMES[Severity.CONFIGURATION])
    logging.addLevelName(SECURITY_LEVEL, _DISPLAY_NAMES[Severity.SECURITY])


register_level_names()
