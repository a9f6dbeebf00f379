"""Backend interface consumed by the log service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..severity import Severity


class LogBackend(ABC):
    """The sink that actually writes records.

    Implementations should:
    - answer :meth:`is_enabled` without side effects
    - emit exactly one record per :meth:`emit` call

    Storage, formatting, rotation and transport all live behind this
    interface.
    """

    @abstractmethod
    def is_enabled(self, origin: str, severity: Severity) -> bool:
        """Return True if *severity* passes the threshold configured for *origin*."""

    @abstractmethod
    def emit(
        self,
        origin: str,
        label: str,
        severity: Severity,
        message: str,
        error: BaseException | None = None,
    ) -> None:
        """Write one record tagged with *origin* and the call-site *label*."""
