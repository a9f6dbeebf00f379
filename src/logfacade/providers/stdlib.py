"""Default provider backed by the standard library ``logging`` module."""

from __future__ import annotations

from typing import ClassVar

from ..backends.stdlib import StdlibBackend
from ..config import LoggingSettings
from ..sanitizer import get_sanitizer
from ..service import LogService
from .base import LogProvider


class StdlibLogProvider(LogProvider):
    """Provider whose service writes through ``logging.getLogger(origin)``."""

    name: ClassVar[str] = "stdlib"

    def __init__(self, settings: LoggingSettings | None = None) -> None:
        super().__init__(settings)
        self._service = LogService(StdlibBackend(), get_sanitizer(self.settings.sanitizer))

    def get_service(self) -> LogService:
        return self._service
