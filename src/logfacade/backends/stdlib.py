"""Backend built on the standard library ``logging`` module."""

from __future__ import annotations

import logging

from ..severity import Severity
from .base import LogBackend


class StdlibBackend(LogBackend):
    """Routes records to ``logging.getLogger(origin)``.

    Severity ranks are stdlib level numbers, so thresholds come straight from
    the logger hierarchy (``Logger.isEnabledFor``). The operation name becomes
    the record's ``funcName`` and is also exposed as ``record.operation``.
    """

    def is_enabled(self, origin: str, severity: Severity) -> bool:
        return logging.getLogger(origin).isEnabledFor(int(severity))

    def emit(
        self,
        origin: str,
        label: str,
        severity: Severity,
        message: str,
        error: BaseException | None = None,
    ) -> None:
        logger = logging.getLogger(origin)
        exc_info = (type(error), error, error.__traceback__) if error is not None else None
        record = logger.makeRecord(
            logger.name,
            int(severity),
            origin,
            0,
            message,
            None,
            exc_info,
            func=label,
            extra={"operation": label},
        )
        logger.handle(record)
