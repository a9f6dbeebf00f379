"""Console output for the stdlib backend, rendered with rich."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from .severity import Severity

_HANDLER_NAME = "logfacade-console"


def configure_console(
    level: Severity | str = Severity.MESSAGE,
    *,
    console: Console | None = None,
    logger: logging.Logger | None = None,
) -> RichHandler:
    """Attach a RichHandler to *logger* (the root logger by default).

    Calling this again replaces the handler installed by a previous call
    instead of stacking a second one.

    Args:
        level: Threshold, as a Severity or a name such as ``"warning"``.
        console: Console to render to. Defaults to stderr.
        logger: Logger to configure.

    Returns:
        The installed handler.
    """
    severity = Severity.from_name(level) if isinstance(level, str) else level
    target = logger or logging.getLogger()

    for existing in list(target.handlers):
        if existing.get_name() == _HANDLER_NAME:
            target.removeHandler(existing)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter("%(operation)s: %(message)s", defaults={"operation": "-"})
    )
    target.addHandler(handler)
    target.setLevel(int(severity))
    return handler
