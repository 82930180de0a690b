"""
Interceptors for capturing standard library and third-party logs.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Iterable

from .context import Context
from .levels import from_stdlib_level
from .modules import ROOT_NAME
from .record import Record


class RedirectStdLibHandler(logging.Handler):
    """
    Redirect standard library logging events into a logtree context.

    The stdlib logger name becomes the logtree module, so per-module levels
    configured on the context apply to third-party loggers as well.
    """

    def __init__(self, context: Context, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.context = context

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = from_stdlib_level(record.levelno)
            logger = self.context.get_logger(self._module_name(record.name))
            if not logger.is_enabled_for(level):
                return

            # Format message using stdlib's formatting (handles %s args)
            msg = self.format(record)

            self.context.writers.dispatch(
                Record(
                    level=level,
                    module=logger.name,
                    filename=record.pathname,
                    line=record.lineno,
                    timestamp=datetime.fromtimestamp(record.created, tz=timezone.utc),
                    message=msg,
                )
            )
        except Exception:
            self.handleError(record)

    @staticmethod
    def _module_name(name: str) -> str:
        if not name or name == "root":
            return ROOT_NAME
        return name


def intercept_stdlib(context: Context, *, loggers: Iterable[str] = ()) -> RedirectStdLibHandler:
    """
    Route stdlib logging through ``context``.

    The stdlib root gets a single ``RedirectStdLibHandler`` and lets every
    level through; filtering happens on the logtree side. Each logger named in
    ``loggers`` loses its own handlers and propagates to the root.
    """
    handler = RedirectStdLibHandler(context)
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(logging.NOTSET)

    for name in loggers:
        lg = logging.getLogger(name)
        lg.handlers = []
        lg.propagate = True
    return handler
