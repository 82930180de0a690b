"""
structlog front-end for logtree.

structlog handles the call-site API and event-dict processing; the final
processor turns the event into a ``Record`` and hands it to a logtree
context, so logger levels and writers configured there apply to structlog
calls too.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.processors import CallsiteParameter, CallsiteParameterAdder
from structlog.typing import EventDict, WrappedLogger

from .context import Context
from .exceptions import InvalidLevel
from .levels import Level, parse_level
from .modules import ROOT_NAME
from .record import Record

_METHOD_LEVELS = {
    "exception": Level.ERROR,
    "fatal": Level.CRITICAL,
    "msg": Level.INFO,
    "log": Level.INFO,
}


def get_logger(name: str | None = None) -> Any:
    """Get a structured logger that routes to the logtree module ``name``."""
    return structlog.get_logger(_name=name or ROOT_NAME)


def _event_level(method_name: str, event_dict: EventDict) -> Level:
    raw = event_dict.pop("level", None) or method_name
    if raw in _METHOD_LEVELS:
        return _METHOD_LEVELS[raw]
    try:
        return parse_level(str(raw))
    except InvalidLevel:
        return Level.INFO


class LogtreeRenderer:
    """
    Final structlog processor.

    Drops the event when the target logger is not enabled for its level;
    otherwise dispatches a record whose message is the event text followed by
    the remaining keys as ``key=value`` pairs. Returns an empty string, which
    the silent logger factory discards.
    """

    def __init__(self, context: Context) -> None:
        self.context = context

    def __call__(self, logger: WrappedLogger, method_name: str, event_dict: EventDict) -> str:
        level = _event_level(method_name, event_dict)
        target = self.context.get_logger(str(event_dict.pop("_name", ROOT_NAME)))
        if not target.is_enabled_for(level):
            raise structlog.DropEvent

        message = str(event_dict.pop("event", ""))
        filename = str(event_dict.pop("pathname", "???"))
        line = int(event_dict.pop("lineno", 0))
        exception = event_dict.pop("exception", None)

        extras = " ".join(f"{k}={v}" for k, v in event_dict.items())
        if extras:
            message = f"{message} {extras}"
        if exception:
            message = f"{message}\n{exception}"

        self.context.writers.dispatch(
            Record(
                level=level,
                module=target.name,
                filename=filename,
                line=line,
                timestamp=datetime.now(timezone.utc),
                message=message,
            )
        )
        return ""


class _NopFile:
    def write(self, s: str) -> None:
        pass

    def flush(self) -> None:
        pass


class SilentPrintLoggerFactory:
    """Logger factory that returns a logger writing to nowhere."""

    _NOP_FILE = _NopFile()

    def __call__(self, *args: Any) -> structlog.PrintLogger:
        return structlog.PrintLogger(file=self._NOP_FILE)


def configure_structlog(context: Context) -> None:
    """Route every structlog call in the process to ``context``."""
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            CallsiteParameterAdder({CallsiteParameter.PATHNAME, CallsiteParameter.LINENO}),
            structlog.processors.format_exc_info,
            LogtreeRenderer(context),
        ],
        context_class=dict,
        logger_factory=SilentPrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
