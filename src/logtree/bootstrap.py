"""
Start-up wiring of writers and levels from ``LoggingSettings``.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional, TextIO

from .context import Context
from .formatters import (
    BasicFormatter,
    ConsoleFormatter,
    DefaultFormatter,
    Formatter,
    WarningFormatter,
)
from .levels import Level
from .registry import DEFAULT_WRITER_NAME
from .settings import LogFormat, LoggingSettings
from .writers import FormattingWriter, RecordWriter

LOGFILE_WRITER_NAME = "logfile"
WARNING_WRITER_NAME = "warning"


def build_formatter(settings: LoggingSettings, stream: Optional[TextIO] = None) -> Formatter:
    if settings.format is LogFormat.BASIC:
        return BasicFormatter()
    if settings.format is LogFormat.CONSOLE:
        use_color = bool(getattr(stream, "isatty", lambda: False)())
        return ConsoleFormatter(
            use_color=use_color,
            timestamp_format=settings.console_timestamp_format,
            level_width=settings.console_level_width,
            module_width=settings.console_module_width,
            separator=settings.console_separator,
        )
    return DefaultFormatter()


def open_log_file(path: str | Path) -> TextIO:
    """Open ``path`` for appending, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    return open(path, "a", encoding="utf-8")


def _root_level(settings: LoggingSettings) -> Level:
    """``level``, made at least as verbose as INFO by ``show_log`` and DEBUG by ``debug``."""
    level = settings.level
    if settings.show_log or settings.debug:
        level = min(level, Level.INFO)
    if settings.debug:
        level = min(level, Level.DEBUG)
    return level


def start_logging(
    context: Context,
    settings: Optional[LoggingSettings] = None,
    *,
    stderr: Optional[TextIO] = None,
) -> Optional[TextIO]:
    """
    Configure ``context`` from ``settings``.

    Steps:
        1. With ``path``, append every record (TRACE and up) to that file.
        2. Root level is ``level`` (WARNING by default), lowered to INFO with
           ``show_log`` and to DEBUG with ``debug``.
        3. With ``show_log`` the default writer is pointed at ``stderr``;
           otherwise it is removed and a terse WARNING-and-up writer is added.
        4. ``config`` overrides individual logger levels.

    Returns the opened log file, if any, so the caller can close it. If any
    step fails the file is closed before the error propagates.
    """
    settings = settings or LoggingSettings()
    stderr = stderr or sys.stderr
    context.writers.raise_errors = settings.raise_writer_errors

    log_file: Optional[TextIO] = None
    if settings.path:
        log_file = open_log_file(settings.path)
    try:
        if log_file is not None:
            file_writer: RecordWriter = FormattingWriter(log_file, build_formatter(settings))
            context.add_writer(LOGFILE_WRITER_NAME, file_writer, Level.TRACE)

        if settings.show_log or settings.debug:
            stderr_writer = FormattingWriter(stderr, build_formatter(settings, stderr))
            if DEFAULT_WRITER_NAME in context.writers:
                context.replace_default_writer(stderr_writer)
            else:
                context.add_writer(DEFAULT_WRITER_NAME, stderr_writer, Level.TRACE)
        else:
            if DEFAULT_WRITER_NAME in context.writers:
                context.remove_writer(DEFAULT_WRITER_NAME)
            context.add_writer(
                WARNING_WRITER_NAME,
                FormattingWriter(stderr, WarningFormatter()),
                Level.WARNING,
            )

        context.get_logger().set_level(_root_level(settings))
        context.configure_loggers(settings.config)
    except Exception:
        if log_file is not None:
            log_file.close()
        raise
    return log_file
