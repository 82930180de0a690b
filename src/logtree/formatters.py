"""
Record formatters and color utilities.
"""

from __future__ import annotations

import os
from datetime import datetime
from typing import Protocol

from .record import Record

# =============================================================================
# Formatter Protocol
# =============================================================================


class Formatter(Protocol):
    """Turns a record into a single display line."""

    def format(self, record: Record) -> str: ...


class DefaultFormatter:
    """Canonical record form: timestamp, level, module, file:line, message."""

    def format(self, record: Record) -> str:
        return str(record)


class MinimalFormatter:
    """Message only."""

    def format(self, record: Record) -> str:
        return record.message


class BasicFormatter:
    """``WARNING The message...``"""

    def format(self, record: Record) -> str:
        return f"{record.level} {record.message}"


class WarningFormatter:
    """Module, level and message; no timestamp or source location."""

    def format(self, record: Record) -> str:
        return f"{record.module} {record.level} {record.message}"


# =============================================================================
# Console Formatter (Aligned Columns)
# =============================================================================

COLORS = {
    "reset": "\033[0m",
    "timestamp": "\033[90m",
    "module": "\033[35m",
    "location": "\033[34m",
}


def colorize(text: str, color: str) -> str:
    """Apply ANSI color to text."""
    return f"{COLORS.get(color, '')}{text}{COLORS['reset']}"


class ConsoleFormatter:
    """Human-readable console rendering (fixed width, right-aligned columns)."""

    _RESET = "\x1b[0m"
    _LEVEL_COLORS = {
        "TRACE": "\x1b[2m",
        "DEBUG": "\x1b[36m",
        "INFO": "\x1b[32m",
        "WARN": "\x1b[33m",
        "ERROR": "\x1b[31m",
        "CRIT": "\x1b[1;31m",
    }

    def __init__(
        self,
        *,
        use_color: bool = False,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
        level_width: int = 5,
        module_width: int = 32,
        separator: str = " | ",
        show_location: bool = True,
    ) -> None:
        self.use_color = use_color
        self.timestamp_format = timestamp_format
        self.timestamp_width = len(datetime.now().strftime(timestamp_format))
        self.level_width = level_width
        self.module_width = module_width
        self.separator = separator
        self.show_location = show_location

    @staticmethod
    def _fit_right(text: str, width: int) -> str:
        if width <= 0:
            return text
        if len(text) > width:
            if width <= 3:
                text = text[-width:]
            else:
                text = "..." + text[-(width - 3) :]
        return f"{text:>{width}}"

    def _maybe_color(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return colorize(text, color)

    def _colorize_level(self, text: str, short_name: str) -> str:
        if not self.use_color:
            return text
        color = self._LEVEL_COLORS.get(short_name)
        if not color:
            return text
        return f"{color}{text}{self._RESET}"

    def format(self, record: Record) -> str:
        timestamp = record.timestamp.astimezone().strftime(self.timestamp_format)
        short_name = record.level.short_name
        message_text = record.message
        if self.show_location:
            location = f"{os.path.basename(record.filename)}:{record.line}"
            message_text = f"{message_text} {self._maybe_color(location, 'location')}"

        return "".join(
            [
                self._maybe_color(self._fit_right(timestamp, self.timestamp_width), "timestamp"),
                self.separator,
                self._colorize_level(self._fit_right(short_name, self.level_width), short_name),
                self.separator,
                self._maybe_color(self._fit_right(record.module, self.module_width), "module"),
                self.separator,
                message_text,
            ]
        )
