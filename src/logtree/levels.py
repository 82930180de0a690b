"""
Severity levels.

Levels are ordered so that a larger value is more severe. ``UNSPECIFIED``
is a sentinel meaning "inherit from the parent logger" and never takes part
in a comparison before being resolved to a concrete level.
"""

from __future__ import annotations

import logging
from enum import IntEnum

from .exceptions import InvalidLevel


class Level(IntEnum):
    UNSPECIFIED = 0
    TRACE = 1
    DEBUG = 2
    INFO = 3
    WARNING = 4
    ERROR = 5
    CRITICAL = 6

    def __str__(self) -> str:
        if self is Level.UNSPECIFIED:
            return ""
        return self.name

    @property
    def short_name(self) -> str:
        """Compact form used in aligned console output."""
        return _SHORT_NAMES[self]

    @property
    def is_concrete(self) -> bool:
        return self is not Level.UNSPECIFIED


_SHORT_NAMES = {
    Level.UNSPECIFIED: "",
    Level.TRACE: "TRACE",
    Level.DEBUG: "DEBUG",
    Level.INFO: "INFO",
    Level.WARNING: "WARN",
    Level.ERROR: "ERROR",
    Level.CRITICAL: "CRIT",
}

_ALIASES = {
    "WARN": Level.WARNING,
}

# stdlib has no TRACE; 5 is the conventional slot below DEBUG.
_STDLIB_LEVELS = {
    Level.TRACE: 5,
    Level.DEBUG: logging.DEBUG,
    Level.INFO: logging.INFO,
    Level.WARNING: logging.WARNING,
    Level.ERROR: logging.ERROR,
    Level.CRITICAL: logging.CRITICAL,
}


def parse_level(text: str) -> Level:
    """Parse a severity name (case-insensitive, ``WARN`` accepted)."""
    name = text.strip().upper()
    if name in _ALIASES:
        return _ALIASES[name]
    try:
        return Level[name]
    except KeyError:
        raise InvalidLevel(value=text) from None


def is_level_enabled(floor: Level, level: Level) -> bool:
    """Whether ``level`` passes a writer or logger whose floor is ``floor``."""
    if floor is Level.UNSPECIFIED:
        return True
    return level >= floor


def to_stdlib_level(level: Level) -> int:
    if level is Level.UNSPECIFIED:
        return logging.NOTSET
    return _STDLIB_LEVELS[level]


def from_stdlib_level(value: int) -> Level:
    """Map a stdlib level number to the closest level at or below it."""
    if value <= logging.NOTSET:
        return Level.UNSPECIFIED
    result = Level.TRACE
    for level, number in _STDLIB_LEVELS.items():
        if value >= number:
            result = level
    return result
