"""
Log records.
"""

from __future__ import annotations

import inspect
import os
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from .levels import Level

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Record:
    """One logging event, immutable once built."""

    level: Level
    module: str
    filename: str
    line: int
    timestamp: datetime
    message: str

    def __str__(self) -> str:
        ts = self.timestamp.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
        filename = os.path.basename(self.filename)
        return f"{ts} {self.level} {self.module} {filename}:{self.line} {self.message}"


def _caller_location(stacklevel: int) -> tuple[str, int]:
    frame = inspect.currentframe()
    # Skip this helper; stacklevel=1 then lands on new_record's caller.
    for _ in range(stacklevel + 1):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return "???", 0
    return frame.f_code.co_filename, frame.f_lineno


def _apply_args(message: str, args: tuple) -> str:
    try:
        return message % args
    except (TypeError, ValueError, KeyError) as exc:
        return f"{message} {args!r} (format error: {exc})"


def new_record(level: Level, module: str, message: str, *args: Any, stacklevel: int = 1) -> Record:
    """
    Build a record for ``module`` stamped with the current time.

    ``stacklevel`` works like the stdlib argument of the same name: 1 is the
    direct caller of this function, 2 its caller, and so on. Arguments are
    applied with ``%`` formatting only when present; a message that does not
    match its arguments is kept raw with the arguments appended. One trailing
    newline is dropped from the message.
    """
    now = datetime.now(timezone.utc)
    filename, line = _caller_location(stacklevel)
    if args:
        message = _apply_args(message, args)
    if message.endswith("\n"):
        message = message[:-1]
    return Record(
        level=level,
        module=module,
        filename=filename,
        line=line,
        timestamp=now,
        message=message,
    )
