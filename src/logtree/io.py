"""
I/O redirection utilities.
"""

from __future__ import annotations

from typing import Any

from .levels import Level
from .logger import Logger


class StreamToLogger:
    """Redirects writes on a text stream to a logger, one record per line."""

    def __init__(self, logger: Logger, level: Level, original_stream: Any):
        self.logger = logger
        self.level = level
        self.original_stream = original_stream
        self.linebuf = ""

    def write(self, buf: str | bytes) -> int:
        if isinstance(buf, bytes):
            buf = buf.decode(self.encoding, errors="replace")

        for line in buf.splitlines(True):
            # If the line ends with a newline, log it immediately
            if line.endswith("\n"):
                self.linebuf += line.rstrip()
                if self.linebuf:
                    self.logger.log(self.level, self.linebuf, stacklevel=2)
                self.linebuf = ""
            else:
                self.linebuf += line
        return len(buf)

    def flush(self) -> None:
        if self.linebuf:
            self.logger.log(self.level, self.linebuf, stacklevel=2)
            self.linebuf = ""

    def isatty(self) -> bool:
        return False

    # Proxy all other methods to original stream
    def __getattr__(self, name: str) -> Any:
        return getattr(self.original_stream, name)

    @property
    def encoding(self) -> str:
        return getattr(self.original_stream, "encoding", None) or "utf-8"
