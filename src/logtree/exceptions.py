"""
Unified exception hierarchy for logtree.

Errors are split along two axes: configuration problems (bad level names,
malformed ``name=level`` text) and writer registry problems (duplicate or
missing writer names, failing sinks). None of them is meant to be fatal to
the process that is logging.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class LogtreeError(Exception):
    """Base class for all logtree errors."""

    def __init__(
        self,
        message: str,
        *,
        code: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details = details or {}


# ================================
# Configuration errors
# ================================


class ConfigurationError(LogtreeError):
    """Invalid level name or logger configuration text."""

    pass


class InvalidLevel(ConfigurationError):
    """Raised when a severity name cannot be parsed."""

    def __init__(self, *, value: str) -> None:
        super().__init__(
            f"unknown severity level {value!r}",
            code="INVALID_LEVEL",
            details={"value": value},
        )


class InvalidConfig(ConfigurationError):
    """Raised when a ``name=level`` entry is malformed."""

    def __init__(self, *, entry: str, reason: str) -> None:
        super().__init__(
            f"logger specification {entry!r} {reason}",
            code="INVALID_CONFIG",
            details={"entry": entry, "reason": reason},
        )


# ================================
# Writer registry errors
# ================================


class WriterError(LogtreeError):
    """Base class for writer registry errors."""

    pass


class DuplicateWriterError(WriterError):
    """Raised when registering a writer under a name already in use."""

    def __init__(self, *, name: str) -> None:
        super().__init__(
            f"there is already a writer registered with the name {name!r}",
            code="DUPLICATE_WRITER",
            details={"name": name},
        )


class WriterNotFoundError(WriterError):
    """Raised when removing or replacing a writer that is not registered."""

    def __init__(self, *, name: str) -> None:
        super().__init__(
            f"no writer registered with the name {name!r}",
            code="WRITER_NOT_FOUND",
            details={"name": name},
        )


class SinkWriteFailure(WriterError):
    """A writer raised while handling a record."""

    def __init__(self, *, name: str, reason: str) -> None:
        super().__init__(
            f"writer {name!r} failed: {reason}",
            code="SINK_WRITE_FAILURE",
            details={"name": name, "reason": reason},
        )
