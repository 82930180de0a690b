"""
Named writer registry.

Writers are kept in registration order and records are delivered in that
order. Structural changes take the registry lock; ``dispatch`` only holds it
long enough to copy the entry list, so a slow writer never blocks
registration from another thread.
"""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from typing import Dict, List, Optional

import structlog

from .exceptions import DuplicateWriterError, SinkWriteFailure, WriterNotFoundError
from .formatters import DefaultFormatter
from .levels import Level, is_level_enabled
from .record import Record
from .writers import RecordWriter, new_stream_writer

DEFAULT_WRITER_NAME = "default"


class _CurrentStderr:
    """Forwards to whatever ``sys.stderr`` is at write time."""

    def write(self, text: str) -> int:
        return sys.stderr.write(text)

    def flush(self) -> None:
        sys.stderr.flush()


_diagnostics = structlog.wrap_logger(
    structlog.PrintLogger(file=_CurrentStderr()),
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.dev.ConsoleRenderer(colors=False),
    ],
    cache_logger_on_first_use=True,
    logger_name="logtree.registry",
)


def _report_writer_failure(name: str, record: Record, exc: Exception) -> None:
    """Report a failed writer on stderr; a broken stderr must not break dispatch."""
    try:
        _diagnostics.error("writer_failed", writer=name, module=record.module, error=repr(exc))
    except (OSError, ValueError):
        # Nowhere left to report to.
        pass


def default_writer() -> RecordWriter:
    return new_stream_writer(sys.stderr, DefaultFormatter())


@dataclass(frozen=True)
class WriterEntry:
    name: str
    writer: RecordWriter
    min_level: Level = Level.UNSPECIFIED

    def accepts(self, level: Level) -> bool:
        return is_level_enabled(self.min_level, level)


class WriterRegistry:
    """
    Ordered collection of named writers.

    Writer failures during ``dispatch`` are reported on stderr and the
    remaining writers still get the record. With ``raise_errors`` the first
    failure is re-raised as ``SinkWriteFailure`` once every writer was tried.
    """

    def __init__(self, *, with_default: bool = True, raise_errors: bool = False) -> None:
        self._lock = threading.Lock()
        self._entries: Dict[str, WriterEntry] = {}
        self.raise_errors = raise_errors
        if with_default:
            self._entries[DEFAULT_WRITER_NAME] = WriterEntry(DEFAULT_WRITER_NAME, default_writer(), Level.TRACE)

    # =========================================================================
    # Structure
    # =========================================================================

    def register(self, name: str, writer: RecordWriter, min_level: Level = Level.UNSPECIFIED) -> None:
        with self._lock:
            if name in self._entries:
                raise DuplicateWriterError(name=name)
            self._entries[name] = WriterEntry(name, writer, min_level)

    def remove(self, name: str) -> WriterEntry:
        with self._lock:
            try:
                return self._entries.pop(name)
            except KeyError:
                raise WriterNotFoundError(name=name) from None

    def replace_default(self, writer: RecordWriter) -> RecordWriter:
        """Swap the writer behind the default entry, keeping its place and floor."""
        with self._lock:
            previous = self._entries.get(DEFAULT_WRITER_NAME)
            if previous is None:
                raise WriterNotFoundError(name=DEFAULT_WRITER_NAME)
            self._entries[DEFAULT_WRITER_NAME] = WriterEntry(DEFAULT_WRITER_NAME, writer, previous.min_level)
            return previous.writer

    def reset(self) -> None:
        """Drop every writer and restore the default one."""
        with self._lock:
            self._entries = {
                DEFAULT_WRITER_NAME: WriterEntry(DEFAULT_WRITER_NAME, default_writer(), Level.TRACE),
            }

    def entries(self) -> List[WriterEntry]:
        with self._lock:
            return list(self._entries.values())

    def get(self, name: str) -> Optional[WriterEntry]:
        with self._lock:
            return self._entries.get(name)

    def __contains__(self, name: str) -> bool:
        with self._lock:
            return name in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    # =========================================================================
    # Delivery
    # =========================================================================

    def will_write(self, level: Level) -> bool:
        """Whether at least one registered writer accepts ``level``."""
        return any(entry.accepts(level) for entry in self.entries())

    def dispatch(self, record: Record) -> None:
        failure: Optional[SinkWriteFailure] = None
        for entry in self.entries():
            if not entry.accepts(record.level):
                continue
            try:
                entry.writer.write_record(record)
            except Exception as exc:
                _report_writer_failure(entry.name, record, exc)
                if failure is None:
                    failure = SinkWriteFailure(name=entry.name, reason=repr(exc))
                    failure.__cause__ = exc
        if failure is not None and self.raise_errors:
            raise failure
