"""
Record writers and their composition.

Anything with a ``write_record(record)`` method is a writer. A writer may
also expose a ``min_level`` floor; composites use it to drop records early.
A writer without a floor is opaque and is assumed to accept everything.
"""

from __future__ import annotations

import sys
import threading
from typing import Any, List, Optional, Protocol, TextIO, runtime_checkable

from .formatters import Formatter
from .levels import Level, is_level_enabled
from .record import Record

# =============================================================================
# Writer Protocols
# =============================================================================


@runtime_checkable
class RecordWriter(Protocol):
    """Recipient of finished log records."""

    def write_record(self, record: Record) -> None: ...


@runtime_checkable
class MinLevelWriter(RecordWriter, Protocol):
    """A writer that exposes the least severe level it accepts."""

    @property
    def min_level(self) -> Level: ...


def writer_min_level(writer: Any) -> Level:
    """The writer's floor, or UNSPECIFIED when it does not expose one."""
    if isinstance(writer, MinLevelWriter):
        return writer.min_level
    return Level.UNSPECIFIED


# =============================================================================
# Composites
# =============================================================================


class LevelFilterWriter:
    """Drops records below ``min_level`` before they reach ``writer``."""

    def __init__(self, writer: RecordWriter, min_level: Level) -> None:
        self.writer = writer
        self._min_level = min_level

    @property
    def min_level(self) -> Level:
        return self._min_level

    def write_record(self, record: Record) -> None:
        if not is_level_enabled(self._min_level, record.level):
            return
        self.writer.write_record(record)


class TeeWriter:
    """
    Writes to a list of writers, in order.

    The combined floor is computed once: the least severe floor of the wrapped
    writers, or UNSPECIFIED as soon as one of them is opaque, since nothing can
    then be proven to be dropped. An empty tee accepts everything.
    """

    def __init__(self, *writers: RecordWriter) -> None:
        self.writers: tuple[RecordWriter, ...] = writers
        combined = Level.UNSPECIFIED
        if writers:
            combined = Level.CRITICAL
            for writer in writers:
                floor = writer_min_level(writer)
                if floor is Level.UNSPECIFIED:
                    combined = Level.UNSPECIFIED
                    break
                combined = min(combined, floor)
        self._min_level = combined

    @property
    def min_level(self) -> Level:
        return self._min_level

    def write_record(self, record: Record) -> None:
        """Every accepting member is tried; the first failure is re-raised afterwards."""
        if not is_level_enabled(self._min_level, record.level):
            return
        failure: Optional[Exception] = None
        for writer in self.writers:
            if not is_level_enabled(writer_min_level(writer), record.level):
                continue
            try:
                writer.write_record(record)
            except Exception as exc:
                if failure is None:
                    failure = exc
        if failure is not None:
            raise failure


class ModuleFilterWriter:
    """Passes on only the records of one exact module."""

    def __init__(self, writer: RecordWriter, module: str) -> None:
        self.writer = writer
        self.module = module.lower()

    def write_record(self, record: Record) -> None:
        if record.module != self.module:
            return
        self.writer.write_record(record)


class StdioSplitWriter:
    """INFO and less severe records go to ``out``; WARNING and above go to ``err``."""

    def __init__(self, out: RecordWriter, err: RecordWriter) -> None:
        self.out = out
        self.err = err

    def write_record(self, record: Record) -> None:
        if record.level <= Level.INFO:
            self.out.write_record(record)
        else:
            self.err.write_record(record)


class DiscardWriter:
    """Accepts and drops every record."""

    def write_record(self, record: Record) -> None:
        pass


# =============================================================================
# Leaf Writers
# =============================================================================


class FormattingWriter:
    """
    Formats each record and writes it, plus a newline, to a text stream.

    One line per record, written synchronously. Without a formatter the
    record's canonical string form is used.
    """

    def __init__(self, stream: TextIO, formatter: Optional[Formatter] = None) -> None:
        self.stream = stream
        self.formatter = formatter

    def write_record(self, record: Record) -> None:
        if self.formatter is None:
            line = str(record)
        else:
            line = self.formatter.format(record)
        self.stream.write(line + "\n")
        self.stream.flush()


def new_stream_writer(stream: Optional[TextIO] = None, formatter: Optional[Formatter] = None) -> FormattingWriter:
    """A formatting writer on ``stream`` (default: stderr)."""
    return FormattingWriter(stream or sys.stderr, formatter)


class RecordingWriter:
    """Keeps every record in memory; meant for tests."""

    def __init__(self, min_level: Level = Level.UNSPECIFIED) -> None:
        self._lock = threading.Lock()
        self._records: List[Record] = []
        self._min_level = min_level

    @property
    def min_level(self) -> Level:
        return self._min_level

    def write_record(self, record: Record) -> None:
        if not is_level_enabled(self._min_level, record.level):
            return
        with self._lock:
            self._records.append(record)

    @property
    def records(self) -> List[Record]:
        """A copy of the records written so far."""
        with self._lock:
            return list(self._records)

    @property
    def messages(self) -> List[str]:
        return [record.message for record in self.records]

    def clear(self) -> None:
        with self._lock:
            self._records.clear()
