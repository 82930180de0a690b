"""
Logging context: one logger namespace plus one writer registry.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from .config import parse_config_string, render_config
from .levels import Level
from .logger import Logger
from .modules import DEFAULT_LEVEL, DEFAULT_ROOT_LEVEL, ModuleRegistry
from .registry import WriterEntry, WriterRegistry
from .writers import RecordWriter


class Context:
    """
    Independent logging universe.

    Subsystems and tests that need isolation build their own ``Context``;
    code that wants the shared one asks for ``default_context()`` once and
    passes it along.
    """

    def __init__(
        self,
        *,
        root_level: Level = DEFAULT_ROOT_LEVEL,
        default_level: Level = DEFAULT_LEVEL,
        with_default_writer: bool = True,
        raise_writer_errors: bool = False,
    ) -> None:
        self.modules = ModuleRegistry(root_level=root_level, default_level=default_level)
        self.writers = WriterRegistry(with_default=with_default_writer, raise_errors=raise_writer_errors)

    # =========================================================================
    # Loggers
    # =========================================================================

    def get_logger(self, name: str = "") -> Logger:
        return Logger(self.modules.get(name), self.modules, self.writers)

    def configure_loggers(self, text: str) -> None:
        """Apply ``name=level`` text; nothing is applied if any entry is invalid."""
        self.modules.apply(parse_config_string(text))

    def reset_logger_levels(self) -> None:
        self.modules.reset_all()

    def config(self) -> Dict[str, Level]:
        return self.modules.snapshot_config()

    def config_string(self) -> str:
        return render_config(self.modules.snapshot_config())

    # =========================================================================
    # Writers
    # =========================================================================

    def add_writer(self, name: str, writer: RecordWriter, min_level: Level = Level.UNSPECIFIED) -> None:
        self.writers.register(name, writer, min_level)

    def remove_writer(self, name: str) -> WriterEntry:
        return self.writers.remove(name)

    def replace_default_writer(self, writer: RecordWriter) -> RecordWriter:
        return self.writers.replace_default(writer)

    def reset_writers(self) -> None:
        self.writers.reset()

    def writer_names(self) -> List[str]:
        return [entry.name for entry in self.writers.entries()]


_default_context: Optional[Context] = None
_default_lock = threading.Lock()


def default_context() -> Context:
    """The process-wide context, created on first use and kept for the process lifetime."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            _default_context = Context()
        return _default_context


def get_logger(name: str = "") -> Logger:
    """Logger from the process-wide context."""
    return default_context().get_logger(name)
