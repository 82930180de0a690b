"""
Caller-facing logger.
"""

from __future__ import annotations

from typing import Any

from .levels import Level
from .modules import LoggerNode, ModuleRegistry
from .record import new_record
from .registry import WriterRegistry


class Logger:
    """
    A named logger bound to a module registry and a writer registry.

    The effective level is checked before a record is built, so disabled
    calls cost a tree walk and nothing else.
    """

    __slots__ = ("_node", "_modules", "_writers")

    def __init__(self, node: LoggerNode, modules: ModuleRegistry, writers: WriterRegistry) -> None:
        self._node = node
        self._modules = modules
        self._writers = writers

    @property
    def name(self) -> str:
        return self._node.display_name

    @property
    def node(self) -> LoggerNode:
        return self._node

    @property
    def level(self) -> Level:
        """Own level; UNSPECIFIED when inherited."""
        return self._node.level

    @property
    def effective_level(self) -> Level:
        return self._node.effective_level()

    def set_level(self, level: Level) -> None:
        self._modules.set_level(self._node, level)

    def is_enabled_for(self, level: Level) -> bool:
        return level is not Level.UNSPECIFIED and level >= self.effective_level

    def child(self, suffix: str) -> "Logger":
        """The logger named ``<this name>.<suffix>``."""
        name = suffix if self._node.is_root else f"{self._node.name}.{suffix}"
        return Logger(self._modules.get(name), self._modules, self._writers)

    def log(self, level: Level, msg: str, *args: Any, stacklevel: int = 1) -> None:
        self._log(level, msg, args, stacklevel + 1)

    def _log(self, level: Level, msg: str, args: tuple, stacklevel: int) -> None:
        if not self.is_enabled_for(level):
            return
        # +1 for this frame.
        record = new_record(level, self._node.display_name, msg, *args, stacklevel=stacklevel + 1)
        self._writers.dispatch(record)

    def critical(self, msg: str, *args: Any) -> None:
        self._log(Level.CRITICAL, msg, args, 2)

    def error(self, msg: str, *args: Any) -> None:
        self._log(Level.ERROR, msg, args, 2)

    def warning(self, msg: str, *args: Any) -> None:
        self._log(Level.WARNING, msg, args, 2)

    def info(self, msg: str, *args: Any) -> None:
        self._log(Level.INFO, msg, args, 2)

    def debug(self, msg: str, *args: Any) -> None:
        self._log(Level.DEBUG, msg, args, 2)

    def trace(self, msg: str, *args: Any) -> None:
        self._log(Level.TRACE, msg, args, 2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Logger):
            return NotImplemented
        return self._node is other._node and self._writers is other._writers

    def __hash__(self) -> int:
        return hash((id(self._node), id(self._writers)))

    def __repr__(self) -> str:
        return f"Logger({self.name!r})"
