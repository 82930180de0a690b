"""
Hierarchical logger namespace.

Loggers are keyed by lowercased dotted names. Looking up ``a.b.c`` creates
``a``, ``a.b`` and ``a.b.c`` as needed, each linked to its immediate parent,
so every node is reachable from the root through whole dotted segments.
A node whose own level is ``UNSPECIFIED`` inherits from its nearest ancestor
with a concrete level; the root always has one.
"""

from __future__ import annotations

import threading
from typing import Dict, Optional

from .levels import Level

# The registry keys the root under the empty string; ``<root>`` is the name
# configuration text and display code use for it.
ROOT_NAME = "<root>"
ROOT_MODULE_NAME = ""

DEFAULT_ROOT_LEVEL = Level.WARNING
DEFAULT_LEVEL = Level.UNSPECIFIED


class LoggerNode:
    """
    One entry in the namespace tree.

    ``level`` is replaced as a whole on every update, so readers never see a
    partially written value. ``parent`` is ``None`` only for the root.
    """

    __slots__ = ("name", "parent", "_level")

    def __init__(self, name: str, level: Level, parent: Optional["LoggerNode"] = None) -> None:
        self.name = name
        self.parent = parent
        self._level = level

    @property
    def level(self) -> Level:
        return self._level

    @property
    def is_root(self) -> bool:
        return self.parent is None

    @property
    def display_name(self) -> str:
        return ROOT_NAME if self.is_root else self.name

    def effective_level(self) -> Level:
        """Walk towards the root until a concrete level is found."""
        node: Optional[LoggerNode] = self
        while node is not None:
            level = node._level
            if level is not Level.UNSPECIFIED:
                return level
            node = node.parent
        # Unreachable while the root invariant holds.
        return DEFAULT_ROOT_LEVEL

    def __repr__(self) -> str:
        return f"LoggerNode({self.display_name!r}, level={self._level.name})"


class ModuleRegistry:
    """
    Concurrency-safe tree of named loggers.

    Every public method takes the registry lock for its whole duration and
    never calls user code while holding it. Parent resolution happens in
    ``_resolve_unlocked``, which never takes the non-reentrant lock itself.
    """

    def __init__(
        self,
        root_level: Level = DEFAULT_ROOT_LEVEL,
        default_level: Level = DEFAULT_LEVEL,
    ) -> None:
        self._lock = threading.Lock()
        self._root_level = root_level
        self._default_level = default_level
        self._all: Optional[Dict[str, LoggerNode]] = None
        self._init_unlocked()

    # =========================================================================
    # Initialization
    # =========================================================================

    def _init_unlocked(self) -> None:
        if self._root_level is Level.UNSPECIFIED:
            self._root_level = DEFAULT_ROOT_LEVEL
        root = LoggerNode(ROOT_MODULE_NAME, self._root_level)
        self._all = {ROOT_MODULE_NAME: root}

    def _maybe_init_unlocked(self) -> Dict[str, LoggerNode]:
        if self._all is None:
            self._init_unlocked()
        return self._all  # type: ignore[return-value]

    @property
    def root_level(self) -> Level:
        return self._root_level

    @property
    def default_level(self) -> Level:
        return self._default_level

    # =========================================================================
    # Lookup
    # =========================================================================

    def get(self, name: str) -> LoggerNode:
        """Return the node for ``name``, creating it and any missing ancestors."""
        with self._lock:
            self._maybe_init_unlocked()
            return self._resolve_unlocked(name.lower())

    def _resolve_unlocked(self, name: str) -> LoggerNode:
        # Caller holds the lock and the registry is initialized.
        if name == ROOT_NAME:
            name = ROOT_MODULE_NAME
        nodes = self._all
        assert nodes is not None
        node = nodes.get(name)
        if node is not None:
            return node

        # Walk up to the nearest existing ancestor; the root always exists.
        missing = [name]
        parent_name, _, _ = name.rpartition(".")
        while parent_name not in nodes:
            missing.append(parent_name)
            parent_name, _, _ = parent_name.rpartition(".")

        parent = nodes[parent_name]
        for missing_name in reversed(missing):
            node = LoggerNode(missing_name, self._default_level, parent)
            nodes[missing_name] = node
            parent = node
        return node

    def __contains__(self, name: str) -> bool:
        name = name.lower()
        if name == ROOT_NAME:
            name = ROOT_MODULE_NAME
        with self._lock:
            return name in self._maybe_init_unlocked()

    def __len__(self) -> int:
        with self._lock:
            return len(self._maybe_init_unlocked())

    def names(self) -> list[str]:
        """Registered names in creation order; the root is ``""``."""
        with self._lock:
            return list(self._maybe_init_unlocked())

    # =========================================================================
    # Levels
    # =========================================================================

    def effective_level(self, node: LoggerNode) -> Level:
        with self._lock:
            return node.effective_level()

    def set_level(self, node: LoggerNode, level: Level) -> None:
        """Set ``node``'s own level; the root falls back to the root level for UNSPECIFIED."""
        with self._lock:
            self._set_level_unlocked(node, level)

    def _set_level_unlocked(self, node: LoggerNode, level: Level) -> None:
        if node.is_root and level is Level.UNSPECIFIED:
            level = self._root_level
        node._level = level

    def apply(self, levels: Dict[str, Level]) -> None:
        """Set several levels by name under a single lock acquisition."""
        with self._lock:
            self._maybe_init_unlocked()
            for name, level in levels.items():
                self._set_level_unlocked(self._resolve_unlocked(name.lower()), level)

    def snapshot_config(self) -> Dict[str, Level]:
        """Own levels of every node that does not inherit, keyed by display name."""
        with self._lock:
            nodes = self._maybe_init_unlocked()
            return {
                node.display_name: node.level
                for node in nodes.values()
                if node.level is not Level.UNSPECIFIED
            }

    def reset_all(self) -> None:
        """Return every node to the configured default (root: root level). Nodes are kept."""
        with self._lock:
            for node in self._maybe_init_unlocked().values():
                node._level = self._root_level if node.is_root else self._default_level
