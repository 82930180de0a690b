"""
Textual logger configuration.

The format is a list of ``name=level`` pairs separated by ``;`` or ``,``::

    <root>=INFO;storage.cache=DEBUG;http.client=WARNING

A bare level name applies to the root logger, and ``*`` is another way to
name the root. Parsing is all-or-nothing: callers get either the full mapping
or a ``ConfigurationError``, so a half-applied configuration cannot happen.
Rendering refuses names that would not parse back to themselves: names
containing a separator or ``=``, ``*``, or names with surrounding whitespace.
"""

from __future__ import annotations

import re
from typing import Dict, Mapping

from .exceptions import InvalidConfig, InvalidLevel
from .levels import Level, parse_level
from .modules import ROOT_MODULE_NAME, ROOT_NAME

_SEPARATORS = re.compile(r"[;,]")
_UNRENDERABLE = re.compile(r"[;,=]")


def parse_config_string(text: str) -> Dict[str, Level]:
    """Parse ``name=level`` text into a mapping keyed by lowercased names."""
    text = text.strip()
    if not text:
        return {}

    try:
        return {ROOT_NAME: parse_level(text)}
    except InvalidLevel:
        pass

    config: Dict[str, Level] = {}
    for entry in _SEPARATORS.split(text):
        if not entry.strip():
            continue
        name, sep, level_text = entry.partition("=")
        if not sep:
            raise InvalidConfig(entry=entry, reason="expected '='")
        name = name.strip().lower()
        level_text = level_text.strip()
        if not name or not level_text:
            raise InvalidConfig(entry=entry, reason="has blank name or level")
        if name == "*":
            name = ROOT_NAME
        config[name] = parse_level(level_text)
    return config


def render_config(config: Mapping[str, Level]) -> str:
    """Inverse of ``parse_config_string``: sorted ``name=LEVEL`` pairs joined by ``;``."""
    entries = []
    for name in sorted(config):
        if name == ROOT_MODULE_NAME:
            display = ROOT_NAME
        elif name == "*" or name != name.strip() or _UNRENDERABLE.search(name):
            raise InvalidConfig(entry=name, reason="cannot be written as name=level text")
        else:
            display = name
        entries.append(f"{display}={config[name].name}")
    return ";".join(entries)
