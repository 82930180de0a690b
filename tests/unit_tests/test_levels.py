"""
Level ordering, parsing and stdlib mapping.
"""

from __future__ import annotations

import logging

import pytest

from logtree.exceptions import ConfigurationError, InvalidLevel
from logtree.levels import Level, from_stdlib_level, is_level_enabled, parse_level, to_stdlib_level


class TestLevelOrdering:
    def test_more_severe_levels_compare_greater(self) -> None:
        assert Level.TRACE < Level.DEBUG < Level.INFO < Level.WARNING < Level.ERROR < Level.CRITICAL

    def test_str_is_level_name(self) -> None:
        assert str(Level.WARNING) == "WARNING"
        assert str(Level.UNSPECIFIED) == ""

    def test_short_names(self) -> None:
        assert Level.WARNING.short_name == "WARN"
        assert Level.CRITICAL.short_name == "CRIT"
        assert Level.INFO.short_name == "INFO"


class TestParseLevel:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("debug", Level.DEBUG),
            ("  Info ", Level.INFO),
            ("WARN", Level.WARNING),
            ("warning", Level.WARNING),
            ("critical", Level.CRITICAL),
            ("unspecified", Level.UNSPECIFIED),
        ],
    )
    def test_valid_names(self, text: str, expected: Level) -> None:
        assert parse_level(text) is expected

    def test_unknown_name_raises_configuration_error(self) -> None:
        with pytest.raises(InvalidLevel) as excinfo:
            parse_level("loud")
        assert isinstance(excinfo.value, ConfigurationError)
        assert excinfo.value.code == "INVALID_LEVEL"
        assert excinfo.value.details == {"value": "loud"}


class TestIsLevelEnabled:
    def test_unspecified_floor_accepts_everything(self) -> None:
        assert is_level_enabled(Level.UNSPECIFIED, Level.TRACE)

    def test_floor_is_inclusive(self) -> None:
        assert is_level_enabled(Level.WARNING, Level.WARNING)
        assert is_level_enabled(Level.WARNING, Level.ERROR)
        assert not is_level_enabled(Level.WARNING, Level.INFO)


class TestStdlibMapping:
    def test_round_trip_for_shared_levels(self) -> None:
        for level in (Level.DEBUG, Level.INFO, Level.WARNING, Level.ERROR, Level.CRITICAL):
            assert from_stdlib_level(to_stdlib_level(level)) is level

    def test_in_between_values_round_down(self) -> None:
        assert from_stdlib_level(logging.INFO + 5) is Level.INFO
        assert from_stdlib_level(1) is Level.TRACE
        assert from_stdlib_level(logging.NOTSET) is Level.UNSPECIFIED
