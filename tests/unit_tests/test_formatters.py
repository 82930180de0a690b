"""
Record string form and formatters.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

from logtree.formatters import (
    BasicFormatter,
    ConsoleFormatter,
    DefaultFormatter,
    MinimalFormatter,
    WarningFormatter,
)
from logtree.levels import Level
from logtree.record import Record, new_record


class TestRecord:
    def test_canonical_string_is_utc(self) -> None:
        record = Record(
            level=Level.ERROR,
            module="db",
            filename="/srv/app/db/pool.py",
            line=7,
            timestamp=datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=2))),
            message="lost connection",
        )
        assert str(record) == "2024-01-01 10:00:00 ERROR db pool.py:7 lost connection"

    def test_records_compare_by_value(self, make_record) -> None:
        assert make_record() == make_record()
        assert make_record(message="a") != make_record(message="b")

    def test_new_record_captures_caller(self) -> None:
        record = new_record(Level.INFO, "m", "x=%d", 5)
        assert record.filename.endswith("test_formatters.py")
        assert record.message == "x=5"
        assert record.line > 0


class TestSimpleFormatters:
    def test_default(self, make_record) -> None:
        record = make_record(Level.INFO, "app", "hi")
        assert DefaultFormatter().format(record) == str(record)

    def test_minimal(self, make_record) -> None:
        assert MinimalFormatter().format(make_record(message="just this")) == "just this"

    def test_basic(self, make_record) -> None:
        assert BasicFormatter().format(make_record(Level.WARNING, message="careful")) == "WARNING careful"

    def test_warning(self, make_record) -> None:
        record = make_record(Level.ERROR, "net.http", "timeout")
        assert WarningFormatter().format(record) == "net.http ERROR timeout"


class TestConsoleFormatter:
    def test_columns_are_aligned(self, make_record) -> None:
        formatter = ConsoleFormatter(module_width=8, show_location=False)
        line = formatter.format(make_record(Level.WARNING, "app", "msg"))
        parts = line.split(" | ")
        assert parts[1] == " WARN"
        assert parts[2] == "     app"
        assert parts[3] == "msg"

    def test_long_module_is_truncated_from_the_left(self, make_record) -> None:
        formatter = ConsoleFormatter(module_width=10, show_location=False)
        line = formatter.format(make_record(module="very.long.module.name"))
        assert line.split(" | ")[2] == "...le.name"

    def test_location_is_appended(self, make_record) -> None:
        line = ConsoleFormatter().format(make_record(message="hi"))
        assert line.endswith("hi main.py:42")

    def test_colors_only_when_enabled(self, make_record) -> None:
        record = make_record(Level.ERROR)
        assert "\x1b[" not in ConsoleFormatter(use_color=False).format(record)
        assert "\x1b[31m" in ConsoleFormatter(use_color=True).format(record)
