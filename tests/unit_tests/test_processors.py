"""
structlog front-end routed into a logtree context.
"""

from __future__ import annotations

import pytest
import structlog

from logtree.context import Context
from logtree.levels import Level
from logtree.modules import ROOT_NAME
from logtree.processors import configure_structlog, get_logger
from logtree.writers import RecordingWriter


@pytest.fixture
def routed(context: Context):
    configure_structlog(context)
    yield context
    structlog.reset_defaults()


class TestLogtreeRenderer:
    def test_event_becomes_record(self, routed: Context, recorder: RecordingWriter) -> None:
        get_logger("api").warning("request failed", status=503)

        record = recorder.records[0]
        assert record.module == "api"
        assert record.level is Level.WARNING
        assert record.message == "request failed status=503"
        assert record.filename.endswith("test_processors.py")
        assert record.line > 0

    def test_logger_levels_apply(self, routed: Context, recorder: RecordingWriter) -> None:
        log = get_logger("api")
        log.info("dropped")
        routed.get_logger("api").set_level(Level.DEBUG)
        log.debug("kept")
        assert recorder.messages == ["kept"]

    def test_bound_values_are_appended(self, routed: Context, recorder: RecordingWriter) -> None:
        get_logger("auth").bind(user="u1").error("denied")
        assert recorder.messages == ["denied user=u1"]

    def test_exception_text_is_included(self, routed: Context, recorder: RecordingWriter) -> None:
        log = get_logger("jobs")
        try:
            1 / 0
        except ZeroDivisionError:
            log.exception("job crashed")

        record = recorder.records[0]
        assert record.level is Level.ERROR
        assert record.message.startswith("job crashed\n")
        assert "ZeroDivisionError" in record.message

    def test_unnamed_logger_targets_root(self, routed: Context, recorder: RecordingWriter) -> None:
        get_logger().critical("halt")
        assert recorder.records[0].module == ROOT_NAME
