"""
stdlib logging bridge and stream redirection.
"""

from __future__ import annotations

import io
import logging

import pytest

from logtree.context import Context
from logtree.interceptors import RedirectStdLibHandler, intercept_stdlib
from logtree.io import StreamToLogger
from logtree.levels import Level
from logtree.modules import ROOT_NAME
from logtree.writers import RecordingWriter


@pytest.fixture
def stdlib_root():
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    yield root
    root.handlers = saved_handlers
    root.setLevel(saved_level)


class TestRedirectStdLibHandler:
    def test_records_are_forwarded_with_levels(self, context: Context, recorder: RecordingWriter) -> None:
        logger = logging.getLogger("thirdparty.client")
        logger.propagate = False
        handler = RedirectStdLibHandler(context)
        logger.addHandler(handler)
        logger.setLevel(logging.DEBUG)
        try:
            context.get_logger("thirdparty").set_level(Level.INFO)
            logger.debug("too chatty")
            logger.info("connected to %s", "db")
        finally:
            logger.removeHandler(handler)
            logger.propagate = True

        assert len(recorder.records) == 1
        record = recorder.records[0]
        assert record.module == "thirdparty.client"
        assert record.level is Level.INFO
        assert record.message == "connected to db"
        assert record.filename.endswith("test_interceptors.py")

    def test_intercept_stdlib_installs_single_handler(
        self, stdlib_root, context: Context, recorder: RecordingWriter
    ) -> None:
        noisy = logging.getLogger("noisy.lib")
        noisy.addHandler(logging.StreamHandler(io.StringIO()))

        handler = intercept_stdlib(context, loggers=["noisy.lib"])

        assert stdlib_root.handlers == [handler]
        assert noisy.handlers == []
        logging.getLogger("noisy.lib").warning("hello")
        logging.getLogger().error("from root")
        assert [(r.module, r.message) for r in recorder.records] == [
            ("noisy.lib", "hello"),
            (ROOT_NAME, "from root"),
        ]


class TestStreamToLogger:
    def test_complete_lines_become_records(self, context: Context, recorder: RecordingWriter) -> None:
        original = io.StringIO()
        stream = StreamToLogger(context.get_logger("stdout"), Level.ERROR, original)
        stream.write("first line\nsecond ")
        stream.write("part\n")
        assert recorder.messages == ["first line", "second part"]
        assert recorder.records[0].filename.endswith("test_interceptors.py")

    def test_flush_emits_pending_text(self, context: Context, recorder: RecordingWriter) -> None:
        stream = StreamToLogger(context.get_logger("stdout"), Level.ERROR, io.StringIO())
        stream.write(b"no newline")
        assert recorder.messages == []
        stream.flush()
        assert recorder.messages == ["no newline"]

    def test_proxies_to_original_stream(self, context: Context) -> None:
        original = io.StringIO()
        stream = StreamToLogger(context.get_logger("stdout"), Level.ERROR, original)
        assert stream.getvalue() == ""
        assert stream.isatty() is False
