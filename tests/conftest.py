from datetime import datetime, timezone

import pytest

from logtree.context import Context
from logtree.levels import Level
from logtree.record import Record
from logtree.writers import RecordingWriter


@pytest.fixture
def context() -> Context:
    """Isolated context with no default writer and a recording writer named 'test'."""
    ctx = Context(with_default_writer=False)
    ctx.add_writer("test", RecordingWriter())
    return ctx


@pytest.fixture
def recorder(context: Context) -> RecordingWriter:
    entry = context.writers.get("test")
    assert entry is not None
    return entry.writer  # type: ignore[return-value]


@pytest.fixture
def make_record():
    def _make(level: Level = Level.INFO, module: str = "app", message: str = "hello") -> Record:
        return Record(
            level=level,
            module=module,
            filename="/src/app/main.py",
            line=42,
            timestamp=datetime(2024, 5, 6, 7, 8, 9, tzinfo=timezone.utc),
            message=message,
        )

    return _make
