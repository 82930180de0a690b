"""
Hierarchical, leveled logging for Python applications.

Loggers live in a dotted namespace whose levels are inherited from parent to
child and can be changed at runtime. Records are fanned out, in registration
order, to named writers, each with its own minimum level:
- composites: level filter, tee, module filter, stdout/stderr split, discard
- leaves: formatting stream writer, in-memory recording writer
- front-ends: native ``Logger``, structlog processor, stdlib handler

Design Pattern: Composite Pattern for writers, Strategy Pattern for formatters.
Library: structlog for the structured front-end and internal diagnostics,
pydantic-settings for bootstrap configuration.
"""

from .bootstrap import start_logging
from .config import parse_config_string, render_config
from .context import Context, default_context, get_logger
from .exceptions import (
    ConfigurationError,
    DuplicateWriterError,
    InvalidConfig,
    InvalidLevel,
    LogtreeError,
    SinkWriteFailure,
    WriterNotFoundError,
)
from .formatters import (
    BasicFormatter,
    ConsoleFormatter,
    DefaultFormatter,
    Formatter,
    MinimalFormatter,
    WarningFormatter,
)
from .levels import Level, is_level_enabled, parse_level
from .logger import Logger
from .modules import ROOT_NAME, LoggerNode, ModuleRegistry
from .record import Record, new_record
from .registry import DEFAULT_WRITER_NAME, WriterEntry, WriterRegistry
from .settings import LoggingSettings
from .writers import (
    DiscardWriter,
    FormattingWriter,
    LevelFilterWriter,
    MinLevelWriter,
    ModuleFilterWriter,
    RecordingWriter,
    RecordWriter,
    StdioSplitWriter,
    TeeWriter,
    new_stream_writer,
)

__all__ = [
    "BasicFormatter",
    "ConfigurationError",
    "ConsoleFormatter",
    "Context",
    "DEFAULT_WRITER_NAME",
    "DefaultFormatter",
    "DiscardWriter",
    "DuplicateWriterError",
    "Formatter",
    "FormattingWriter",
    "InvalidConfig",
    "InvalidLevel",
    "Level",
    "LevelFilterWriter",
    "Logger",
    "LoggerNode",
    "LoggingSettings",
    "LogtreeError",
    "MinLevelWriter",
    "MinimalFormatter",
    "ModuleFilterWriter",
    "ModuleRegistry",
    "ROOT_NAME",
    "Record",
    "RecordWriter",
    "RecordingWriter",
    "SinkWriteFailure",
    "StdioSplitWriter",
    "TeeWriter",
    "WarningFormatter",
    "WriterEntry",
    "WriterNotFoundError",
    "WriterRegistry",
    "default_context",
    "get_logger",
    "is_level_enabled",
    "new_record",
    "new_stream_writer",
    "parse_config_string",
    "parse_level",
    "render_config",
    "start_logging",
]
