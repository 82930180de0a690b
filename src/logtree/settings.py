"""
Logging Configuration.
"""

from enum import Enum
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .config import parse_config_string
from .exceptions import ConfigurationError
from .levels import Level, parse_level


class LogFormat(str, Enum):
    DEFAULT = "default"
    BASIC = "basic"
    CONSOLE = "console"


class LoggingSettings(BaseSettings):
    """Bootstrap configuration for ``start_logging``."""

    model_config = SettingsConfigDict(
        env_prefix="LOGTREE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    config: str = Field(default="", description="Logger levels as name=level pairs")
    level: Level = Field(default=Level.WARNING, description="Root level before show_log and debug apply")
    path: Optional[str] = Field(default=None, description="Append log records to this file")
    debug: bool = Field(default=False, description="Root level DEBUG; implies show_log")
    show_log: bool = Field(default=False, description="Root level INFO, full records on stderr")
    format: LogFormat = Field(default=LogFormat.DEFAULT, description="Record format for stream writers")
    raise_writer_errors: bool = Field(default=False, description="Re-raise writer failures from dispatch")
    console_timestamp_format: str = Field(
        default="%Y-%m-%d %H:%M:%S",
        description="Console timestamp format",
    )
    console_level_width: int = Field(default=5, description="Console level column width")
    console_module_width: int = Field(default=32, description="Console module column width")
    console_separator: str = Field(default=" | ", description="Console column separator")

    @field_validator("config")
    @classmethod
    def _config_must_parse(cls, value: str) -> str:
        try:
            parse_config_string(value)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc
        return value

    @field_validator("level", mode="before")
    @classmethod
    def _parse_level_name(cls, value: object) -> object:
        if isinstance(value, str):
            try:
                value = parse_level(value)
            except ConfigurationError as exc:
                raise ValueError(str(exc)) from exc
        if value == Level.UNSPECIFIED:
            raise ValueError("the root level must be a concrete severity")
        return value
