"""Configuration via pydantic-settings.

Configuration is loaded from environment variables prefixed with
``FAKE_CLOCK_`` and/or a ``.env`` file.  Nested models use ``__`` as
the delimiter, e.g. ``FAKE_CLOCK_LOGGING__LEVEL=DEBUG``.

All durations are in **seconds**.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from fake_clock._instant import MAX_SECONDS


class LoggingSettings(BaseModel):
    """Logging configuration.

    When ``file`` is set, logs are also written to a rotating file
    (size-based rotation, ``backup_count`` generations kept).  When
    ``None``, logs go to stderr only.

    The ``format`` field selects the output format:

    - ``"json"`` (default) — one JSON object per line, including the
      ``synthetic_time`` of the attached clock.
    - ``"text"`` — human-readable timestamped lines.
    """

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level.",
    )
    format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format ('json' or 'text').",
    )
    file: str | None = Field(
        default=None,
        description="Optional log file path. ``None`` means stderr only.",
    )
    max_file_size_mb: Annotated[int, Field(ge=1)] = Field(
        default=10,
        description=(
            "Maximum log file size in megabytes before rotation. "
            "Only applies when ``file`` is set."
        ),
    )
    backup_count: Annotated[int, Field(ge=0)] = Field(
        default=3,
        description="Number of rotated log files to keep.",
    )


class Settings(BaseSettings):
    """Root settings for synthetic clocks.

    Example ``.env``::

        FAKE_CLOCK_START=120
        FAKE_CLOCK_LOGGING__LEVEL=DEBUG
        FAKE_CLOCK_LOGGING__FORMAT=text
    """

    model_config = SettingsConfigDict(
        env_prefix="FAKE_CLOCK_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    start: Annotated[float, Field(ge=0, le=MAX_SECONDS)] = Field(
        default=0.0,
        description=(
            "Initial offset (seconds) from the synthetic epoch for "
            "clocks built with ``FakeClock.from_settings``."
        ),
    )
    logging: LoggingSettings = Field(
        default_factory=LoggingSettings,
        description="Logging configuration.",
    )
