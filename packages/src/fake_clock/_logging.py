"""Structured JSON log formatter and logging configuration.

Log lines produced while a test drives a :class:`FakeClock` are far
easier to read when they carry the *synthetic* time next to the wall
clock timestamp.  :class:`SyntheticTimeFilter` stamps each record with
the clock's current offset and :class:`JsonFormatter` emits it as the
``synthetic_time`` field.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from logging.handlers import RotatingFileHandler
from typing import Any

from fake_clock._clock import ClockPort
from fake_clock._settings import LoggingSettings

_MEGABYTE = 1024 * 1024

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class SyntheticTimeFilter(logging.Filter):
    """Attach ``record.synthetic_time`` (seconds) from *clock*.

    Never drops a record.
    """

    def __init__(self, clock: ClockPort) -> None:
        super().__init__()
        self._clock = clock

    def filter(self, record: logging.LogRecord) -> bool:
        record.synthetic_time = self._clock.now()
        return True


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects (NDJSON).

    Each record produces a JSON object with these fields:

    - ``timestamp`` — ISO 8601 wall-clock time (always UTC)
    - ``level`` — Python log level name
    - ``logger`` — dotted logger name
    - ``message`` — the formatted log message
    - ``service`` — application name for log correlation
    - ``version`` — application version (omitted when empty)
    - ``synthetic_time`` — fake clock offset in seconds (only present
      when a :class:`SyntheticTimeFilter` stamped the record)
    - ``exception`` — formatted traceback (only present when
      an exception is logged)

    Args:
        service: Application name included in every log line.
        version: Application version string.  Omitted from
            output when empty.
    """

    def __init__(
        self,
        *,
        service: str = "",
        version: str = "",
    ) -> None:
        super().__init__()
        self._service = service
        self._version = version

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self._service,
        }

        if self._version:
            entry["version"] = self._version

        synthetic_time = getattr(record, "synthetic_time", None)
        if synthetic_time is not None:
            entry["synthetic_time"] = synthetic_time

        if record.exc_info and record.exc_info[0] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str)


def configure_logging(
    settings: LoggingSettings,
    *,
    service: str,
    version: str = "",
    clock: ClockPort | None = None,
) -> None:
    """Configure the root logger from settings.

    Clears any existing handlers on the root logger, then installs a
    ``stderr`` stream handler and, when ``settings.file`` is set, a
    :class:`~logging.handlers.RotatingFileHandler`.  When *clock* is
    given every handler also gets a :class:`SyntheticTimeFilter`.
    """
    root = logging.getLogger()

    for handler in root.handlers[:]:
        root.removeHandler(handler)

    if settings.format == "json":
        formatter: logging.Formatter = JsonFormatter(service=service, version=version)
    else:
        formatter = logging.Formatter(_TEXT_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if settings.file is not None:
        handlers.append(
            RotatingFileHandler(
                settings.file,
                maxBytes=settings.max_file_size_mb * _MEGABYTE,
                backupCount=settings.backup_count,
            )
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        if clock is not None:
            handler.addFilter(SyntheticTimeFilter(clock))
        root.addHandler(handler)

    root.setLevel(settings.level)
