"""fake_clock.

A deterministic, manually advanced monotonic clock for tests.
"""

from importlib.metadata import PackageNotFoundError, version

from fake_clock._clock import (
    ClockPort,
    FakeClock,
    SystemClock,
    advance_time,
    current_time,
    default_clock,
    set_default_clock,
    set_time,
    use_clock,
)
from fake_clock._instant import FakeInstant, as_duration
from fake_clock._logging import JsonFormatter, SyntheticTimeFilter, configure_logging
from fake_clock._settings import LoggingSettings, Settings

try:
    __version__ = version("fake-clock")
except PackageNotFoundError:
    # Source checkout without installed metadata
    __version__ = "0.0.0+unknown"

__all__ = [
    # Version
    "__version__",
    # Instant
    "FakeInstant",
    "as_duration",
    # Clock
    "ClockPort",
    "FakeClock",
    "SystemClock",
    "advance_time",
    "current_time",
    "default_clock",
    "set_default_clock",
    "set_time",
    "use_clock",
    # Logging
    "JsonFormatter",
    "SyntheticTimeFilter",
    "configure_logging",
    # Settings
    "LoggingSettings",
    "Settings",
]
