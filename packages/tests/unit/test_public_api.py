"""Unit tests for the fake_clock top-level public API surface.

Test Techniques Used:
    - Specification-based Testing: ``__all__`` completeness.
    - Importability: Every name in ``__all__`` resolves to a real object.
"""

from __future__ import annotations

import fake_clock


class TestFakeClockPublicAPI:
    """All expected symbols are importable and listed in ``__all__``."""

    EXPECTED_NAMES = {
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
    }

    def test_all_contains_expected_symbols(self) -> None:
        """``__all__`` matches the documented public API exactly."""
        assert set(fake_clock.__all__) == self.EXPECTED_NAMES

    def test_all_symbols_importable(self) -> None:
        """Every name in ``__all__`` resolves to an attribute on the module."""
        for name in fake_clock.__all__:
            obj = getattr(fake_clock, name, None)
            assert obj is not None, f"{name!r} listed in __all__ but not importable"

    def test_version_is_string(self) -> None:
        """Package exposes a non-empty version string."""
        assert isinstance(fake_clock.__version__, str)
        assert fake_clock.__version__
