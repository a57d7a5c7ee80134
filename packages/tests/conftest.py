"""Pytest configuration and shared fixtures."""

import pytest

# The fake_clock plugin is registered via a ``pytest11`` entry point
# (pyproject.toml) for external consumers.  This suite disables it
# (``-p no:fake_clock``) and loads it here instead so that the plugin's
# imports happen while ``pytest-cov`` is tracing.
pytest_plugins = ["fake_clock.testing._plugin"]


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests (fast, no external dependencies)"
    )
