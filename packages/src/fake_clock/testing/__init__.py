"""Public test-support utilities for fake_clock.

Provided symbols:

- :class:`FakeClock` — re-exported for convenience.
- :func:`make_settings` — factory for ``Settings`` without ``.env`` files.

The ``fake_clock`` and ``default_fake_clock`` fixtures are registered
through the ``pytest11`` entry point (see :mod:`fake_clock.testing._plugin`).
"""

from fake_clock._clock import FakeClock
from fake_clock.testing._settings import make_settings

__all__ = [
    "FakeClock",
    "make_settings",
]
