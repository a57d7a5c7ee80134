"""Monotonic clock port, system adapter and synthetic clock state.

Provides :class:`ClockPort` (Protocol), :class:`SystemClock` for
production code and :class:`FakeClock`, the explicitly owned
synthetic clock that tests advance by hand.

**Why monotonic?** time.monotonic() is immune to NTP adjustments and
manual system-clock changes, making it suitable for measuring elapsed
durations. The epoch is arbitrary — only *differences* between now()
calls are meaningful (PEP 418).  The synthetic epoch of a
:class:`FakeClock` is ``timedelta(0)`` unless a ``start`` is given.

A process-wide *default clock* backs :meth:`FakeInstant.now` when no
clock is passed.  Tests that rely on it should install a fresh clock
with :func:`use_clock` (or the ``default_fake_clock`` fixture) so they
do not observe each other's time.
"""

from __future__ import annotations

import contextlib
import logging
import threading
import time
from collections.abc import Iterator
from datetime import timedelta
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from fake_clock._instant import ZERO, FakeInstant, as_duration

if TYPE_CHECKING:
    from fake_clock._settings import Settings

logger = logging.getLogger(__name__)


@runtime_checkable
class ClockPort(Protocol):
    """Monotonic clock for timing measurements.

    The default implementation wraps ``time.monotonic()``. Tests
    inject a :class:`FakeClock` for reproducible timing.
    """

    def now(self) -> float:
        """Return monotonic time in seconds.

        Returns:
            A float representing seconds from an arbitrary epoch.
            Only the *difference* between two calls is meaningful.
        """
        ...


class SystemClock:
    """Production clock wrapping ``time.monotonic()``.

    Satisfies :class:`ClockPort` via structural subtyping — no
    base-class inheritance required (PEP 544).
    """

    def now(self) -> float:
        """Return monotonic time in seconds."""
        return time.monotonic()


def _check_offset(value: timedelta) -> timedelta:
    if value < ZERO:
        msg = f"Synthetic time must be non-negative, got {value!r}"
        raise ValueError(msg)
    return value


class FakeClock:
    """Synthetic clock state, advanced manually by test code.

    Satisfies :class:`ClockPort`: ``now()`` returns the current
    offset in seconds, so a ``FakeClock`` can be injected anywhere a
    :class:`SystemClock` is expected.  :meth:`instant` returns the
    same reading as a :class:`FakeInstant`.

    All reads and writes go through a lock, so a clock shared between
    threads never exposes a torn update.

    Args:
        start: Initial offset from the synthetic epoch, as a
            timedelta or in seconds.  Defaults to the epoch.

    Raises:
        ValueError: If *start* is negative or does not fit in a timedelta.

    Example::

        clock = FakeClock()
        t0 = clock.instant()
        clock.advance(5)
        assert t0.elapsed(clock) == timedelta(seconds=5)
    """

    def __init__(self, start: timedelta | float = ZERO) -> None:
        self._time = _check_offset(as_duration(start))
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls, settings: Settings) -> FakeClock:
        """Build a clock starting at ``settings.start`` seconds."""
        return cls(settings.start)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.time()!r})"

    def time(self) -> timedelta:
        """Return the current offset from the synthetic epoch."""
        with self._lock:
            return self._time

    def now(self) -> float:
        """Return the current offset in seconds."""
        return self.time().total_seconds()

    def instant(self) -> FakeInstant:
        """Return a :class:`FakeInstant` snapshot of the current time."""
        return FakeInstant(self.time())

    def set_time(self, value: timedelta | float) -> timedelta:
        """Replace the current offset, returning the previous one.

        Setting an earlier time is allowed; instants taken before then
        report zero elapsed time until the clock catches up again.
        """
        new = _check_offset(as_duration(value))
        with self._lock:
            old, self._time = self._time, new
        logger.debug("Synthetic time set: %s -> %s", old, new)
        return old

    def advance(self, amount: timedelta | float) -> timedelta:
        """Move the clock forward by *amount*, returning the new offset.

        Raises:
            ValueError: If *amount* is negative or does not fit in a
                timedelta.
            OverflowError: If the result exceeds ``timedelta.max``.
        """
        step = as_duration(amount)
        if step < ZERO:
            msg = f"Cannot advance by a negative amount: {step!r}"
            raise ValueError(msg)
        with self._lock:
            try:
                self._time += step
            except OverflowError as exc:
                msg = "overflow when advancing synthetic time"
                raise OverflowError(msg) from exc
            new = self._time
        logger.debug("Synthetic time advanced by %s to %s", step, new)
        return new


# ---------------------------------------------------------------------------
# Process-wide default clock
# ---------------------------------------------------------------------------

_default_lock = threading.Lock()
_default: FakeClock = FakeClock()


def default_clock() -> FakeClock:
    """Return the clock read by ``FakeInstant.now()`` without arguments."""
    with _default_lock:
        return _default


def set_default_clock(clock: FakeClock) -> FakeClock:
    """Install *clock* as the default clock, returning the previous one.

    Raises:
        TypeError: If *clock* is not a :class:`FakeClock`.
    """
    global _default
    if not isinstance(clock, FakeClock):
        msg = f"Expected FakeClock, got {type(clock).__name__}"
        raise TypeError(msg)
    with _default_lock:
        previous, _default = _default, clock
    return previous


@contextlib.contextmanager
def use_clock(clock: FakeClock | None = None) -> Iterator[FakeClock]:
    """Install *clock* (or a fresh one) as the default for a block.

    The previous default is restored on exit, even if the block
    raises.

    Example::

        with use_clock() as clock:
            t0 = FakeInstant.now()
            clock.advance(3)
            assert t0.elapsed() == timedelta(seconds=3)
    """
    clock = FakeClock() if clock is None else clock
    previous = set_default_clock(clock)
    try:
        yield clock
    finally:
        set_default_clock(previous)


def current_time() -> timedelta:
    """Return the default clock's current offset."""
    return default_clock().time()


def set_time(value: timedelta | float) -> timedelta:
    """Set the default clock's offset, returning the previous one."""
    return default_clock().set_time(value)


def advance_time(amount: timedelta | float) -> timedelta:
    """Advance the default clock, returning the new offset."""
    return default_clock().advance(amount)
