"""Synthetic monotonic instants.

Provides :class:`FakeInstant`, a deterministic stand-in for a
monotonic-clock timestamp.  An instant is nothing more than an offset
(a :class:`~datetime.timedelta`) from an arbitrary synthetic epoch;
only *differences* between instants are meaningful, exactly as with
``time.monotonic()``.

Representable range: ``timedelta(0)`` up to ``timedelta.max``.  The
arithmetic comes in three flavours:

- **checked** (``checked_add``, ``checked_sub``,
  ``checked_duration_since``) — return ``None`` when the result is not
  representable.
- **saturating** (``duration_since``, ``saturating_duration_since``,
  ``instant - duration``) — clamp at the range boundary, never raise.
- **operator ``+``** — raises :class:`OverflowError` past the maximum.

Instants never hold a reference to the clock that produced them: they
are frozen snapshots, so ``a += d`` rebinds ``a`` and leaves every
other reference untouched.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fake_clock._clock import FakeClock

ZERO = timedelta(0)
MAX_OFFSET = timedelta.max
MAX_SECONDS = MAX_OFFSET // timedelta(seconds=1)


def as_duration(value: timedelta | float) -> timedelta:
    """Coerce *value* to a :class:`~datetime.timedelta`.

    ``int`` and ``float`` values are interpreted as seconds.  ``bool``
    is rejected even though it is an ``int`` subclass.

    Raises:
        TypeError: If *value* is neither a timedelta nor a number.
        ValueError: If *value* seconds do not fit in a timedelta.
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return timedelta(seconds=value)
        except OverflowError as exc:
            msg = f"{value!r} seconds is outside the representable range"
            raise ValueError(msg) from exc
    msg = f"Expected timedelta or seconds, got {type(value).__name__}"
    raise TypeError(msg)


def _check_duration(duration: object) -> timedelta:
    if not isinstance(duration, timedelta):
        msg = f"Expected timedelta, got {type(duration).__name__}"
        raise TypeError(msg)
    if duration < ZERO:
        msg = f"Duration must be non-negative, got {duration!r}"
        raise ValueError(msg)
    return duration


@dataclass(frozen=True, slots=True, order=True)
class FakeInstant:
    """A point in synthetic time.

    Equality, ordering and hashing are all derived from ``offset``,
    so equal instants hash identically.

    Example::

        t0 = FakeInstant.now(clock)
        t1 = t0 + timedelta(seconds=5)
        assert t1.duration_since(t0) == timedelta(seconds=5)
        assert t0.duration_since(t1) == timedelta(0)
        assert t0.checked_duration_since(t1) is None

    Raises:
        TypeError: If ``offset`` is not a timedelta.
        ValueError: If ``offset`` lies outside the representable range.
    """

    offset: timedelta = ZERO

    def __post_init__(self) -> None:
        if not isinstance(self.offset, timedelta):
            msg = f"offset must be a timedelta, got {type(self.offset).__name__}"
            raise TypeError(msg)
        if self.offset < ZERO:
            msg = f"offset must be non-negative, got {self.offset!r}"
            raise ValueError(msg)

    # -- construction -------------------------------------------------------

    @classmethod
    def now(cls, clock: FakeClock | None = None) -> FakeInstant:
        """Snapshot the current synthetic time of *clock*.

        Reads the process-wide default clock when *clock* is ``None``.
        """
        if clock is None:
            from fake_clock._clock import default_clock

            clock = default_clock()
        return cls(clock.time())

    # -- differences --------------------------------------------------------

    def checked_duration_since(self, earlier: FakeInstant) -> timedelta | None:
        """Time elapsed from *earlier* to ``self``.

        Returns ``None`` when *earlier* is later than ``self``.
        """
        if not isinstance(earlier, FakeInstant):
            msg = f"Expected FakeInstant, got {type(earlier).__name__}"
            raise TypeError(msg)
        if earlier.offset > self.offset:
            return None
        return self.offset - earlier.offset

    def saturating_duration_since(self, earlier: FakeInstant) -> timedelta:
        """Time elapsed from *earlier*, or zero if *earlier* is later."""
        elapsed = self.checked_duration_since(earlier)
        return ZERO if elapsed is None else elapsed

    def duration_since(self, earlier: FakeInstant) -> timedelta:
        """Time elapsed from *earlier* to ``self``.

        Saturates to zero when *earlier* is later than ``self``.  Use
        :meth:`checked_duration_since` to detect that case.
        """
        return self.saturating_duration_since(earlier)

    def elapsed(self, clock: FakeClock | None = None) -> timedelta:
        """Time elapsed between ``self`` and the current synthetic time.

        Computed against *clock* (or the default clock), not against
        whichever clock created this instant.  Saturates to zero if the
        clock has been set back behind ``self``.
        """
        return FakeInstant.now(clock).duration_since(self)

    # -- checked arithmetic -------------------------------------------------

    def checked_add(self, duration: timedelta) -> FakeInstant | None:
        """Return ``self + duration``, or ``None`` past ``timedelta.max``."""
        duration = _check_duration(duration)
        try:
            offset = self.offset + duration
        except OverflowError:
            return None
        return FakeInstant(offset)

    def checked_sub(self, duration: timedelta) -> FakeInstant | None:
        """Return ``self - duration``, or ``None`` before the epoch."""
        duration = _check_duration(duration)
        if duration > self.offset:
            return None
        return FakeInstant(self.offset - duration)

    # -- operators ----------------------------------------------------------

    def __add__(self, other: object) -> FakeInstant:
        if not isinstance(other, timedelta):
            return NotImplemented
        result = self.checked_add(other)
        if result is None:
            msg = "overflow when adding duration to instant"
            raise OverflowError(msg)
        return result

    __radd__ = __add__

    def __sub__(self, other: object) -> FakeInstant | timedelta:
        if isinstance(other, FakeInstant):
            return self.duration_since(other)
        if not isinstance(other, timedelta):
            return NotImplemented
        result = self.checked_sub(other)
        # Saturate at the epoch.
        return FakeInstant() if result is None else result
