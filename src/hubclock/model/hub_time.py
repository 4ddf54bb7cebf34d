"""
Hub Time (Data Model)
=====================
Time as kept on the fictional world Hub.

Similarly to how we record time as a day number, hour, minute and second,
Hub time is recorded as a "cycle" number, "slice", "tick" and "tickule".
There is no grouping above the cycle; the cycle number just keeps
incrementing forever.

In practice the cycle number is referenced by only a few trailing digits.
That ambiguous value is the "splat" date, while the full-precision number is
the "absolute" date. The clock shows the splat date only, so a running clock
*appears* to roll over once it passes the displayed precision even though the
absolute date is always retained.

Classes:
    HubTime: The clock value with its invariant-preserving operations.
"""
from __future__ import annotations

import logging

from hubclock.model import codec
from hubclock.model.codec import TimeComponents

logger = logging.getLogger(__name__)


class HubTime:
    """
    A cycle count plus tickules elapsed since the top of that cycle.

    `elapsed` is the single source of truth for sub-cycle time; slice, tick and
    tickule are computed from it on demand and never stored.
    """
    # Re-exported so the UI can build bounded inputs without importing codec.
    SLICES_PER_CYCLE = codec.SLICES_PER_CYCLE
    TICKS_PER_SLICE = codec.TICKS_PER_SLICE
    TICKULES_PER_TICK = codec.TICKULES_PER_TICK
    TICKULES_PER_SLICE = codec.TICKULES_PER_SLICE
    TICKULES_PER_CYCLE = codec.TICKULES_PER_CYCLE
    SECONDS_PER_TICKULE = codec.SECONDS_PER_TICKULE

    MIN_PRECISION = 1
    MAX_PRECISION = 7  # Can be bumped as long as the display font fits
    DEFAULT_PRECISION = 3

    __slots__ = ("_cycle", "_precision", "_elapsed")

    def __init__(self, cycle: int = 0, precision: int = DEFAULT_PRECISION, elapsed: int = 0) -> None:
        self._cycle = 0
        self._precision = self.DEFAULT_PRECISION
        self._elapsed = 0
        self.cycle = cycle
        self.precision = precision
        self.set_total_elapsed(elapsed)

    # --- STORED FIELDS ---

    @property
    def cycle(self) -> int:
        return self._cycle

    @cycle.setter
    def cycle(self, value: int) -> None:
        self._cycle = max(0, int(value))

    @property
    def precision(self) -> int:
        """Number of trailing cycle digits the user is allowed to see."""
        return self._precision

    @precision.setter
    def precision(self, value: int) -> None:
        clamped = codec.clamp(int(value), self.MIN_PRECISION, self.MAX_PRECISION)
        if clamped != int(value):
            logger.debug("Precision clamped to %d", clamped)
        self._precision = clamped

    @property
    def elapsed(self) -> int:
        """Tickules since the top of the current cycle (00′00″00)."""
        return self._elapsed

    # --- TIME PASSAGE ---

    def advance(self) -> None:
        """Move forward by exactly one tickule, carrying into the cycle."""
        if self._elapsed + 1 == self.TICKULES_PER_CYCLE:
            self._elapsed = 0
            self._cycle += 1
            logger.info("Cycle rolled over, splat date now %s", self.cycle_display_string())
        else:
            self._elapsed += 1

    def set_total_elapsed(self, value: int) -> None:
        """
        The only setter that accepts a magnitude past the end of the cycle.
        Excess whole cycles are carried into `cycle`, which lets a caller hand
        in a running counter and trigger overflow. Negative totals clamp to 0.
        """
        value = int(value)
        if value < 0:
            logger.debug("Negative total clamped to 0")
            value = 0
        carry, self._elapsed = divmod(value, self.TICKULES_PER_CYCLE)
        if carry:
            self._cycle += carry
            # Splat text only: an arbitrarily large cycle has no safe str()
            logger.info("Carried into a new cycle, splat date now %s", self.cycle_display_string())

    @property
    def total_tickules(self) -> int:
        return self._elapsed

    @total_tickules.setter
    def total_tickules(self, value: int) -> None:
        self.set_total_elapsed(value)

    # --- DERIVED COMPONENTS ---

    @property
    def components(self) -> TimeComponents:
        """(slice, tick, tickule) computed from `elapsed`."""
        return codec.split(self._elapsed)

    @components.setter
    def components(self, value: TimeComponents) -> None:
        slice_, tick, tickule = value
        self._elapsed = codec.join(
            codec.clamp(int(slice_), 0, self.SLICES_PER_CYCLE - 1),
            codec.clamp(int(tick), 0, self.TICKS_PER_SLICE - 1),
            codec.clamp(int(tickule), 0, self.TICKULES_PER_TICK - 1),
        )

    @property
    def slice(self) -> int:
        return self.components[0]

    @slice.setter
    def slice(self, value: int) -> None:
        _, tick, tickule = self.components
        self.components = (value, tick, tickule)

    @property
    def tick(self) -> int:
        return self.components[1]

    @tick.setter
    def tick(self, value: int) -> None:
        slice_, _, tickule = self.components
        self.components = (slice_, value, tickule)

    @property
    def tickule(self) -> int:
        return self.components[2]

    @tickule.setter
    def tickule(self, value: int) -> None:
        slice_, tick, _ = self.components
        self.components = (slice_, tick, value)

    # --- DISPLAY ---

    def cycle_display_string(self) -> str:
        """Splat date, e.g. cycle 12345 at precision 3 -> "*345"."""
        return codec.format_splat(self._cycle, self._precision)

    def time_display_string(self) -> str:
        """Zero padded time, e.g. "01′23″45"."""
        return codec.format_time(*self.components)

    # --- VALUE SEMANTICS ---

    def copy(self) -> HubTime:
        """Independent working copy, used as the editor draft."""
        return HubTime(self._cycle, self._precision, self._elapsed)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HubTime):
            return NotImplemented
        return (self._cycle, self._precision, self._elapsed) == (other._cycle, other._precision, other._elapsed)

    __hash__ = None  # Mutable

    def __repr__(self) -> str:
        return f"HubTime(cycle={self._cycle}, precision={self._precision}, elapsed={self._elapsed})"
