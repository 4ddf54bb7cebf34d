"""
Hub Time Codec
==============
Conversion between the flat tickule counter and its (slice, tick, tickule)
decomposition, plus the two display formats used by the clock face.

All functions are pure; HubTime is the only caller that holds state.
"""
from __future__ import annotations

from typing import Tuple

# Ratios between the Hub time groupings.
SLICES_PER_CYCLE: int = 16
TICKS_PER_SLICE: int = 100
TICKULES_PER_TICK: int = 100
TICKULES_PER_SLICE: int = TICKS_PER_SLICE * TICKULES_PER_TICK
TICKULES_PER_CYCLE: int = SLICES_PER_CYCLE * TICKULES_PER_SLICE

# The single ratio tying Hub time to real-world time.
SECONDS_PER_TICKULE: float = 60.0 / 77.0

SPLAT: str = "*"
SLICE_SEP: str = "′"  # prime
TICK_SEP: str = "″"  # double prime

TimeComponents = Tuple[int, int, int]


def clamp(value: int, low: int, high: int) -> int:
    """Saturate value into the closed range [low, high]."""
    return max(low, min(value, high))


def split(elapsed: int) -> TimeComponents:
    """
    Decompose tickules since top of cycle into (slice, tick, tickule).

    Expects 0 <= elapsed < TICKULES_PER_CYCLE.
    """
    total_ticks, tickule = divmod(elapsed, TICKULES_PER_TICK)
    slice_, tick = divmod(total_ticks, TICKS_PER_SLICE)
    return slice_, tick, tickule


def join(slice_: int, tick: int, tickule: int) -> int:
    """
    Recombine components into tickules since top of cycle.
    Components are not validated here; callers clamp first.
    """
    return slice_ * TICKULES_PER_SLICE + tick * TICKULES_PER_TICK + tickule


def format_splat(cycle: int, precision: int) -> str:
    """
    Render a cycle as a splat date: the trailing `precision` digits,
    zero padded, behind the splat marker.

    Ex: cycle 12345 at precision 3 -> "*345", cycle 7 -> "*007".
    """
    # Reduce first so the full cycle number is never converted to text
    digits = f"{cycle % 10 ** precision:0{precision}d}"
    return SPLAT + digits


def format_time(slice_: int, tick: int, tickule: int) -> str:
    """Ex: (1, 23, 45) -> "01′23″45"."""
    return f"{slice_:02d}{SLICE_SEP}{tick:02d}{TICK_SEP}{tickule:02d}"
