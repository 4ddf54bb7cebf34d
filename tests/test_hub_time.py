# tests/test_hub_time.py
import logging

import pytest

from hubclock.model.hub_time import HubTime

TPC = HubTime.TICKULES_PER_CYCLE


def test_defaults() -> None:
    t = HubTime()
    assert (t.cycle, t.precision, t.elapsed) == (0, 3, 0)
    assert t.cycle_display_string() == "*000"
    assert t.time_display_string() == "00′00″00"


def test_advance_single_tickule() -> None:
    t = HubTime()
    t.advance()
    assert (t.cycle, t.elapsed) == (0, 1)


def test_advance_carries_into_next_cycle() -> None:
    t = HubTime(cycle=4)
    for _ in range(TPC):
        t.advance()
    assert (t.cycle, t.elapsed) == (5, 0)
    t.advance()
    assert (t.cycle, t.elapsed) == (5, 1)


def test_advance_leaves_precision_alone() -> None:
    t = HubTime(precision=6, elapsed=TPC - 1)
    t.advance()
    assert t.precision == 6
    assert (t.cycle, t.elapsed) == (1, 0)


@pytest.mark.parametrize(
    ("total", "cycle", "elapsed"),
    [
        (0, 0, 0),
        (TPC - 1, 0, TPC - 1),
        (160_000, 1, 0),
        (160_045, 1, 45),
        (TPC * 10 + 7, 10, 7),
    ],
)
def test_set_total_elapsed_carries(total: int, cycle: int, elapsed: int) -> None:
    t = HubTime()
    t.set_total_elapsed(total)
    assert (t.cycle, t.elapsed) == (cycle, elapsed)


def test_set_total_elapsed_adds_to_existing_cycle() -> None:
    t = HubTime(cycle=3)
    t.set_total_elapsed(2 * TPC + 1)
    assert (t.cycle, t.elapsed) == (5, 1)


def test_set_total_elapsed_negative_clamps_to_zero() -> None:
    t = HubTime(cycle=9, elapsed=500)
    t.set_total_elapsed(-5)
    assert (t.cycle, t.elapsed) == (9, 0)


def test_total_tickules_property_matches_setter() -> None:
    t = HubTime()
    t.total_tickules = 160_045
    assert t.total_tickules == 45
    assert t.cycle == 1


def test_components_are_derived_from_elapsed() -> None:
    t = HubTime()
    t.slice, t.tick, t.tickule = 1, 23, 45
    assert t.elapsed == 12_345
    assert t.components == (1, 23, 45)
    assert t.time_display_string() == "01′23″45"


@pytest.mark.parametrize("value", [HubTime.TICKULES_PER_TICK, 101, 10**9])
def test_tickule_clamps_high(value: int) -> None:
    t = HubTime(elapsed=12_300)
    t.tickule = value
    assert t.tickule == HubTime.TICKULES_PER_TICK - 1
    assert (t.slice, t.tick) == (1, 23)


@pytest.mark.parametrize("value", [-1, -500])
def test_tickule_clamps_low(value: int) -> None:
    t = HubTime(elapsed=12_345)
    t.tickule = value
    assert t.tickule == 0


def test_slice_and_tick_clamp() -> None:
    t = HubTime()
    t.slice = 16
    t.tick = 250
    assert (t.slice, t.tick) == (15, 99)
    t.slice = -2
    assert t.slice == 0
    assert t.elapsed < TPC


def test_field_setter_does_not_touch_cycle() -> None:
    t = HubTime(cycle=42)
    t.slice = 99
    assert t.cycle == 42


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0, 1), (-4, 1), (1, 1), (5, 5), (7, 7), (8, 7), (100, 7)],
)
def test_precision_clamps(value: int, expected: int) -> None:
    t = HubTime()
    t.precision = value
    assert t.precision == expected


def test_negative_cycle_clamps() -> None:
    t = HubTime(cycle=-3)
    assert t.cycle == 0


@pytest.mark.parametrize(
    ("cycle", "precision", "expected"),
    [(12345, 3, "*345"), (7, 5, "*00007"), (0, 1, "*0")],
)
def test_cycle_display_string(cycle: int, precision: int, expected: str) -> None:
    assert HubTime(cycle=cycle, precision=precision).cycle_display_string() == expected


def test_splat_date_appears_to_roll_over() -> None:
    t = HubTime(cycle=999, elapsed=TPC - 1)
    t.advance()
    assert t.cycle == 1000
    assert t.cycle_display_string() == "*000"


def test_copy_is_independent() -> None:
    live = HubTime(cycle=12, precision=4, elapsed=777)
    draft = live.copy()
    assert draft == live
    assert draft is not live

    draft.tick = 50
    draft.cycle = 99
    assert live == HubTime(cycle=12, precision=4, elapsed=777)
    assert draft != live


def test_repr() -> None:
    assert repr(HubTime(cycle=1, elapsed=2)) == "HubTime(cycle=1, precision=3, elapsed=2)"


def test_huge_cycle_still_displays() -> None:
    t = HubTime(cycle=10 ** 5000)
    assert t.cycle_display_string() == "*000"
    t.precision = 7
    assert t.cycle_display_string() == "*0000000"


def test_huge_total_carries_without_error(caplog: pytest.LogCaptureFixture) -> None:
    t = HubTime()
    with caplog.at_level(logging.INFO, logger="hubclock.model.hub_time"):
        t.set_total_elapsed(TPC * 10 ** 5000 + 45)
    assert "splat date now *000" in caplog.text
    assert t.cycle == 10 ** 5000
    assert t.elapsed == 45
    assert t.cycle_display_string() == "*000"


def test_integral_float_precision_is_not_reported_as_clamped(caplog: pytest.LogCaptureFixture) -> None:
    t = HubTime()
    with caplog.at_level(logging.DEBUG, logger="hubclock.model.hub_time"):
        t.precision = 3.0
        assert t.precision == 3
        assert "clamped" not in caplog.text

        t.precision = 9.0
        assert t.precision == 7
        assert "clamped" in caplog.text
