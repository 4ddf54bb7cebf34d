# tests/test_state.py
import pytest

from hubclock.app.state import Store
from hubclock.model.hub_time import HubTime


def test_advance_emits_time_changed(store: Store, emitted_times: list[HubTime]) -> None:
    assert store.advance() is True
    assert store.hub_time.elapsed == 1
    assert emitted_times == [store.hub_time]


def test_set_total_elapsed_overflows_into_cycle(store: Store, emitted_times: list[HubTime]) -> None:
    store.set_total_elapsed(160_045)
    assert (store.hub_time.cycle, store.hub_time.elapsed) == (1, 45)
    assert len(emitted_times) == 1


def test_draft_isolation_until_commit(store: Store, emitted_times: list[HubTime]) -> None:
    before = (store.hub_time.cycle_display_string(), store.hub_time.time_display_string())

    draft = store.begin_edit()
    draft.cycle = 12345
    draft.slice, draft.tick, draft.tickule = 1, 23, 45

    live = store.hub_time
    assert (live.cycle_display_string(), live.time_display_string()) == before
    assert emitted_times == []

    store.commit(draft)
    assert store.hub_time is draft
    assert store.hub_time.cycle_display_string() == "*345"
    assert store.hub_time.time_display_string() == "01′23″45"
    assert emitted_times == [draft]


def test_cancel_discards_draft(store: Store) -> None:
    original = store.hub_time.copy()
    draft = store.begin_edit()
    draft.tick = 77
    store.cancel_edit()
    assert store.hub_time == original
    assert not store.is_editing


def test_begin_edit_returns_same_draft_while_open(store: Store) -> None:
    assert store.begin_edit() is store.begin_edit()


def test_live_time_locked_during_edit(store: Store, emitted_times: list[HubTime]) -> None:
    store.begin_edit()
    assert store.advance() is False
    assert store.set_total_elapsed(10) is False
    assert store.hub_time.elapsed == 0
    assert emitted_times == []


def test_editing_changed_signal(store: Store) -> None:
    states: list[bool] = []
    store.editing_changed.connect(lambda s: states.append(s))
    draft = store.begin_edit()
    store.commit(draft)
    store.begin_edit()
    store.cancel_edit()
    assert states == [True, False, True, False]


def test_commit_rejects_foreign_draft(store: Store) -> None:
    store.begin_edit()
    with pytest.raises(ValueError):
        store.commit(HubTime(cycle=5))
    assert store.is_editing


def test_commit_without_session(store: Store) -> None:
    with pytest.raises(ValueError):
        store.commit(store.hub_time.copy())


def test_commit_rejects_non_hub_time(store: Store) -> None:
    store.begin_edit()
    with pytest.raises(TypeError):
        store.commit("not a time")  # type: ignore[arg-type]
