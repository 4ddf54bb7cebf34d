# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Iterator

import pytest

# Widgets are created in tests; no display is needed
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from hubclock.app.state import Store
from hubclock.model.hub_time import HubTime


@pytest.fixture(scope="session")
def qapp() -> Iterator[QApplication]:
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture()
def store(qapp: QApplication) -> Store:
    return Store(HubTime())


@pytest.fixture()
def emitted_times(store: Store) -> list[HubTime]:
    received: list[HubTime] = []
    store.time_changed.connect(lambda t: received.append(t))
    return received
