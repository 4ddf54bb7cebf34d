"""
Real-Time Driver
================
Delivers one tickule to the Store per real-time tickule period.

Why is this file needed?
------------------------
The model is passive. Something has to turn wall-clock time into advance()
calls, and only while the user has the clock running. The run flag lives
here, not in the model.

Note: sub-tickule time between the last delivered tick and a stop is lost
when the clock is restarted. Do not use this as a stopwatch.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal

from hubclock.app.state import Store
from hubclock.config import TIMER_INTERVAL_MS

logger = logging.getLogger(__name__)


class ClockDriver(QObject):
    running_changed = Signal(bool)

    def __init__(self, store: Store, interval_ms: int = TIMER_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self._running = False

        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self._on_timeout)

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    def start(self) -> None:
        if self._running:
            return
        if self.store.is_editing:
            logger.warning("Cannot start the clock while an edit session is open.")
            return
        self._running = True
        self._timer.start()
        logger.info(f"Clock started ({self.interval_ms} ms per tickule).")
        self.running_changed.emit(True)

    def stop(self) -> None:
        if not self._running:
            return
        self._running = False
        self._timer.stop()
        logger.info("Clock stopped.")
        self.running_changed.emit(False)

    def toggle(self) -> None:
        if self._running:
            self.stop()
        else:
            self.start()

    def _on_timeout(self) -> None:
        # A timeout already queued when stop() ran is dropped, never replayed.
        if self._running:
            self.store.advance()
