"""
Application State Store
=======================
Owns the live HubTime shared by the clock face, the driver and the editor.

Why is this file needed?
------------------------
1. Ownership: the live model is created once by the composition root and
   passed to every component through this store (no module-level singleton).
2. Notification: views subscribe to Qt signals instead of polling the model.
3. Editing: an edit session works on a draft copy that replaces the live
   model in a single assignment on commit, or is dropped on cancel.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from hubclock.model.hub_time import HubTime

logger = logging.getLogger(__name__)


class Store(QObject):
    """Central state store with signals for clock face/editor sync."""
    time_changed = Signal(object)
    editing_changed = Signal(bool)

    def __init__(self, hub_time: Optional[HubTime] = None) -> None:
        super().__init__()
        self._hub_time = hub_time if hub_time is not None else HubTime()
        self._draft: Optional[HubTime] = None

    @property
    def hub_time(self) -> HubTime:
        """The live model. Treat as read-only; mutate through the store."""
        return self._hub_time

    @property
    def is_editing(self) -> bool:
        return self._draft is not None

    # --- LIVE MUTATIONS ---

    def advance(self) -> bool:
        """Advance the live clock by one tickule. Refused while editing."""
        if self.is_editing:
            logger.warning("Ignoring tick: live time is locked by an open edit session.")
            return False
        self._hub_time.advance()
        self.time_changed.emit(self._hub_time)
        return True

    def set_total_elapsed(self, value: int) -> bool:
        if self.is_editing:
            logger.warning("Ignoring total update: live time is locked by an open edit session.")
            return False
        self._hub_time.set_total_elapsed(value)
        self.time_changed.emit(self._hub_time)
        return True

    # --- EDIT SESSION ---

    def begin_edit(self) -> HubTime:
        """Open an edit session and return its draft copy."""
        if self._draft is None:
            self._draft = self._hub_time.copy()
            logger.debug("Edit session opened at %s %s", self._draft.cycle_display_string(), self._draft.time_display_string())
            self.editing_changed.emit(True)
        return self._draft

    def commit(self, draft: HubTime) -> None:
        """Replace the live model with the draft, all at once."""
        if not isinstance(draft, HubTime):
            raise TypeError(f"Expected HubTime draft, got {type(draft).__name__}.")
        if self._draft is None or draft is not self._draft:
            raise ValueError("Draft does not belong to the open edit session.")

        self._hub_time = draft
        self._draft = None
        logger.info("Committed edited time %s %s", self._hub_time.cycle_display_string(), self._hub_time.time_display_string())
        self.editing_changed.emit(False)
        self.time_changed.emit(self._hub_time)

    def cancel_edit(self) -> None:
        """Discard the draft; the live model is untouched."""
        if self._draft is None:
            return
        logger.debug("Edit session cancelled.")
        self._draft = None
        self.editing_changed.emit(False)
