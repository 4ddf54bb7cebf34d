"""
Modal Dialog for Editing the Hub Time
=====================================
Works on a draft copy obtained from the Store. OK commits the draft in one
step, Cancel drops it. OK stays disabled while any field holds invalid text.
"""
import logging
import sys

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QDialog, QVBoxLayout, QHBoxLayout, QLabel, QSpinBox,
    QFormLayout, QDialogButtonBox
)
from PySide6.QtGui import QFont

from hubclock.app.state import Store
from hubclock.model.codec import SLICE_SEP, TICK_SEP, SPLAT
from hubclock.model.hub_time import HubTime
from hubclock.view.widgets.integer_field import IntegerField

logger = logging.getLogger(__name__)


class EditorDialog(QDialog):
    def __init__(self, store: Store, font: QFont, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Edit Hub Time")

        self.store = store
        self.draft: HubTime = self.store.begin_edit()
        self._committed = False

        self._init_ui(font)

    def _init_ui(self, font: QFont) -> None:
        layout = QVBoxLayout(self)

        # --- Cycle ---
        h_cycle = QHBoxLayout()
        lbl_splat = QLabel(SPLAT)
        lbl_splat.setFont(font)
        h_cycle.addWidget(lbl_splat)

        # Bounded at the largest native integer so its text always converts
        self.field_cycle = IntegerField("Cycle", self.draft.cycle, sys.maxsize)
        self.field_cycle.setFont(font)
        self.field_cycle.valueChanged.connect(self._on_cycle_changed)
        h_cycle.addWidget(self.field_cycle)
        layout.addLayout(h_cycle)

        # --- Precision ---
        form = QFormLayout()
        self.spin_precision = QSpinBox()
        self.spin_precision.setRange(HubTime.MIN_PRECISION, HubTime.MAX_PRECISION)
        self.spin_precision.setValue(self.draft.precision)
        self.spin_precision.valueChanged.connect(self._on_precision_changed)
        form.addRow("Precision:", self.spin_precision)
        layout.addLayout(form)

        # --- Slice / Tick / Tickule ---
        h_time = QHBoxLayout()
        self.field_slice = IntegerField("Slice", self.draft.slice, HubTime.SLICES_PER_CYCLE - 1)
        self.field_tick = IntegerField("Tick", self.draft.tick, HubTime.TICKS_PER_SLICE - 1)
        self.field_tickule = IntegerField("Tickule", self.draft.tickule, HubTime.TICKULES_PER_TICK - 1)

        self.field_slice.valueChanged.connect(self._on_slice_changed)
        self.field_tick.valueChanged.connect(self._on_tick_changed)
        self.field_tickule.valueChanged.connect(self._on_tickule_changed)

        for field, sep in ((self.field_slice, SLICE_SEP), (self.field_tick, TICK_SEP), (self.field_tickule, None)):
            field.setFont(font)
            field.validityChanged.connect(self._update_buttons)
            h_time.addWidget(field)
            if sep:
                lbl = QLabel(sep)
                lbl.setFont(font)
                h_time.addWidget(lbl)
        self.field_cycle.validityChanged.connect(self._update_buttons)
        layout.addLayout(h_time)

        # --- Preview ---
        self.lbl_preview = QLabel()
        self.lbl_preview.setAlignment(Qt.AlignCenter)
        self.lbl_preview.setStyleSheet("color: gray;")
        layout.addWidget(self.lbl_preview)
        self._refresh_preview()

        # --- Buttons ---
        self.button_box = QDialogButtonBox(QDialogButtonBox.Ok | QDialogButtonBox.Cancel)
        self.button_box.accepted.connect(self.save_changes)
        self.button_box.rejected.connect(self.reject)
        layout.addWidget(self.button_box)

    # --- VALIDITY ---

    @property
    def fields(self) -> list[IntegerField]:
        return [self.field_cycle, self.field_slice, self.field_tick, self.field_tickule]

    @property
    def is_valid(self) -> bool:
        return all(f.is_valid for f in self.fields)

    def _update_buttons(self, *_) -> None:
        self.button_box.button(QDialogButtonBox.Ok).setEnabled(self.is_valid)

    # --- DRAFT UPDATES ---

    def _on_cycle_changed(self, value: int) -> None:
        self.draft.cycle = value
        self._refresh_preview()

    def _on_precision_changed(self, value: int) -> None:
        self.draft.precision = value
        self._refresh_preview()

    def _on_slice_changed(self, value: int) -> None:
        self.draft.slice = value
        self._refresh_preview()

    def _on_tick_changed(self, value: int) -> None:
        self.draft.tick = value
        self._refresh_preview()

    def _on_tickule_changed(self, value: int) -> None:
        self.draft.tickule = value
        self._refresh_preview()

    def _refresh_preview(self) -> None:
        self.lbl_preview.setText(f"{self.draft.cycle_display_string()}  {self.draft.time_display_string()}")

    # --- COMMIT / CANCEL ---

    def save_changes(self) -> None:
        if not self.is_valid:
            return
        self.store.commit(self.draft)
        self._committed = True
        self.accept()

    def done(self, result: int) -> None:
        # Covers Cancel, Esc and the window close button
        if not self._committed:
            self.store.cancel_edit()
        super().done(result)
