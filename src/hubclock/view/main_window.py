"""
Main Application Window
=======================
The clock face: splat date, time of cycle, play/pause and Edit.

Why is this file needed?
------------------------
1. Layout: It organizes the clock face.
2. Routing: It connects the Store and the ClockDriver signals to the labels
   and buttons, and opens the editor with the driver stopped.
"""
import logging
import os

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton
)
from PySide6.QtCore import Qt
from PySide6.QtGui import QFont, QFontDatabase

from hubclock.app.state import Store
from hubclock.config import FONT_PATH, FONT_FAMILY, CYCLE_FONT_SIZE, TIME_FONT_SIZE, VISIBLE_APP_NAME
from hubclock.controller.driver import ClockDriver
from hubclock.model.hub_time import HubTime
from hubclock.view.dialogs.dialog_editor import EditorDialog

logger = logging.getLogger(__name__)


def load_clock_font(point_size: int) -> QFont:
    """Bundled digital font if present, otherwise the system monospace font."""
    family = None
    if os.path.exists(FONT_PATH):
        font_id = QFontDatabase.addApplicationFont(FONT_PATH)
        families = QFontDatabase.applicationFontFamilies(font_id) if font_id >= 0 else []
        family = families[0] if families else None

    if family is None:
        logger.debug(f"Font '{FONT_FAMILY}' not available, using system monospace.")
        font = QFontDatabase.systemFont(QFontDatabase.FixedFont)
    else:
        font = QFont(family)
    font.setPointSize(point_size)
    return font


class ClockWindow(QMainWindow):
    def __init__(self, store: Store, driver: ClockDriver) -> None:
        super().__init__()
        self.store = store
        self.driver = driver

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(480, 420)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        layout = QVBoxLayout(main_widget)

        # --- Edit button, top right ---
        h_top = QHBoxLayout()
        h_top.addStretch()
        self.btn_edit = QPushButton("Edit")
        self.btn_edit.clicked.connect(self.on_edit_clicked)
        h_top.addWidget(self.btn_edit)
        layout.addLayout(h_top)

        layout.addStretch()

        # --- Clock face ---
        self.lbl_cycle = QLabel()
        self.lbl_cycle.setFont(load_clock_font(CYCLE_FONT_SIZE))
        self.lbl_cycle.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.lbl_cycle)

        self.lbl_time = QLabel()
        self.lbl_time.setFont(load_clock_font(TIME_FONT_SIZE))
        self.lbl_time.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.lbl_time)

        # --- Play / Pause ---
        self.btn_run = QPushButton()
        self.btn_run.setMinimumHeight(40)
        self.btn_run.clicked.connect(self.driver.toggle)
        layout.addWidget(self.btn_run)

        layout.addStretch()

        # --- SIGNAL CONNECTIONS ---
        self.store.time_changed.connect(self.on_time_changed)
        self.driver.running_changed.connect(self.on_running_changed)

        self.on_time_changed(self.store.hub_time)
        self.on_running_changed(self.driver.is_running)

    def on_time_changed(self, hub_time: HubTime) -> None:
        self.lbl_cycle.setText(hub_time.cycle_display_string())
        self.lbl_time.setText(hub_time.time_display_string())

    def on_running_changed(self, running: bool) -> None:
        self.btn_run.setText("Pause" if running else "Play")
        # Editing is only offered while the clock is stopped
        self.btn_edit.setEnabled(not running)

    def on_edit_clicked(self) -> None:
        self.driver.stop()
        dialog = EditorDialog(self.store, load_clock_font(CYCLE_FONT_SIZE // 2), self)
        dialog.exec()

    def closeEvent(self, event) -> None:
        self.driver.stop()
        super().closeEvent(event)
