"""
Bounded Integer Input Widget
============================
A QLineEdit backed by an IntegerInput. Invalid text is shown in red and the
last valid value is kept, so the parent dialog only has to aggregate the
`is_valid` flags of its fields.
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Signal, QTimer
from PySide6.QtWidgets import QLineEdit, QWidget

from hubclock.model.fields import IntegerInput


class IntegerField(QLineEdit):
    valueChanged = Signal(int)
    validityChanged = Signal(bool)

    def __init__(
        self,
        label: str,
        value: int,
        max_value: int,
        *,
        coerce_empty: bool = True,
        parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.input = IntegerInput(max_value=max_value, value=value, coerce_empty=coerce_empty)

        self.setPlaceholderText(label)
        self.setAccessibleName(label)
        self.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.setText(self.input.text)
        self.textEdited.connect(self._on_text_edited)

    @property
    def value(self) -> int:
        return self.input.value

    @property
    def is_valid(self) -> bool:
        return self.input.is_valid

    def focusInEvent(self, event) -> None:
        super().focusInEvent(event)
        # Select all on focus; deferred so the click does not clear the selection
        QTimer.singleShot(0, self.selectAll)

    def _on_text_edited(self, text: str) -> None:
        was_valid = self.input.is_valid
        old_value = self.input.value

        self.input.update(text)

        self.setStyleSheet("" if self.input.is_valid else "color: red;")
        if self.input.is_valid != was_valid:
            self.validityChanged.emit(self.input.is_valid)
        if self.input.value != old_value:
            self.valueChanged.emit(self.input.value)
