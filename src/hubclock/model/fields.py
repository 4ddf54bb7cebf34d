"""
Integer Field Validation
========================
Backing state for a bounded, non-negative integer text input.

The editor keeps one IntegerInput per field. Malformed text is a normal,
representable state: the last accepted value is kept and the input is flagged
invalid, so the dialog can colour the field and withhold Save.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import sys
from typing import Optional

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


@dataclass
class IntegerInput:
    """
    Validates user text against [0, max_value].

    Args:
        max_value: Inclusive upper bound. The cycle field uses the default,
            sys.maxsize, so text never grows past what int() will convert.
        value: Initial, known-good value.
        coerce_empty: Treat an empty string as a valid 0 instead of an error.
    """
    max_value: int = sys.maxsize
    value: int = 0
    coerce_empty: bool = True
    text: str = ""
    is_valid: bool = True

    def __post_init__(self) -> None:
        self.reset(self.value)

    def reset(self, value: int) -> None:
        """Re-seed the field from a model value, as done when a field is shown."""
        # Saturate first so str() only ever sees a bounded number
        self.update(str(max(0, min(value, self.max_value))))

    def update(self, text: str) -> bool:
        """Accept new text. Returns the resulting validity."""
        # The raw text is always kept so the widget shows what was typed.
        self.text = text

        if text == "":
            if self.coerce_empty:
                self.value = 0
                self.is_valid = True
            else:
                self.is_valid = False
        else:
            number = self._parse(text)
            if number is None:
                # Keep the last known-good value.
                logger.debug(f"Rejected input of {len(text)} chars (max={self.max_value})")
                self.is_valid = False
            else:
                self.value = number
                self.is_valid = True

        return self.is_valid

    def _parse(self, text: str) -> Optional[int]:
        if not set(text) <= _DIGITS:
            return None
        # Leading zeros are harmless; anything longer than the bound is too big
        if len(text.lstrip("0")) > len(str(self.max_value)):
            return None
        number = int(text)
        if number > self.max_value:
            return None
        return number
