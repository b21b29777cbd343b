from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont
from PySide6.QtWidgets import QLabel, QSizePolicy, QWidget

from pocketcalc.config import DISPLAY_FONT_PX, DISPLAY_FONT_PX_LONG, LONG_DISPLAY_THRESHOLD

if TYPE_CHECKING:
    from pocketcalc.app.state import Store
    from pocketcalc.model.state import CalculatorState


def font_px_for(raw_text: str) -> int:
    """Pixel size of the display font; long raw strings get the smaller size."""
    if len(raw_text) > LONG_DISPLAY_THRESHOLD:
        return DISPLAY_FONT_PX_LONG
    return DISPLAY_FONT_PX


class Display(QLabel):
    """Right-aligned readout of the formatted display string."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

        self.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignBottom)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        self.setMinimumHeight(96)
        self.setStyleSheet("color: white;")
        self.setAccessibleName("Display")

        self.store.state_changed.connect(self._on_state_changed)
        self.refresh()

    @Slot(object)
    def _on_state_changed(self, _state: CalculatorState) -> None:
        self.refresh()

    def refresh(self) -> None:
        font = QFont(self.font())
        font.setWeight(QFont.Weight.Light)
        font.setPixelSize(font_px_for(self.store.state.display_value))
        self.setFont(font)
        self.setText(self.store.display_text())
