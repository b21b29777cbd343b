"""
The calculator window: display on top, keypad below.
"""
from __future__ import annotations

from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from pocketcalc.app.application import VISIBLE_APP_NAME
from pocketcalc.app.state import Store
from pocketcalc.app.ui.display import Display
from pocketcalc.app.ui.keypad import Keypad


class CalculatorWindow(QMainWindow):
    def __init__(self, store: Store | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(340, 560)

        # Global store
        self.store = store if store is not None else Store(parent=self)

        central = QWidget(self)
        central.setObjectName("calculator")
        central.setStyleSheet("#calculator { background-color: black; }")
        v = QVBoxLayout(central)
        v.setContentsMargins(24, 24, 24, 24)
        v.setSpacing(24)

        self.display = Display(self.store, central)
        v.addWidget(self.display, 0)

        self.keypad = Keypad(self.store, central)
        v.addWidget(self.keypad, 1)

        self.setCentralWidget(central)
