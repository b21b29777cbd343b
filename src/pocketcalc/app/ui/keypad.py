from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from pocketcalc.model.events import (
    DIGITS, Clear, DecimalPoint, Digit, Equals, Event, Operator, OperatorPressed, Percent, ToggleSign,
)

if TYPE_CHECKING:
    from pocketcalc.app.state import Store
    from pocketcalc.model.state import CalculatorState

CLEAR_KEY = "AC"
TOGGLE_SIGN_KEY = "+/−"
PERCENT_KEY = "%"
DECIMAL_KEY = "."
EQUALS_KEY = "="

# Button roles, matched by the stylesheet
ROLE_OPERATOR = "operator"
ROLE_FUNCTION = "function"
ROLE_DIGIT = "digit"
ROLE_ZERO = "zero"


@dataclass(frozen=True)
class ButtonSpec:
    label: str
    row: int
    column: int
    column_span: int = 1
    role: str = ROLE_DIGIT
    accessible_name: str = ""


BUTTONS: list[ButtonSpec] = [
    ButtonSpec(CLEAR_KEY, 0, 0, role=ROLE_FUNCTION, accessible_name="Clear"),
    ButtonSpec(TOGGLE_SIGN_KEY, 0, 1, role=ROLE_FUNCTION, accessible_name="Toggle Sign"),
    ButtonSpec(PERCENT_KEY, 0, 2, role=ROLE_FUNCTION, accessible_name="Percent"),
    ButtonSpec(Operator.DIVIDE.value, 0, 3, role=ROLE_OPERATOR, accessible_name="Divide"),

    ButtonSpec("7", 1, 0), ButtonSpec("8", 1, 1), ButtonSpec("9", 1, 2),
    ButtonSpec(Operator.MULTIPLY.value, 1, 3, role=ROLE_OPERATOR, accessible_name="Multiply"),

    ButtonSpec("4", 2, 0), ButtonSpec("5", 2, 1), ButtonSpec("6", 2, 2),
    ButtonSpec(Operator.SUBTRACT.value, 2, 3, role=ROLE_OPERATOR, accessible_name="Subtract"),

    ButtonSpec("1", 3, 0), ButtonSpec("2", 3, 1), ButtonSpec("3", 3, 2),
    ButtonSpec(Operator.ADD.value, 3, 3, role=ROLE_OPERATOR, accessible_name="Add"),

    ButtonSpec("0", 4, 0, column_span=2, role=ROLE_ZERO),
    ButtonSpec(DECIMAL_KEY, 4, 2, accessible_name="Decimal"),
    ButtonSpec(EQUALS_KEY, 4, 3, role=ROLE_OPERATOR, accessible_name="Equals"),
]

STYLESHEET = """
QPushButton {
    border: none;
    border-radius: 32px;
    min-width: 64px;
    min-height: 64px;
    font-size: 26px;
    color: white;
}
QPushButton[role="operator"] { background-color: #f59e0b; }
QPushButton[role="operator"]:hover { background-color: #fbbf24; }
QPushButton[role="operator"]:pressed { background-color: #d97706; }
QPushButton[role="function"] { background-color: #a1a1aa; color: black; }
QPushButton[role="function"]:hover { background-color: #d4d4d8; }
QPushButton[role="function"]:pressed { background-color: #71717a; }
QPushButton[role="digit"], QPushButton[role="zero"] { background-color: #3f3f46; }
QPushButton[role="digit"]:hover, QPushButton[role="zero"]:hover { background-color: #52525b; }
QPushButton[role="digit"]:pressed, QPushButton[role="zero"]:pressed { background-color: #27272a; }
QPushButton[role="zero"] { text-align: left; padding-left: 32px; }
"""


def event_for_label(label: str) -> Event:
    """
    Map a button label to its input event.

    Both "AC" and "C" clear.

    Raises:
        KeyError: If no button carries this label.
    """
    if len(label) == 1 and label in DIGITS:
        return Digit(label)
    if label in (CLEAR_KEY, "C"):
        return Clear()
    if label == DECIMAL_KEY:
        return DecimalPoint()
    if label == EQUALS_KEY:
        return Equals()
    if label == TOGGLE_SIGN_KEY:
        return ToggleSign()
    if label == PERCENT_KEY:
        return Percent()
    for op in Operator:
        if label == op.value:
            return OperatorPressed(op)
    raise KeyError(f"No button with label '{label}'")


class Keypad(QWidget):
    """The 4-column button grid. Forwards every click to the store."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.buttons: dict[str, QPushButton] = {}

        grid = QGridLayout(self)
        grid.setContentsMargins(0, 0, 0, 0)
        grid.setSpacing(12)

        for spec in BUTTONS:
            btn = QPushButton(spec.label, self)
            btn.setProperty("role", spec.role)
            btn.setCursor(Qt.CursorShape.PointingHandCursor)
            btn.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            btn.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
            if spec.accessible_name:
                btn.setAccessibleName(spec.accessible_name)
            # clicked emits checked(bool); swallow it and bind the key
            btn.clicked.connect(lambda checked=False, key=spec.label: self.store.press(key))
            grid.addWidget(btn, spec.row, spec.column, 1, spec.column_span)
            self.buttons[spec.label] = btn

        self.setStyleSheet(STYLESHEET)

        self.store.state_changed.connect(self._on_state_changed)
        self._update_clear_label()

    @property
    def clear_button(self) -> QPushButton:
        return self.buttons[CLEAR_KEY]

    @Slot(object)
    def _on_state_changed(self, _state: CalculatorState) -> None:
        self._update_clear_label()

    def _update_clear_label(self) -> None:
        self.clear_button.setText(self.store.clear_label())
