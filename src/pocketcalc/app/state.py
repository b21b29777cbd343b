from __future__ import annotations

import logging

from PySide6.QtCore import QObject, Signal

from pocketcalc.app.ui.keypad import event_for_label
from pocketcalc.model.engine import apply
from pocketcalc.model.events import Event
from pocketcalc.model.formatting import EN_US, NumberStyle, render_display
from pocketcalc.model.state import INITIAL_STATE, CalculatorState

logger = logging.getLogger(__name__)

ALL_CLEAR_LABEL = "AC"
CLEAR_LABEL = "C"


class Store(QObject):
    """Central state store. Runs events through the engine and notifies the widgets."""
    state_changed = Signal(object)

    def __init__(self, number_style: NumberStyle = EN_US, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._state: CalculatorState = INITIAL_STATE
        self.number_style = number_style

    @property
    def state(self) -> CalculatorState:
        return self._state

    def dispatch(self, event: Event) -> None:
        new_state = apply(self._state, event)
        logger.debug("%r: %r -> %r", event, self._state, new_state)
        if new_state == self._state:
            return
        self._state = new_state
        self.state_changed.emit(self._state)

    def press(self, label: str) -> None:
        """Dispatch the event bound to a keypad label."""
        self.dispatch(event_for_label(label))

    def display_text(self) -> str:
        return render_display(self._state.display, self.number_style)

    def clear_label(self) -> str:
        """'AC' at the initial display with no pending operand, 'C' otherwise."""
        if self._state.display_value == "0" and self._state.first_operand is None:
            return ALL_CLEAR_LABEL
        return CLEAR_LABEL
