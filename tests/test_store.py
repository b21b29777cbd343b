"""Tests for the Qt store and the keypad label mapping."""
import pytest

from pocketcalc.app.application import number_style_for_locale
from pocketcalc.app.state import Store
from pocketcalc.app.ui.keypad import BUTTONS, event_for_label
from pocketcalc.model.events import (
    Clear, DecimalPoint, Digit, Equals, Operator, OperatorPressed, Percent, ToggleSign,
)
from pocketcalc.model.formatting import NumberStyle
from pocketcalc.model.state import INITIAL_STATE


@pytest.fixture
def store(qapp):
    return Store()


class TestEventForLabel:

    @pytest.mark.parametrize("label, event", [
        ("7", Digit("7")),
        (".", DecimalPoint()),
        ("+", OperatorPressed(Operator.ADD)),
        ("−", OperatorPressed(Operator.SUBTRACT)),
        ("×", OperatorPressed(Operator.MULTIPLY)),
        ("÷", OperatorPressed(Operator.DIVIDE)),
        ("=", Equals()),
        ("AC", Clear()),
        ("C", Clear()),
        ("+/−", ToggleSign()),
        ("%", Percent()),
    ])
    def test_mapping(self, label, event):
        assert event_for_label(label) == event

    def test_every_button_maps_to_an_event(self):
        for spec in BUTTONS:
            event_for_label(spec.label)

    def test_unknown_label(self):
        with pytest.raises(KeyError):
            event_for_label("M+")


class TestStore:

    def test_press_updates_display(self, store):
        for label in ("1", "2", "3", "4"):
            store.press(label)
        assert store.display_text() == "1,234"
        assert store.state.display_value == "1234"

    def test_signal_emitted_on_change(self, store):
        received = []
        store.state_changed.connect(lambda state: received.append(state))
        store.press("5")
        assert len(received) == 1
        assert received[0].display_value == "5"

    def test_noop_does_not_emit(self, store):
        received = []
        store.state_changed.connect(lambda state: received.append(state))
        store.dispatch(Equals())
        assert received == []
        assert store.state is INITIAL_STATE

    def test_error_text(self, store):
        for label in ("6", "÷", "0", "="):
            store.press(label)
        assert store.display_text() == "Error"

    def test_clear_label(self, store):
        assert store.clear_label() == "AC"
        store.press("0")
        assert store.clear_label() == "AC"
        store.press("5")
        assert store.clear_label() == "C"
        store.press("+")
        store.press("0")
        # display is "0" again but an operand is pending
        assert store.clear_label() == "C"
        store.press("C")
        assert store.clear_label() == "AC"
        assert store.state == INITIAL_STATE

    def test_number_style(self, qapp):
        store = Store(number_style=NumberStyle(group_separator=".", decimal_point=","))
        for label in ("1", "2", "3", "4", ".", "5"):
            store.press(label)
        assert store.display_text() == "1.234,5"

    def test_unknown_label_raises(self, store):
        with pytest.raises(KeyError):
            store.press("MC")


class TestNumberStyleForLocale:

    def test_en_us(self):
        assert number_style_for_locale("en_US") == NumberStyle(",", ".")

    def test_de_de(self):
        assert number_style_for_locale("de_DE") == NumberStyle(".", ",")
