import os

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from pocketcalc.model.engine import apply_all
from pocketcalc.app.ui.keypad import event_for_label


@pytest.fixture(scope="session")
def qapp():
    """One QApplication for the whole test session."""
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def press():
    """Run a sequence of keypad labels through the engine from the initial state."""
    def _press(*labels: str):
        return apply_all(event_for_label(label) for label in labels)
    return _press
