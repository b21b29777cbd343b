"""
Configuration & Global Constants
================================
This module serves as the central registry for the calculator's constants and
the few user-adjustable display settings.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (the 9-character input cap, the
   8 fraction digits, ...) from being scattered throughout the code.
2. Settings: It reads the persisted display settings through QSettings, so the
   model layer never has to touch Qt.

Exports:
    MAX_INPUT_LENGTH (int): Digit entry is refused at this display length.
    MAX_FRACTION_DIGITS (int): Fraction digits kept by the grouped display.
    EXPONENT_FRACTION_DIGITS (int): Fraction digits in exponential display.
    ERROR_TEXT (str): Text shown for an arithmetic error.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging
import os

logger = logging.getLogger(__name__)

# Global Constants
MAX_INPUT_LENGTH: int = 9
MAX_FRACTION_DIGITS: int = 8
EXPONENT_FRACTION_DIGITS: int = 3
ERROR_TEXT: str = "Error"

# Display font: shrink once the raw display string gets longer than this
LONG_DISPLAY_THRESHOLD: int = 6
DISPLAY_FONT_PX: int = 72
DISPLAY_FONT_PX_LONG: int = 56

DEFAULT_LOCALE: str = "en_US"
LOG_LEVEL_ENV: str = "POCKETCALC_LOG_LEVEL"

SETTINGS_KEY_LOCALE = "display/locale"


@dataclass(frozen=True)
class DisplaySettings:
    """User-adjustable display settings."""
    locale_name: str = DEFAULT_LOCALE


def load_display_settings() -> DisplaySettings:
    """
    Read the display settings from QSettings, falling back to the defaults.
    """
    from PySide6.QtCore import QSettings

    locale_name = QSettings().value(SETTINGS_KEY_LOCALE, DEFAULT_LOCALE, type=str) or DEFAULT_LOCALE
    logger.debug("Display locale: %s", locale_name)
    return DisplaySettings(locale_name=locale_name)


def log_level_from_env(default: int = logging.WARNING) -> int:
    """
    Resolve the log level named in the POCKETCALC_LOG_LEVEL environment variable.

    Unknown names fall back to `default`.
    """
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return default
