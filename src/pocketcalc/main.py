"""
Application Initialization
==========================
This module wires the calculator together and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging from the command line or the environment.
2. Creates the QApplication and reads the display settings.
3. Instantiates the Store (model side) and the window (view side).
"""
from __future__ import annotations

import argparse
import logging
import sys

from pocketcalc.app.application import create_app, number_style_for_locale
from pocketcalc.app.state import Store
from pocketcalc.app.ui.main_window import CalculatorWindow
from pocketcalc.config import load_display_settings, log_level_from_env
from pocketcalc.logging_config import setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="pocketcalc", description="Four-function desktop calculator.")
    parser.add_argument("--debug", action="store_true", help="log every key press")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    args, _unknown = parser.parse_known_args(argv)  # leave Qt's own options alone
    return args


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the application."""
    argv = sys.argv[1:] if argv is None else argv
    args = parse_args(argv)

    level = logging.DEBUG if args.debug else log_level_from_env()
    setup_logging(level=level, log_file=args.log_file)

    app = create_app([sys.argv[0], *argv])

    settings = load_display_settings()
    store = Store(number_style=number_style_for_locale(settings.locale_name))

    window = CalculatorWindow(store)
    window.show()
    logger.info("Calculator started (locale %s)", settings.locale_name)

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
