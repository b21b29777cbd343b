from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings, QLocale

import os
import sys

from pocketcalc.model.formatting import NumberStyle

ORG_ID = "pocketcalc"
APP_ID = "pocketcalc"
ORG_DOMAIN = "pocketcalc.local"

VISIBLE_APP_NAME = "Calculator"


def number_style_for_locale(locale_name: str) -> NumberStyle:
    """Build the display separators from a Qt locale name such as 'en_US' or 'de_DE'."""
    locale = QLocale(locale_name)
    return NumberStyle(
        group_separator=locale.groupSeparator(),
        decimal_point=locale.decimalPoint(),
    )


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication(sys.argv if argv is None else argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app
