from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication, QSettings

import sys
import os

from timingcurve.config import DEMO_KEYS

ORG_ID = "timingcurve"
APP_ID = "timing-curve-editor"
ORG_DOMAIN = "timingcurve.local"

VISIBLE_APP_NAME = "Timing Curve"

SETTINGS_DEMO_KEY = "ui/demo"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (or return the running one)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setOrganizationDomain(ORG_DOMAIN)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance()
    if app is None:
        app = QApplication(argv if argv is not None else sys.argv)

    visible_name = QCoreApplication.translate("App", VISIBLE_APP_NAME)
    app.setApplicationDisplayName(visible_name)

    return app


def load_last_demo(default: str) -> str:
    """The demo key the user picked last time, or `default`."""
    value = QSettings().value(SETTINGS_DEMO_KEY, default, type=str)
    return value if value in DEMO_KEYS else default


def save_last_demo(key: str) -> None:
    QSettings().setValue(SETTINGS_DEMO_KEY, key)
