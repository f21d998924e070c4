from __future__ import annotations

import os
import sys
from typing import Sequence

import pyqtgraph as pg
from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

ORG_ID = "civil-data"
APP_ID = "sample-collector"

VISIBLE_APP_NAME = "Civil Engineering Project Data Collection"


def configure_plotting() -> None:
    """White charts with black axes, matching the rest of the UI."""
    pg.setConfigOptions(background="w", foreground="k", antialias=True)


def create_app(argv: Sequence[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (one per process)."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(list(argv) if argv is not None else sys.argv)
    app.setStyle("Fusion")
    app.setApplicationDisplayName(QCoreApplication.translate("App", VISIBLE_APP_NAME))

    configure_plotting()
    return app
