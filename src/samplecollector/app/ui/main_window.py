"""
Main Application Window
=======================
The primary GUI container: entry form on the left, tabbed views on the right.

Why is this file needed?
------------------------
1. Ownership: The window creates the Session for its lifetime and hands it to
   every panel, so the session ends when the window is closed.
2. Layout: It organizes the high-level visual structure of the application.
3. Notifications: It turns submission outcomes into status bar messages and
   warning dialogs.
"""
from __future__ import annotations

import logging
import random

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QSplitter, QTabWidget, QLabel, QMessageBox

from samplecollector import config
from samplecollector.app.application import VISIBLE_APP_NAME
from samplecollector.app.session import Session, SubmissionOutcome
from samplecollector.app.ui.panels.entry_form import EntryFormPanel
from samplecollector.app.ui.plot_view import StrengthLoadPlotView
from samplecollector.app.ui.table_view import RecordsTableView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, rng: random.Random | None = None) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1300, 800)

        # Session store for the lifetime of this window
        self.session = Session(rng=rng, parent=self)

        # ---- Central: title on top, splitter below ----
        central = QWidget(self)
        v = QVBoxLayout(central)

        title = QLabel(f"<h1>{self.tr(VISIBLE_APP_NAME)}</h1>", central)
        title.setStyleSheet("color: #2c3e50;")
        v.addWidget(title, 0)

        split = QSplitter(Qt.Orientation.Horizontal, central)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        self.form_panel = EntryFormPanel(self.session, parent=split)

        self.tabs = QTabWidget(split)
        self.table_view = RecordsTableView(self.session, parent=self.tabs)
        self.plot_view = StrengthLoadPlotView(self.session, parent=self.tabs)
        self.tabs.addTab(self.table_view, self.tr("Collected Data"))
        self.tabs.addTab(self.plot_view, self.tr("Visual Analysis"))

        split.addWidget(self.form_panel)
        split.addWidget(self.tabs)
        split.setStretchFactor(0, 1)
        split.setStretchFactor(1, 2)

        self.setCentralWidget(central)

        self.form_panel.submitted.connect(self._on_submitted)

        # Permanent session status; notifications use the temporary message area
        self.session_status = QLabel(self.session.status_text(), self)
        self.statusBar().addPermanentWidget(self.session_status)
        self.session.store.records_changed.connect(self._refresh_session_status)

    @Slot()
    def _refresh_session_status(self) -> None:
        self.session_status.setText(self.session.status_text())

    @Slot(object)
    def _on_submitted(self, outcome: SubmissionOutcome) -> None:
        self.statusBar().showMessage(outcome.message, config.NOTIFICATION_DURATION_MS)
        if not outcome.ok:
            QMessageBox.warning(self, self.tr("Invalid input"), outcome.message)

    def closeEvent(self, event) -> None:
        logger.info(f"Session {self.session.session_id} ended with {self.session.store.count()} record(s).")
        super().closeEvent(event)
