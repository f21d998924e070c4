from __future__ import annotations

from PySide6.QtWidgets import QWidget

from samplecollector.app.session import Session


class BasePanel(QWidget):
    """Base class for the panels of the main window. Holds a reference to the session."""
    def __init__(self, session: Session, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.session = session
