"""
Run with: python -m samplecollector
"""
from __future__ import annotations

import sys

from samplecollector import config
from samplecollector.app.application import create_app
from samplecollector.app.ui.main_window import MainWindow
from samplecollector.logging_config import setup_logging


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=config.LOG_LEVEL, log_file=config.LOG_FILE)
    app = create_app()
    # The window owns the session: closing it ends the session
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
