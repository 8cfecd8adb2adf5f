"""
Run with: python -m arrayvisualizer
"""
from __future__ import annotations

import logging
import sys

from arrayvisualizer.app.application import create_app
from arrayvisualizer.app.state import VisualizerController
from arrayvisualizer.app.ui.main_window import MainWindow
from arrayvisualizer.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    setup_logging()

    app = create_app()
    controller = VisualizerController()
    win = MainWindow(controller)
    win.show()

    logger.info("Entering Qt event loop.")
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
