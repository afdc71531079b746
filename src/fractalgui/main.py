"""
Application Initialization
==========================
Builds the window and starts the Qt event loop.

Why is this file needed?
------------------------
It acts as the composition root. It:
1. Configures logging.
2. Creates the QApplication.
3. Instantiates the Main Window (which owns the controller and state).
"""
import logging
import sys

from fractalgui.app.application import create_app
from fractalgui.app.ui.main_window import MainWindow
from fractalgui.config import LOG_FILE, LOG_LEVEL
from fractalgui.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    # Set config.LOG_LEVEL to logging.DEBUG to see per-redraw command counts
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    app = create_app()

    window = MainWindow()
    window.show()
    window.center_on_screen()
    logger.info("Main window shown.")

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
