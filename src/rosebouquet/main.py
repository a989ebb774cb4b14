"""
Application Initialization
==========================
This module wires the controller and the window and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging.
2. Instantiates the Animation Controller (owns the bouquet and the clock).
3. Instantiates the Main Window, passing the controller in.
"""
import logging
import sys
from PySide6.QtWidgets import QApplication

from rosebouquet import config
from rosebouquet.logging_config import setup_logging
from rosebouquet.controller.animation import AnimationController
from rosebouquet.view.main_window import MainWindow, VISIBLE_APP_NAME

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Setup Logging (level from ROSEBOUQUET_LOG_LEVEL, INFO by default)
    setup_logging()

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)

    if config.RANDOM_SEED is not None:
        logger.info(f"Using random seed {config.RANDOM_SEED}.")

    # 3. Initialize the Animation Controller
    controller = AnimationController()

    # 4. Initialize the Main Window, passing the controller
    window = MainWindow(controller)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
