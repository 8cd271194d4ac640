"""
Application Initialization
==========================
This module wires the window to the data file and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Sets up logging.
2. Creates the QApplication and the Main Window (View).
3. Hands the startup data file to the window, which precomputes the spiral.
"""
import sys

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication

from climatespiral.config import resolve_data_path, LOG_LEVEL, LOG_FILE
from climatespiral.logging_config import setup_logging
from climatespiral.view.main_window import MainWindow, VISIBLE_APP_NAME


def main() -> None:
    # 1. Setup Logging (Console + Optional File)
    # CLIMATESPIRAL_LOG_LEVEL=DEBUG also shows mapping switches and pause/resume
    setup_logging(level=LOG_LEVEL, log_file=LOG_FILE)

    # 2. Create the Qt Application
    app = QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)
    pg.setConfigOptions(antialias=True)

    # 3. Initialize the Main Window with the startup data, if any
    window = MainWindow(resolve_data_path(sys.argv))
    window.show()

    # 4. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
