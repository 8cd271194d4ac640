"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths to the data file scattered
   throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the anomaly CSV) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_DATA_PATH (str): Absolute path to the default anomaly CSV.
"""
import logging
import sys
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/climatespiral/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_DATA_PATH: str = os.path.join(ASSETS_PATH, "global-temp-anomaly.csv")


def resolve_data_path(argv: list[str]) -> str | None:
    """
    Pick the CSV to open at startup.

    The first command-line argument wins over the bundled default. Returns None
    when neither exists, the window then starts empty.
    """
    candidates = argv[1:2] + [DEFAULT_DATA_PATH]
    for path in candidates:
        if os.path.isfile(path):
            return path
        logger.debug(f"Data file not found at {path}")
    return None


# Logging, overridable from the environment
LOG_LEVEL: str = os.environ.get("CLIMATESPIRAL_LOG_LEVEL", "INFO")
LOG_FILE: str | None = os.environ.get("CLIMATESPIRAL_LOG_FILE") or None
