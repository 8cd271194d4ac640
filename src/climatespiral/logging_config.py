"""
Logging Configuration
Sets up the 'climatespiral' logger for the application.

Level and file come from CLIMATESPIRAL_LOG_LEVEL and CLIMATESPIRAL_LOG_FILE
(see config.py); INFO shows loading, precomputation and end of playback.
"""
import logging
import sys
from typing import Optional, Union

FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def parse_level(level: Union[int, str]) -> int:
    """
    Accept a logging level as an int or a name such as "debug".

    Raises:
        ValueError: If the name is not a standard logging level.
    """
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.strip().upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown logging level '{level}'.")
    return value


def setup_logging(level: Union[int, str] = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'climatespiral' logger.

    Args:
        level: Logging level, e.g. logging.DEBUG or "DEBUG".
        log_file: Optional path to also save logs to (overwritten each run).

    Returns:
        The configured package logger.
    """
    level = parse_level(level)
    logger = logging.getLogger("climatespiral")
    logger.setLevel(level)

    # Re-running setup (e.g. a second window in tests) must not duplicate output
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(FORMAT, datefmt='%H:%M:%S')

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}"
                + (f", writing to {log_file}." if log_file else "."))
    return logger
