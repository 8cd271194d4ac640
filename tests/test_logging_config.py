"""Tests for the logging setup."""

import logging

import pytest

from climatespiral.logging_config import setup_logging, parse_level


def test_parse_level():
    assert parse_level("debug") == logging.DEBUG
    assert parse_level(" WARNING ") == logging.WARNING
    assert parse_level(logging.ERROR) == logging.ERROR


def test_parse_level_rejects_unknown():
    with pytest.raises(ValueError, match="Unknown logging level"):
        parse_level("chatty")


def test_setup_writes_log_file(tmp_path):
    log_file = tmp_path / "spiral.log"
    logger = setup_logging(level="DEBUG", log_file=str(log_file))
    try:
        assert logger.name == "climatespiral"
        assert logger.level == logging.DEBUG
        logging.getLogger("climatespiral.model.geometry").debug("precompute done")
        for handler in logger.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
        assert "Logging initialized at DEBUG" in text
        assert "climatespiral.model.geometry - DEBUG - precompute done" in text
    finally:
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()


def test_setup_twice_keeps_one_console_handler():
    logger = setup_logging()
    logger = setup_logging()
    try:
        assert len(logger.handlers) == 1
    finally:
        logger.handlers.clear()
