"""Test the centralized logging functionality."""

import logging
from io import StringIO

from depgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


def test_centralized_logging():
    logger = get_logger("depgraph.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    try:
        logger.info("Test info message")
        assert "Test info message" in log_capture.getvalue()

        log_capture.seek(0)
        log_capture.truncate(0)
        logger.debug("Test debug message")
        assert "Test debug message" not in log_capture.getvalue()

        enable_debug_logging()
        logger.debug("Test debug message after enable")
        assert "Test debug message after enable" in log_capture.getvalue()
    finally:
        disable_debug_logging()
        logger.removeHandler(handler)


def test_child_loggers_inherit_root_level():
    logger1 = get_logger("depgraph.module1")
    logger2 = get_logger("depgraph.module2")
    assert logger1 is not logger2

    set_global_log_level(logging.WARNING)
    assert logging.getLogger("depgraph").level == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING


def test_reset_and_setup_with_custom_handler():
    stream = StringIO()
    reset_logging()
    try:
        setup_root_logger(handler=logging.StreamHandler(stream), format_string="%(message)s")
        get_logger("depgraph.custom").warning("custom handler message")
        assert stream.getvalue() == "custom handler message\n"
    finally:
        reset_logging()
        setup_root_logger()
