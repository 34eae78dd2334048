"""Tests for centralized logging behavior and configuration."""

import logging
from io import StringIO

import pytest

from editalign.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def _reset_logging_each_test():
    reset_logging()
    yield
    reset_logging()


def test_effective_levels_enable_disable():
    """ERROR by default, DEBUG after enable, back to ERROR after disable."""
    logger = get_logger("editalign.test")
    assert logger.getEffectiveLevel() == logging.ERROR

    capture = StringIO()
    handler = logging.StreamHandler(capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    logger.warning("warning-1")
    assert "warning-1" not in capture.getvalue()

    enable_debug_logging()
    logger.debug("debug-2")
    assert "debug-2" in capture.getvalue()

    disable_debug_logging()
    logger.debug("debug-3")
    assert "debug-3" not in capture.getvalue()
    logger.removeHandler(handler)


def test_set_global_level_propagates_to_children():
    logger1 = get_logger("editalign.module1")
    logger2 = get_logger("editalign.module2")

    set_global_log_level(logging.WARNING)
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING

    logger3 = get_logger("editalign.module3")
    assert logger3.getEffectiveLevel() == logging.WARNING


def test_setup_root_logger_idempotent_no_duplicate_handlers():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    setup_root_logger(level=logging.INFO, handler=handler)

    root_logger = logging.getLogger("editalign")
    assert len(root_logger.handlers) == 1

    setup_root_logger(level=logging.DEBUG)
    assert len(root_logger.handlers) == 1
    assert root_logger.level == logging.INFO


def test_custom_format_string_applied():
    capture = StringIO()
    handler = logging.StreamHandler(capture)
    fmt = "LEVEL:%(levelname)s|NAME:%(name)s|MSG:%(message)s"
    setup_root_logger(level=logging.INFO, format_string=fmt, handler=handler)

    logger = get_logger("editalign.test.format")
    logger.info("hello")
    out = capture.getvalue()
    assert "LEVEL:INFO" in out
    assert "NAME:editalign.test.format" in out
    assert "MSG:hello" in out


def test_search_debug_logging_smoke(caplog):
    from editalign.alignment import AlignmentGenerator

    caplog.set_level(logging.DEBUG, logger="editalign")
    list(AlignmentGenerator("ab", "b"))
    names = {r.name for r in caplog.records if r.levelno == logging.DEBUG}
    assert names == {"editalign.search.engine", "editalign.alignment"}
    assert any(r.getMessage().startswith("Consume cost") for r in caplog.records)
    assert any("Found all alignments" in r.getMessage() for r in caplog.records)
