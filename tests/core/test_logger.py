import logging

import pytest

from colwise.logger.logger import get_logger, is_console_handler, logger, setup_logger


def console_handlers(log):
    return [h for h in log.handlers if is_console_handler(h)]


def test_project_logger_configured_once():
    assert logger.name == "colwise"
    assert len(console_handlers(logger)) == 1
    assert logger.propagate is False

    again = setup_logger()
    assert again is logger
    assert len(console_handlers(again)) == 1


def test_setup_ignores_foreign_handlers():
    log = logging.getLogger("colwise-test-foreign")
    log.addHandler(logging.NullHandler())

    configured = setup_logger("colwise-test-foreign")

    assert len(console_handlers(configured)) == 1
    assert configured.propagate is False


def test_child_logger_shares_project_handler():
    child = get_logger("colwise.functional.loops")
    assert child.name == "colwise.loops"
    assert child.parent is logger


def test_explicit_level():
    log = setup_logger("colwise-test-level", level="debug")
    assert log.level == logging.DEBUG


def test_unknown_level_raises():
    with pytest.raises(ValueError):
        setup_logger("colwise-test-bad-level", level="chatty")
