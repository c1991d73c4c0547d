"""Tests for logging configuration."""

import logging

import pytest

from co2_action.app_logging import (
    WorkflowCommandFormatter,
    configure_logging,
    escape_command_data,
)


@pytest.fixture
def action_logger():
    logger = logging.getLogger("co2_action")
    logger.handlers.clear()
    yield logger
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


def _record(level: int, message: str) -> logging.LogRecord:
    return logging.LogRecord("co2_action.test", level, __file__, 1, message, None, None)


def test_configure_logging_idempotent(action_logger) -> None:
    configure_logging()
    first_count = len(action_logger.handlers)

    configure_logging()
    second_count = len(action_logger.handlers)

    assert first_count == 1
    assert second_count == 1
    assert action_logger.propagate is False


def test_warning_becomes_workflow_command() -> None:
    formatter = WorkflowCommandFormatter("%(message)s")

    assert formatter.format(_record(logging.WARNING, "skipping")) == "::warning::skipping"
    assert formatter.format(_record(logging.ERROR, "Path not found: x")) == (
        "::error::Path not found: x"
    )
    assert formatter.format(_record(logging.DEBUG, "walk")) == "::debug::walk"


def test_info_stays_plain() -> None:
    formatter = WorkflowCommandFormatter("%(message)s")

    assert formatter.format(_record(logging.INFO, "Total bytes: 350")) == (
        "Total bytes: 350"
    )


def test_command_data_is_escaped() -> None:
    assert escape_command_data("50%\r\nnext") == "50%25%0D%0Anext"


def test_configured_logger_writes_to_stdout(action_logger, capsys) -> None:
    configure_logging()

    logging.getLogger("co2_action.services.analytics").warning("no data")

    assert "::warning::no data" in capsys.readouterr().out
