"""Tests for the application log file."""

from __future__ import annotations

import logging
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from tasklist.main import app
from tasklist.services.task_service import TaskService
from tasklist.utils.logger import LOGGER_NAME, get_logger


@pytest.fixture
def log_dir(tmp_path):
    """A brand-new ``tasklist`` logger writing into ``tmp_path``."""
    manager = logging.Logger.manager
    shared = manager.loggerDict.pop(LOGGER_NAME, None)
    get_logger.cache_clear()

    with patch("tasklist.utils.logger.user_log_dir", return_value=str(tmp_path)):
        yield tmp_path

    for handler in list(logging.getLogger(LOGGER_NAME).handlers):
        handler.close()
    manager.loggerDict.pop(LOGGER_NAME, None)
    if shared is not None:
        manager.loggerDict[LOGGER_NAME] = shared
    get_logger.cache_clear()


def _log_text(log_dir) -> str:
    return (log_dir / "tasklist.log").read_text(encoding="utf-8")


def test_records_go_to_log_file(log_dir):
    get_logger().warning("disk almost full")

    line = _log_text(log_dir).strip()
    assert line.endswith("WARNING  [tasklist] disk almost full")


def test_logger_is_built_once(log_dir):
    logger = get_logger()

    assert get_logger() is logger
    assert len(logger.handlers) == 1


def test_records_stay_out_of_root_logger(log_dir, caplog):
    with caplog.at_level(logging.DEBUG):
        get_logger().info("private")

    assert caplog.records == []
    assert "private" in _log_text(log_dir)


def test_debug_records_are_kept(log_dir):
    get_logger().debug("inserted task abc")

    assert "DEBUG" in _log_text(log_dir)


def test_commands_log_start_and_completion(log_dir, memory_repo, mock_config_service):
    with patch(
        "tasklist.commands.list_command.get_task_service",
        return_value=TaskService(memory_repo),
    ), patch(
        "tasklist.commands.list_command.get_config_service",
        return_value=mock_config_service,
    ):
        result = CliRunner().invoke(app, ["list"])

    assert result.exit_code == 0, result.output
    text = _log_text(log_dir)
    assert "command started: list_tasks" in text
    assert "command completed: list_tasks" in text
