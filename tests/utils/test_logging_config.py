# tests/utils/test_logging_config.py
"""Unit tests for logging configuration utility.
=================================================

Tests for the logging setup utility in `reflow.utils.logging_config`.

This module verifies that `setup_logging`:
- Creates rotating file handlers for the main log and a separate error log
  when `separate_error_log` is enabled.
- Honors the configured levels for each handler.
- Can disable file logging with an empty `file` and console logging with
  `log_to_console = False`.

The tests run in a temporary working directory to avoid touching real files.
"""

import logging

from reflow.utils import logging_config


def test_setup_logging_creates_handlers(tmp_path, monkeypatch) -> None:
    """`setup_logging` should add rotating file handlers with proper levels.

    Scenario:
    - Console logging is disabled.
    - Separate error log is requested.
    - File handler level is INFO.

    Assertions:
    - A main rotating file handler (`reflow.log`) and a separate error
      handler (`error.log`) are attached to the root logger, nothing else.
    - Handler levels match the configuration.
    """
    monkeypatch.chdir(tmp_path)

    logging_config.setup_logging(
        {
            "logging": {
                "file_level": "INFO",
                "console_level": "ERROR",
                "log_to_console": False,
                "separate_error_log": True,
            }
        }
    )

    root = logging.getLogger()
    names = {type(h).__name__ for h in root.handlers}
    assert "RotatingFileHandler" in names
    assert len(root.handlers) == 2
    assert root.handlers[0].level == logging.INFO
    assert root.handlers[1].level == logging.ERROR
    assert root.level == logging.INFO
    assert (tmp_path / "reflow.log").exists()


def test_setup_logging_console_only(tmp_path, monkeypatch) -> None:
    """An empty `file` disables file logging; the console level drives the root."""
    monkeypatch.chdir(tmp_path)

    logging_config.setup_logging({"logging": {"file": "", "console_level": "info"}})

    root = logging.getLogger()
    assert [type(h).__name__ for h in root.handlers] == ["StreamHandler"]
    assert root.level == logging.INFO
    assert not (tmp_path / "reflow.log").exists()


def test_setup_logging_creates_log_directory(tmp_path) -> None:
    log_file = tmp_path / "logs" / "nested" / "reflow.log"

    logging_config.setup_logging(
        {"logging": {"file": str(log_file), "log_to_console": False}}
    )

    assert log_file.parent.is_dir()
    assert logging.getLogger().level == logging.DEBUG


def test_setup_logging_twice_does_not_duplicate_handlers(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    config = {"logging": {"log_to_console": False}}

    logging_config.setup_logging(config)
    logging_config.setup_logging(config)

    assert len(logging.getLogger().handlers) == 1
