# reflow/utils/logging_config.py
"""reflow.utils.logging_config
=============================

This module provides the logging configuration utility of the reflow tool.
It defines the global package logger and a single setup function,
`setup_logging`, which configures application-wide logging handlers and
log levels based on a supplied configuration dictionary.

Features:
    - Rotating file logging of every rule firing and file outcome (reflow.log).
    - Optional console logging to stderr with configurable log level.
    - Optional separate error log file (error.log) for ERROR and CRITICAL events.
    - Automatic creation of log directories, with fallback to the system temp directory on failure.
    - Safe reconfiguration: clears existing handlers to avoid duplicate logs when called multiple times.
    - Never raises exceptions; all errors are reported to stderr and logging continues with best-effort.

Usage:
    Call `setup_logging()` early in the tool's startup sequence, optionally
    passing the configuration dictionary to customize log levels and handlers.

    >>> from reflow.utils import logging_config
    >>> logging_config.setup_logging({"logging": {"console_level": "INFO"}})

Globals:
    logger: Main package logger ("reflow").
"""

import logging
import logging.handlers
import os
import sys
import tempfile
from typing import Any, Optional


# ======================== Global logger ========================
# Created at import-time but unconfigured until ``setup_logging()``
# attaches handlers to the root logger.
logger = logging.getLogger("reflow")


def _ensure_log_dir(filename: str) -> str:
    """Creates the directory of ``filename``; returns a temp-dir fallback on failure."""
    log_dir = os.path.dirname(filename)
    if log_dir and not os.path.exists(log_dir):
        try:
            os.makedirs(log_dir)
        except OSError as e_mkdir:
            print(f"Error creating log directory '{log_dir}': {e_mkdir}", file=sys.stderr)
            filename = os.path.join(tempfile.gettempdir(), os.path.basename(filename) or "reflow.log")
            print(f"Logging to temporary file: '{filename}'", file=sys.stderr)
    return filename


def setup_logging(config: Optional[dict[str, Any]] = None) -> None:
    """Configures application-wide logging handlers and log levels.

    The routine sets up up to three independent handlers:

    1. File handler: rotating reflow.log capturing everything from
       the configured `file_level` (default DEBUG) upward. Disabled when
       `file` is empty.
    2. Console handler: optional `stderr` output whose threshold is
       `console_level` (default WARNING).
    3. Error-file handler: optional rotating error.log that stores
       only ERROR and CRITICAL events.

    Existing handlers on the root logger are cleared to avoid duplicate
    records when the function is invoked multiple times (e.g. in unit
    tests).

    Args:
        config (dict | None): Optional application configuration blob.
            Only the ``["logging"]`` sub-section is consulted; recognised
            keys are:

            - ``file`` (str): Path of the main log file; empty disables
              file logging. Default: ``"reflow.log"``.
            - ``file_level`` (str): Log-level for the main log file
              (DEBUG, INFO, ...).  Default: ``"DEBUG"``.
            - ``console_level`` (str): Log-level for console output.
              Default: ``"WARNING"``.
            - ``log_to_console`` (bool): Disable/enable console handler.
              Default: ``True``.
            - ``separate_error_log`` (bool): Whether to create error.log.
              Default: ``False``.

    Notes:
        The function never raises; all I/O or permission errors are
        reported to stderr and the logging subsystem continues with a
        best-effort configuration.

    Example:
        >>> setup_logging({
        ...     "logging": {
        ...         "file_level": "INFO",
        ...         "console_level": "ERROR",
        ...         "separate_error_log": True
        ...     }
        ... })
    """
    if config is None:
        config = {}
    logging_config = config.get("logging", {})

    log_filename = logging_config.get("file", "reflow.log")
    log_file_level_str = str(logging_config.get("file_level", "DEBUG")).upper()
    log_file_level = getattr(logging, log_file_level_str, logging.DEBUG)

    file_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)-8s - %(name)-15s - %(message)s (%(filename)s:%(lineno)d)"
    )
    file_handler = None
    if log_filename:
        log_filename = _ensure_log_dir(log_filename)
        try:
            file_handler = logging.handlers.RotatingFileHandler(
                log_filename, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8"
            )
            file_handler.setFormatter(file_formatter)
            file_handler.setLevel(log_file_level)
        except Exception as e_fh:
            print(
                f"Error setting up file logger for '{log_filename}': {e_fh}. File logging may be impaired.",
                file=sys.stderr,
            )

    # Console Handler
    console_handler = None
    console_log_level = logging.WARNING
    if logging_config.get("log_to_console", True):
        console_level_str = str(logging_config.get("console_level", "WARNING")).upper()
        console_log_level = getattr(logging, console_level_str, logging.WARNING)

        console_formatter = logging.Formatter("%(levelname)-8s - %(name)-12s - %(message)s")
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(console_log_level)

    # Optional Separate Error Log File
    error_file_handler = None
    if logging_config.get("separate_error_log", False):
        error_log_filename = _ensure_log_dir("error.log")
        try:
            error_file_handler = logging.handlers.RotatingFileHandler(
                error_log_filename,
                maxBytes=1 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
            error_file_handler.setFormatter(file_formatter)
            error_file_handler.setLevel(logging.ERROR)
        except Exception as e_efh:
            print(
                f"Error setting up separate error log '{error_log_filename}': {e_efh}.",
                file=sys.stderr,
            )

    # Configure the root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []  # Clear existing root handlers to avoid duplicates

    levels = []
    for handler in (file_handler, console_handler, error_file_handler):
        if handler:
            root_logger.addHandler(handler)
            levels.append(handler.level)

    # Root must let through the most verbose level any handler wants.
    root_logger.setLevel(min(levels) if levels else logging.WARNING)

    logging.debug(
        "Logging setup complete. Root logger level: %s.",
        logging.getLevelName(root_logger.level),
    )
    if file_handler:
        logging.debug(
            f"File logging to '{log_filename}' at level: {logging.getLevelName(file_handler.level)}."
        )
    if console_handler:
        logging.debug(f"Console logging to stderr at level: {logging.getLevelName(console_log_level)}.")
    if error_file_handler:
        logging.debug("Error logging to 'error.log' at level: ERROR.")
