# reflow/utils/utils.py
"""
reflow.utils.utils.py
=====================

This module provides the core utility functions of the reflow tool.

Key functionalities include:
- Robust Configuration Loading: Implements a multi-layered strategy that loads a
  hardcoded, built-in default configuration, then recursively merges it with
  user-defined settings from `~/.config/reflow/config.toml`, an explicit
  configuration file and environment overrides.
- Configuration Validation: Normalizes the values the rules depend on (the
  maximum width, the file extensions, the formatter command).
- Safe Subprocess Execution: A wrapper around `subprocess.run` for safely
  executing external commands such as the code formatter.
- Helper Utilities: Includes a function for deep-merging dictionaries.

This architecture ensures the tool is always runnable, even if user
configuration files are missing or corrupted, by falling back to the
embedded defaults.
"""

import copy
import logging
import os
import shlex
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional

import toml

from reflow.errors import ConfigError

logger = logging.getLogger("reflow")

# --- Constants ---
USER_CONFIG_DIR = Path.home() / ".config" / "reflow"

# This dictionary is the hardcoded fallback configuration.
# It ensures the tool can ALWAYS start, even without any config file.
DEFAULT_CONFIG: Dict[str, Any] = {
    "reflow": {
        "max_width": 79,
        "extensions": ["py"],
        "exclude_dirs": [".git", "__pycache__", ".venv", "venv", ".tox", "build", "dist"],
    },
    "formatter": {"command": ["black"], "timeout": 0},
    "logging": {
        "file": "reflow.log",
        "file_level": "DEBUG",
        "console_level": "WARNING",
        "log_to_console": True,
        "separate_error_log": False,
    },
}

# Environment variables (optionally loaded from ~/.config/reflow/.env).
ENV_MAX_WIDTH = "REFLOW_MAX_WIDTH"
ENV_FORMATTER = "REFLOW_BLACK"


# --- Helper Functions ---

def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads and merges configurations, ensuring the tool can always run.

    Layers, lowest priority first: embedded defaults, the user config in
    `~/.config/reflow/config.toml`, the explicit `config_path`, and the
    environment variables `REFLOW_MAX_WIDTH` and `REFLOW_BLACK`.

    A broken user config is logged and ignored; a broken explicit config is
    a `ConfigError`, because the user asked for it by name.
    """
    final_config = copy.deepcopy(DEFAULT_CONFIG)
    logger.debug("Loaded embedded default configuration.")

    user_config_path = USER_CONFIG_DIR / "config.toml"
    if user_config_path.is_file():
        try:
            user_config = toml.load(user_config_path)
            final_config = deep_merge(final_config, user_config)
            logger.info(f"Successfully loaded and merged user config from {user_config_path}")
        except Exception as e:
            logger.error(f"Could not parse user config '{user_config_path}': {e}. Using defaults.")

    if config_path:
        try:
            explicit_config = toml.load(config_path)
        except (OSError, toml.TomlDecodeError) as e:
            raise ConfigError(f"Could not load config '{config_path}': {e}") from e
        final_config = deep_merge(final_config, explicit_config)
        logger.info(f"Loaded config from {config_path}")

    final_config = apply_env_overrides(final_config)
    return validate_config(final_config)


def apply_env_overrides(config: Dict[str, Any], environ: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
    """
    Applies `REFLOW_*` environment variables on top of `config`.
    """
    env = os.environ if environ is None else environ
    result = copy.deepcopy(config)

    max_width = env.get(ENV_MAX_WIDTH, "").strip()
    if max_width:
        result.setdefault("reflow", {})["max_width"] = max_width
        logger.debug(f"Max width overridden from environment: {max_width}")

    formatter = env.get(ENV_FORMATTER, "").strip()
    if formatter:
        result.setdefault("formatter", {})["command"] = shlex.split(formatter)
        logger.debug(f"Formatter command overridden from environment: {formatter}")

    return result


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalizes and checks the values the tool depends on.

    Raises:
        ConfigError: If a value has the wrong type or is out of range.
    """
    section = config.setdefault("reflow", {})
    try:
        max_width = int(section.get("max_width", 79))
    except (TypeError, ValueError) as e:
        raise ConfigError(f"reflow.max_width must be an integer: {e}") from e
    if max_width < 1:
        raise ConfigError(f"reflow.max_width must be positive, got {max_width}")
    section["max_width"] = max_width

    extensions = section.get("extensions", [])
    if isinstance(extensions, str):
        extensions = [extensions]
    # Accept both "py" and ".py".
    section["extensions"] = [str(ext).lstrip(".").lower() for ext in extensions if str(ext).strip(".")]
    section["exclude_dirs"] = [str(name) for name in section.get("exclude_dirs", [])]

    formatter = config.setdefault("formatter", {})
    command = formatter.get("command", ["black"])
    if isinstance(command, str):
        command = shlex.split(command)
    if not command:
        raise ConfigError("formatter.command must not be empty")
    formatter["command"] = [str(part) for part in command]
    try:
        timeout = float(formatter.get("timeout") or 0)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"formatter.timeout must be a number: {e}") from e
    formatter["timeout"] = timeout if timeout > 0 else None

    return config


def safe_run(cmd: List[str], **kwargs: Any) -> subprocess.CompletedProcess:
    """
    Executes a command safely, capturing output and handling common exceptions.
    """
    try:
        return subprocess.run(
            cmd, capture_output=True, text=True, check=False,
            encoding="utf-8", errors="replace", **kwargs,
        )
    except FileNotFoundError as e:
        logger.error(f"Command not found: {cmd[0]!r}")
        return subprocess.CompletedProcess(cmd, 127, stdout="", stderr=str(e))
    except subprocess.TimeoutExpired as e:
        logger.warning(f"Command timed out: {' '.join(cmd)}")
        return subprocess.CompletedProcess(cmd, -9, stdout="", stderr=f"Command timed out after {e.timeout}s")
    except Exception as e:
        logger.exception(f"An unexpected error occurred while running command: {' '.join(cmd)}")
        return subprocess.CompletedProcess(cmd, -1, stdout="", stderr=str(e))


def deep_merge(base: Dict, override: Dict) -> Dict:
    """
    Recursively merges the `override` dictionary into the `base` dictionary.
    """
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
