# tests/integrations/test_formatter_bridge.py
"""Unit tests for the `BlackFormatter` integration.
===================================================

This module tests how `BlackFormatter` drives the ``black`` executable:

- The command line it builds (line length, quiet mode, stdin input).
- Clean-up of the formatted output.
- Mapping of every failure mode onto `FormatError`.

System calls are mocked (`safe_run`, `shutil.which`), so black does not
need to be installed.

Tools & libraries:
- `pytest` for assertions on raised exceptions.
- `unittest.mock` for patching functions and simulating external behavior.
- `subprocess.CompletedProcess` for mocking process execution results.
"""

import subprocess
from unittest import mock

import pytest

from reflow.errors import FormatError
from reflow.integrations.FormatterBridge import BlackFormatter


def _completed(returncode: int, stdout: str = "", stderr: str = "") -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(["black"], returncode, stdout=stdout, stderr=stderr)


@mock.patch("reflow.integrations.FormatterBridge.safe_run")
def test_format_pipes_code_through_black(mock_run) -> None:
    mock_run.return_value = _completed(0, stdout='print(\n    "a", "b"\n)\n')

    result = BlackFormatter(timeout=3.0).format('print("a", "b")', 20)

    assert result == 'print(\n    "a", "b"\n)'
    args, kwargs = mock_run.call_args
    assert args[0] == ["black", "--quiet", "--line-length", "20", "-"]
    assert kwargs["input"] == 'print("a", "b")\n'
    assert kwargs["timeout"] == 3.0


@mock.patch("reflow.integrations.FormatterBridge.safe_run")
def test_custom_command_prefix(mock_run) -> None:
    mock_run.return_value = _completed(0, stdout="print(x)\n")

    BlackFormatter(["python", "-m", "black"]).format("print(x)", 79)

    assert mock_run.call_args[0][0][:3] == ["python", "-m", "black"]


@mock.patch("reflow.integrations.FormatterBridge.safe_run")
def test_nonzero_exit_raises_with_last_stderr_line(mock_run) -> None:
    mock_run.return_value = _completed(
        123, stderr="error: cannot format -: Cannot parse: 1:6\nOh no! 1 file failed\n"
    )

    with pytest.raises(FormatError, match="Oh no! 1 file failed"):
        BlackFormatter().format("print(", 79)


@mock.patch("reflow.integrations.FormatterBridge.safe_run")
def test_missing_executable_raises(mock_run) -> None:
    mock_run.return_value = _completed(127)

    with pytest.raises(FormatError, match="exit status 127"):
        BlackFormatter().format("print(x)", 79)


@mock.patch("reflow.integrations.FormatterBridge.safe_run")
def test_empty_output_raises(mock_run) -> None:
    mock_run.return_value = _completed(0, stdout="\n")

    with pytest.raises(FormatError, match="no output"):
        BlackFormatter().format("print(x)", 79)


def test_is_available_checks_path() -> None:
    with mock.patch("shutil.which", return_value=None):
        assert not BlackFormatter(["no-such-black"]).is_available()
    with mock.patch("shutil.which", return_value="/usr/bin/black"):
        assert BlackFormatter().is_available()
