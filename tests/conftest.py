"""Pytest configuration with shared fixtures for the reflow tests.

Tooling: pytest, unittest.mock
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Generator

import pytest

from reflow.core.Engine import Engine
from reflow.core.Report import FileReport
from tests.stubs import FailingFormatter, StubFormatter


@pytest.fixture(autouse=True)
def reset_root_logger() -> Generator[None, None, None]:
    """Restore the root logger after tests that call `setup_logging`.

    Yields:
        None: The root handlers and level are put back on teardown.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def stub_formatter() -> StubFormatter:
    """Provide a deterministic formatter double.

    Returns:
        StubFormatter: Records every call in `calls`.
    """
    return StubFormatter()


@pytest.fixture
def failing_formatter() -> FailingFormatter:
    """Provide a formatter double that always raises `FormatError`."""
    return FailingFormatter()


@pytest.fixture
def engine(stub_formatter: StubFormatter) -> Engine:
    """Provide an engine with the default rules at width 79."""
    return Engine.with_defaults(stub_formatter, 79)


@pytest.fixture
def report() -> FileReport:
    """Provide an empty report for a fictitious file."""
    return FileReport("example.py")


@pytest.fixture
def write_source(tmp_path: Path) -> Callable[..., Path]:
    """Provide a helper writing lines to a file below `tmp_path`.

    Returns:
        Callable: ``write_source(name, lines, newline="\\n")`` returning the path.
    """

    def _write(name: str, lines: list[str], newline: str = "\n") -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes((newline.join(lines) + newline).encode("utf-8"))
        return path

    return _write
