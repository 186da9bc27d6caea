# tests/test_core/test_reflower.py
"""Reflower Tests
========================

Integration tests for `Reflower`, the file and directory driver of the
engine. Files are created with pytest's `tmp_path`; the formatter is the
stub from `tests.stubs`.
"""

import copy
from pathlib import Path

from reflow.core.Engine import Engine
from reflow.core.Reflower import Reflower
from reflow.utils.utils import DEFAULT_CONFIG, validate_config
from tests.stubs import StubFormatter


LONG_COMMENT = "# " + "a fairly long comment that wraps " * 3
SHORT_SOURCE = ["import os", "", "x = 1  # fine"]


def make_reflower(dry_run: bool = False) -> Reflower:
    engine = Engine.with_defaults(StubFormatter(), 79)
    return Reflower(engine, extensions=["py"], exclude_dirs=["skipped"], dry_run=dry_run)


def test_changed_file_is_rewritten(write_source) -> None:
    path = write_source("module.py", [LONG_COMMENT, "x = 1"])

    report = make_reflower().process_file(str(path))

    assert report.modifications == 1
    assert report.written
    lines = path.read_text(encoding="utf-8").split("\n")
    assert lines[0] == '"""'
    assert lines[-2] == "x = 1"
    assert lines[-1] == ""
    assert all(len(line) <= 79 for line in lines)


def test_unchanged_file_is_not_written(write_source) -> None:
    path = write_source("module.py", SHORT_SOURCE)
    before = path.stat().st_mtime_ns

    report = make_reflower().process_file(str(path))

    assert report.modifications == 0
    assert not report.written
    assert path.stat().st_mtime_ns == before


def test_dry_run_leaves_the_file_alone(write_source) -> None:
    path = write_source("module.py", [LONG_COMMENT])
    original = path.read_bytes()

    report = make_reflower(dry_run=True).process_file(str(path))

    assert report.modifications == 1
    assert not report.written
    assert path.read_bytes() == original


def test_crlf_newlines_are_preserved(write_source) -> None:
    path = write_source("windows.py", [LONG_COMMENT, "x = 1"], newline="\r\n")

    make_reflower().process_file(str(path))

    data = path.read_bytes()
    assert data.endswith(b"x = 1\r\n")
    assert data.count(b"\n") == data.count(b"\r\n")


def test_missing_file_is_reported_not_raised(tmp_path: Path) -> None:
    report = make_reflower().process_file(str(tmp_path / "absent.py"))
    assert report.failed
    assert "absent.py" in report.error
    assert report.summary().startswith("Failed ")


def test_directories_are_walked_and_failures_isolated(tmp_path: Path, write_source) -> None:
    write_source("pkg/a.py", [LONG_COMMENT])
    write_source("pkg/b.py", SHORT_SOURCE)
    write_source("pkg/notes.txt", [LONG_COMMENT])
    write_source("pkg/skipped/c.py", [LONG_COMMENT])

    summary = make_reflower().process_paths(
        [str(tmp_path / "pkg"), str(tmp_path / "missing.py")]
    )

    processed = [Path(report.path).name for report in summary.reports]
    assert processed == ["a.py", "b.py", "missing.py"]
    assert summary.files_processed == 2
    assert summary.files_changed == 1
    assert summary.files_failed == 1
    assert (tmp_path / "pkg" / "notes.txt").read_text(encoding="utf-8").startswith("# ")
    assert summary.summary() == (
        "2 file(s) processed, 1 changed, 1 modification(s), "
        "0 formatter failure(s), 1 failed."
    )


def test_from_config_uses_configured_width() -> None:
    config = validate_config(copy.deepcopy(DEFAULT_CONFIG))
    config["reflow"]["max_width"] = 40

    reflower = Reflower.from_config(config, formatter=StubFormatter())

    assert [rule.max_width for rule in reflower.engine.rules] == [40, 40, 40, 40]
    assert reflower.extensions == ["py"]
    assert "__pycache__" in reflower.exclude_dirs
