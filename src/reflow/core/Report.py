# reflow/core/Report.py
"""Report.py
========================
Per-file and per-run bookkeeping: which rules fired where, which
opportunities were skipped because the formatter failed, and which boxed
blocks were found without a closing delimiter.

Line numbers stored here are 1-based, as they are shown to users.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Change:
    """One rule firing: the rule name and the inclusive 1-based line range."""

    rule: str
    first_line: int
    last_line: int

    def describe(self) -> str:
        if self.first_line == self.last_line:
            return f"{self.rule} at line {self.first_line}"
        return f"{self.rule} from line {self.first_line} to {self.last_line}"


@dataclass
class FileReport:
    """Outcome of processing one file."""

    path: str
    changes: list[Change] = field(default_factory=list)
    skipped_formats: int = 0
    malformed_blocks: list[int] = field(default_factory=list)
    written: bool = False
    error: Optional[str] = None

    @property
    def modifications(self) -> int:
        return len(self.changes)

    @property
    def failed(self) -> bool:
        return self.error is not None

    def record_change(self, rule: str, start: int, end: int) -> Change:
        """Records a firing over the 0-based half-open span ``[start, end)``."""
        change = Change(rule, start + 1, end)
        self.changes.append(change)
        return change

    def summary(self) -> str:
        if self.failed:
            return f"Failed {self.path}: {self.error}"
        text = f"Processed {self.path}: {self.modifications} modification(s) made."
        if self.skipped_formats:
            text += f" {self.skipped_formats} print statement(s) left unformatted."
        if self.malformed_blocks:
            lines = ", ".join(str(line) for line in self.malformed_blocks)
            text += f" Unclosed block(s) repaired at line(s) {lines}."
        return text


@dataclass
class RunSummary:
    """Aggregate of the file reports of one batch."""

    reports: list[FileReport] = field(default_factory=list)

    def add(self, report: FileReport) -> None:
        self.reports.append(report)

    @property
    def files_processed(self) -> int:
        return sum(1 for report in self.reports if not report.failed)

    @property
    def files_changed(self) -> int:
        return sum(1 for report in self.reports if report.modifications)

    @property
    def files_failed(self) -> int:
        return sum(1 for report in self.reports if report.failed)

    @property
    def modifications(self) -> int:
        return sum(report.modifications for report in self.reports)

    @property
    def skipped_formats(self) -> int:
        return sum(report.skipped_formats for report in self.reports)

    def summary(self) -> str:
        return (
            f"{self.files_processed} file(s) processed, "
            f"{self.files_changed} changed, {self.modifications} modification(s), "
            f"{self.skipped_formats} formatter failure(s), "
            f"{self.files_failed} failed."
        )
