# reflow/core/Reflower.py
"""Reflower Module
====================
This module defines the `Reflower` class, which runs the `Engine` over
files and directory trees.

Each file is handled independently: it is read and decoded, transformed
in memory, and atomically replaced only when a rule fired. A failure to
read or write one file is recorded in that file's report and the batch
carries on with the next file.
"""

import logging
from typing import Any, Iterable, Optional

from reflow.core.Engine import Engine
from reflow.core.Report import FileReport, RunSummary
from reflow.errors import SourceFileError
from reflow.integrations.FormatterBridge import BlackFormatter, FormatService
from reflow.utils.source_files import iter_source_files, read_source_lines, write_source_lines


logger = logging.getLogger(__name__)


## ==================== Reflower Class ====================
class Reflower:
    """Processes files and directory trees with one `Engine`.

    Attributes:
        engine (Engine): The rule engine applied to every file.
        extensions (list[str]): File extensions picked up when walking directories.
        exclude_dirs (list[str]): Directory names skipped while walking.
        dry_run (bool): When True, files are transformed and reported but
            never written.
    """

    def __init__(
        self,
        engine: Engine,
        extensions: Iterable[str] = ("py",),
        exclude_dirs: Iterable[str] = (),
        dry_run: bool = False,
    ) -> None:
        self.engine = engine
        self.extensions = list(extensions)
        self.exclude_dirs = list(exclude_dirs)
        self.dry_run = dry_run

    @classmethod
    def from_config(
        cls,
        config: dict[str, Any],
        formatter: Optional[FormatService] = None,
        dry_run: bool = False,
    ) -> "Reflower":
        """Builds a reflower from a validated configuration dictionary."""
        settings = config.get("reflow", {})
        if formatter is None:
            formatter_settings = config.get("formatter", {})
            formatter = BlackFormatter(
                formatter_settings.get("command"), formatter_settings.get("timeout")
            )
        engine = Engine.with_defaults(formatter, settings.get("max_width", 79))
        return cls(
            engine,
            extensions=settings.get("extensions", ["py"]),
            exclude_dirs=settings.get("exclude_dirs", []),
            dry_run=dry_run,
        )

    def process_file(self, path: str) -> FileReport:
        """Transforms one file in place.

        Args:
            path: The file to process.

        Returns:
            The file's report. Read and write failures are recorded in
            `FileReport.error` rather than raised.
        """
        report = FileReport(path)
        try:
            source = read_source_lines(path)
            new_lines = self.engine.run(source.lines, report)
            if report.modifications and not self.dry_run:
                write_source_lines(path, new_lines, source)
                report.written = True
        except SourceFileError as e:
            report.error = str(e)
            logger.error("Failed to process %s: %s", path, e)
            return report

        logger.info(report.summary())
        return report

    def process_paths(self, paths: Iterable[str]) -> RunSummary:
        """Processes every file named by ``paths``, expanding directories."""
        summary = RunSummary()
        for path in iter_source_files(paths, self.extensions, self.exclude_dirs):
            summary.add(self.process_file(path))
        logger.info(summary.summary())
        return summary
