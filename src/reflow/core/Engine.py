# reflow/core/Engine.py
"""Engine Module
====================
This module defines the `Engine` class, the single-pass scan that applies
the reflow rules to the lines of one file.

At every unconsumed position the engine asks its rules in order; the
first rule that fires replaces the lines it consumed and the scan resumes
after them. If no rule fires the line is copied unchanged. The default
order is:

1. `BlockReflower`: an existing boxed block is never mistaken for a fresh
   comment run.
2. `PrintExtractor`: a disabled print is boxed via the formatter rather
   than merged as prose.
3. `InlineSplitter`
4. `CommentMerger`

The order is plain data (`Engine.rules`), so callers and tests may supply
their own list.
"""

import logging
from typing import Optional, Sequence

from reflow.core.BlockReflower import BlockReflower
from reflow.core.CommentMerger import CommentMerger
from reflow.core.InlineSplitter import InlineSplitter
from reflow.core.PrintExtractor import PrintExtractor
from reflow.core.Report import FileReport
from reflow.core.Rule import DEFAULT_MAX_WIDTH, Rule
from reflow.integrations.FormatterBridge import FormatService


logger = logging.getLogger(__name__)


def default_rules(formatter: FormatService, max_width: int = DEFAULT_MAX_WIDTH) -> list[Rule]:
    """Builds the standard rule list in precedence order."""
    return [
        BlockReflower(max_width),
        PrintExtractor(formatter, max_width),
        InlineSplitter(max_width),
        CommentMerger(max_width),
    ]


## ==================== Engine Class ====================
class Engine:
    """Applies an ordered list of rules to a sequence of lines.

    Attributes:
        rules (list[Rule]): The rules, highest precedence first.
    """

    def __init__(self, rules: Sequence[Rule]) -> None:
        if not rules:
            raise ValueError("Engine needs at least one rule.")
        self.rules = list(rules)

    @classmethod
    def with_defaults(cls, formatter: FormatService, max_width: int = DEFAULT_MAX_WIDTH) -> "Engine":
        return cls(default_rules(formatter, max_width))

    def run(self, lines: Sequence[str], report: Optional[FileReport] = None) -> list[str]:
        """Transforms ``lines`` and returns the new line sequence.

        Args:
            lines: The file's lines without terminators.
            report: Receives one `Change` per rule firing. A throwaway report
                is used when omitted.

        Returns:
            The transformed lines. The input sequence is not modified.
        """
        if report is None:
            report = FileReport("<lines>")
        source = list(lines)
        output: list[str] = []
        index = 0
        while index < len(source):
            for rule in self.rules:
                block = rule.apply(source, index, report)
                if block is None:
                    continue
                output.extend(block.lines)
                change = report.record_change(rule.name, block.start, block.end)
                logger.info("Applied %s in %s.", change.describe(), report.path)
                index = block.end
                break
            else:
                output.append(source[index])
                index += 1
        return output
