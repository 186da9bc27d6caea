# reflow/core/PrintExtractor.py
"""PrintExtractor Module
====================
Rule A: a commented-out ``print(`` statement that is longer than the width
limit is uncommented, reformatted by the external formatter and boxed in
block delimiters at its original indentation:

    #     print("a very long message", value, another_value, and_more_values)

becomes

    \"\"\"
    print(
        "a very long message", value, another_value, and_more_values
    )
    \"\"\"

Formatter failures never propagate: the rule reports "no change", bumps the
file report's skipped counter, and the engine moves on to the next rule.
"""

import logging
from typing import Optional

from reflow.core.Block import Block, build_boxed_block
from reflow.core.LineClassifier import (
    COMMENT_MARKER,
    DEF_KEYWORD,
    comment_body,
    is_commented_print,
    leading_whitespace,
)
from reflow.core.Report import FileReport
from reflow.core.Rule import DEFAULT_MAX_WIDTH, Rule
from reflow.errors import FormatError
from reflow.integrations.FormatterBridge import FormatService


## ================= PrintExtractor Class ====================
class PrintExtractor(Rule):
    """Boxes an over-width disabled print statement after formatting it.

    Attributes:
        formatter: The `FormatService` invoked once per attempt.
    """

    name = "print"

    def __init__(self, formatter: FormatService, max_width: int = DEFAULT_MAX_WIDTH) -> None:
        super().__init__(max_width)
        self.formatter = formatter

    def matches(self, line: str) -> bool:
        """Checks the preconditions that do not need the formatter."""
        if len(line) <= self.max_width or not is_commented_print(line):
            return False
        leading_code = line[: line.index(COMMENT_MARKER)]
        if len(leading_code) >= self.max_width:
            return False
        # A disabled function signature cannot be boxed safely.
        return not comment_body(line).startswith(DEF_KEYWORD)

    def apply(self, lines: list[str], index: int, report: FileReport) -> Optional[Block]:
        line = lines[index]
        if not self.matches(line):
            return None

        statement = comment_body(line)
        try:
            formatted = self.formatter.format(statement, self.max_width)
        except FormatError as e:
            report.skipped_formats += 1
            logging.warning(
                "Could not format commented-out print in %s at line %d: %s",
                report.path, index + 1, e,
            )
            return None

        content = formatted.splitlines()
        if content and content[0].lstrip().startswith(COMMENT_MARKER):
            content[0] = comment_body(content[0])
        return Block(
            index,
            index + 1,
            self.name,
            build_boxed_block(leading_whitespace(line), content),
        )
