# reflow/core/InlineSplitter.py
"""InlineSplitter Module
====================
Rule B: an over-width line ending in an inline comment is split in two,
the comment moved above its code at the same indentation.

The rule runs a single pass: if either resulting line is still too long
it is left as is.
"""

from typing import Optional

from reflow.core.Block import Block
from reflow.core.LineClassifier import COMMENT_MARKER, LineKind, classify, leading_whitespace
from reflow.core.Report import FileReport
from reflow.core.Rule import Rule


## ================= InlineSplitter Class ====================
class InlineSplitter(Rule):
    """Moves a trailing comment onto its own line above the code."""

    name = "inline"

    def split(self, line: str) -> Optional[tuple[str, str]]:
        """Returns the ``(comment_line, code_line)`` pair, or None if the rule does not apply."""
        if len(line) <= self.max_width or classify(line) is not LineKind.INLINE_COMMENT:
            return None
        marker = line.index(COMMENT_MARKER)
        code = line[:marker].rstrip()
        comment = line[marker + len(COMMENT_MARKER):].strip()
        comment_line = f"{leading_whitespace(line)}{COMMENT_MARKER} {comment}".rstrip()
        return comment_line, code

    def apply(self, lines: list[str], index: int, report: FileReport) -> Optional[Block]:
        parts = self.split(lines[index])
        if parts is None:
            return None
        return Block(index, index + 1, self.name, list(parts))
