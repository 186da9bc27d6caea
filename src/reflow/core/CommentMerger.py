# reflow/core/CommentMerger.py
"""CommentMerger Module
====================
Rule C: a run of consecutive full-line comments whose first line exceeds
the width limit is flattened into one paragraph, re-wrapped to the width
left after the run's common indentation, and boxed in block delimiters.

The run ends at the first line that is not a full comment (a blank line
or code). Its reconstruction margin is the indentation of the least
indented comment in the run.
"""

from typing import Optional

from reflow.core.Block import Block, build_boxed_block
from reflow.core.LineClassifier import (
    LineKind,
    classify,
    comment_body,
    indent_of,
    is_full_comment,
    leading_whitespace,
)
from reflow.core.Report import FileReport
from reflow.core.Rule import Rule
from reflow.core.Wrapper import join_fragments, wrap


## ================= CommentMerger Class ====================
class CommentMerger(Rule):
    """Merges an over-width comment run into a single wrapped block."""

    name = "merge"

    def find_run(self, lines: list[str], start: int) -> tuple[int, str]:
        """Finds the end of the comment run beginning at ``start``.

        Args:
            lines: The file's lines.
            start: Index of the first comment of the run.

        Returns:
            A tuple ``(end, indent)``: the exclusive end index of the run and
            the leading whitespace of its least indented line.
        """
        end = start
        common = leading_whitespace(lines[start])
        while end < len(lines) and is_full_comment(lines[end]):
            if indent_of(lines[end]) < len(common):
                common = leading_whitespace(lines[end])
            end += 1
        return end, common

    def apply(self, lines: list[str], index: int, report: FileReport) -> Optional[Block]:
        line = lines[index]
        if classify(line) is not LineKind.FULL_COMMENT or len(line) <= self.max_width:
            return None

        end, indent = self.find_run(lines, index)
        text = join_fragments(comment_body(lines[i]) for i in range(index, end))
        avail = max(self.max_width - len(indent), 1)
        wrapped = wrap(text, avail)
        wrapped[0] = wrapped[0].lstrip()
        return Block(index, end, self.name, build_boxed_block(indent, wrapped))
