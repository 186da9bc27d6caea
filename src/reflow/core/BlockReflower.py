# reflow/core/BlockReflower.py
"""BlockReflower Module
====================
Rule D: an existing boxed block (a line starting with the triple-quote
delimiter, its content, and the line holding the closing delimiter) is
flattened and re-wrapped to the width left after the opener's
indentation.

Edge cases:
- Opening and closing delimiters on the same line form a one-line block;
  it is only rebuilt when the line is longer than the width limit.
- Text following the closing delimiter (``.strip()``, ``+ suffix``, a
  comment) stays on the rebuilt closing delimiter line, so the
  surrounding expression still parses.
- A block never closed before the end of the file absorbs the rest of the
  file. It is rebuilt with a closing delimiter and reported as malformed.
"""

import logging
from typing import Optional

from reflow.core.Block import Block, build_boxed_block
from reflow.core.LineClassifier import BLOCK_DELIMITER, LineKind, classify, leading_whitespace
from reflow.core.Report import FileReport
from reflow.core.Rule import Rule
from reflow.core.Wrapper import join_fragments, wrap


logger = logging.getLogger(__name__)


## ================= BlockReflower Class ====================
class BlockReflower(Rule):
    """Re-wraps the content of an existing boxed block."""

    name = "reflow"

    def collect(self, lines: list[str], index: int) -> tuple[int, list[str], str, bool]:
        """Collects the content of the block opened at ``lines[index]``.

        Args:
            lines: The file's lines.
            index: Index of the opener line.

        Returns:
            A tuple ``(end, fragments, tail, closed)``: the exclusive end of
            the span, the raw content fragments, any text following the
            closing delimiter, and whether a closing delimiter was found.
        """
        after_open = lines[index].lstrip()[len(BLOCK_DELIMITER):]
        if BLOCK_DELIMITER in after_open:
            content, _, tail = after_open.partition(BLOCK_DELIMITER)
            return index + 1, [content], tail, True

        fragments = [after_open]
        for position in range(index + 1, len(lines)):
            line = lines[position]
            if BLOCK_DELIMITER in line:
                content, _, tail = line.partition(BLOCK_DELIMITER)
                fragments.append(content)
                return position + 1, fragments, tail, True
            fragments.append(line)
        return len(lines), fragments, "", False

    def apply(self, lines: list[str], index: int, report: FileReport) -> Optional[Block]:
        opener = lines[index]
        if classify(opener) is not LineKind.BLOCK_OPENER:
            return None

        end, fragments, tail, closed = self.collect(lines, index)
        if end == index + 1 and closed and len(opener) <= self.max_width:
            return None
        if not closed:
            report.malformed_blocks.append(index + 1)
            logger.warning(
                "Unclosed block in %s opened at line %d; closing it at end of file.",
                report.path, index + 1,
            )

        indent = leading_whitespace(opener)
        wrapped = wrap(join_fragments(fragments), max(self.max_width - len(indent), 1))
        wrapped[0] = wrapped[0].lstrip()
        replacement = build_boxed_block(indent, wrapped)
        if tail.strip():
            replacement[-1] = f"{indent}{BLOCK_DELIMITER}{tail.rstrip()}"
        return Block(index, end, self.name, replacement)
