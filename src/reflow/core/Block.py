# reflow/core/Block.py
"""Block.py
========================
Replacement spans produced by the rules, and the boxed block builder they
share.

A boxed block is an opening delimiter line, zero or more content lines and
a closing delimiter line, all carrying the same leading whitespace:

    \"\"\"
    content
    \"\"\"
"""

from dataclasses import dataclass, field
from typing import Iterable

from reflow.core.LineClassifier import BLOCK_DELIMITER


@dataclass(frozen=True)
class Block:
    """A half-open span ``[start, end)`` of input lines and its replacement."""

    start: int
    end: int
    rule: str
    lines: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.end <= self.start:
            raise ValueError(
                f"Block span must not be empty: [{self.start}, {self.end})"
            )


def build_boxed_block(indent: str, content: Iterable[str]) -> list[str]:
    """Assembles a boxed block at ``indent``.

    Every content line is right-trimmed; lines left empty are dropped so the
    block never carries blank or whitespace-only lines.

    Args:
        indent: Leading whitespace shared by all lines of the block.
        content: The unindented content lines.

    Returns:
        The block's lines, delimiters included.
    """
    lines = [f"{indent}{BLOCK_DELIMITER}"]
    for text in content:
        text = text.rstrip()
        if text:
            lines.append(f"{indent}{text}")
    lines.append(f"{indent}{BLOCK_DELIMITER}")
    return lines
