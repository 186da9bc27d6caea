# reflow/core/LineClassifier.py
"""LineClassifier.py
========================
Pure lexical predicates that categorize a single source line.

The classifier deliberately stops at lexical heuristics: a leading ``#``,
leading whitespace and the presence of a delimiter token. Markers embedded
in string literals are not recognised as such.

Only the double-quote triple delimiter opens a boxed block; the
single-quote style is left alone.
"""

import enum


COMMENT_MARKER = "#"
BLOCK_DELIMITER = '"""'
PRINT_CALL = "print("
DEF_KEYWORD = "def "


class LineKind(enum.Enum):
    """Classification of a single line, recomputed on demand."""

    UNCHANGED = "unchanged"
    FULL_COMMENT = "full_comment"
    INLINE_COMMENT = "inline_comment"
    BLOCK_OPENER = "block_opener"


def indent_of(line: str) -> int:
    """Returns the number of leading whitespace characters in ``line``."""
    return len(line) - len(line.lstrip())


def leading_whitespace(line: str) -> str:
    """Returns the leading whitespace prefix of ``line`` as written."""
    return line[: indent_of(line)]


def is_full_comment(line: str) -> bool:
    """True if the first non-whitespace character is the comment marker."""
    return line.lstrip().startswith(COMMENT_MARKER)


def comment_body(line: str) -> str:
    """Returns the text of a full comment after the marker and its whitespace."""
    stripped = line.lstrip()
    if stripped.startswith(COMMENT_MARKER):
        stripped = stripped[len(COMMENT_MARKER):]
    return stripped.lstrip()


def is_commented_print(line: str) -> bool:
    """True if ``line`` is a full comment holding a disabled ``print(`` call."""
    return is_full_comment(line) and comment_body(line).startswith(PRINT_CALL)


def is_block_opener(line: str) -> bool:
    """True if the line starts, after indentation, with the block delimiter."""
    return line.lstrip().startswith(BLOCK_DELIMITER)


def has_inline_comment(line: str) -> bool:
    """True if the comment marker is present but is not the first non-blank character."""
    return COMMENT_MARKER in line and not is_full_comment(line)


def classify(line: str) -> LineKind:
    """Classifies ``line``; block openers take precedence over comments."""
    if is_block_opener(line):
        return LineKind.BLOCK_OPENER
    if is_full_comment(line):
        return LineKind.FULL_COMMENT
    if has_inline_comment(line):
        return LineKind.INLINE_COMMENT
    return LineKind.UNCHANGED
