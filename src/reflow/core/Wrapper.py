# reflow/core/Wrapper.py
"""Wrapper.py
========================
Greedy, right-biased line wrapping used by every rule that rebuilds a
comment block.

The algorithm looks for a break position as close to the width limit as
possible:

1. Scan backward from ``max_width`` for a breakable character.
2. If there is none, scan a short window past the limit (a long leading
   token such as a URL is kept whole when a separator follows it soon).
3. Otherwise hard-break at exactly ``max_width``.

Whitespace at a break is consumed. Punctuation separators carry content,
so they stay at the end of the emitted line; a break after punctuation is
only used when the resulting line still fits.
"""

from typing import Iterable


BREAK_CHARS = " ,.:;"
"""Characters a line may be broken at, in no particular order."""

FORWARD_SCAN_LIMIT = 10
"""Exclusive ceiling (relative to ``max_width``) of the forward scan."""


def _break_position(text: str, index: int) -> int:
    """Returns where the first line ends when breaking at ``text[index]``."""
    if not text[index].isspace():
        return index + 1
    # The emitted line never ends in whitespace.
    while index > 0 and text[index - 1].isspace():
        index -= 1
    return index


def _find_break(text: str, max_width: int) -> int:
    """Finds the end of the first emitted line for an over-long ``text``."""
    # Backward scan: the break must leave a non-empty line that fits.
    for index in range(min(max_width, len(text) - 1), -1, -1):
        if text[index] in BREAK_CHARS:
            position = _break_position(text, index)
            if 0 < position <= max_width:
                return position

    # Forward scan past the limit for an oversized leading token.
    for index in range(max_width + 1, min(len(text), max_width + FORWARD_SCAN_LIMIT)):
        if text[index] in BREAK_CHARS:
            position = _break_position(text, index)
            if position > 0:
                return position

    return max_width


def _skip_separators(text: str, position: int) -> int:
    """Returns the index of the first non-whitespace character at or after ``position``."""
    while position < len(text) and text[position].isspace():
        position += 1
    return position


def wrap(text: str, max_width: int) -> list[str]:
    """Wraps a single line of text into lines of at most ``max_width`` characters.

    Lines only exceed ``max_width`` when the text starts with a token longer
    than the limit and a separator follows within the forward-scan window;
    a hard break produces a line of exactly ``max_width`` characters.

    Args:
        text: The text to wrap. It must not contain newlines.
        max_width: The maximum line width, at least 1.

    Returns:
        A non-empty list of lines. Empty input yields ``[""]``.

    Raises:
        ValueError: If ``max_width`` is smaller than 1.

    Example:
        >>> wrap("alpha beta, gamma", 11)
        ['alpha beta,', 'gamma']
    """
    if max_width < 1:
        raise ValueError(f"max_width must be at least 1, got {max_width}")

    lines: list[str] = []
    remaining = text
    while len(remaining) > max_width:
        cut = _find_break(remaining, max_width)
        lines.append(remaining[:cut])
        remaining = remaining[_skip_separators(remaining, cut):]
    # A cut at the very end leaves nothing to emit.
    if remaining or not lines:
        lines.append(remaining)
    return lines


def join_fragments(fragments: Iterable[str]) -> str:
    """Joins text fragments into one line, collapsing every whitespace run to a single space."""
    return " ".join(word for fragment in fragments for word in fragment.split())
