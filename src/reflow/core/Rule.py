# reflow/core/Rule.py
"""Rule.py
========================
Base class for the line rewriting rules evaluated by the `Engine`.

A rule inspects the line sequence at a position and either returns a
`Block` describing the lines it consumes and their replacement, or
``None`` when its preconditions do not hold. Rules never mutate the input
lines.
"""

from typing import Optional

from reflow.core.Block import Block
from reflow.core.Report import FileReport


DEFAULT_MAX_WIDTH = 79


# ==================== Rule Class ====================
class Rule:
    """Common interface of the reflow rules.

    Attributes:
        name (str): Short identifier used in change logs.
        max_width (int): The enforced maximum line length.
    """

    name = "rule"

    def __init__(self, max_width: int = DEFAULT_MAX_WIDTH) -> None:
        if max_width < 1:
            raise ValueError(f"max_width must be at least 1, got {max_width}")
        self.max_width = max_width

    def apply(
        self, lines: list[str], index: int, report: FileReport
    ) -> Optional[Block]:
        """Tries the rule at ``lines[index]``.

        Args:
            lines: The full line sequence of the file, terminators stripped.
            index: The 0-based position to examine.
            report: The report of the file being processed; rules record
                skipped opportunities and malformed input here.

        Returns:
            The replacement block, or None if the rule does not fire.

        Raises:
            NotImplementedError: This method must be implemented in subclasses.
        """
        raise NotImplementedError("Subclasses must implement this method.")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(max_width={self.max_width})"
