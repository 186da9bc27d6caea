# reflow/integrations/FormatterBridge.py
"""FormatterBridge.py
========================
Module for running the external code formatter used by the print
extraction rule.

The rules only see the `FormatService` interface: a synchronous call that
turns one statement into formatted source text or raises `FormatError`.
`BlackFormatter` implements it by piping the statement through the
``black`` command line tool (``black --quiet --line-length N -``) with the
shared `safe_run` subprocess wrapper. Any failure (tool missing, non-zero
exit, timeout, empty output) is reported uniformly as `FormatError`.
"""

import logging
import shutil
from typing import Optional, Protocol, Sequence

from reflow.errors import FormatError
from reflow.utils.utils import safe_run


logger = logging.getLogger(__name__)


class FormatService(Protocol):
    """Anything able to reformat a statement to a width limit."""

    def format(self, code: str, max_width: int) -> str:
        """Returns ``code`` reformatted, or raises `FormatError`."""
        ...


## ================== BlackFormatter Class ====================
class BlackFormatter:
    """Formats statements with the ``black`` executable.

    Attributes:
        command: The command prefix used to start black, e.g. ``["black"]``.
        timeout: Optional limit in seconds for one invocation. None waits
            indefinitely.
    """

    def __init__(
        self, command: Optional[Sequence[str]] = None, timeout: Optional[float] = None
    ) -> None:
        self.command: list[str] = list(command) if command else ["black"]
        self.timeout = timeout

    def is_available(self) -> bool:
        """True if the formatter executable can be found in PATH."""
        return shutil.which(self.command[0]) is not None

    def format(self, code: str, max_width: int) -> str:
        """Runs black on ``code`` with a line length of ``max_width``.

        Args:
            code: The source of a single statement.
            max_width: The line length black should target.

        Returns:
            The formatted source, without the trailing newline.

        Raises:
            FormatError: If black cannot be run or rejects the input.
        """
        cmd = [*self.command, "--quiet", "--line-length", str(max_width), "-"]
        result = safe_run(cmd, input=f"{code}\n", timeout=self.timeout)
        if result.returncode != 0:
            detail = (result.stderr or "").strip().splitlines()
            message = detail[-1] if detail else f"exit status {result.returncode}"
            logger.debug("black failed on %r: %s", code, message)
            raise FormatError(f"black failed: {message}")

        formatted = (result.stdout or "").rstrip("\r\n")
        if not formatted.strip():
            raise FormatError("black returned no output")
        return formatted
