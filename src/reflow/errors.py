# reflow/errors.py
"""Exception hierarchy shared by the reflow package.

Rule mismatches are not exceptions: a rule that does not apply simply
returns ``None``. Only conditions that cross a collaborator boundary
(formatter, file system, configuration) are raised.
"""


class ReflowError(Exception):
    """Base class for all reflow errors."""


class FormatError(ReflowError):
    """The external formatter could not format a statement."""


class SourceFileError(ReflowError):
    """A source file could not be read, decoded or durably replaced."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class ConfigError(ReflowError):
    """The configuration is unreadable or holds an invalid value."""
