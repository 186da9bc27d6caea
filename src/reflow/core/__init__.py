# src/reflow/core/__init__.py
"""Public facade for reflow.core: re-export main classes from CamelCase modules.

Keeps one-class-per-file module names (Engine.py, CommentMerger.py, ...),
but provides flat imports for convenience and stability.
"""

# Re-export classes/symbols from CamelCase modules
from .Block import Block, build_boxed_block  # noqa: F401
from .BlockReflower import BlockReflower  # noqa: F401
from .CommentMerger import CommentMerger  # noqa: F401
from .Engine import Engine, default_rules  # noqa: F401
from .InlineSplitter import InlineSplitter  # noqa: F401
from .PrintExtractor import PrintExtractor  # noqa: F401
from .Reflower import Reflower  # noqa: F401
from .Report import Change, FileReport, RunSummary  # noqa: F401
from .Rule import DEFAULT_MAX_WIDTH, Rule  # noqa: F401
from .Wrapper import wrap  # noqa: F401


__all__ = [
    "Block",
    "BlockReflower",
    "Change",
    "CommentMerger",
    "DEFAULT_MAX_WIDTH",
    "Engine",
    "FileReport",
    "InlineSplitter",
    "PrintExtractor",
    "Reflower",
    "Rule",
    "RunSummary",
    "build_boxed_block",
    "default_rules",
    "wrap",
]
