"""reflow: rewrap the comments of Python source files to a maximum line width."""

__version__ = "0.1.0"
