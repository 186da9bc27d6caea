#!/usr/bin/env python3
# /reflow/main.py
"""
Reflow Main Entry Point
=======================

Runs the ``reflow`` command from a source checkout without installing it:

    python main.py path/to/file_or_dir

The installed console script and ``python -m reflow`` use the same
`reflow.cli.start` function.
"""

import os
import sys

# Ensure the 'reflow' package is importable from the src/ layout.
src_root = os.path.join(os.path.dirname(os.path.abspath(__file__)), "src")
if src_root not in sys.path:
    sys.path.insert(0, src_root)

from reflow.cli import start  # noqa: E402


if __name__ == "__main__":
    start()
