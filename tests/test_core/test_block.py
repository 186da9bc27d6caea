# tests/test_core/test_block.py
"""Block Tests
========================

Unit tests for the `Block` replacement span and `build_boxed_block`.
"""

import dataclasses

import pytest

from reflow.core.Block import Block, build_boxed_block


def test_block_is_a_plain_span() -> None:
    block = Block(2, 5, "merge", ["x"])
    assert [field.name for field in dataclasses.fields(block)] == ["start", "end", "rule", "lines"]
    assert (block.start, block.end, block.rule, block.lines) == (2, 5, "merge", ["x"])


@pytest.mark.parametrize("start, end", [(3, 3), (4, 2)])
def test_empty_span_is_rejected(start: int, end: int) -> None:
    with pytest.raises(ValueError):
        Block(start, end, "merge")


def test_boxed_block_trims_and_drops_blank_content() -> None:
    assert build_boxed_block("  ", ["alpha  ", "   ", "beta"]) == [
        '  """',
        "  alpha",
        "  beta",
        '  """',
    ]
