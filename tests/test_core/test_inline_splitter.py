# tests/test_core/test_inline_splitter.py
"""Inline Splitter Tests
========================

Unit tests for `InlineSplitter`, the rule that lifts a trailing comment
above its code when the line is too long.
"""

from reflow.core.Engine import Engine
from reflow.core.InlineSplitter import InlineSplitter
from reflow.core.Report import FileReport
from tests.stubs import StubFormatter


LONG_LINE = (
    "    result = compute_something(alpha, beta, gamma)"
    "  # explain why this computation matters here"
)


def test_long_line_becomes_comment_then_code() -> None:
    assert len(LONG_LINE) > 79
    block = InlineSplitter(79).apply([LONG_LINE], 0, FileReport("x.py"))

    assert block is not None
    assert (block.start, block.end) == (0, 1)
    assert block.lines == [
        "    # explain why this computation matters here",
        "    result = compute_something(alpha, beta, gamma)",
    ]


def test_trailing_comment_is_split_exactly_once() -> None:
    line = (
        "    total = compute(x, y)  # sums the two inputs after validation"
        " and rounding adjustments are fully applied here"
    )
    assert len(line) > 79

    output = Engine.with_defaults(StubFormatter(), 79).run([line])

    assert output == [
        "    # sums the two inputs after validation and rounding adjustments"
        " are fully applied here",
        "    total = compute(x, y)",
    ]


def test_short_line_is_left_alone() -> None:
    assert InlineSplitter(79).split("x = 1  # fine") is None


def test_full_comment_is_not_split() -> None:
    line = "    # " + "word " * 20
    assert InlineSplitter(79).split(line) is None


def test_line_at_exact_width_is_not_split() -> None:
    line = "x = 1  # " + "c" * 70
    assert len(line) == 79
    assert InlineSplitter(79).split(line) is None


def test_empty_comment_keeps_a_bare_marker() -> None:
    line = "value = " + "v" * 80 + "  #"
    comment, code = InlineSplitter(79).split(line)
    assert comment == "#"
    assert code == "value = " + "v" * 80


def test_only_one_pass_is_made() -> None:
    """A still-too-long half is emitted as is."""
    line = "x = 1  # " + "long " * 30
    comment, code = InlineSplitter(20).split(line)
    assert comment == "# " + ("long " * 30).strip()
    assert code == "x = 1"


def test_block_opener_is_left_to_the_block_rule() -> None:
    """A line classified as a block opener is never split as an inline comment."""
    line = '"""' + "x" * 80 + '"""  # note'
    assert InlineSplitter(79).split(line) is None
