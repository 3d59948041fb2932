from __future__ import annotations

from monodiff import ChangeType, Granularity, Operation, Summary, count_units, diff, summarize
from monodiff.normalize import normalize_script


def test_word_count_ignores_repeated_whitespace():
    operation = Operation(ChangeType.ADDED, "a b  c")

    assert count_units(operation, Granularity.INLINE_WORD) == 3


def test_word_count_of_whitespace_is_zero():
    assert count_units(Operation(ChangeType.ADDED, "   \n\t"), Granularity.INLINE_WORD) == 0
    assert count_units(Operation(ChangeType.ADDED, ""), Granularity.INLINE_WORD) == 0


def test_char_count_is_text_length():
    assert count_units(Operation(ChangeType.REMOVED, "ab \n"), Granularity.INLINE_CHAR) == 4


def test_line_count_prefers_explicit_count():
    operation = Operation(ChangeType.ADDED, "a\nb\nc\n", count=7)

    assert count_units(operation, Granularity.LINE) == 7


def test_line_count_falls_back_to_line_segments():
    assert count_units(Operation(ChangeType.ADDED, "a\nb\n"), Granularity.LINE) == 2
    assert count_units(Operation(ChangeType.ADDED, "a\nb"), Granularity.LINE) == 2
    assert count_units(Operation(ChangeType.ADDED, "\n"), Granularity.LINE) == 1
    assert count_units(Operation(ChangeType.ADDED, ""), Granularity.LINE) == 0


def test_count_accepts_granularity_strings():
    assert count_units(Operation(ChangeType.ADDED, "abc"), "char") == 3


def test_summary_for_line_scenario():
    operations = normalize_script(diff("foo\nbar\n", "foo\nbaz\n"))

    summary = summarize(operations, Granularity.LINE)

    assert summary == Summary(added=1, removed=1)
    assert summary.label == "+1 −1"


def test_summary_uses_requested_granularity():
    operations = (
        Operation(ChangeType.UNCHANGED, "keep "),
        Operation(ChangeType.REMOVED, "old words"),
        Operation(ChangeType.ADDED, "new"),
    )

    assert summarize(operations, Granularity.INLINE_WORD) == Summary(added=1, removed=2)
    assert summarize(operations, Granularity.INLINE_CHAR) == Summary(added=3, removed=9)


def test_summary_of_empty_script_is_zero():
    assert summarize((), Granularity.LINE) == Summary(0, 0)


def test_line_summary_counts_blank_added_lines():
    operations = normalize_script(diff("a\n", "a\nx\n\ny\n"))

    assert summarize(operations, Granularity.LINE) == Summary(added=3, removed=0)
