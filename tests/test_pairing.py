from __future__ import annotations

from monodiff import ChangeGroup, ChangeType, GroupKind, LineCounter, Operation, diff, pair_lines
from monodiff.normalize import normalize_script
from monodiff.pairing import align_rows


def _ops(*pairs: tuple[ChangeType, str]) -> tuple[Operation, ...]:
    return normalize_script([Operation(kind, text) for kind, text in pairs])


def test_scenario_pairs_removed_with_following_added():
    groups = pair_lines(normalize_script(diff("foo\nbar\n", "foo\nbaz\n")))

    assert groups[0] == ChangeGroup(GroupKind.EQUAL, ("foo",), ("foo",))
    assert groups[1] == ChangeGroup(GroupKind.CHANGE, ("bar",), ("baz",))
    assert [group.kind for group in groups].count(GroupKind.CHANGE) == 1
    assert all(group.kind is GroupKind.EQUAL for group in groups[2:])


def test_removed_without_added_has_empty_right():
    groups = pair_lines(_ops((ChangeType.UNCHANGED, "a\n"), (ChangeType.REMOVED, "b\n")))

    assert groups[-1] == ChangeGroup(GroupKind.CHANGE, ("b",), ())


def test_added_without_removed_has_empty_left():
    groups = pair_lines(_ops((ChangeType.ADDED, "x\ny\n"), (ChangeType.UNCHANGED, "a\n")))

    assert groups[0] == ChangeGroup(GroupKind.CHANGE, (), ("x", "y"))


def test_only_the_next_operation_is_considered_for_pairing():
    groups = pair_lines(
        _ops(
            (ChangeType.REMOVED, "a\n"),
            (ChangeType.REMOVED, "b\n"),
            (ChangeType.ADDED, "c\n"),
            (ChangeType.ADDED, "d\n"),
        )
    )

    assert groups == (
        ChangeGroup(GroupKind.CHANGE, ("a",), ()),
        ChangeGroup(GroupKind.CHANGE, ("b",), ("c",)),
        ChangeGroup(GroupKind.CHANGE, (), ("d",)),
    )


def test_pairing_conserves_lines_on_both_sides():
    left = "one\ntwo\nthree\nfour\nfive\n"
    right = "one\n2\nthree\nfour\nfour and a half\nfive\nsix\n"
    operations = normalize_script(diff(left, right))

    groups = pair_lines(operations)

    assert sum(len(group.left) for group in groups) == sum(
        len(operation.lines) for operation in operations if not operation.is_added
    )
    assert sum(len(group.right) for group in groups) == sum(
        len(operation.lines) for operation in operations if not operation.is_removed
    )


def test_pairing_empty_script():
    assert pair_lines(()) == ()


def test_align_rows_pads_shorter_side():
    group = ChangeGroup(GroupKind.CHANGE, ("a", "b", "c"), ("x",))

    rows, counter = align_rows(group, LineCounter(base=10, target=4))

    assert len(rows) == 3
    assert [row.left_lineno for row in rows] == [10, 11, 12]
    assert [row.right_lineno for row in rows] == [4, None, None]
    assert [row.left_symbol for row in rows] == ["−", "−", "−"]
    assert [row.right_symbol for row in rows] == ["+", " ", " "]
    assert rows[1].right_text is None
    assert rows[1].right_kind is ChangeType.UNCHANGED
    assert counter == LineCounter(base=13, target=5)


def test_align_rows_equal_group_has_blank_symbols():
    group = ChangeGroup(GroupKind.EQUAL, ("a",), ("a",))

    rows, counter = align_rows(group, LineCounter())

    assert rows[0].left_symbol == rows[0].right_symbol == " "
    assert rows[0].left_kind is rows[0].right_kind is ChangeType.UNCHANGED
    assert counter == LineCounter(2, 2)
