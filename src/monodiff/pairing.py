"""Correlate removed and added line runs for the split view."""

from __future__ import annotations

from typing import List, Sequence

from .models import (
    ADDED_SYMBOL,
    BLANK_SYMBOL,
    REMOVED_SYMBOL,
    ChangeGroup,
    ChangeType,
    GroupKind,
    LineCounter,
    Operation,
    SplitRow,
)
from .normalize import split_lines


def pair_lines(operations: Sequence[Operation]) -> tuple[ChangeGroup, ...]:
    """Convert an edit script into split-view groups.

    A removed operation is merged with the operation right after it when that
    one is an addition. Only the immediately next operation is considered, so
    runs such as removed, removed, added, added produce three groups.
    """

    groups: List[ChangeGroup] = []
    index = 0
    while index < len(operations):
        operation = operations[index]
        if operation.kind is ChangeType.REMOVED:
            left = operation_lines(operation)
            right: tuple[str, ...] = ()
            following = operations[index + 1] if index + 1 < len(operations) else None
            if following is not None and following.kind is ChangeType.ADDED:
                right = operation_lines(following)
                index += 2
            else:
                index += 1
            groups.append(ChangeGroup(GroupKind.CHANGE, left=left, right=right))
        elif operation.kind is ChangeType.ADDED:
            groups.append(ChangeGroup(GroupKind.CHANGE, left=(), right=operation_lines(operation)))
            index += 1
        else:
            lines = operation_lines(operation)
            groups.append(ChangeGroup(GroupKind.EQUAL, left=lines, right=lines))
            index += 1
    return tuple(groups)


def align_rows(group: ChangeGroup, counter: LineCounter) -> tuple[tuple[SplitRow, ...], LineCounter]:
    """Lay out ``group`` as aligned rows numbered from ``counter``.

    Returns the rows together with the counter for the following group. The
    shorter side is padded with blank cells that carry no line number.
    """

    rows = tuple(_build_row(group, counter, offset) for offset in range(group.height))
    return rows, counter.advance(base=len(group.left), target=len(group.right))


def operation_lines(operation: Operation) -> tuple[str, ...]:
    return operation.lines or split_lines(operation.text)


def _build_row(group: ChangeGroup, counter: LineCounter, offset: int) -> SplitRow:
    has_left = offset < len(group.left)
    has_right = offset < len(group.right)

    if group.kind is GroupKind.EQUAL:
        left_kind = right_kind = ChangeType.UNCHANGED
        left_symbol = right_symbol = BLANK_SYMBOL
    else:
        left_kind = ChangeType.REMOVED if has_left else ChangeType.UNCHANGED
        right_kind = ChangeType.ADDED if has_right else ChangeType.UNCHANGED
        left_symbol = REMOVED_SYMBOL if has_left else BLANK_SYMBOL
        right_symbol = ADDED_SYMBOL if has_right else BLANK_SYMBOL

    return SplitRow(
        left_kind=left_kind,
        left_lineno=counter.base + offset if has_left else None,
        left_symbol=left_symbol,
        left_text=group.left[offset] if has_left else None,
        right_kind=right_kind,
        right_lineno=counter.target + offset if has_right else None,
        right_symbol=right_symbol,
        right_text=group.right[offset] if has_right else None,
    )
