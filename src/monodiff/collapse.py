"""Line-mode block construction with collapsible unchanged runs.

Every builder threads a :class:`LineCounter` explicitly and returns the
advanced counter next to its block. Collapsed runs advance the counter exactly
as an expanded run would, so the numbers stored in a placeholder never depend
on which other placeholders happen to be expanded.
"""

from __future__ import annotations

from typing import List, Sequence

from .models import (
    ADDED_SYMBOL,
    BLANK_SYMBOL,
    REMOVED_SYMBOL,
    ChangeGroup,
    ChangeType,
    CollapsedBlock,
    ContentBlock,
    GroupKind,
    InlineBlock,
    LineCounter,
    Operation,
    PresentationBlock,
    UnifiedRow,
    ViewMode,
)
from .pairing import align_rows, operation_lines

_UNIFIED_SYMBOLS = {
    ChangeType.ADDED: ADDED_SYMBOL,
    ChangeType.REMOVED: REMOVED_SYMBOL,
    ChangeType.UNCHANGED: BLANK_SYMBOL,
}


def build_unified_blocks(
    operations: Sequence[Operation],
    *,
    only_changes: bool = False,
    counter: LineCounter | None = None,
) -> tuple[PresentationBlock, ...]:
    """Build one unified-view block per operation.

    The unified view numbers rows with a single running counter shared by both
    sides, so placeholders carry the same base and target resume number.
    """

    state = counter or LineCounter()
    blocks: List[PresentationBlock] = []
    for operation in operations:
        lines = operation_lines(operation)
        if only_changes and operation.kind is ChangeType.UNCHANGED:
            block, state = collapse_lines(lines, lines, ViewMode.UNIFIED, state)
        else:
            block, state = unified_content(operation.kind, lines, state)
        blocks.append(block)
    return tuple(blocks)


def build_split_blocks(
    groups: Sequence[ChangeGroup],
    *,
    only_changes: bool = False,
    counter: LineCounter | None = None,
) -> tuple[PresentationBlock, ...]:
    state = counter or LineCounter()
    blocks: List[PresentationBlock] = []
    for group in groups:
        if only_changes and group.kind is GroupKind.EQUAL:
            block, state = collapse_lines(group.left, group.right, ViewMode.SPLIT, state)
        else:
            block, state = split_content(group, state)
        blocks.append(block)
    return tuple(blocks)


def unified_content(
    kind: ChangeType,
    lines: Sequence[str],
    counter: LineCounter,
) -> tuple[ContentBlock, LineCounter]:
    symbol = _UNIFIED_SYMBOLS[kind]
    rows = tuple(
        UnifiedRow(kind=kind, lineno=counter.base + offset, symbol=symbol, text=line)
        for offset, line in enumerate(lines)
    )
    block = ContentBlock(view=ViewMode.UNIFIED, changed=kind is not ChangeType.UNCHANGED, rows=rows)
    return block, counter.advance(base=len(lines), target=len(lines))


def split_content(group: ChangeGroup, counter: LineCounter) -> tuple[ContentBlock, LineCounter]:
    rows, advanced = align_rows(group, counter)
    block = ContentBlock(view=ViewMode.SPLIT, changed=group.kind is GroupKind.CHANGE, rows=rows)
    return block, advanced


def collapse_lines(
    left: Sequence[str],
    right: Sequence[str],
    view: ViewMode,
    counter: LineCounter,
) -> tuple[CollapsedBlock, LineCounter]:
    """Replace an unchanged run with a placeholder.

    The returned counter is identical to the one :func:`unified_content` or
    :func:`split_content` would have returned for the same lines.
    """

    block = CollapsedBlock(
        view=view,
        count=max(len(left), len(right)),
        resume_line_base=counter.base,
        resume_line_target=counter.target,
        left=tuple(left),
        right=tuple(right),
    )
    if view is ViewMode.UNIFIED:
        return block, counter.advance(base=len(left), target=len(left))
    return block, counter.advance(base=len(left), target=len(right))


def expand(block: PresentationBlock) -> PresentationBlock:
    """Return the fully expanded form of ``block``.

    Placeholders expand to the content block a full render would place at the
    same position. Any other block is returned unchanged, so expanding twice is
    harmless.
    """

    if not isinstance(block, CollapsedBlock):
        if isinstance(block, (ContentBlock, InlineBlock)):
            return block
        raise TypeError(f"Cannot expand {type(block)!r}")

    counter = LineCounter(base=block.resume_line_base, target=block.resume_line_target)
    if block.view is ViewMode.UNIFIED:
        expanded, _ = unified_content(ChangeType.UNCHANGED, block.left, counter)
    else:
        group = ChangeGroup(GroupKind.EQUAL, left=block.left, right=block.right)
        expanded, _ = split_content(group, counter)
    return expanded
