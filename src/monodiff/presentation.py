"""Assemble the presentation model handed to the render collaborator."""

from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from .collapse import build_split_blocks, build_unified_blocks, expand
from .counting import summarize
from .models import (
    InlineBlock,
    InlineSegment,
    Operation,
    PresentationBlock,
    PresentationModel,
    ViewMode,
    ViewOptions,
)
from .pairing import pair_lines
from .window import window_operations


def build_presentation(
    operations: Sequence[Operation],
    options: ViewOptions | None = None,
    *,
    mode: str = "text",
) -> PresentationModel:
    """Turn a normalized edit script into a :class:`PresentationModel`.

    Line granularity yields one block per operation (unified) or per change
    group (split), collapsing unchanged runs when ``only_changes`` is set.
    Inline granularities yield a single inline block, clipped to the sentence
    window around the changes when ``only_changes`` is set. The summary is
    counted over exactly the operations that are presented.
    """

    opts = options or ViewOptions()
    operations = tuple(operations)

    if opts.granularity.is_inline:
        if opts.only_changes:
            operations = window_operations(operations)
        blocks = inline_blocks(operations, opts.view)
    elif opts.view is ViewMode.SPLIT:
        blocks = build_split_blocks(pair_lines(operations), only_changes=opts.only_changes)
    else:
        blocks = build_unified_blocks(operations, only_changes=opts.only_changes)

    return PresentationModel(
        blocks=blocks,
        summary=summarize(operations, opts.granularity),
        granularity=opts.granularity,
        view=opts.view,
        only_changes=opts.only_changes,
        mode=mode,
    )


def inline_blocks(operations: Sequence[Operation], view: ViewMode) -> tuple[PresentationBlock, ...]:
    segments = tuple(
        InlineSegment(kind=operation.kind, text=operation.text)
        for operation in operations
        if operation.text
    )
    if not segments:
        return ()
    return (InlineBlock(view=view, segments=segments),)


def expand_at(model: PresentationModel, index: int) -> PresentationModel:
    """Return a copy of ``model`` with the block at ``index`` expanded."""

    blocks = list(model.blocks)
    blocks[index] = expand(blocks[index])
    return replace(model, blocks=tuple(blocks))


def expand_all(model: PresentationModel) -> PresentationModel:
    return replace(model, blocks=tuple(expand(block) for block in model.blocks))
