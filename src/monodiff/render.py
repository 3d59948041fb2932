"""Plain-text rendering of presentation models."""

from __future__ import annotations

from typing import Iterable, List

from .collapse import expand
from .models import (
    ChangeType,
    CollapsedBlock,
    ContentBlock,
    InlineBlock,
    InlineSegment,
    PresentationBlock,
    PresentationModel,
    SplitRow,
    UnifiedRow,
    ViewMode,
)

_GUTTER_WIDTH = 4


def render_text(model: PresentationModel, *, expand_all: bool = False) -> str:
    """Render a :class:`PresentationModel` as terminal text.

    Parameters
    ----------
    model:
        Output of :func:`monodiff.compare` or
        :func:`monodiff.presentation.build_presentation`.
    expand_all:
        Render collapsed placeholders as the lines they stand for.

    Returns
    -------
    str
        Numbered rows with ``+``/``−`` markers, inline `{+ +}` / `[- -]`
        markers for word and character diffs, and a closing summary line.
    """

    rendered: List[str] = []
    for block in model.blocks:
        if expand_all:
            block = expand(block)
        rendered.extend(_render_block(block))
    rendered.append(f"{model.summary.label}\n")
    return "".join(rendered)


def collapsed_label(count: int) -> str:
    if count <= 0:
        return ""
    plural = "s" if count != 1 else ""
    return f"··· {count} unchanged line{plural} ···"


def _render_block(block: PresentationBlock) -> Iterable[str]:
    if isinstance(block, CollapsedBlock):
        return [f"{'':>{_GUTTER_WIDTH}}   {collapsed_label(block.count)}".rstrip() + "\n"]
    if isinstance(block, InlineBlock):
        return _render_inline_block(block)
    if isinstance(block, ContentBlock):
        width = max((len(_left_cell(row)) for row in block.rows if isinstance(row, SplitRow)), default=0)
        return [_render_row(row, width) for row in block.rows]
    raise ValueError(f"Unsupported block type: {type(block)!r}")


def _render_row(row: UnifiedRow | SplitRow, width: int = 0) -> str:
    if isinstance(row, UnifiedRow):
        return f"{row.lineno:>{_GUTTER_WIDTH}} {row.symbol} {row.text}".rstrip() + "\n"
    left = _left_cell(row).ljust(width)
    right = _cell(row.right_lineno, row.right_symbol, row.right_text)
    return f"{left} | {right}".rstrip() + "\n"


def _left_cell(row: SplitRow) -> str:
    return _cell(row.left_lineno, row.left_symbol, row.left_text)


def _cell(lineno: int | None, symbol: str, text: str | None) -> str:
    number = "" if lineno is None else str(lineno)
    return f"{number:>{_GUTTER_WIDTH}} {symbol} {text or ''}"


def _render_inline_block(block: InlineBlock) -> List[str]:
    if block.view is ViewMode.SPLIT:
        left = "".join(_render_segment(segment) for segment in block.left_segments)
        right = "".join(_render_segment(segment) for segment in block.right_segments)
        return [f"--- base\n{_terminate(left)}", f"+++ target\n{_terminate(right)}"]
    return [_terminate("".join(_render_segment(segment) for segment in block.segments))]


def _render_segment(segment: InlineSegment) -> str:
    if segment.kind is ChangeType.ADDED:
        return f"{{+{segment.text}+}}"
    if segment.kind is ChangeType.REMOVED:
        return f"[-{segment.text}-]"
    return segment.text


def _terminate(text: str) -> str:
    return text if text.endswith("\n") else text + "\n"
