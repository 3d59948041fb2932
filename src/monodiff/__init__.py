"""monodiff package."""

from .collapse import expand
from .counting import count_units, summarize
from .diff import diff
from .models import (
    ChangeGroup,
    ChangeType,
    CollapsedBlock,
    ContentBlock,
    DiffConfig,
    Granularity,
    GroupKind,
    InlineBlock,
    InlineSegment,
    LineCounter,
    Operation,
    PresentationModel,
    SentenceWindow,
    SplitRow,
    Summary,
    UnifiedRow,
    ViewMode,
    ViewOptions,
)
from .navigation import NavigationIndex
from .normalize import coerce_text, normalize_script
from .pairing import pair_lines
from .presentation import build_presentation
from .pretty import beautify, is_json, pretty_json
from .render import render_text
from .viewer import Viewer, ViewerState, compare
from .window import window_operations

__all__ = [
    "compare",
    "diff",
    "normalize_script",
    "coerce_text",
    "count_units",
    "summarize",
    "pair_lines",
    "expand",
    "window_operations",
    "build_presentation",
    "render_text",
    "pretty_json",
    "is_json",
    "beautify",
    "Viewer",
    "ViewerState",
    "NavigationIndex",
    "PresentationModel",
    "Operation",
    "ChangeType",
    "Granularity",
    "ViewMode",
    "ViewOptions",
    "DiffConfig",
    "ChangeGroup",
    "GroupKind",
    "LineCounter",
    "UnifiedRow",
    "SplitRow",
    "ContentBlock",
    "CollapsedBlock",
    "InlineBlock",
    "InlineSegment",
    "SentenceWindow",
    "Summary",
]
