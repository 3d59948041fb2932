from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple, Union

ADDED_SYMBOL = "+"
REMOVED_SYMBOL = "\u2212"
BLANK_SYMBOL = " "


class ChangeType(str, Enum):
    """Classification attached to every operation, row, and segment."""

    ADDED = "added"
    REMOVED = "removed"
    UNCHANGED = "unchanged"


class Granularity(str, Enum):
    """Unit of comparison used to tokenize both documents."""

    LINE = "line"
    INLINE_WORD = "word"
    INLINE_CHAR = "char"

    @property
    def is_inline(self) -> bool:
        return self is not Granularity.LINE


class ViewMode(str, Enum):
    """Layout requested from the render collaborator."""

    UNIFIED = "unified"
    SPLIT = "split"


class GroupKind(str, Enum):
    CHANGE = "change"
    EQUAL = "equal"


@dataclass(frozen=True)
class Operation:
    """A contiguous span of text tagged as added, removed, or unchanged.

    ``count`` is the unit count reported by the diff collaborator, when it
    provides one. ``lines`` holds the canonical line breakdown and is filled in
    by :func:`monodiff.normalize.normalize_script`.
    """

    kind: ChangeType
    text: str
    count: int | None = None
    lines: Tuple[str, ...] = ()

    @property
    def is_added(self) -> bool:
        return self.kind is ChangeType.ADDED

    @property
    def is_removed(self) -> bool:
        return self.kind is ChangeType.REMOVED

    @property
    def is_change(self) -> bool:
        return self.kind is not ChangeType.UNCHANGED


@dataclass(frozen=True)
class ChangeGroup:
    """Correlated base/target lines for the split view."""

    kind: GroupKind
    left: Tuple[str, ...] = ()
    right: Tuple[str, ...] = ()

    @property
    def height(self) -> int:
        return max(len(self.left), len(self.right))


@dataclass(frozen=True)
class LineCounter:
    """Next line numbers for the base and target panes."""

    base: int = 1
    target: int = 1

    def advance(self, base: int = 0, target: int = 0) -> LineCounter:
        return LineCounter(base=self.base + base, target=self.target + target)


@dataclass(frozen=True)
class UnifiedRow:
    kind: ChangeType
    lineno: int
    symbol: str
    text: str


@dataclass(frozen=True)
class SplitRow:
    """One aligned row of the split view; ``None`` marks a padding cell."""

    left_kind: ChangeType
    left_lineno: int | None
    left_symbol: str
    left_text: str | None
    right_kind: ChangeType
    right_lineno: int | None
    right_symbol: str
    right_text: str | None


@dataclass(frozen=True)
class ContentBlock:
    """Expanded block of line rows."""

    view: ViewMode
    changed: bool
    rows: Tuple[Union[UnifiedRow, SplitRow], ...] = ()


@dataclass(frozen=True)
class CollapsedBlock:
    """Placeholder for a run of unchanged lines.

    The resume line numbers are the numbers the first hidden line would carry
    in a fully expanded render.
    """

    view: ViewMode
    count: int
    resume_line_base: int
    resume_line_target: int
    left: Tuple[str, ...] = ()
    right: Tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        return False


@dataclass(frozen=True)
class InlineSegment:
    kind: ChangeType
    text: str


@dataclass(frozen=True)
class InlineBlock:
    """Word or character level diff rendered as a single flowing block."""

    view: ViewMode
    segments: Tuple[InlineSegment, ...] = ()

    @property
    def left_segments(self) -> Tuple[InlineSegment, ...]:
        return tuple(segment for segment in self.segments if segment.kind is not ChangeType.ADDED)

    @property
    def right_segments(self) -> Tuple[InlineSegment, ...]:
        return tuple(segment for segment in self.segments if segment.kind is not ChangeType.REMOVED)

    @property
    def changed(self) -> bool:
        return any(segment.kind is not ChangeType.UNCHANGED for segment in self.segments)


PresentationBlock = Union[ContentBlock, CollapsedBlock, InlineBlock]


@dataclass(frozen=True)
class SentenceWindow:
    """Half-open ``[start, end)`` range in target-text character offsets."""

    start: int
    end: int

    def __len__(self) -> int:
        return max(0, self.end - self.start)


@dataclass(frozen=True)
class Summary:
    added: int = 0
    removed: int = 0

    @property
    def label(self) -> str:
        return f"+{self.added} {REMOVED_SYMBOL}{self.removed}"


@dataclass(frozen=True)
class PresentationModel:
    """Everything the render collaborator needs for one comparison."""

    blocks: Tuple[PresentationBlock, ...] = ()
    summary: Summary = field(default_factory=Summary)
    granularity: Granularity = Granularity.LINE
    view: ViewMode = ViewMode.UNIFIED
    only_changes: bool = False
    mode: str = "text"

    @property
    def anchors(self) -> Tuple[int, ...]:
        """Indices of changed blocks in document order."""

        return tuple(index for index, block in enumerate(self.blocks) if block.changed)

    @property
    def has_changes(self) -> bool:
        return any(block.changed for block in self.blocks)


@dataclass(frozen=True)
class DiffConfig:
    """Options forwarded to the diff collaborator."""

    treat_newline_as_token: bool = True


@dataclass(frozen=True)
class ViewOptions:
    """User-selected presentation options."""

    view: ViewMode = ViewMode.UNIFIED
    granularity: Granularity = Granularity.LINE
    only_changes: bool = False

    def __post_init__(self) -> None:
        # Plain strings coming from argv or stored preferences are accepted.
        object.__setattr__(self, "view", ViewMode(self.view))
        object.__setattr__(self, "granularity", Granularity(self.granularity))
        object.__setattr__(self, "only_changes", bool(self.only_changes))
