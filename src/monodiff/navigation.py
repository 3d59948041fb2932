"""Wrap-around traversal over changed presentation blocks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from .models import PresentationBlock, PresentationModel


@dataclass(frozen=True)
class NavigationIndex:
    """Ordered anchors (block indices) of one presentation model."""

    anchors: Tuple[int, ...] = ()

    @classmethod
    def from_blocks(cls, blocks: Iterable[PresentationBlock]) -> NavigationIndex:
        return cls(tuple(index for index, block in enumerate(blocks) if block.changed))

    @classmethod
    def from_model(cls, model: PresentationModel) -> NavigationIndex:
        return cls.from_blocks(model.blocks)

    def __len__(self) -> int:
        return len(self.anchors)

    def next(self, current: int) -> int:
        if not self.anchors:
            return current
        return (current + 1) % len(self.anchors)

    def prev(self, current: int) -> int:
        if not self.anchors:
            return current
        return (current - 1) % len(self.anchors)

    def block_index(self, current: int) -> int | None:
        """Block index targeted by the cursor, or ``None`` without anchors."""

        if not self.anchors:
            return None
        return self.anchors[current % len(self.anchors)]

    def label(self, current: int) -> str:
        if not self.anchors:
            return "0 / 0"
        return f"{current % len(self.anchors) + 1} / {len(self.anchors)}"
