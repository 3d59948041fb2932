"""Unit counting and change summaries."""

from __future__ import annotations

from typing import Iterable

from .models import ChangeType, Granularity, Operation, Summary
from .normalize import split_lines


def count_units(operation: Operation, granularity: Granularity | str) -> int:
    """Return how many changed units ``operation`` contributes.

    Lines use the collaborator's explicit count when present, characters use
    the text length, and words count whitespace-delimited tokens.
    """

    granularity = Granularity(granularity)
    text = operation.text

    if granularity is Granularity.LINE:
        if operation.count is not None:
            return operation.count
        if not text:
            return 0
        return len(operation.lines or split_lines(text))
    if granularity is Granularity.INLINE_CHAR:
        return len(text)
    return len(text.split())


def summarize(operations: Iterable[Operation], granularity: Granularity | str) -> Summary:
    added = 0
    removed = 0
    for operation in operations:
        if operation.kind is ChangeType.ADDED:
            added += count_units(operation, granularity)
        elif operation.kind is ChangeType.REMOVED:
            removed += count_units(operation, granularity)
    return Summary(added=added, removed=removed)
