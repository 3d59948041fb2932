"""Sentence-bounded windowing for inline "only changes" views.

Windowing happens purely in target-text coordinates. Removed operations have
no width there, so they are never sliced and are kept whole whenever they sit
inside the retained range.

Sentences are found with a terminator heuristic (``.``, ``!``, ``?`` or a
newline). Abbreviations, decimal numbers, and quoted punctuation can split a
sentence early; that is accepted.
"""

from __future__ import annotations

from dataclasses import replace
import re
from typing import List, Sequence

from .models import ChangeType, Operation, SentenceWindow
from .normalize import split_lines

_SENTENCE_RE = re.compile(r"[^.!?\n]+[.!?]?\s*")


def split_sentences(text: str) -> tuple[SentenceWindow, ...]:
    """Return the character span of every sentence in ``text``.

    Text without any sentence match is a single sentence.
    """

    spans = tuple(SentenceWindow(match.start(), match.end()) for match in _SENTENCE_RE.finditer(text))
    if not spans:
        return (SentenceWindow(0, len(text)),)
    return spans


def target_offsets(operations: Sequence[Operation]) -> tuple[SentenceWindow, ...]:
    """Map every operation to its ``[start, end)`` range in the target text."""

    offsets: List[SentenceWindow] = []
    position = 0
    for operation in operations:
        start = position
        if operation.kind is not ChangeType.REMOVED:
            position += len(operation.text)
        offsets.append(SentenceWindow(start, position))
    return tuple(offsets)


def sentence_window(
    operations: Sequence[Operation],
    target_text: str | None = None,
) -> SentenceWindow | None:
    """Compute the target range covering the changed sentences plus one
    sentence of context on each side.

    Documents of three sentences or fewer are kept whole. Returns ``None``
    when the script has no additions.
    """

    added = [index for index, operation in enumerate(operations) if operation.kind is ChangeType.ADDED]
    if not added:
        return None

    if target_text is None:
        target_text = reconstruct_target(operations)
    offsets = target_offsets(operations)
    change_start = offsets[added[0]].start
    change_end = offsets[added[-1]].end

    sentences = split_sentences(target_text)
    if len(sentences) <= 3:
        return SentenceWindow(0, len(target_text))

    first = _sentence_starting_before(sentences, change_start)
    last = _sentence_ending_after(sentences, change_end, first)

    context_first = max(0, first - 1)
    context_last = min(len(sentences) - 1, last + 1)
    return SentenceWindow(sentences[context_first].start, sentences[context_last].end)


def window_operations(
    operations: Sequence[Operation],
    target_text: str | None = None,
) -> tuple[Operation, ...]:
    """Clip ``operations`` to the sentence window around the additions.

    A script without additions (for example a pure deletion) is returned
    unmodified.
    """

    operations = tuple(operations)
    window = sentence_window(operations, target_text)
    if window is None:
        return operations

    offsets = target_offsets(operations)
    if window == SentenceWindow(0, offsets[-1].end):
        return operations
    first_keep = next((index for index, span in enumerate(offsets) if span.end > window.start), None)
    if first_keep is None:
        return ()
    last_keep = next(
        (index for index in range(len(offsets) - 1, -1, -1) if offsets[index].start < window.end),
        len(offsets) - 1,
    )

    clipped: List[Operation] = []
    for index in range(first_keep, max(first_keep, last_keep) + 1):
        operation = operations[index]
        if operation.kind is ChangeType.REMOVED:
            clipped.append(operation)
            continue
        span = offsets[index]
        keep_start = max(0, window.start - span.start)
        keep_end = min(len(operation.text), window.end - span.start)
        if keep_end <= keep_start:
            continue
        if keep_start == 0 and keep_end == len(operation.text):
            clipped.append(operation)
            continue
        text = operation.text[keep_start:keep_end]
        clipped.append(replace(operation, text=text, count=None, lines=split_lines(text)))
    return tuple(clipped)


def reconstruct_target(operations: Sequence[Operation]) -> str:
    return "".join(operation.text for operation in operations if operation.kind is not ChangeType.REMOVED)


def reconstruct_base(operations: Sequence[Operation]) -> str:
    return "".join(operation.text for operation in operations if operation.kind is not ChangeType.ADDED)


def _sentence_starting_before(sentences: Sequence[SentenceWindow], offset: int) -> int:
    # A change starting exactly on a boundary belongs to the sentence it opens.
    index = 0
    for candidate, sentence in enumerate(sentences):
        if sentence.start > offset:
            break
        index = candidate
    return index


def _sentence_ending_after(sentences: Sequence[SentenceWindow], offset: int, first: int) -> int:
    # A change ending exactly on a boundary belongs to the sentence it closes.
    for index in range(first, len(sentences)):
        if sentences[index].end >= offset:
            return index
    return len(sentences) - 1
