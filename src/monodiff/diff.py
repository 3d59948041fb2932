"""Edit-script generation for two documents."""

from __future__ import annotations

from difflib import SequenceMatcher
import re
from typing import List, Sequence, Tuple

from .models import ChangeType, DiffConfig, Granularity, Operation
from .normalize import split_lines

_LINE_TOKEN_RE = re.compile(r"\n|[^\n]+")
_WORD_TOKEN_RE = re.compile(r"\s+|\w+|[^\w\s]")
_LINE_RE = re.compile(r"[^\n]*\n|[^\n]+")


def diff(
    text_a: str,
    text_b: str,
    granularity: Granularity | str = Granularity.LINE,
    config: DiffConfig | None = None,
) -> tuple[Operation, ...]:
    """Compute the edit script turning ``text_a`` into ``text_b``.

    Parameters
    ----------
    text_a, text_b:
        Base and target documents.
    granularity:
        Tokenization unit. Line diffs carry an explicit ``count`` per
        operation; inline diffs leave it unset.
    config:
        Collaborator options. ``treat_newline_as_token`` makes every newline
        its own token so that line bodies and line breaks diff separately.

    Returns
    -------
    tuple[Operation, ...]
        Operations whose non-added texts concatenate to ``text_a`` and whose
        non-removed texts concatenate to ``text_b``.
    """

    granularity = Granularity(granularity)
    cfg = config or DiffConfig()

    left_lines = _LINE_RE.findall(text_a)
    right_lines = _LINE_RE.findall(text_b)
    spans: List[Tuple[ChangeType, List[str]]] = []

    # Whole lines are matched first; finer tokens are only compared inside
    # replaced line ranges.
    for tag, i1, i2, j1, j2 in _opcodes(left_lines, right_lines):
        if tag == "replace" and (granularity.is_inline or cfg.treat_newline_as_token):
            left_tokens = tokenize("".join(left_lines[i1:i2]), granularity, cfg)
            right_tokens = tokenize("".join(right_lines[j1:j2]), granularity, cfg)
            _push_opcodes(spans, left_tokens, right_tokens)
        else:
            _push_opcode(spans, tag, left_lines[i1:i2], right_lines[j1:j2])

    return tuple(
        Operation(
            kind=kind,
            text="".join(tokens),
            count=len(split_lines("".join(tokens))) if granularity is Granularity.LINE else None,
        )
        for kind, tokens in spans
    )


def tokenize(text: str, granularity: Granularity, config: DiffConfig | None = None) -> List[str]:
    if not text:
        return []
    if granularity is Granularity.INLINE_CHAR:
        return list(text)
    if granularity is Granularity.INLINE_WORD:
        return _WORD_TOKEN_RE.findall(text)
    cfg = config or DiffConfig()
    if cfg.treat_newline_as_token:
        return _LINE_TOKEN_RE.findall(text)
    return text.splitlines(keepends=True)


def _push(spans: List[Tuple[ChangeType, List[str]]], kind: ChangeType, tokens: Sequence[str]) -> None:
    if not tokens:
        return
    if spans and spans[-1][0] is kind:
        spans[-1][1].extend(tokens)
    else:
        spans.append((kind, list(tokens)))


def _opcodes(left: Sequence[str], right: Sequence[str]) -> List[Tuple[str, int, int, int, int]]:
    return SequenceMatcher(None, left, right, autojunk=False).get_opcodes()


def _push_opcodes(spans: List[Tuple[ChangeType, List[str]]], left: Sequence[str], right: Sequence[str]) -> None:
    for tag, i1, i2, j1, j2 in _opcodes(left, right):
        _push_opcode(spans, tag, left[i1:i2], right[j1:j2])


def _push_opcode(
    spans: List[Tuple[ChangeType, List[str]]],
    tag: str,
    left: Sequence[str],
    right: Sequence[str],
) -> None:
    if tag == "equal":
        _push(spans, ChangeType.UNCHANGED, left)
    elif tag == "delete":
        _push(spans, ChangeType.REMOVED, left)
    elif tag == "insert":
        _push(spans, ChangeType.ADDED, right)
    elif tag == "replace":
        _push(spans, ChangeType.REMOVED, left)
        _push(spans, ChangeType.ADDED, right)
    else:  # pragma: no cover
        raise ValueError(f"Unexpected opcode: {tag}")
