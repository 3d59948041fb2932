"""Input coercion and edit-script normalization."""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Iterable, Mapping

from .models import ChangeType, Operation

NEWLINE_MARKER = "\\n"


def coerce_text(value: Any) -> str:
    """Coerce an arbitrary input value into comparable text.

    Strings pass through and bytes are decoded as UTF-8. Every other value,
    including ``None``, is treated as an empty document. Line endings are
    standardized to LF and a leading byte-order mark is dropped.
    """

    if isinstance(value, str):
        text = value
    elif isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode("utf-8", errors="replace")
    else:
        return ""
    return _strip_bom(_normalize_line_endings(text))


def split_lines(text: str) -> tuple[str, ...]:
    """Break operation text into the lines it contributes.

    A lone newline is a single visible unit rendered as an escaped marker. A
    trailing newline terminates the last line instead of opening a new one.
    Empty text still yields one empty line so the operation is never lost.
    """

    if text == "\n":
        return (NEWLINE_MARKER,)
    if not text:
        return ("",)
    pieces = text.split("\n")
    if text.endswith("\n"):
        pieces.pop()
    return tuple(pieces)


def normalize_operation(raw: Operation | Mapping[str, Any]) -> Operation:
    operation = _coerce_operation(raw)
    return replace(operation, lines=split_lines(operation.text))


def normalize_script(raw_operations: Iterable[Operation | Mapping[str, Any]] | None) -> tuple[Operation, ...]:
    """Canonicalize raw diff operations.

    Accepts :class:`Operation` instances or jsdiff-style mappings with
    ``value``/``added``/``removed``/``count`` keys.
    """

    if not raw_operations:
        return ()
    return tuple(normalize_operation(raw) for raw in raw_operations)


def _coerce_operation(raw: Operation | Mapping[str, Any]) -> Operation:
    if isinstance(raw, Operation):
        return replace(raw, text=coerce_text(raw.text))
    if isinstance(raw, Mapping):
        if raw.get("added"):
            kind = ChangeType.ADDED
        elif raw.get("removed"):
            kind = ChangeType.REMOVED
        else:
            kind = ChangeType.UNCHANGED
        count = raw.get("count")
        return Operation(
            kind=kind,
            text=coerce_text(raw.get("value")),
            count=count if isinstance(count, int) and not isinstance(count, bool) else None,
        )
    raise TypeError(f"Unsupported operation type: {type(raw)!r}")


def _normalize_line_endings(text: str) -> str:
    """Standardize carriage returns to single LF characters."""
    return text.replace("\r\n", "\n").replace("\r", "\n")


def _strip_bom(text: str) -> str:
    """Remove a UTF-8 BOM prefix if present."""
    return text.lstrip("\ufeff")
