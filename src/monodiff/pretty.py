"""JSON detection and pretty-printing for comparison inputs."""

from __future__ import annotations

import json
import logging
from typing import Any

logger = logging.getLogger(__name__)

INDENT = 2


def pretty_json(text: str) -> str:
    """Re-indent ``text`` as JSON, or return it unchanged when it is not JSON."""

    try:
        value = _parse(text)
    except (TypeError, ValueError, RecursionError) as exc:
        logger.debug("Input is not valid JSON, leaving it untouched: %s", exc)
        return text
    return json.dumps(value, indent=INDENT, ensure_ascii=False)


def is_json(text: Any) -> bool:
    if not isinstance(text, str) or not text.strip():
        return False
    try:
        _parse(text.strip())
    except (ValueError, RecursionError):
        return False
    return True


def beautify(text: str) -> str:
    """Pretty-print JSON objects and arrays; every other input passes through."""

    if not isinstance(text, str):
        return text
    stripped = text.strip()
    if not stripped.startswith(("{", "[")):
        return text
    try:
        value = _parse(stripped)
    except (ValueError, RecursionError):
        return text
    if not isinstance(value, (dict, list)):
        return text
    return json.dumps(value, indent=INDENT, ensure_ascii=False)


def _parse(text: str) -> Any:
    return json.loads(text, parse_constant=_reject_constant)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are Python extensions, not JSON.
    raise ValueError(f"Invalid JSON constant: {name}")
