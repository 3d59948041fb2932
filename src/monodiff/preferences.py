"""Best-effort persistence of viewer preferences.

Stores never raise. A backing file that cannot be read or written only means
preferences are not remembered across sessions.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Protocol

logger = logging.getLogger(__name__)

VIEW = "view"
TOKEN_GRANULARITY = "token-granularity"
ONLY_CHANGES = "only-changes"
THEME = "theme"
INPUT_A = "input-a"
INPUT_B = "input-b"


class PreferenceStore(Protocol):
    """Key/value store the viewer remembers its settings in."""

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class MemoryPreferences:
    """Preference store kept in process memory."""

    def __init__(self, values: Dict[str, Any] | None = None) -> None:
        self._values: Dict[str, Any] = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value


class JsonFilePreferences:
    """Preference store backed by a flat JSON object on disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def get(self, key: str, default: Any = None) -> Any:
        return self._load().get(key, default)

    def set(self, key: str, value: Any) -> None:
        values = self._load()
        values[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(values, indent=2, sort_keys=True), encoding="utf-8")
        except (OSError, TypeError, ValueError) as exc:
            logger.debug("Could not persist preference %r to %s: %s", key, self.path, exc)

    def _load(self) -> Dict[str, Any]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as exc:
            logger.debug("Ignoring unreadable preferences file %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.debug("Ignoring preferences file %s without a JSON object", self.path)
            return {}
        return data
