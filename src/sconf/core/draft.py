"""Draft helpers: building preset entries and loading drafts from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from .errors import ValidationError

PRESET_FIELD = "preset"

DraftEntry = Dict[str, Any]
Draft = Mapping[str, Mapping[str, Any]]


def preset(value: Any, meta: Optional[Mapping[str, Any]] = None) -> DraftEntry:
    """
    Build a draft entry holding ``value`` as its preset.

    Any ``meta`` fields are copied next to the preset. A ``preset`` field in
    ``meta`` is overridden by ``value``.
    """
    entry: DraftEntry = dict(meta) if meta else {}
    entry[PRESET_FIELD] = value
    return entry


def load_draft(path: str | Path) -> Dict[str, DraftEntry]:
    """
    Load a draft from a JSON file.

    The file must hold an object mapping each key to an entry object with a
    ``preset`` field. Entry shape is checked later by ``Schema``.

    Raises:
        ValidationError: If the file is missing, not valid JSON or not an object.
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise ValidationError(f"Draft file not found: {path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise ValidationError(f"Unable to load draft {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValidationError(f"Draft {path} must contain a JSON object.")
    return payload
