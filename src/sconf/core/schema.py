"""Immutable schema built from a configuration draft."""

from __future__ import annotations

import copy
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping

from .draft import PRESET_FIELD, Draft
from .errors import KeyNotFound, ValidationError


def infer_type(value: Any) -> type:
    """Infer the type of a preset value for coercion purposes."""
    if value is None:
        return type(None)
    if isinstance(value, bool):
        return bool
    if isinstance(value, int):
        return int
    if isinstance(value, float):
        return float
    if isinstance(value, tuple):
        # Tuples round-trip through JSON as lists
        return tuple
    if isinstance(value, list):
        return list
    if isinstance(value, dict):
        return dict
    return str


class Schema:
    """
    Static description of configuration keys.

    Each draft entry is a mapping with a ``preset`` value plus any number of
    metadata fields. The schema never changes after construction.
    """

    def __init__(self, draft: Draft):
        if not isinstance(draft, Mapping):
            raise ValidationError(
                f"Draft must be a mapping, got {type(draft).__name__}."
            )
        if not draft:
            raise ValidationError("Draft must declare at least one key.")

        entries: Dict[str, Dict[str, Any]] = {}
        for key, entry in draft.items():
            if not isinstance(entry, Mapping) or PRESET_FIELD not in entry:
                raise ValidationError(
                    f"Draft entry {key!r} must be a mapping with a '{PRESET_FIELD}' field."
                )
            entries[key] = copy.deepcopy(dict(entry))

        self._entries = entries
        self._flattened = {key: entry[PRESET_FIELD] for key, entry in entries.items()}

    @property
    def flattened(self) -> Mapping[str, Any]:
        """Read-only mapping of key to preset, in draft order."""
        return MappingProxyType(self._flattened)

    def defaults(self) -> Dict[str, Any]:
        """Return a fresh deep copy of the flattened presets."""
        return copy.deepcopy(self._flattened)

    def has(self, key: Any) -> bool:
        return key in self._entries

    def get(self, key: Any) -> Any:
        """Return the preset for ``key``."""
        if key not in self._flattened:
            raise KeyNotFound(key)
        return copy.deepcopy(self._flattened[key])

    def meta(self, key: Any) -> Dict[str, Any]:
        """Return every draft field for ``key`` except the preset."""
        if key not in self._entries:
            raise KeyNotFound(key)
        return {
            name: copy.deepcopy(value)
            for name, value in self._entries[key].items()
            if name != PRESET_FIELD
        }

    def field_type(self, key: Any) -> type:
        if key not in self._flattened:
            raise KeyNotFound(key)
        return infer_type(self._flattened[key])

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._flattened)

    def __len__(self) -> int:
        return len(self._flattened)

    def __repr__(self) -> str:
        return f"Schema(keys={list(self._flattened)!r})"
