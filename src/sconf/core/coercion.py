"""Value coercion for configuration values supplied as text."""

from __future__ import annotations

import json
from typing import Any

from .errors import CoercionError
from .schema import Schema


def _coerce_bool(value: str) -> Any:
    lowered = value.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    return value


def _coerce_int(value: str) -> Any:
    try:
        return int(value.strip())
    except ValueError:
        return value


def _coerce_float(value: str) -> Any:
    try:
        return float(value.strip())
    except ValueError:
        return value


def _coerce_list(value: str) -> Any:
    trimmed = value.strip()
    try:
        parsed = json.loads(trimmed)
        if isinstance(parsed, list):
            return parsed
    except json.JSONDecodeError:
        pass
    if trimmed:
        return [item.strip() for item in trimmed.split(",") if item.strip()]
    return []


def _coerce_dict(value: str) -> Any:
    try:
        parsed = json.loads(value.strip())
        if isinstance(parsed, dict):
            return parsed
    except json.JSONDecodeError:
        pass
    return value


def _coerce_any(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError:
        return value


_COERCERS = {
    bool: _coerce_bool,
    int: _coerce_int,
    float: _coerce_float,
    list: _coerce_list,
    tuple: _coerce_list,
    dict: _coerce_dict,
    type(None): _coerce_any,
}


def coerce_text(key: str, raw: str, schema: Schema) -> Any:
    """
    Convert ``raw`` text to a value shaped like the preset of ``key``.

    String presets take the text verbatim and ``None`` presets accept any
    JSON value (or the bare text). Keys the schema does not declare are
    parsed as JSON when possible.

    Raises:
        CoercionError: If the text does not fit the preset's type.
    """
    if not schema.has(key):
        return _coerce_any(raw)
    target = schema.field_type(key)
    if target is str:
        return raw
    coerced = _COERCERS[target](raw)
    if target is not type(None) and isinstance(coerced, str):
        raise CoercionError(key, raw, target)
    return coerced
