"""Construction options for configuration stores."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ValidationError

CONFIG_FILE_SUFFIX = ".json"


class ConfigOptions(BaseModel):
    """Options recognized by ``ConfigStore``."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Path
    use_cache: bool = False
    allow_create: bool = True
    exposed_events: bool = False

    @field_validator("path")
    @classmethod
    def _require_json_suffix(cls, value: Path) -> Path:
        if not str(value).endswith(CONFIG_FILE_SUFFIX):
            raise ValueError(f'Expected "{CONFIG_FILE_SUFFIX}" file extension.')
        return value


def build_options(
    options: Union[ConfigOptions, Mapping[str, Any], None] = None, **overrides: Any
) -> ConfigOptions:
    """
    Normalize ``options`` into a ``ConfigOptions`` instance.

    Accepts an existing instance, a mapping of option values, keyword
    overrides, or any mix of those. Invalid values raise ``ValidationError``.
    """
    if isinstance(options, ConfigOptions):
        values = options.model_dump()
    elif options is None:
        values = {}
    elif isinstance(options, Mapping):
        values = dict(options)
    else:
        raise ValidationError(
            f"Options must be a mapping or ConfigOptions, got {type(options).__name__}."
        )
    values.update(overrides)
    try:
        return ConfigOptions(**values)
    except PydanticValidationError as exc:
        details = "; ".join(
            f"{'.'.join(str(part) for part in error['loc']) or 'options'}: {error['msg']}"
            for error in exc.errors()
        )
        raise ValidationError(f"Invalid configuration options: {details}") from exc
