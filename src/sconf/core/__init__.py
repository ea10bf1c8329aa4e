"""
Core modules for sconf.

- draft: preset entries and draft loading
- schema: immutable key/preset/metadata view over a draft
- persistence: reading and writing the JSON file
- events: alteration records and the notification channel
- options: construction options
- store: the configuration store
"""

from .coercion import coerce_text
from .draft import load_draft, preset
from .errors import (
    CoercionError,
    KeyNotFound,
    PersistenceError,
    ReadFailure,
    ResourceMissing,
    SconfError,
    ValidationError,
)
from .events import CHANGE_EVENT, Alteration, ChangeChannel, change_event
from .options import ConfigOptions, build_options
from .persistence import ensure_resource, read_config, write_config
from .schema import Schema
from .store import ConfigStore, create_config

__all__ = [
    "Alteration",
    "CHANGE_EVENT",
    "ChangeChannel",
    "CoercionError",
    "ConfigOptions",
    "ConfigStore",
    "KeyNotFound",
    "PersistenceError",
    "ReadFailure",
    "ResourceMissing",
    "Schema",
    "SconfError",
    "ValidationError",
    "build_options",
    "change_event",
    "coerce_text",
    "create_config",
    "ensure_resource",
    "load_draft",
    "preset",
    "read_config",
    "write_config",
]
