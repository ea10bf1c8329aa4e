"""
sconf - small typed configuration store backed by a JSON file.

A draft maps each key to a preset value plus optional metadata. A
``ConfigStore`` built from it reads the JSON file merged over the presets,
alters single keys or overwrites everything, resets to presets, and
publishes ``"change"`` / ``"change:<key>"`` events synchronously.

Example:
    >>> from sconf import create_config, preset
    >>> store = create_config({"theme": preset("dark")}, "settings.json")
    >>> store.alter("theme", "light")

Package Structure:
- core/: draft, schema, persistence, events, options and the store
- cli/: command-line interface
- utils/: logging configuration
"""

__version__ = "0.1.0"

from sconf.core import (
    CHANGE_EVENT,
    Alteration,
    CoercionError,
    ConfigOptions,
    ConfigStore,
    KeyNotFound,
    PersistenceError,
    ReadFailure,
    ResourceMissing,
    Schema,
    SconfError,
    ValidationError,
    change_event,
    create_config,
    load_draft,
    preset,
)

__all__ = [
    "Alteration",
    "CHANGE_EVENT",
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
    "change_event",
    "create_config",
    "load_draft",
    "preset",
]
