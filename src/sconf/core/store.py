"""
JSON-backed configuration store.

A ``ConfigStore`` wraps a ``Schema`` built from a draft and a JSON file on
disk. With ``use_cache`` the store keeps the live configuration in memory
and mirrors every mutation to the file; without it the file is the only
source of truth and each read rebuilds the configuration from it.

Every committed change is published on the store's ``ChangeChannel``:
``"change"`` receives the list of ``Alteration`` records and, when
``exposed_events`` is set, ``"change:<key>"`` receives each new value.
Listeners run synchronously and their exceptions propagate to the caller.

When a write fails after the cache has been updated, the cache and the
file stay out of sync. There is no rollback.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from sconf.utils.logger import log_configuration_change, log_debug

from .draft import Draft
from .errors import KeyNotFound, ValidationError
from .events import Alteration, ChangeChannel, Listener
from .options import ConfigOptions, build_options
from .persistence import ensure_resource, read_config, write_config
from .schema import Schema

MODULE = "store"


class ConfigStore:
    """Typed configuration backed by a JSON file."""

    def __init__(
        self,
        draft: Draft,
        options: Union[ConfigOptions, Mapping[str, Any], None] = None,
        **overrides: Any,
    ):
        """
        Build a store from a draft and options.

        Args:
            draft: Mapping of key to ``{"preset": value, **metadata}``
            options: ``ConfigOptions`` or a mapping of option values
            **overrides: Option values taking precedence over ``options``

        Raises:
            ValidationError: Malformed draft or options (e.g. non ``.json`` path)
            ResourceMissing: File absent and ``allow_create`` is false
        """
        self._schema = Schema(draft)
        self._options = build_options(options, **overrides)
        self._channel = ChangeChannel(exposed_events=self._options.exposed_events)
        self._cache: Optional[Dict[str, Any]] = None

        ensure_resource(self.path, self._options.allow_create)
        if self._options.use_cache:
            self._cache = self._read_file()
        log_debug(
            MODULE,
            f"Opened configuration with {len(self._schema)} keys",
            context=f"path={self.path}, use_cache={self._options.use_cache}",
        )

    @property
    def path(self) -> Path:
        return self._options.path

    @property
    def options(self) -> ConfigOptions:
        return self._options

    @property
    def schema(self) -> Schema:
        return self._schema

    def read(self, key: Optional[str] = None) -> Any:
        """
        Return the full configuration, or the value of ``key``.

        The full configuration is returned as a new dict so callers cannot
        change the cached copy by accident.
        """
        current = self._current()
        if key is None:
            return dict(current) if self._options.use_cache else current
        if key not in current:
            raise KeyNotFound(key)
        return current[key]

    def alter(self, key: str, value: Any) -> None:
        """Set one property, persist the configuration and emit the change."""
        if not self._schema.has(key):
            raise KeyNotFound(key)
        current = self._current()
        previous = current.get(key)
        # with the cache enabled this mutates the cache itself
        current[key] = value
        write_config(self.path, current, self._options.allow_create)
        log_configuration_change(key, previous, value)
        self._channel.publish([Alteration(key, value)])

    def overwrite(self, next_config: Mapping[str, Any]) -> None:
        """Replace the whole configuration and emit one change per key given."""
        if not isinstance(next_config, Mapping):
            raise ValidationError(
                f"Configuration must be a mapping, got {type(next_config).__name__}."
            )
        snapshot = dict(next_config)
        if self._options.use_cache:
            # the file holds ``snapshot`` alone; uncached reads merge presets under it
            self._cache = {**self._schema.defaults(), **snapshot}
        write_config(self.path, snapshot, self._options.allow_create)
        log_debug(MODULE, f"Overwrote configuration with {len(snapshot)} keys", context=str(self.path))
        self._channel.publish(Alteration(key, value) for key, value in snapshot.items())

    def reset(self) -> None:
        """Restore every property to its preset."""
        self.overwrite(self._schema.defaults())

    def trigger(self, *keys: str) -> None:
        """Emit the current value of each key without writing anything."""
        current = self._current()
        missing = [key for key in keys if key not in current]
        if missing:
            raise KeyNotFound(missing[0])
        self._channel.publish(Alteration(key, current[key]) for key in keys)

    def on(self, event: str, listener: Listener) -> Listener:
        """Register ``listener`` for ``"change"`` or ``"change:<key>"``."""
        return self._channel.on(event, listener)

    def once(self, event: str, listener: Listener) -> Listener:
        """Register ``listener`` for a single delivery of ``event``."""
        return self._channel.once(event, listener)

    def ignore(self, event: str) -> None:
        """Remove every listener registered for ``event``."""
        self._channel.ignore(event)

    def _current(self) -> Dict[str, Any]:
        if self._options.use_cache:
            return self._cache
        return self._read_file()

    def _read_file(self) -> Dict[str, Any]:
        return read_config(self.path, self._schema.flattened)

    def __repr__(self) -> str:
        return (
            f"ConfigStore(path={str(self.path)!r}, "
            f"use_cache={self._options.use_cache}, keys={list(self._schema)!r})"
        )


def create_config(draft: Draft, path: Union[str, Path], **options: Any) -> ConfigStore:
    """
    Create a ``ConfigStore`` for ``draft`` stored at ``path``.

    Keyword options: ``use_cache``, ``allow_create``, ``exposed_events``.
    """
    return ConfigStore(draft, path=path, **options)
