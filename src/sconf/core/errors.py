"""Exception types raised by sconf."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional


class SconfError(Exception):
    """Base class for every error raised by sconf."""


class ValidationError(SconfError, ValueError):
    """Invalid construction options, draft or overwrite payload."""


class ResourceMissing(SconfError, FileNotFoundError):
    """The configuration file is absent and creating it is not allowed."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Configuration resource does not exist: {self.path}")


class ReadFailure(SconfError):
    """
    The configuration file could not be read or parsed.

    Only raised inside the persistence layer, which recovers by falling
    back to the schema defaults.
    """

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Unable to read {self.path}: {reason}")


class PersistenceError(SconfError, OSError):
    """Writing the configuration file failed."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Unable to write {self.path}: {reason}")


class KeyNotFound(SconfError, KeyError):
    """A key was requested that the schema does not declare."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Unknown configuration key: {self.key!r}"


class CoercionError(SconfError, ValueError):
    """Text could not be converted to the type of a preset."""

    def __init__(self, key: str, raw: str, expected: Optional[type] = None):
        self.key = key
        self.raw = raw
        self.expected = expected
        name = expected.__name__ if expected is not None else "value"
        super().__init__(f"Cannot convert {raw!r} to {name} for key {key!r}")
