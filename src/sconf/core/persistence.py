"""Config file persistence utilities."""

from __future__ import annotations

import copy
import json
import os
import stat
import tempfile
from pathlib import Path
from typing import Any, Dict, Mapping

from sconf.utils.logger import log_debug, log_file_operation, log_warning

from .errors import PersistenceError, ReadFailure, ResourceMissing

MODULE = "persistence"


def ensure_resource(path: Path, allow_create: bool = True) -> None:
    """
    Make sure ``path`` exists or can be created.

    When the file is missing its parent directory chain is created if
    ``allow_create`` is set, otherwise ``ResourceMissing`` is raised.
    The file itself is only created by the first write.
    """
    path = Path(path)
    if path.exists():
        return
    if not allow_create:
        raise ResourceMissing(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    log_debug(MODULE, f"Prepared directory {path.parent}", context=str(path))


def _load_json_object(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except FileNotFoundError as exc:
        raise ReadFailure(path, "file does not exist") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadFailure(path, str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise ReadFailure(path, f"invalid JSON ({exc})") from exc
    if not isinstance(payload, dict):
        raise ReadFailure(path, f"expected a JSON object, got {type(payload).__name__}")
    return payload


def read_config(path: Path, defaults: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Read the config file merged over a fresh copy of ``defaults``.

    File values win per key and keys only present in the file are kept.
    A missing, unreadable or corrupt file yields the defaults alone.
    """
    path = Path(path)
    merged = copy.deepcopy(dict(defaults))
    try:
        payload = _load_json_object(path)
    except ReadFailure as exc:
        if path.exists():
            log_warning(MODULE, "Config file is unreadable; using defaults", context=str(exc))
        else:
            log_debug(MODULE, "Config file missing; using defaults", context=str(path))
        return merged
    merged.update(payload)
    return merged


def _target_mode(path: Path) -> int:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def _write_atomic(path: Path, text: str) -> None:
    # NamedTemporaryFile raises FileNotFoundError when the directory is gone
    with tempfile.NamedTemporaryFile(
        "w",
        encoding="utf-8",
        delete=False,
        dir=str(path.parent),
        prefix=f".{path.name}.",
        suffix=".tmp",
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(text)
            tmp.flush()
            os.fsync(tmp.fileno())
        except BaseException:
            tmp.close()
            tmp_path.unlink(missing_ok=True)
            raise
    try:
        # mkstemp creates 0600 files; keep the target's permissions instead
        os.chmod(tmp_path, _target_mode(path))
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def write_config(path: Path, config: Mapping[str, Any], allow_create: bool = True) -> None:
    """
    Write the full configuration to ``path``, replacing prior contents.

    If the target directory vanished the resource is prepared again and the
    write retried once. Every other failure raises ``PersistenceError``.
    """
    path = Path(path)
    try:
        text = json.dumps(dict(config), indent=2, ensure_ascii=False)
    except (TypeError, ValueError) as exc:
        log_file_operation("write", str(path), False, str(exc))
        raise PersistenceError(path, f"configuration is not JSON serializable: {exc}") from exc

    try:
        _write_atomic(path, text)
    except FileNotFoundError:
        log_warning(MODULE, "Config location disappeared; recreating", context=str(path))
    except OSError as exc:
        log_file_operation("write", str(path), False, str(exc))
        raise PersistenceError(path, str(exc)) from exc
    else:
        log_file_operation("write", str(path), True)
        return

    ensure_resource(path, allow_create)
    try:
        _write_atomic(path, text)
    except OSError as exc:
        log_file_operation("write", str(path), False, str(exc))
        raise PersistenceError(path, str(exc)) from exc
    log_file_operation("write", str(path), True)
