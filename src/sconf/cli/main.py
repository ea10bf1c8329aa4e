"""
Typer-based CLI for sconf.

Inspects and edits a JSON configuration file against a draft file. The
draft is a JSON object mapping each key to an entry with a ``preset`` field
and optional metadata (for example ``description``).

Usage:
    sconf --draft draft.json --config settings.json show
    sconf -d draft.json -c settings.json get theme
    sconf -d draft.json -c settings.json set retries 5
    sconf -d draft.json -c settings.json reset
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from sconf.cli.exit_codes import CliExit
from sconf.core import (
    CoercionError,
    ConfigStore,
    KeyNotFound,
    PersistenceError,
    ResourceMissing,
    ValidationError,
    coerce_text,
    load_draft,
)
from sconf.utils.logger import setup_logging

console = Console()
app = typer.Typer(
    name="sconf",
    help="Inspect and edit JSON configuration files backed by a draft.",
    add_completion=False,
    no_args_is_help=True,
)


@dataclass
class CliState:
    draft_path: Path
    config_path: Path
    allow_create: bool


def _format_value(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def _open_store(ctx: typer.Context) -> ConfigStore:
    state: CliState = ctx.obj
    try:
        draft = load_draft(state.draft_path)
        return ConfigStore(
            draft,
            path=state.config_path,
            allow_create=state.allow_create,
        )
    except (ValidationError, ResourceMissing) as exc:
        raise CliExit.config_error(f"Error: {exc}")


@app.callback()
def callback(
    ctx: typer.Context,
    draft: Path = typer.Option(
        ..., "--draft", "-d", help="JSON file mapping keys to preset entries"
    ),
    config: Path = typer.Option(
        ..., "--config", "-c", help="JSON configuration file to read and write"
    ),
    no_create: bool = typer.Option(
        False, "--no-create", help="Fail instead of creating missing directories"
    ),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level"),
) -> None:
    """Inspect and edit JSON configuration files backed by a draft."""
    try:
        setup_logging(level=log_level)
    except ValueError as exc:
        raise CliExit.config_error(f"Error: {exc}")
    ctx.obj = CliState(draft_path=draft, config_path=config, allow_create=not no_create)


@app.command("show")
def show(ctx: typer.Context) -> None:
    """Show every configuration value next to its preset."""
    store = _open_store(ctx)
    current = store.read()
    table = Table(title=str(store.path))
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    table.add_column("Preset", style="dim")
    table.add_column("Description", style="dim")
    for key, value in current.items():
        if store.schema.has(key):
            preset_text = _format_value(store.schema.get(key))
            description = str(store.schema.meta(key).get("description", ""))
        else:
            preset_text = "-"
            description = "(not in draft)"
        table.add_row(key, _format_value(value), preset_text, description)
    console.print(table)


@app.command("get")
def get(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Configuration key"),
) -> None:
    """Print one value as JSON."""
    store = _open_store(ctx)
    try:
        value = store.read(key)
    except KeyNotFound as exc:
        raise CliExit.config_error(f"Error: {exc}")
    typer.echo(_format_value(value))


@app.command("set")
def set_value(
    ctx: typer.Context,
    key: str = typer.Argument(..., help="Configuration key"),
    value: str = typer.Argument(..., help="New value, converted to the preset's type"),
) -> None:
    """Change one value and save the configuration."""
    store = _open_store(ctx)
    try:
        coerced = coerce_text(key, value, store.schema)
        store.alter(key, coerced)
    except (KeyNotFound, CoercionError) as exc:
        raise CliExit.config_error(f"Error: {exc}")
    except (PersistenceError, ResourceMissing) as exc:
        raise CliExit.error(f"Error: {exc}")
    console.print(f"[green]✓[/green] {key} = {_format_value(coerced)}")


@app.command("reset")
def reset(ctx: typer.Context) -> None:
    """Restore every value to its preset."""
    store = _open_store(ctx)
    try:
        store.reset()
    except (PersistenceError, ResourceMissing) as exc:
        raise CliExit.error(f"Error: {exc}")
    console.print(f"[green]✓[/green] Reset {len(store.schema)} keys in {store.path}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
