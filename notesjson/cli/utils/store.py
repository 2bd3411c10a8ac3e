"""Shared state and store access for the notesjson CLI commands."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from notesjson.config import NotesConfig
from notesjson.exceptions import NotesError
from notesjson.store import SqliteNoteStore

console = Console()


@dataclass
class CliState:
    config: NotesConfig
    verbose: bool = False


def build_state(db: Optional[Path], verbose: bool) -> CliState:
    config = NotesConfig.from_env()
    if db is not None:
        config = dataclasses.replace(config, db_path=db)
    return CliState(config=config, verbose=verbose)


def get_state(ctx: typer.Context) -> CliState:
    state = ctx.find_root().obj
    if state is None:
        state = build_state(None, False)
        ctx.find_root().obj = state
    return state


def open_store(ctx: typer.Context) -> SqliteNoteStore:
    """Open the configured database; callers close it with ``with``."""
    return SqliteNoteStore(get_state(ctx).config.database)


def fail(exc: NotesError) -> None:
    """Print a user-facing error and exit with status 1."""
    console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
    raise typer.Exit(1)
