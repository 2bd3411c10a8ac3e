"""Export and import commands for the notesjson CLI."""

from pathlib import Path
from typing import Optional

import typer

from notesjson.cli.utils.store import console, fail, get_state, open_store
from notesjson.exceptions import NotesError
from notesjson.exchange import ImportMode, NoteExchange


def export_notes(
    ctx: typer.Context,
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Directory for the export file"
    ),
    stdout: bool = typer.Option(
        False, "--stdout", help="Write the JSON to standard output instead of a file"
    ),
):
    """Export all notes to a JSON file."""
    config = get_state(ctx).config
    try:
        with open_store(ctx) as store:
            exchange = NoteExchange(store, config)
            if stdout:
                typer.echo(exchange.export().decode("utf-8"))
                return
            path = exchange.export_to_directory(output_dir)
        console.print(f"Notes exported successfully to: [bold]{path}[/bold]")
    except NotesError as e:
        fail(e)


def import_notes(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help="JSON file produced by export"),
    replace: bool = typer.Option(
        False, "--replace", help="Delete all existing notes before importing"
    ),
    force: bool = typer.Option(
        False, "--force", "-f", help="Replace without confirmation"
    ),
):
    """Import notes from a JSON file, merging by default."""
    mode = ImportMode.REPLACE if replace else ImportMode.MERGE
    if replace and not force:
        confirmed = typer.confirm(
            "Replace mode deletes ALL existing notes first. Continue?"
        )
        if not confirmed:
            console.print("Import cancelled")
            return

    config = get_state(ctx).config
    try:
        with open_store(ctx) as store:
            summary = NoteExchange(store, config).import_file(path, mode=mode)
    except NotesError as e:
        fail(e)
        return

    action = "replaced" if mode is ImportMode.REPLACE else "merged"
    console.print(
        f"Notes {action} successfully: imported {summary.imported_count} "
        f"of {summary.total_count}"
    )
    if summary.skipped_count:
        console.print(f"Skipped {summary.skipped_count} duplicates")
