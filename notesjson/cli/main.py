#!/usr/bin/env python
"""Command line interface for the notesjson store."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.logging import RichHandler
from rich.traceback import install

from notesjson.cli.commands import notes, transfer
from notesjson.cli.utils.store import build_state, console

app = typer.Typer(help="Local notes with JSON export and import")

app.add_typer(notes.app, name="notes")
app.command("export")(transfer.export_notes)
app.command("import")(transfer.import_notes)


@app.callback()
def callback(
    ctx: typer.Context,
    db: Optional[Path] = typer.Option(
        None, "--db", envvar="NOTESJSON_DB", help="Path to the notes database"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logs"),
):
    """Manage notes and move them in and out of JSON files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                show_time=True,
                show_path=False,
            )
        ],
    )
    ctx.obj = build_state(db, verbose)


def main():
    """Main entry point for the CLI."""
    install()
    app()


if __name__ == "__main__":
    main()
