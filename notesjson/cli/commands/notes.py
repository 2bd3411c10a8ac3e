"""Note CRUD commands for the notesjson CLI."""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from notesjson.cli.utils.store import console, fail, open_store
from notesjson.exceptions import NotesError
from notesjson.models import clean_input
from notesjson.store import seed_samples

app = typer.Typer(help="Create, list, edit and delete notes")


def _snippet(content: Optional[str], width: int = 60) -> str:
    if not content:
        return ""
    line = content.splitlines()[0]
    return line if len(line) <= width else line[: width - 3] + "..."


@app.command("add")
def add_note(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Note title"),
    content: Optional[str] = typer.Option(None, "--content", "-c", help="Note body"),
):
    """Add a note stamped with the current time."""
    title, content = clean_input(title, content)
    try:
        with open_store(ctx) as store:
            note = store.create(title, content)
        console.print(f"Created note [bold]{escape(note.display_title)}[/bold] ({note.id})")
    except NotesError as e:
        fail(e)


@app.command("list")
def list_notes(ctx: typer.Context):
    """List notes, newest first."""
    with open_store(ctx) as store:
        notes = store.list()

    if not notes:
        console.print("No notes yet")
        return

    table = Table("Title", "Content", "Updated", "ID")
    for note in notes:
        table.add_row(
            escape(note.display_title),
            escape(_snippet(note.content)),
            note.formatted_timestamp,
            note.id,
        )
    console.print(table)


@app.command("show")
def show_note(ctx: typer.Context, note_id: str):
    """Show a single note."""
    try:
        with open_store(ctx) as store:
            note = store.get(note_id)
        console.print(f"[bold]{escape(note.display_title)}[/bold]")
        console.print(f"Updated: {note.formatted_timestamp}")
        console.print(f"ID: {note.id}")
        if note.has_content:
            console.print()
            console.print(note.content, markup=False)
    except NotesError as e:
        fail(e)


@app.command("edit")
def edit_note(
    ctx: typer.Context,
    note_id: str,
    title: Optional[str] = typer.Option(None, "--title", "-t", help="New title"),
    content: Optional[str] = typer.Option(
        None, "--content", "-c", help="New body; an empty string clears it"
    ),
):
    """Edit a note's title and/or content."""
    if title is None and content is None:
        console.print("[yellow]Warning:[/yellow] No updates specified")
        return

    if title is not None:
        title = title.strip()
    if content is not None:
        content = content.strip()

    try:
        with open_store(ctx) as store:
            note = store.update(note_id, title=title, content=content)
        console.print(f"Updated note [bold]{escape(note.display_title)}[/bold]")
    except NotesError as e:
        fail(e)


@app.command("delete")
def delete_note(
    ctx: typer.Context,
    note_id: str,
    force: bool = typer.Option(
        False, "--force", "-f", help="Delete without confirmation"
    ),
):
    """Delete a note."""
    if not force:
        confirmed = typer.confirm(f"Are you sure you want to delete note {note_id}?")
        if not confirmed:
            console.print("Deletion cancelled")
            return

    try:
        with open_store(ctx) as store:
            store.delete(note_id)
        console.print(f"Deleted note [bold]{note_id}[/bold]")
    except NotesError as e:
        fail(e)


@app.command("clear")
def clear_notes(
    ctx: typer.Context,
    force: bool = typer.Option(
        False, "--force", "-f", help="Delete without confirmation"
    ),
):
    """Delete every note."""
    if not force:
        confirmed = typer.confirm("Delete ALL notes? This cannot be undone")
        if not confirmed:
            console.print("Deletion cancelled")
            return

    with open_store(ctx) as store:
        removed = store.delete_all()
    console.print(f"Deleted {removed} notes")


@app.command("seed")
def seed_notes(ctx: typer.Context):
    """Add a handful of sample notes."""
    with open_store(ctx) as store:
        created = seed_samples(store)
    console.print(f"Added {len(created)} sample notes")
