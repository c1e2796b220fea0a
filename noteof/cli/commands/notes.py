"""Notes commands for the NoteOf CLI."""

from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from noteof.cli.utils import auth
from noteof.exceptions import NoteOfException
from noteof.models import Note, NoteText

app = typer.Typer(help="Manage notes")
console = Console()

UsernameOption = typer.Option(None, "--username", "-u", help="NoteOf username")
EndpointOption = typer.Option(None, "--endpoint", help="Override the API endpoint")


@app.command("list")
def list_notes(
    archived: Optional[bool] = typer.Option(
        None, "--archived/--no-archived", help="Only archived / unarchived notes"
    ),
    tag: Optional[str] = typer.Option(None, help="Only notes carrying this tag"),
    username: Optional[str] = UsernameOption,
    endpoint: Optional[str] = EndpointOption,
):
    """List all notes."""
    client = auth.get_client(username, endpoint)

    try:
        notes = client.list_notes()
    except NoteOfException as e:
        auth.fail(e)

    if archived is not None:
        notes = [n for n in notes if n.archived == archived]
    if tag:
        notes = [n for n in notes if n.has_tag(tag)]

    if not notes:
        console.print("No notes found")
        return

    table = Table("ID", "Text", "Tags", "Starred", "Archived", "Created")
    for note in notes:
        text = note.text.splitlines()[0] if note.text else ""
        table.add_row(
            str(note.note_id),
            text,
            ", ".join(note.tags),
            "*" if note.starred else "",
            "yes" if note.archived else "",
            note.created.isoformat() if note.created else "",
        )

    console.print(table)


@app.command("get")
def get_note(
    note_id: int = typer.Argument(..., help="ID of the note"),
    history: bool = typer.Option(False, help="Also show prior revisions"),
    username: Optional[str] = UsernameOption,
    endpoint: Optional[str] = EndpointOption,
):
    """Show a single note."""
    client = auth.get_client(username, endpoint)

    try:
        note = client.get_note(note_id)
    except NoteOfException as e:
        auth.fail(e)

    subtitle = ", ".join(note.tags) if note.tags else None
    console.print(
        Panel(note.text or "", title=f"Note {note.note_id}", subtitle=subtitle)
    )

    if history:
        for revision in note.history:
            created = revision.created.isoformat() if revision.created else "?"
            console.print(Panel(revision.note_text, title=created, border_style="dim"))


@app.command("create")
def create_note(
    text: str = typer.Argument(..., help="Text of the note"),
    tag: Optional[List[str]] = typer.Option(
        None, "--tag", "-t", help="Tag (repeatable)"
    ),
    starred: bool = typer.Option(False, help="Star the note"),
    username: Optional[str] = UsernameOption,
    endpoint: Optional[str] = EndpointOption,
):
    """Create a new note."""
    client = auth.get_client(username, endpoint)

    try:
        note = client.create_note(Note.from_text(text, tags=tag, starred=starred))
    except NoteOfException as e:
        auth.fail(e)

    console.print(f"Created note [bold]{note.note_id}[/bold]")


@app.command("update")
def update_note(
    note_id: int = typer.Argument(..., help="ID of the note"),
    text: Optional[str] = typer.Option(None, help="New text"),
    tag: Optional[List[str]] = typer.Option(
        None, "--tag", "-t", help="Replace tags (repeatable)"
    ),
    archived: Optional[bool] = typer.Option(None, "--archive/--unarchive"),
    starred: Optional[bool] = typer.Option(None, "--star/--unstar"),
    username: Optional[str] = UsernameOption,
    endpoint: Optional[str] = EndpointOption,
):
    """Update a note's text, tags or flags."""
    if text is None and not tag and archived is None and starred is None:
        console.print("[yellow]Warning:[/yellow] No updates specified")
        return

    client = auth.get_client(username, endpoint)

    try:
        # Start from the stored note so unspecified fields are kept
        note = client.get_note(note_id)
        changes = {}
        if text is not None:
            changes["current"] = NoteText(note_text=text)
        if tag:
            changes["tags"] = list(tag)
        if archived is not None:
            changes["archived"] = archived
        if starred is not None:
            changes["starred"] = starred
        client.update_note(note.model_copy(update=changes))
    except NoteOfException as e:
        auth.fail(e)

    console.print(f"Updated note [bold]{note_id}[/bold]")


@app.command("delete")
def delete_note(
    note_id: int = typer.Argument(..., help="ID of the note to delete"),
    force: bool = typer.Option(
        False, "--force", "-f", help="Delete without confirmation"
    ),
    username: Optional[str] = UsernameOption,
    endpoint: Optional[str] = EndpointOption,
):
    """Delete a note."""
    if not force:
        confirmed = typer.confirm(f"Are you sure you want to delete note {note_id}?")
        if not confirmed:
            console.print("Deletion cancelled")
            return

    client = auth.get_client(username, endpoint)

    try:
        deleted = client.delete_note(note_id, missing_ok=True)
    except NoteOfException as e:
        auth.fail(e)

    if deleted:
        console.print(f"Deleted note [bold]{note_id}[/bold]")
    else:
        console.print(f"Note [bold]{note_id}[/bold] was already deleted")
