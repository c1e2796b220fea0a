#!/usr/bin/env python
"""Command line interface for NoteOf."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from noteof.cli.commands import auth, notes

app = typer.Typer(help="Command Line Interface for NoteOf")
console = Console()

# Add command groups
app.add_typer(auth.app, name="auth")
app.add_typer(notes.app, name="notes")


@app.callback()
def callback(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logs"
    ),
):
    """Manage your NoteOf notes from the terminal."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, rich_tracebacks=True)],
        )


def main():
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
