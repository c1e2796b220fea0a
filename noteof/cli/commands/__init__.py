"""Command modules for the NoteOf CLI."""

from noteof.cli.commands import auth, notes

__all__ = ["auth", "notes"]
