"""Public exports for NoteOf data models."""

from __future__ import annotations

from .note import Note, NoteText
from .token import Token, TokenResponse
from .user import User, UserMeta

__all__ = [
    "Note",
    "NoteText",
    "Token",
    "TokenResponse",
    "User",
    "UserMeta",
]
