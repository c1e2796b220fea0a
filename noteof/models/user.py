"""User model returned alongside an API token."""

from __future__ import annotations

from typing import Dict

from pydantic import Field

from ._base import NoteOfModel

UserMeta = Dict[str, str]
"""
Arbitrary string metadata attached to a user.

The server enforces a 255 character limit on both keys and values. Keys are
expected to be ASCII and values UTF-8; neither is checked client-side.
"""


class User(NoteOfModel):
    """A NoteOf account."""

    username: str = ""
    """Login name."""

    email_address: str = Field("", alias="email")
    """Email address registered for the account."""

    meta: UserMeta = Field(default_factory=dict)
    """Implementation specific key/value metadata."""
