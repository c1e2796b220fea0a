"""Client library for the NoteOf notes API."""

import logging

from noteof.api import NoteOfAPI
from noteof.auth import Credential
from noteof.endpoint import DEFAULT_ENDPOINT, EndpointResolver
from noteof.exceptions import (
    DecodeError,
    InvalidCredentialsError,
    NoteOfException,
    NotFoundError,
    ServerError,
    UnexpectedServerResponseError,
)
from noteof.models import Note, NoteText, Token, User
from noteof.notes import NotesClient
from noteof.tags import canonicalize_tag

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_ENDPOINT",
    "Credential",
    "DecodeError",
    "EndpointResolver",
    "InvalidCredentialsError",
    "Note",
    "NoteOfAPI",
    "NoteOfException",
    "NoteText",
    "NotFoundError",
    "NotesClient",
    "ServerError",
    "Token",
    "UnexpectedServerResponseError",
    "User",
    "canonicalize_tag",
]
