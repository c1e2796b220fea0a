"""Entry points: an unauthenticated API and its authenticated notes client."""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import requests

from .auth import Credential, authenticate
from .endpoint import DEFAULT_ENDPOINT, EndpointResolver
from .models import Token, User
from .notes import NotesClient
from .transport import _HTTPClient

LOGGER = logging.getLogger(__name__)


class NoteOfAPI:
    """
    Unauthenticated access to a NoteOf server.

    Use ``authenticate`` to obtain a token, then ``with_token`` for a
    ``NotesClient``. Both share the same endpoint and request builder.
    """

    def __init__(
        self,
        endpoint: Optional[str] = None,
        *,
        default_endpoint: str = DEFAULT_ENDPOINT,
        session: Optional[requests.Session] = None,
    ):
        self._http = _HTTPClient(EndpointResolver(endpoint, default_endpoint), session)

    @property
    def endpoint(self) -> str:
        return self._http.endpoint.resolve()

    def authenticate(
        self, username: str, password: str, usage: str = ""
    ) -> Tuple[Token, User]:
        return authenticate(self._http, username, password, usage)

    def with_token(self, token: str) -> NotesClient:
        return NotesClient(Credential(token), self._http)

    def login(
        self, username: str, password: str, usage: str = ""
    ) -> Tuple[NotesClient, Token, User]:
        """Authenticate and return a ready notes client with the token and user."""
        token, user = self.authenticate(username, password, usage)
        return self.with_token(token.api_token), token, user

    def __repr__(self) -> str:
        return f"<NoteOfAPI: {self.endpoint}>"
