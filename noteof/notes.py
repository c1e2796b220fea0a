"""
Authenticated client for the ``notes`` resource.

Public API:
  - NotesClient.list_notes() -> List[Note]
  - NotesClient.get_note(note_id) -> Note
  - NotesClient.create_note(note) -> Note
  - NotesClient.update_note(note) -> Note
  - NotesClient.delete_note(note_id, missing_ok=False) -> bool

Every call sends ``Authorization: Token <token>``. A 403 on any call raises
``InvalidCredentialsError``; unexpected statuses raise ``ServerError``.
"""

from __future__ import annotations

import logging
from typing import List, Optional

import requests

from .auth import Credential
from .endpoint import DEFAULT_ENDPOINT, EndpointResolver
from .exceptions import NotFoundError
from .models import Note
from .transport import _HTTPClient, check_status, decode, decode_list

LOGGER = logging.getLogger(__name__)

NOTES_PATH = "/notes"


class NotesClient:
    """CRUD operations on notes for one API token."""

    def __init__(self, credential: Credential, http: _HTTPClient):
        self._credential = credential
        self._http = http
        LOGGER.info("NotesClient initialized.")

    @classmethod
    def from_token(
        cls,
        token: str,
        endpoint: Optional[str] = None,
        *,
        default_endpoint: str = DEFAULT_ENDPOINT,
        session: Optional[requests.Session] = None,
    ) -> "NotesClient":
        http = _HTTPClient(EndpointResolver(endpoint, default_endpoint), session)
        return cls(Credential(token), http)

    @property
    def endpoint(self) -> str:
        return self._http.endpoint.resolve()

    def _request(
        self, method: str, path: str, payload: Optional[dict] = None
    ) -> requests.Response:
        return self._http.request(
            method, path, payload=payload, headers=self._credential.headers()
        )

    @staticmethod
    def _note_path(note_id: int) -> str:
        return f"{NOTES_PATH}/{note_id}"

    # ----- Read -----

    def list_notes(self) -> List[Note]:
        resp = self._request("GET", NOTES_PATH)
        check_status(resp, 200)
        notes = decode_list(resp, Note)
        LOGGER.info("Listed %d notes.", len(notes))
        return notes

    def get_note(self, note_id: int) -> Note:
        resp = self._request("GET", self._note_path(note_id))
        check_status(resp, 200, not_found=True)
        return decode(resp, Note)

    # ----- Write -----

    def create_note(self, note: Note) -> Note:
        """Store a new note; the server assigns its identifier and timestamps."""
        payload = note.to_payload()
        payload.pop("note_id", None)
        resp = self._request("POST", NOTES_PATH, payload)
        check_status(resp, 201)
        created = decode(resp, Note)
        LOGGER.info("Created note %s", created.note_id)
        return created

    def update_note(self, note: Note) -> Note:
        if note.note_id is None:
            raise ValueError("cannot update a note without a note_id")
        resp = self._request("PUT", self._note_path(note.note_id), note.to_payload())
        check_status(resp, 200)
        LOGGER.info("Updated note %s", note.note_id)
        return decode(resp, Note)

    def delete_note(self, note_id: int, *, missing_ok: bool = False) -> bool:
        """
        Delete a note.

        Returns ``True`` on 204. A 404 means the note is already gone: it
        raises ``NotFoundError``, or returns ``False`` when ``missing_ok``.
        """
        resp = self._request("DELETE", self._note_path(note_id))
        try:
            check_status(resp, 204, not_found=True)
        except NotFoundError:
            if missing_ok:
                LOGGER.info("Note %s was already deleted", note_id)
                return False
            raise
        LOGGER.info("Deleted note %s", note_id)
        return True
