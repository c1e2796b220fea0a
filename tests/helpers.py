"""Fake HTTP responses for the client tests."""

import json
from unittest.mock import MagicMock

from noteof import NoteOfAPI

ENDPOINT = "https://notes.example.com"


def fake_response(status_code, body=None, text=None, url=ENDPOINT):
    """Build a stand-in for ``requests.Response``."""
    resp = MagicMock()
    resp.status_code = status_code
    resp.url = url
    if body is not None:
        resp.text = json.dumps(body)
        resp.json.return_value = body
    else:
        resp.text = text or ""
        resp.json.side_effect = ValueError("Expecting value")
    return resp


def api_with(resp, endpoint=ENDPOINT):
    """Return (api, session) where every request answers ``resp``."""
    session = MagicMock()
    session.request.return_value = resp
    return NoteOfAPI(endpoint, session=session), session
