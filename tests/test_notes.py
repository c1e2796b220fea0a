"""Tests for the notes resource client."""

import unittest
from unittest.mock import MagicMock, patch

import requests

from noteof import (
    DecodeError,
    InvalidCredentialsError,
    Note,
    NoteOfException,
    NotesClient,
    NotFoundError,
    ServerError,
)
from noteof.models import NoteText

from .helpers import ENDPOINT, api_with, fake_response

NOTE = {
    "note_id": 42,
    "archived": False,
    "current": {"note_text": "hi", "created": "2024-01-01T00:00:00Z"},
}


def client_with(resp):
    api, session = api_with(resp)
    return api.with_token("tok"), session


class NotesClientTest(unittest.TestCase):
    """Tests for NotesClient."""

    def assert_request(self, session, method, path):
        args, kwargs = session.request.call_args
        self.assertEqual(args, (method, f"{ENDPOINT}{path}"))
        self.assertEqual(kwargs["headers"], {"Authorization": "Token tok"})
        return kwargs

    def test_list_notes(self):
        client, session = client_with(
            fake_response(200, [NOTE, {"note_id": 43, "starred": True}])
        )
        notes = client.list_notes()
        self.assertEqual([n.note_id for n in notes], [42, 43])
        self.assertTrue(notes[1].starred)
        kwargs = self.assert_request(session, "GET", "/notes")
        self.assertNotIn("json", kwargs)

    def test_list_notes_null_body(self):
        resp = fake_response(200, text="null")
        resp.json.side_effect = None
        resp.json.return_value = None
        client, _ = client_with(resp)
        self.assertEqual(client.list_notes(), [])

    def test_get_note(self):
        client, session = client_with(fake_response(200, NOTE))
        note = client.get_note(42)
        self.assertEqual(note.text, "hi")
        self.assert_request(session, "GET", "/notes/42")

    def test_create_note(self):
        client, session = client_with(fake_response(201, NOTE))
        note = client.create_note(Note.from_text("hi", tags=["x"]))

        self.assertEqual(note.note_id, 42)
        self.assertEqual(note.current.note_text, "hi")

        kwargs = self.assert_request(session, "POST", "/notes")
        self.assertEqual(
            kwargs["json"],
            {
                "archived": False,
                "starred": False,
                "tags": ["x"],
                "current": {"note_text": "hi"},
            },
        )

    def test_create_never_sends_identifier(self):
        client, session = client_with(fake_response(201, NOTE))
        client.create_note(Note(note_id=7, current=NoteText(note_text="hi")))
        _, kwargs = session.request.call_args
        self.assertNotIn("note_id", kwargs["json"])

    def test_update_note(self):
        client, session = client_with(fake_response(200, dict(NOTE, archived=True)))
        history = [NoteText(note_text="old"), NoteText(note_text="older")]
        note = Note(note_id=42, archived=True, history=history)

        updated = client.update_note(note)

        self.assertTrue(updated.archived)
        kwargs = self.assert_request(session, "PUT", "/notes/42")
        self.assertEqual(kwargs["json"]["note_id"], 42)
        self.assertEqual(
            [h["note_text"] for h in kwargs["json"]["history"]], ["old", "older"]
        )

    def test_update_requires_identifier(self):
        client, session = client_with(fake_response(200, NOTE))
        with self.assertRaises(ValueError):
            client.update_note(Note.from_text("no id"))
        session.request.assert_not_called()

    def test_delete_note(self):
        client, session = client_with(fake_response(204, text=""))
        self.assertTrue(client.delete_note(42))
        self.assert_request(session, "DELETE", "/notes/42")

    def test_forbidden_everywhere(self):
        calls = [
            lambda c: c.list_notes(),
            lambda c: c.get_note(1),
            lambda c: c.create_note(Note.from_text("x")),
            lambda c: c.update_note(Note(note_id=1)),
            lambda c: c.delete_note(1),
            lambda c: c.delete_note(1, missing_ok=True),
        ]
        for call in calls:
            client, _ = client_with(fake_response(403, text="forbidden"))
            with self.assertRaises(InvalidCredentialsError):
                call(client)

    def test_get_not_found(self):
        client, _ = client_with(fake_response(404, text="not found"))
        with self.assertRaises(NotFoundError):
            client.get_note(99)

    def test_delete_not_found(self):
        client, _ = client_with(fake_response(404, text="not found"))
        with self.assertRaises(NotFoundError):
            client.delete_note(99)

    def test_delete_not_found_missing_ok(self):
        client, _ = client_with(fake_response(404, text="not found"))
        self.assertFalse(client.delete_note(99, missing_ok=True))

    def test_list_not_found_is_server_error(self):
        client, _ = client_with(fake_response(404, text="nope"))
        with self.assertRaises(ServerError) as ctx:
            client.list_notes()
        self.assertEqual(ctx.exception.status_code, 404)

    def test_server_error_skips_decoding(self):
        resp = fake_response(500, text="internal error")
        client, _ = client_with(resp)
        with self.assertRaises(ServerError) as ctx:
            client.get_note(1)
        self.assertEqual(ctx.exception.body, "internal error")
        resp.json.assert_not_called()

    def test_wrong_success_code(self):
        client, _ = client_with(fake_response(200, NOTE))
        with self.assertRaises(ServerError) as ctx:
            client.create_note(Note.from_text("x"))
        self.assertEqual(ctx.exception.status_code, 200)

    def test_malformed_json(self):
        client, _ = client_with(fake_response(200, text="<html>"))
        with self.assertRaises(DecodeError) as ctx:
            client.get_note(1)
        self.assertEqual(ctx.exception.payload, "<html>")

    def test_transport_error_propagates(self):
        client, session = client_with(None)
        error = requests.ConnectionError("connection refused")
        session.request.side_effect = error
        with self.assertRaises(requests.ConnectionError) as ctx:
            client.list_notes()
        self.assertIs(ctx.exception, error)
        self.assertNotIsInstance(ctx.exception, NoteOfException)

    def test_schema_mismatch(self):
        client, _ = client_with(fake_response(200, {"note_id": "not-a-number"}))
        with self.assertRaises(DecodeError):
            client.get_note(1)


class FromTokenTest(unittest.TestCase):
    def test_default_endpoint_and_fresh_session(self):
        with patch("noteof.transport.requests.Session") as session_cls:
            session = MagicMock()
            session.request.return_value = fake_response(200, [])
            session_cls.return_value.__enter__.return_value = session

            client = NotesClient.from_token("tok")
            client.list_notes()
            client.list_notes()

        self.assertEqual(session_cls.call_count, 2)
        args, _ = session.request.call_args
        self.assertEqual(args, ("GET", "https://api.noteof.app/notes"))

    def test_empty_token_rejected(self):
        with self.assertRaises(ValueError):
            NotesClient.from_token("")


if __name__ == "__main__":
    unittest.main()
