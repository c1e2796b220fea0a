"""Tests for endpoint resolution."""

import unittest

from noteof import DEFAULT_ENDPOINT, EndpointResolver, NoteOfAPI


class EndpointResolverTest(unittest.TestCase):
    def test_default(self):
        self.assertEqual(EndpointResolver().resolve(), DEFAULT_ENDPOINT)
        self.assertEqual(DEFAULT_ENDPOINT, "https://api.noteof.app")

    def test_empty_override_falls_back(self):
        self.assertEqual(EndpointResolver("").resolve(), DEFAULT_ENDPOINT)
        self.assertEqual(EndpointResolver(None).resolve(), DEFAULT_ENDPOINT)

    def test_override(self):
        resolver = EndpointResolver("http://localhost:8080/")
        self.assertEqual(resolver.resolve(), "http://localhost:8080")

    def test_custom_default(self):
        resolver = EndpointResolver(default="https://staging.example.com")
        self.assertEqual(resolver.resolve(), "https://staging.example.com")

    def test_empty_default_rejected(self):
        with self.assertRaises(ValueError):
            EndpointResolver(default="")

    def test_api_endpoint(self):
        self.assertEqual(NoteOfAPI().endpoint, DEFAULT_ENDPOINT)
        self.assertEqual(
            NoteOfAPI("https://notes.example.com").endpoint,
            "https://notes.example.com",
        )


if __name__ == "__main__":
    unittest.main()
