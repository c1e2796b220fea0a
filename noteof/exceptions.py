"""Library exceptions."""

from typing import Optional


class NoteOfException(Exception):
    """Generic NoteOf exception."""


class InvalidCredentialsError(NoteOfException):
    """The server answered 403 Forbidden."""

    def __init__(self, message: str = "invalid username or password"):
        super().__init__(message)


class NotFoundError(NoteOfException):
    """The requested note does not exist (404)."""


class UnexpectedServerResponseError(NoteOfException):
    """The server reported success but the payload breaks the protocol."""

    def __init__(self, message: str = "invalid server response"):
        super().__init__(message)


class ServerError(UnexpectedServerResponseError):
    """Catch-all for an unexpected HTTP status; carries the status and raw body."""

    def __init__(self, status_code: int, body: Optional[str] = None):
        self.status_code = status_code
        self.body = body
        message = f"{status_code}: {body}" if body else f"HTTP {status_code}"
        super().__init__(message)


class DecodeError(NoteOfException):
    """A success response could not be decoded into the expected shape."""

    def __init__(self, message: str, payload: Optional[object] = None):
        super().__init__(message)
        self.payload = payload
