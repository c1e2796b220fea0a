"""Credentials and the token authentication flow."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .exceptions import UnexpectedServerResponseError
from .models import Token, TokenResponse, User
from .transport import _HTTPClient, check_status, decode

LOGGER = logging.getLogger(__name__)

AUTH_PATH = "/auth"


@dataclass(frozen=True)
class Credential:
    """An API token attached verbatim to every authenticated request."""

    token: str = field(repr=False)

    def __post_init__(self):
        if not self.token:
            raise ValueError("token must not be empty")

    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Token {self.token}"}


def authenticate(
    http: _HTTPClient, username: str, password: str, usage: str = ""
) -> Tuple[Token, User]:
    """
    Exchange a username and password for an API token.

    ``usage`` is a free-form description of what the token is for. A 403
    raises ``InvalidCredentialsError``; any status other than 201 raises
    ``ServerError``. A 201 without a token or user is treated as a protocol
    violation and raises ``UnexpectedServerResponseError``.
    """
    LOGGER.info("Requesting API token for %s", username)
    resp = http.request(
        "POST", AUTH_PATH, payload={"usage": usage}, auth=(username, password)
    )
    check_status(resp, 201)

    tresp = decode(resp, TokenResponse)
    if not tresp.api_token:
        LOGGER.error("Authentication for %s succeeded without a token", username)
        raise UnexpectedServerResponseError()
    if tresp.user is None:
        LOGGER.error("Authentication for %s succeeded without a user", username)
        raise UnexpectedServerResponseError()

    LOGGER.info("Obtained API token for %s", tresp.user.username)
    return tresp.as_token(), tresp.user
