"""API token models."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field, field_validator

from ._base import NoteOfModel, Timestamp
from .user import User


class Token(NoteOfModel):
    """An API token and its validity window."""

    api_token: str = Field("", alias="token")
    created: Optional[Timestamp] = None
    expiration: Optional[Timestamp] = None

    @field_validator("api_token", mode="before")
    @classmethod
    def _null_token_as_empty(cls, v):
        # a null token is caught as a protocol violation, not a decode failure
        return "" if v is None else v

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        """Return ``True`` once the expiration has passed. Tokens without one never expire."""
        if self.expiration is None:
            return False
        now = now or datetime.now(timezone.utc)
        expiration = self.expiration
        if expiration.tzinfo is None:
            expiration = expiration.replace(tzinfo=timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)
        return now >= expiration


class TokenResponse(Token):
    """Body of ``POST /auth``: the token fields plus the owning user."""

    user: Optional[User] = None

    def as_token(self) -> Token:
        return Token(
            token=self.api_token, created=self.created, expiration=self.expiration
        )
