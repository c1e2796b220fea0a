from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Annotated

from dateutil.parser import isoparse
from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer


def _env_extra_mode(default: str = "ignore") -> str:
    """
    Determine the extra-mode from environment vars.

    NOTEOF_EXTRA: allow|forbid|ignore
    Convenience booleans: "true/1/on" -> forbid (strict), "false/0/off" -> allow
    """
    raw = (os.getenv("NOTEOF_EXTRA") or default).strip().lower()

    if raw in {"allow", "forbid", "ignore"}:
        return raw

    if raw in {"1", "true", "yes", "on", "strict"}:
        return "forbid"
    if raw in {"0", "false", "no", "off", "lenient"}:
        return "allow"

    return default


_EXTRA = _env_extra_mode()


def parse_timestamp(value):
    """Accept RFC 3339 strings of any fractional precision."""
    # the server emits nanoseconds; isoparse truncates to microseconds
    if isinstance(value, str):
        return isoparse(value)
    return value


def format_timestamp(value: datetime) -> str:
    """RFC 3339 in UTC; naive values are taken to be UTC already."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


Timestamp = Annotated[
    datetime,
    BeforeValidator(parse_timestamp),
    PlainSerializer(format_timestamp, return_type=str, when_used="json"),
]


class NoteOfModel(BaseModel):
    """
    Project-wide base model.

    Default is extra='ignore' so newer server fields do not break decoding;
    switch at runtime by setting an env var before import:
      export NOTEOF_EXTRA=forbid   # or allow/ignore
    """

    model_config = ConfigDict(
        extra=_EXTRA,  # 'forbid' | 'allow' | 'ignore'
        populate_by_name=True,
    )


__all__ = [
    "NoteOfModel",
    "Timestamp",
    "_env_extra_mode",
    "format_timestamp",
    "parse_timestamp",
]
