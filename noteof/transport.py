"""
Minimal HTTP plumbing shared by the unauthenticated and authenticated APIs.

Requests are built against the resolved endpoint and sent through ``requests``.
Interpreting a response is split in two steps: the status code is checked
first, and only a response carrying the expected success code is decoded as
domain JSON. Anything else is read as raw text for the error.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple, Type, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError

from .endpoint import EndpointResolver
from .exceptions import (
    DecodeError,
    InvalidCredentialsError,
    NotFoundError,
    ServerError,
)

LOGGER = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class _HTTPClient:
    """
    Stateless request builder:
      - JSON request bodies via `json=payload`
      - per-call headers and basic auth
      - a fresh ``requests.Session`` per call unless one is injected
    """

    def __init__(
        self,
        endpoint: EndpointResolver,
        session: Optional[requests.Session] = None,
    ):
        self._endpoint = endpoint
        self._session = session
        LOGGER.debug("Initialized _HTTPClient with endpoint: %s", endpoint.resolve())

    @property
    def endpoint(self) -> EndpointResolver:
        return self._endpoint

    def build_url(self, path: str) -> str:
        return f"{self._endpoint.resolve()}{path}"

    def request(
        self,
        method: str,
        path: str,
        *,
        payload: Optional[object] = None,
        headers: Optional[Dict[str, str]] = None,
        auth: Optional[Tuple[str, str]] = None,
    ) -> requests.Response:
        url = self.build_url(path)
        LOGGER.info("%s to %s", method, url)
        kwargs = {"headers": headers or {}, "auth": auth}
        if payload is not None:
            kwargs["json"] = payload
        if self._session is not None:
            resp = self._session.request(method, url, **kwargs)
        else:
            with requests.Session() as session:
                resp = session.request(method, url, **kwargs)
        LOGGER.debug("%s to %s returned status %d", method, url, resp.status_code)
        return resp


def check_status(
    resp: requests.Response, expected: int, *, not_found: bool = False
) -> None:
    """Raise the error matching ``resp``'s status unless it is ``expected``."""
    code = resp.status_code
    if code == expected:
        return
    if code == 403:
        LOGGER.error("Request to %s was forbidden", resp.url)
        raise InvalidCredentialsError()
    if not_found and code == 404:
        LOGGER.info("Request to %s returned not found", resp.url)
        raise NotFoundError(f"not found: {resp.url}")
    LOGGER.error("Request to %s failed with code %d", resp.url, code)
    raise ServerError(code, resp.text)


def _json(resp: requests.Response) -> object:
    try:
        return resp.json()
    except ValueError as exc:
        LOGGER.error("Failed to parse JSON response from %s", resp.url)
        raise DecodeError("Invalid JSON response", payload=resp.text) from exc


def decode(resp: requests.Response, model: Type[ModelT]) -> ModelT:
    data = _json(resp)
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        LOGGER.error("%s response validation failed.", model.__name__)
        raise DecodeError(
            f"{model.__name__} response validation failed", payload=data
        ) from exc


def decode_list(resp: requests.Response, model: Type[ModelT]) -> List[ModelT]:
    data = _json(resp)
    if data is None:
        return []
    try:
        return TypeAdapter(List[model]).validate_python(data)
    except ValidationError as exc:
        LOGGER.error("%s list response validation failed.", model.__name__)
        raise DecodeError(
            f"{model.__name__} list response validation failed", payload=data
        ) from exc
