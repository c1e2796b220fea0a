"""Base URL resolution."""

from typing import Optional

DEFAULT_ENDPOINT = "https://api.noteof.app"


class EndpointResolver:
    """Return the configured override when set, otherwise the default base URL."""

    def __init__(
        self, override: Optional[str] = None, default: str = DEFAULT_ENDPOINT
    ):
        if not default:
            raise ValueError("default endpoint must not be empty")
        self._override = override or ""
        self._default = default

    def resolve(self) -> str:
        return (self._override or self._default).rstrip("/")

    def __repr__(self) -> str:
        return f"EndpointResolver({self.resolve()!r})"
