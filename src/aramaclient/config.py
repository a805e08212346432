"""Configuration for the Arama search API."""

from __future__ import annotations

from dataclasses import dataclass

import httpx

DEFAULT_BASE_URL = "https://api.tavily.com"
SEARCH_ENDPOINT = "/search"
EXTRACT_ENDPOINT = "/extract"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Immutable settings held by a single client."""

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    def endpoint(self, path: str) -> str:
        """Join the base URL with an endpoint path."""
        return f"{self.base_url}/{path.lstrip('/')}"

    def __repr__(self) -> str:
        # Keep the key out of logs and tracebacks
        return (
            f"ClientConfig(api_key='****', base_url={self.base_url!r}, "
            f"timeout={self.timeout!r}, transport={self.transport!r})"
        )
