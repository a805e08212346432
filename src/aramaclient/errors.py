"""Error types for the aramaclient library."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class AramaError(Exception):
    """Base error type for client operations."""

    message: str

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class InvalidURLError(AramaError):
    """The endpoint URL could not be constructed."""

    url: str | None = None


@dataclass(eq=False)
class NetworkError(AramaError):
    """Transport-level failure: DNS, connect, TLS or timeout."""

    cause: BaseException | None = None

    def __post_init__(self) -> None:
        self.__cause__ = self.cause


@dataclass(eq=False)
class InvalidResponseError(AramaError):
    """The response body could not be decoded into the expected schema."""

    detail: str | None = None


@dataclass(eq=False)
class ApiError(AramaError):
    """The server answered with a non-200 status."""

    status_code: int | None = None
    detail: str | None = None
