"""Arama API client implementation."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from .codec import encode_extract_request, encode_search_request
from .config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    EXTRACT_ENDPOINT,
    SEARCH_ENDPOINT,
    ClientConfig,
)
from .errors import (
    AramaError,
    ApiError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
)
from .result import Err, Ok, Result
from .types import ExtractParameters, ExtractResponse, SearchParameters, SearchResponse

logger = logging.getLogger(__name__)


def _error_detail(response: httpx.Response) -> str | None:
    """Pull a human-readable error message out of an error response."""
    try:
        data = response.json()
    except ValueError:
        return response.reason_phrase or None

    if isinstance(data, dict):
        detail = data.get("detail", data.get("error"))
        if isinstance(detail, dict):
            detail = detail.get("error") or detail.get("message")
        if detail:
            return str(detail)
    return response.reason_phrase or None


class AramaClient:
    """Client for the Arama search and extract API.

    Usage:
        async with AramaClient(api_key="tvly-...") as client:
            result = await client.search(SearchParameters(query="CES 2025"))
            if result.is_ok():
                for r in result.value.results:
                    print(f"{r.title}: {r.url}")
            else:
                print(f"Error: {result.error}")

            result = await client.extract(["https://example.com/article"])
            if result.is_ok():
                print(result.value.content_for("https://example.com/article"))

    The client owns one ``httpx.AsyncClient`` for its lifetime. Calls are
    independent and may run concurrently. Pass ``transport`` to route
    requests through a custom httpx transport.
    """

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = ClientConfig(
            api_key=api_key,
            base_url=base_url,
            timeout=timeout,
            transport=transport,
        )
        self._http = httpx.AsyncClient(transport=transport, timeout=timeout)

    @classmethod
    def from_config(cls, config: ClientConfig) -> AramaClient:
        return cls(
            api_key=config.api_key,
            base_url=config.base_url,
            timeout=config.timeout,
            transport=config.transport,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        await self._http.aclose()

    async def __aenter__(self) -> AramaClient:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }

    def _endpoint_url(self, path: str) -> Result[httpx.URL, AramaError]:
        """Build an absolute endpoint URL, rejecting anything unusable."""
        raw = self._config.endpoint(path)
        try:
            url = httpx.URL(raw)
        except httpx.InvalidURL:
            return Err(InvalidURLError(f"Invalid endpoint URL: {raw}", url=raw))
        if url.scheme not in ("http", "https") or not url.host:
            return Err(InvalidURLError(f"Invalid endpoint URL: {raw}", url=raw))
        return Ok(url)

    async def _post(self, path: str, payload: dict[str, Any]) -> Result[Any, AramaError]:
        """POST a JSON payload and return the decoded JSON body."""
        url_result = self._endpoint_url(path)
        if url_result.is_err():
            return url_result
        url = url_result.value

        logger.debug(f"POST {url}")
        try:
            response = await self._http.post(url, json=payload, headers=self._headers())
        except httpx.TimeoutException as e:
            return Err(NetworkError("Request timed out", cause=e))
        except (httpx.RemoteProtocolError, httpx.DecodingError) as e:
            return Err(InvalidResponseError(f"Malformed HTTP response: {e}", detail=str(e)))
        except httpx.RequestError as e:
            return Err(NetworkError(f"Request failed: {e}", cause=e))

        if response.status_code != 200:
            detail = _error_detail(response)
            message = f"HTTP {response.status_code}"
            if detail:
                message = f"{message}: {detail}"
            logger.debug(f"{url.path} rejected: {message}")
            return Err(ApiError(message, status_code=response.status_code, detail=detail))

        try:
            return Ok(response.json())
        except ValueError as e:
            return Err(InvalidResponseError("Response body is not valid JSON", detail=str(e)))

    async def search(self, parameters: SearchParameters) -> Result[SearchResponse, AramaError]:
        """Search the web.

        Args:
            parameters: Query and filtering options.

        Returns:
            Result containing SearchResponse on success or AramaError on failure
        """
        topic = parameters.topic.value if parameters.topic else "default"
        logger.debug(
            f"Searching for {parameters.query!r} "
            f"(depth={parameters.search_depth.value}, topic={topic})"
        )
        payload = encode_search_request(parameters, self._config.api_key)
        result = await self._post(SEARCH_ENDPOINT, payload)
        if result.is_err():
            return result

        try:
            response = SearchResponse.model_validate(result.value)
        except ValidationError as e:
            return Err(InvalidResponseError(f"Invalid search response: {e}", detail=str(e)))

        logger.debug(f"Found {len(response.results)} results in {response.response_time:.2f}s")
        return Ok(response)

    async def extract(
        self,
        urls: list[str] | str | ExtractParameters,
    ) -> Result[ExtractResponse, AramaError]:
        """Extract raw page content from one or more URLs.

        URLs the server cannot fetch are reported in ``failed_results`` of a
        successful response.

        Args:
            urls: A list of URLs, a single URL, or prepared ExtractParameters.

        Returns:
            Result containing ExtractResponse on success or AramaError on failure

        Raises:
            ValueError: If no URLs are given.
        """
        parameters = urls if isinstance(urls, ExtractParameters) else ExtractParameters(urls=urls)
        logger.debug(f"Extracting {len(parameters.urls)} URL(s)")
        payload = encode_extract_request(parameters, self._config.api_key)
        result = await self._post(EXTRACT_ENDPOINT, payload)
        if result.is_err():
            return result

        try:
            response = ExtractResponse.model_validate(result.value)
        except ValidationError as e:
            return Err(InvalidResponseError(f"Invalid extract response: {e}", detail=str(e)))

        if response.failed_results:
            logger.warning(f"Failed to extract {len(response.failed_results)} URL(s)")
            for failed in response.failed_results:
                logger.warning(f"- {failed.url}: {failed.error}")
        return Ok(response)


# Convenience functions for one-off usage
async def search(
    query: str,
    api_key: str,
    *,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
    **kwargs: Any,
) -> Result[SearchResponse, AramaError]:
    """Search the web.

    Convenience function that creates a client for single use.
    For multiple requests, prefer creating an AramaClient instance.

    Args:
        query: Search query string.
        api_key: API key.
        base_url: Override the default API base URL.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport for the temporary client.
        **kwargs: Additional options passed to SearchParameters.
    """
    parameters = SearchParameters(query=query, **kwargs)
    async with AramaClient(api_key, base_url=base_url, timeout=timeout, transport=transport) as client:
        return await client.search(parameters)


async def extract(
    urls: list[str] | str,
    api_key: str,
    *,
    base_url: str = DEFAULT_BASE_URL,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.AsyncBaseTransport | None = None,
) -> Result[ExtractResponse, AramaError]:
    """Extract raw content from one or more URLs.

    Convenience function that creates a client for single use.
    For multiple requests, prefer creating an AramaClient instance.
    """
    async with AramaClient(api_key, base_url=base_url, timeout=timeout, transport=transport) as client:
        return await client.extract(urls)
