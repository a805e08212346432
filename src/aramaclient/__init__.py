"""
aramaclient - Python client library for the Arama (Tavily) search API

Usage:
    from aramaclient import AramaClient, SearchParameters

    async with AramaClient(api_key="tvly-...") as client:
        # Search
        result = await client.search(SearchParameters(query="What is CES 2025?"))
        if result.is_ok():
            for r in result.value.results:
                print(f"{r.title}: {r.url}")

        # Extract
        result = await client.extract(["https://example.com/article"])
        if result.is_ok():
            for r in result.value.results:
                print(r.raw_content[:200])
            for f in result.value.failed_results:
                print(f"Failed: {f.url} ({f.error})")
"""

from .client import AramaClient, extract, search
from .config import ClientConfig
from .errors import (
    ApiError,
    AramaError,
    InvalidResponseError,
    InvalidURLError,
    NetworkError,
)
from .types import (
    ExtractParameters,
    ExtractResponse,
    ExtractResult,
    FailedResult,
    ImageResult,
    SearchDepth,
    SearchParameters,
    SearchResponse,
    SearchResult,
    Topic,
)
from .result import Result, Ok, Err

__all__ = [
    # Client
    "AramaClient",
    "ClientConfig",
    "search",
    "extract",
    # Types
    "SearchDepth",
    "Topic",
    "SearchParameters",
    "SearchResponse",
    "SearchResult",
    "ImageResult",
    "ExtractParameters",
    "ExtractResponse",
    "ExtractResult",
    "FailedResult",
    # Errors
    "AramaError",
    "InvalidURLError",
    "NetworkError",
    "InvalidResponseError",
    "ApiError",
    # Result
    "Result",
    "Ok",
    "Err",
]

__version__ = "1.0.0"
