"""Pytest fixtures for all test modules."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from aramaclient import AramaClient

MOCK_API_KEY = "tvly-mock-api-key"


class RecordingHandler:
    """MockTransport handler that records requests and replays a canned response."""

    def __init__(self, status_code: int = 200, body: Any = None, text: str | None = None):
        self.status_code = status_code
        self.body = body
        self.text = text
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.text is not None:
            return httpx.Response(self.status_code, text=self.text)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last_payload(self) -> dict[str, Any]:
        return json.loads(self.requests[-1].content)


@pytest.fixture
def make_client() -> Callable[..., AramaClient]:
    """Build a client whose requests go to the given MockTransport handler."""

    def _make(handler: Callable[[httpx.Request], httpx.Response], **kwargs: Any) -> AramaClient:
        return AramaClient(
            api_key=MOCK_API_KEY,
            transport=httpx.MockTransport(handler),
            **kwargs,
        )

    return _make


@pytest.fixture
def search_body() -> dict[str, Any]:
    """A search response as the server sends it."""
    return {
        "query": "What is CES 2025?",
        "answer": None,
        "images": [],
        "results": [
            {
                "title": "CES 2025: Everything announced",
                "url": "https://techcrunch.com/ces-2025",
                "content": "The biggest consumer tech show of the year...",
                "score": 0.97,
                "raw_content": None,
            },
            {
                "title": "CES 2025 - Wikipedia",
                "url": "https://en.wikipedia.org/wiki/CES_2025",
                "content": "CES 2025 was held in Las Vegas...",
                "score": 0.81,
                "published_date": "2025-01-07T10:00:00Z",
            },
        ],
        "response_time": 1.42,
        "follow_up_questions": None,
    }


@pytest.fixture
def extract_body() -> dict[str, Any]:
    """An extract response with one success and one failure."""
    return {
        "results": [
            {
                "url": "https://example.com/article",
                "raw_content": "Example article body",
                "images": [],
            }
        ],
        "failed_results": [
            {"url": "bad-url", "error": "Failed to fetch url"},
        ],
        "response_time": 0.6,
    }
