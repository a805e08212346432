"""Type definitions for the Arama search API."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictFloat, StrictStr, field_validator


class SearchDepth(str, Enum):
    """Server-side effort level for a search."""

    BASIC = "basic"
    ADVANCED = "advanced"  # Higher quality, higher cost


class Topic(str, Enum):
    """Content domain to search within."""

    GENERAL = "general"
    NEWS = "news"


# === Request Types ===

@dataclass(frozen=True, slots=True)
class SearchParameters:
    """Options for a search request.

    ``days`` only applies when ``topic`` is ``Topic.NEWS`` and
    ``include_image_descriptions`` only applies when ``include_images`` is set.
    These combinations are checked by the server, not here.

    ``topic``, ``max_results`` and ``days`` are left out of the request body
    when unset so the server applies its own defaults.
    """

    query: str
    search_depth: SearchDepth = SearchDepth.BASIC
    topic: Topic | None = None
    days: int | None = None
    max_results: int | None = None
    include_images: bool = False
    include_image_descriptions: bool = False
    include_answers: bool = False
    include_raw_content: bool = False
    include_domains: list[str] = field(default_factory=list)
    exclude_domains: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Normalize enum values passed as plain strings
        object.__setattr__(self, "search_depth", SearchDepth(self.search_depth))
        if self.topic is not None:
            object.__setattr__(self, "topic", Topic(self.topic))
        object.__setattr__(self, "include_domains", list(self.include_domains))
        object.__setattr__(self, "exclude_domains", list(self.exclude_domains))


@dataclass(frozen=True, slots=True)
class ExtractParameters:
    """URLs to extract raw content from."""

    urls: list[str]

    def __post_init__(self) -> None:
        urls = [self.urls] if isinstance(self.urls, str) else list(self.urls)
        if not urls:
            raise ValueError("No URLs provided")
        object.__setattr__(self, "urls", urls)


# === Response Types ===
#
# Responses are validated strictly: a missing required key or a value of the
# wrong type fails validation. Optional fields are None when absent or null.
# Keys the client does not model are ignored.

_RESPONSE_CONFIG = ConfigDict(frozen=True, extra="ignore")


class SearchResult(BaseModel):
    """A single web page matching the query."""

    model_config = _RESPONSE_CONFIG

    title: StrictStr
    url: StrictStr
    content: StrictStr
    score: StrictFloat = Field(..., description="Relevance, higher is better; no fixed range")
    published_date: StrictStr | None = None
    raw_content: StrictStr | None = None


class ImageResult(BaseModel):
    """An image related to the query."""

    model_config = _RESPONSE_CONFIG

    url: StrictStr
    description: StrictStr | None = None


class SearchResponse(BaseModel):
    """Response from the search endpoint."""

    model_config = _RESPONSE_CONFIG

    query: StrictStr
    results: list[SearchResult]
    response_time: StrictFloat
    answer: StrictStr | None = None
    images: list[ImageResult] | None = None

    @field_validator("images", mode="before")
    @classmethod
    def wrap_bare_image_urls(cls, v: Any) -> Any:
        # Without descriptions the server sends plain URL strings
        if isinstance(v, list):
            return [{"url": item} if isinstance(item, str) else item for item in v]
        return v

    @property
    def urls(self) -> list[str]:
        return [r.url for r in self.results]


class ExtractResult(BaseModel):
    """Raw content pulled from one URL."""

    model_config = _RESPONSE_CONFIG

    url: StrictStr
    raw_content: StrictStr


class FailedResult(BaseModel):
    """A URL the server could not extract."""

    model_config = _RESPONSE_CONFIG

    url: StrictStr
    error: StrictStr


class ExtractResponse(BaseModel):
    """Response from the extract endpoint.

    Individual URLs fail independently; those failures are listed in
    ``failed_results`` and do not make the call itself fail.
    """

    model_config = _RESPONSE_CONFIG

    results: list[ExtractResult]
    failed_results: list[FailedResult]
    response_time: StrictFloat

    @property
    def failed_urls(self) -> list[str]:
        return [f.url for f in self.failed_results]

    @property
    def succeeded(self) -> bool:
        """True when every requested URL was extracted."""
        return not self.failed_results

    def content_for(self, url: str) -> str | None:
        """Get the extracted content for a URL, if it succeeded."""
        for result in self.results:
            if result.url == url:
                return result.raw_content
        return None
