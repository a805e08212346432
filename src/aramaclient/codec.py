"""Request encoding for the Arama wire format.

Outgoing bodies always carry the boolean flags and domain lists; ``topic``,
``max_results`` and ``days`` are omitted when unset. Wire names match the
field names except ``include_answers``, which is sent as ``include_answer``.

Responses are decoded by the pydantic models in ``types``.
"""

from __future__ import annotations

from typing import Any

from .types import ExtractParameters, SearchParameters


def encode_search_request(parameters: SearchParameters, api_key: str) -> dict[str, Any]:
    """Build the JSON body for a search request."""
    payload: dict[str, Any] = {
        "query": parameters.query,
        "api_key": api_key,
        "search_depth": parameters.search_depth.value,
        "include_answer": parameters.include_answers,
        "include_raw_content": parameters.include_raw_content,
        "include_images": parameters.include_images,
        "include_image_descriptions": parameters.include_image_descriptions,
        "include_domains": list(parameters.include_domains),
        "exclude_domains": list(parameters.exclude_domains),
    }
    if parameters.topic is not None:
        payload["topic"] = parameters.topic.value
    if parameters.max_results is not None:
        payload["max_results"] = parameters.max_results
    if parameters.days is not None:
        payload["days"] = parameters.days
    return payload


def encode_extract_request(parameters: ExtractParameters, api_key: str) -> dict[str, Any]:
    """Build the JSON body for an extract request."""
    return {"urls": list(parameters.urls), "api_key": api_key}
