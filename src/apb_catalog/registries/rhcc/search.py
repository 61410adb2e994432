"""Registry image search."""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from apb_catalog.registries.rhcc.client import RegistryClient
from apb_catalog.registries.rhcc.models import SearchResult
from apb_catalog.utils.errors import RegistryError

logger = logging.getLogger(__name__)

SEARCH_PATH = "/v1/search"


def search_images(client: RegistryClient, query: str, registry: str | None = None) -> SearchResult:
    """Search the registry for images matching a query.

    The query is placed into the URL as given. Registry query syntax such
    as wildcards must already be quoted by the caller, e.g. ``'"*-apb"'``.
    Only the first page of results is returned.

    Args:
        client: Registry client to issue the request with
        query: Search term
        registry: Registry name used in error messages

    Returns:
        SearchResult parsed from the response body

    Raises:
        RegistryError: If the request fails or the body cannot be decoded
    """
    logger.debug(f"Using {client.base_url} to source APB images using query: {query}")
    path = f"{SEARCH_PATH}?q={query}"

    try:
        response = client.get(path)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise RegistryError(
            f"Failed to search images: {e}", registry=registry, url=client.url_for(path)
        ) from e

    logger.debug("Got image response from registry")

    try:
        result = SearchResult.model_validate_json(response.content)
    except ValidationError as e:
        raise RegistryError(
            f"Failed to decode search response (HTTP {response.status_code}): {e}",
            registry=registry,
            url=client.url_for(path),
        ) from e

    logger.debug("Properly unmarshalled image response")
    return result
