"""HTTP client for a container registry.

The registry base URL is configured without a guaranteed scheme, so every
request is built against the normalized URL. The underlying
``httpx.Client`` is shared and owned by the caller.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)

HTTP_PREFIX = "http://"
HTTPS_PREFIX = "https://"


def normalize_url(url: str) -> str:
    """Ensure a registry URL carries an explicit scheme.

    URLs that already start with ``http://`` or ``https://`` are returned
    unchanged; anything else gets ``http://`` prepended.

    Args:
        url: Registry base URL as configured.

    Returns:
        The URL with a scheme.
    """
    if url.startswith(HTTP_PREFIX) or url.startswith(HTTPS_PREFIX):
        return url
    return HTTP_PREFIX + url


class RegistryClient:
    """Issues GET requests against a registry base URL."""

    def __init__(self, base_url: str, http_client: httpx.Client) -> None:
        self._base_url = normalize_url(base_url)
        self._http = http_client

    @property
    def base_url(self) -> str:
        """Normalized registry base URL."""
        return self._base_url

    def url_for(self, path: str) -> str:
        """Join the base URL and a request path (which may carry a query)."""
        return self._base_url + path

    def build_request(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Request:
        """Build a GET request for a registry path.

        Raises:
            httpx.InvalidURL: If the resulting URL cannot be parsed
        """
        return self._http.build_request("GET", self.url_for(path), params=params, headers=headers)

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send a request and return its fully read, closed response.

        The status code is not checked; callers decide what a body means.

        Raises:
            httpx.HTTPError: On transport failure
        """
        response = self._http.send(request, stream=True)
        try:
            response.read()
        finally:
            response.close()
        logger.debug(f"GET {request.url} -> {response.status_code}")
        return response

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Issue a GET request and return the response with its body read."""
        return self.send(self.build_request(path, params=params, headers=headers))

    def get_json(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Issue a GET request and decode the body as JSON.

        Raises:
            httpx.HTTPError: On transport failure
            ValueError: If the body is not valid JSON
        """
        return self.get(path, params=params, headers=headers).json()
