"""HTTP transport for publisher pages and APIs.

This module wraps an httpx client with a browser user agent. JSON
requests distinguish "not found" from failures; page requests return
None on any failure so callers can fall back to cached copies.
"""

from __future__ import annotations

import json

import httpx

from core.constants import BROWSER_USER_AGENT, DEFAULT_HTTP_TIMEOUT_SECONDS
from core.errors import LaurelTransportError
from core.logging_config import get_logger

_LOGGER = get_logger(__name__)


class HttpFetcher:
    """Blocking fetcher backed by a shared httpx client."""

    def __init__(
        self,
        timeout: float = DEFAULT_HTTP_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
    ) -> None:
        """Create a fetcher.

        Args:
            timeout: Per-request timeout in seconds.
            client: Optional preconfigured client, mainly for tests.
        """
        self._client = client or httpx.Client(
            timeout=timeout,
            follow_redirects=True,
            headers={"User-Agent": BROWSER_USER_AGENT},
        )

    def fetch_json(self, url: str) -> object | None:
        """Fetch and decode a JSON document.

        Args:
            url: Endpoint URL.

        Returns:
            Decoded payload, or None when the endpoint answers 404.

        Raises:
            LaurelTransportError: On network errors, non-2xx responses,
                or undecodable bodies.
        """
        try:
            response = self._client.get(url, headers={"Accept": "application/json"})
        except httpx.HTTPError as error:
            raise LaurelTransportError(f"Request failed for {url}: {error}") from error
        if response.status_code == 404:
            return None
        if not response.is_success:
            raise LaurelTransportError(f"HTTP {response.status_code} for {url}")
        try:
            return json.loads(response.text)
        except json.JSONDecodeError as error:
            raise LaurelTransportError(
                f"Invalid JSON from {url}: {error.msg} at position {error.pos}"
            ) from error

    def fetch_text(self, url: str) -> str | None:
        """Fetch a page body.

        Args:
            url: Page URL.

        Returns:
            Response body, or None when the request fails or is not 2xx.
        """
        try:
            response = self._client.get(url)
        except httpx.HTTPError as error:
            _LOGGER.warning("page_fetch_failed", url=url, error=str(error))
            return None
        if not response.is_success:
            _LOGGER.warning("page_fetch_failed", url=url, status_code=response.status_code)
            return None
        return response.text

    def close(self) -> None:
        """Release pooled connections."""
        self._client.close()
