"""Unit tests for the httpx-backed fetcher."""

from __future__ import annotations

import httpx
import pytest

from core.errors import LaurelTransportError
from ingest.http_fetcher import HttpFetcher


def _fetcher(handler) -> HttpFetcher:
    return HttpFetcher(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_fetch_json_decodes_body() -> None:
    """A 200 JSON response should be decoded."""
    fetcher = _fetcher(lambda request: httpx.Response(200, json={"ok": True}))

    assert fetcher.fetch_json("https://example.test/api") == {"ok": True}


def test_fetch_json_accepts_any_success_status() -> None:
    """Any 2xx response with a JSON body should be decoded."""
    fetcher = _fetcher(lambda request: httpx.Response(203, json={"ok": True}))

    assert fetcher.fetch_json("https://example.test/api") == {"ok": True}


def test_fetch_json_returns_none_for_not_found() -> None:
    """A 404 should mean the document does not exist yet."""
    fetcher = _fetcher(lambda request: httpx.Response(404))

    assert fetcher.fetch_json("https://example.test/api") is None


def test_fetch_json_raises_for_server_errors_and_bad_json() -> None:
    """Other statuses and undecodable bodies should raise transport errors."""
    failing = _fetcher(lambda request: httpx.Response(503))
    garbled = _fetcher(lambda request: httpx.Response(200, text="<html>"))

    with pytest.raises(LaurelTransportError, match="HTTP 503"):
        failing.fetch_json("https://example.test/api")
    with pytest.raises(LaurelTransportError, match="Invalid JSON"):
        garbled.fetch_json("https://example.test/api")


def test_fetch_json_wraps_network_errors() -> None:
    """Connection failures should surface as transport errors."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(LaurelTransportError, match="Request failed"):
        _fetcher(handler).fetch_json("https://example.test/api")


def test_fetch_text_returns_none_on_failure() -> None:
    """Page fetches should report failures as None."""

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/ok":
            return httpx.Response(200, text="<html>ok</html>")
        if request.url.path == "/down":
            raise httpx.ConnectError("refused", request=request)
        return httpx.Response(403)

    fetcher = _fetcher(handler)

    assert fetcher.fetch_text("https://example.test/ok") == "<html>ok</html>"
    assert fetcher.fetch_text("https://example.test/blocked") is None
    assert fetcher.fetch_text("https://example.test/down") is None
    fetcher.close()
