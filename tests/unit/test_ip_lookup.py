"""Tests for HttpIpLookup."""

import httpx
import pytest

from patentvault.infrastructure.network import ip_lookup as ip_lookup_module
from patentvault.infrastructure.network.ip_lookup import HttpIpLookup


def _patch_transport(monkeypatch, handler) -> list[httpx.Request]:
    seen: list[httpx.Request] = []
    original = httpx.AsyncClient

    def _record(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return handler(request)

    class _Client(original):
        def __init__(self, **kwargs) -> None:
            super().__init__(transport=httpx.MockTransport(_record), **kwargs)

    monkeypatch.setattr(ip_lookup_module.httpx, "AsyncClient", _Client)
    return seen


@pytest.mark.asyncio
async def test_json_body(monkeypatch) -> None:
    _patch_transport(monkeypatch, lambda r: httpx.Response(200, json={"ip": "203.0.113.9"}))
    assert await HttpIpLookup("https://ip.example/json").lookup() == "203.0.113.9"


@pytest.mark.asyncio
async def test_text_body_and_cache(monkeypatch) -> None:
    seen = _patch_transport(monkeypatch, lambda r: httpx.Response(200, text="198.51.100.4\n"))
    lookup = HttpIpLookup("https://ip.example/")
    assert await lookup.lookup() == "198.51.100.4"
    assert await lookup.lookup() == "198.51.100.4"
    assert len(seen) == 1


@pytest.mark.asyncio
async def test_http_error_returns_none(monkeypatch) -> None:
    _patch_transport(monkeypatch, lambda r: httpx.Response(503))
    assert await HttpIpLookup("https://ip.example/").lookup() is None


@pytest.mark.asyncio
async def test_connection_error_returns_none(monkeypatch) -> None:
    def _refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    _patch_transport(monkeypatch, _refuse)
    assert await HttpIpLookup("https://ip.example/").lookup() is None


@pytest.mark.asyncio
async def test_json_without_ip_field(monkeypatch) -> None:
    _patch_transport(monkeypatch, lambda r: httpx.Response(200, json=["x"]))
    assert await HttpIpLookup("https://ip.example/").lookup() is None
