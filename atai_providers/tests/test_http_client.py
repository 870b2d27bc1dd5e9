from __future__ import annotations

import json
from typing import Any, Dict, List

import httpx
import pytest

from atai_providers.base.http import BridgeTransport, HttpStatusError, Transport, join_url, make_request


def test_join_url_trims_one_slash_at_the_seam():
    assert join_url("https://api.test/v1/", "/models") == "https://api.test/v1/models"  # nosec B101
    assert join_url("https://api.test/v1", "models") == "https://api.test/v1/models"  # nosec B101
    assert join_url("https://api.test/v1//", "models") == "https://api.test/v1//models"  # nosec B101


@pytest.mark.asyncio
async def test_make_request_posts_json_with_merged_headers(make_transport):
    transport, recorder = make_transport(lambda request: httpx.Response(200, json={"ok": True}))

    resp = await make_request(
        transport,
        "https://api.test/v1/",
        "/chat/completions",
        body={"text": "héllo"},
        headers={"Authorization": "Bearer k"},
    )

    assert resp.ok and resp.json() == {"ok": True}  # nosec B101
    req = recorder.last
    assert req.method == "POST"  # nosec B101
    assert str(req.url) == "https://api.test/v1/chat/completions"  # nosec B101
    assert req.headers["content-type"] == "application/json"  # nosec B101
    assert req.headers["authorization"] == "Bearer k"  # nosec B101
    assert json.loads(req.content) == {"text": "héllo"}  # nosec B101


@pytest.mark.asyncio
async def test_get_never_carries_a_body(make_transport):
    transport, recorder = make_transport(lambda request: httpx.Response(200, json={"data": []}))
    await make_request(transport, "https://api.test/v1", "models", method="get", body={"ignored": 1})
    assert recorder.last.method == "GET"  # nosec B101
    assert recorder.last.content == b""  # nosec B101


@pytest.mark.asyncio
async def test_non_2xx_raises_with_status_and_body(make_transport):
    transport, _ = make_transport(lambda request: httpx.Response(401, text="bad key"))
    with pytest.raises(HttpStatusError) as info:
        await make_request(transport, "https://api.test/v1", "models", method="GET")
    assert str(info.value) == "HTTP 401: bad key"  # nosec B101
    assert info.value.status_code == 401  # nosec B101
    assert info.value.body == "bad key"  # nosec B101


@pytest.mark.asyncio
async def test_bridge_transport_maps_text_replies():
    calls: List[Dict[str, Any]] = []

    async def bridge(**kwargs: Any) -> Dict[str, Any]:
        calls.append(kwargs)
        return {"status": 200, "headers": {"Content-Type": "application/json"}, "text": '{"a": 1}'}

    transport = BridgeTransport(bridge)
    assert isinstance(transport, Transport)  # nosec B101
    resp = await make_request(transport, "https://api.test", "v1/messages", body={"q": "x"})

    assert resp.json() == {"a": 1}  # nosec B101
    assert resp.content_type == "application/json"  # nosec B101
    assert calls[0]["url"] == "https://api.test/v1/messages"  # nosec B101
    assert calls[0]["method"] == "POST"  # nosec B101
    assert json.loads(calls[0]["body"]) == {"q": "x"}  # nosec B101


@pytest.mark.asyncio
async def test_bridge_transport_error_status_raises():
    async def bridge(**kwargs: Any) -> Dict[str, Any]:
        return {"status": 429, "body": b"too many"}

    with pytest.raises(HttpStatusError) as info:
        await make_request(BridgeTransport(bridge), "https://api.test", "models", method="GET")
    assert str(info.value) == "HTTP 429: too many"  # nosec B101
