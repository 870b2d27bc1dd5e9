from __future__ import annotations

from typing import List

import httpx
import pytest

from atai_providers.anthropic import AnthropicProvider
from atai_providers.anthropic.client import build_messages_body
from atai_providers.base.dto import AdapterParams
from atai_providers.base.errors import EmptyResponseError
from atai_providers.base.models import GenerationRequest, Message, Usage
from atai_providers.config.defaults import ANTHROPIC_MODELS

PARAMS = AdapterParams(api_key="ak-test", base_url="https://api.anthropic.com")


def _request() -> GenerationRequest:
    return GenerationRequest(
        messages=[
            Message(role="system", content="Be brief"),
            Message(role="user", content="Hi"),
            Message(role="assistant", content="Hello"),
            Message(role="user", content="Again"),
        ],
        model="claude-3-5-sonnet-20241022",
    )


def test_messages_body_splits_system_prompt():
    body = build_messages_body(_request())
    assert body["system"] == "Be brief"  # nosec B101
    assert [m["role"] for m in body["messages"]] == ["user", "assistant", "user"]  # nosec B101
    assert body["max_tokens"] == 2000 and body["temperature"] == 0.7  # nosec B101


def test_messages_body_without_system():
    body = build_messages_body(GenerationRequest(messages=[Message(role="user", content="x")], model="m"))
    assert "system" not in body  # nosec B101


@pytest.mark.asyncio
async def test_send_headers_and_usage_without_total(make_transport):
    reply = {
        "content": [{"type": "text", "text": "Hi there"}],
        "usage": {"input_tokens": 3, "output_tokens": 4},
    }
    transport, recorder = make_transport(lambda request: httpx.Response(200, json=reply))

    response = await AnthropicProvider(PARAMS, transport=transport).send(_request())

    assert response.content == "Hi there"  # nosec B101
    assert response.usage == Usage(prompt_tokens=3, completion_tokens=4, total_tokens=None)  # nosec B101
    req = recorder.last
    assert str(req.url) == "https://api.anthropic.com/v1/messages"  # nosec B101
    assert req.headers["authorization"] == "Bearer ak-test"  # nosec B101
    assert req.headers["x-api-key"] == "ak-test"  # nosec B101
    assert req.headers["anthropic-version"] == "2023-06-01"  # nosec B101


@pytest.mark.asyncio
async def test_vendor_total_is_passed_through(make_transport):
    reply = {"content": [{"text": "x"}], "usage": {"input_tokens": 3, "output_tokens": 4, "total_tokens": 10}}
    transport, _ = make_transport(lambda request: httpx.Response(200, json=reply))
    response = await AnthropicProvider(PARAMS, transport=transport).send(_request())
    assert response.usage.total_tokens == 10  # nosec B101


@pytest.mark.asyncio
async def test_empty_content_raises(make_transport):
    transport, _ = make_transport(lambda request: httpx.Response(200, json={"content": []}))
    with pytest.raises(EmptyResponseError, match="No response from Anthropic API"):
        await AnthropicProvider(PARAMS, transport=transport).send(_request())


@pytest.mark.asyncio
async def test_connection_probe_and_static_models(make_transport):
    transport, recorder = make_transport(lambda request: httpx.Response(200, json={"content": [{"text": "H"}]}))
    provider = AnthropicProvider(PARAMS, transport=transport)

    assert await provider.test_connection() is True  # nosec B101
    probe = recorder.last_json()
    assert probe["model"] == "claude-3-haiku-20240307" and probe["max_tokens"] == 1  # nosec B101

    seen: List[httpx.Request] = list(recorder.requests)
    assert await provider.list_models() == list(ANTHROPIC_MODELS)  # nosec B101
    assert recorder.requests == seen  # nosec B101


@pytest.mark.asyncio
async def test_rejected_probe_returns_false(make_transport):
    transport, _ = make_transport(lambda request: httpx.Response(401, text="invalid x-api-key"))
    assert await AnthropicProvider(PARAMS, transport=transport).test_connection() is False  # nosec B101
