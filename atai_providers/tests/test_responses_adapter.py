"""Tests for the OpenAI responses API adapter.

Covers body shaping, event-stream vs JSON routing, explicit error payloads
and the empty-response rule.
"""

from __future__ import annotations

import httpx
import pytest

from atai_providers.base.dto import AdapterParams
from atai_providers.base.errors import EmptyResponseError, StreamError, UnknownError
from atai_providers.base.factory import ProviderFactory
from atai_providers.base.models import ApiType, GenerationRequest, Message, Usage
from atai_providers.openai import ResponsesAdapter
from atai_providers.openai.responses import build_responses_body

PARAMS = AdapterParams(api_key="sk-test", base_url="https://api.test/v1", api_type=ApiType.RESPONSES)

HELLO_STREAM = (
    "event: response.output_text.delta\n"
    'data: {"delta":"Hel"}\n\n'
    "event: response.output_text.delta\n"
    'data: {"delta":"lo"}\n\n'
    "event: response.completed\n"
    'data: {"response":{"usage":{"input_tokens":5,"output_tokens":2}}}\n\n'
)


def _request(**kwargs) -> GenerationRequest:
    return GenerationRequest(
        messages=[
            Message(role="system", content="sys"),
            Message(role="user", content="Hi"),
            Message(role="assistant", content="Hello"),
        ],
        model="gpt-4o",
        **kwargs,
    )


def _sse(content_type: str = "text/event-stream"):
    return lambda request: httpx.Response(200, headers={"content-type": content_type}, content=HELLO_STREAM.encode())


def test_body_shape():
    body = build_responses_body(_request())
    assert body["stream"] is True  # nosec B101
    assert body["input"][1] == {"role": "user", "content": [{"type": "input_text", "text": "Hi"}]}  # nosec B101
    assert body["input"][2]["content"][0]["type"] == "output_text"  # nosec B101
    assert "temperature" not in body and "max_output_tokens" not in body  # nosec B101

    tuned = build_responses_body(_request(temperature=0.2, max_tokens=64))
    assert tuned["temperature"] == 0.2 and tuned["max_output_tokens"] == 64  # nosec B101


@pytest.mark.asyncio
async def test_event_stream_by_content_type(make_transport):
    transport, recorder = make_transport(_sse())
    response = await ResponsesAdapter(PARAMS, transport=transport).send(_request())
    assert response.content == "Hello"  # nosec B101
    assert response.usage == Usage(prompt_tokens=5, completion_tokens=2)  # nosec B101
    assert str(recorder.last.url) == "https://api.test/v1/responses"  # nosec B101


@pytest.mark.asyncio
async def test_event_stream_content_type_is_case_insensitive(make_transport):
    transport, _ = make_transport(_sse("TEXT/EVENT-STREAM; charset=UTF-8"))
    response = await ResponsesAdapter(PARAMS, transport=transport).send(_request())
    assert response.content == "Hello"  # nosec B101


@pytest.mark.asyncio
async def test_event_stream_sniffed_without_content_type(make_transport):
    transport, _ = make_transport(_sse("text/plain"))
    response = await ResponsesAdapter(PARAMS, transport=transport).send(_request())
    assert response.content == "Hello"  # nosec B101


@pytest.mark.asyncio
async def test_json_body_uses_structured_extractor(make_transport):
    reply = {
        "output": [{"type": "message", "content": [{"type": "output_text", "text": "Answer"}]}],
        "usage": {"prompt_tokens": 2, "completion_tokens": 3, "total_tokens": 5},
    }
    transport, _ = make_transport(lambda request: httpx.Response(200, json=reply))
    response = await ResponsesAdapter(PARAMS, transport=transport).send(_request())
    assert response.content == "Answer"  # nosec B101
    assert response.usage == Usage(2, 3, 5)  # nosec B101


@pytest.mark.asyncio
async def test_json_error_payload_raises_unknown(make_transport):
    transport, _ = make_transport(lambda request: httpx.Response(200, json={"error": {"message": "Invalid model"}}))
    with pytest.raises(UnknownError, match="Invalid model"):
        await ResponsesAdapter(PARAMS, transport=transport).send(_request())


@pytest.mark.asyncio
async def test_nothing_extracted_raises_empty(make_transport):
    transport, _ = make_transport(lambda request: httpx.Response(200, json={"output": []}))
    with pytest.raises(EmptyResponseError, match="No response from OpenAI Responses API"):
        await ResponsesAdapter(PARAMS, transport=transport).send(_request())


@pytest.mark.asyncio
async def test_stream_error_passes_through_unchanged(make_transport):
    text = 'event: response.error\ndata: {"error":{"message":"boom"}}\n\n'
    transport, _ = make_transport(
        lambda request: httpx.Response(200, headers={"content-type": "text/event-stream"}, content=text.encode())
    )
    with pytest.raises(StreamError, match="boom"):
        await ResponsesAdapter(PARAMS, transport=transport).send(_request())


@pytest.mark.asyncio
async def test_factory_routes_openai_responses_kind(make_transport):
    transport, _ = make_transport(lambda request: httpx.Response(200, json={"data": [{"id": "gpt-4o"}]}))
    provider = ProviderFactory.create("openai", params=PARAMS, transport=transport)
    assert isinstance(provider, ResponsesAdapter)  # nosec B101
    assert await provider.list_models() == []  # nosec B101
    assert await provider.test_connection() is True  # nosec B101
