"""Unit tests for ChatCompletionsAdapter and the OpenAI chat provider.

Covers:
- request body shape and defaults
- response normalization (content and usage)
- error classification at the adapter boundary
- connection test and model listing degrade instead of raising
"""

from __future__ import annotations

import httpx
import pytest

from atai_providers.base.dto import AdapterParams
from atai_providers.base.errors import AuthenticationError, EmptyResponseError, NetworkError
from atai_providers.base.http import HttpStatusError
from atai_providers.base.models import GenerationRequest, Message, Usage
from atai_providers.base.openai_style_parts import ChatCompletionsAdapter
from atai_providers.openai import OpenAIProvider

PARAMS = AdapterParams(api_key="sk-test", base_url="https://api.test/v1")
HELLO_BODY = {
    "choices": [{"message": {"role": "assistant", "content": "Hello!"}}],
    "usage": {"prompt_tokens": 1, "completion_tokens": 1, "total_tokens": 2},
}


def _request(**kwargs) -> GenerationRequest:
    return GenerationRequest(messages=[Message(role="user", content="Hi")], model="gpt-4o-mini", **kwargs)


@pytest.mark.asyncio
async def test_send_end_to_end(make_transport, log_capture):
    transport, recorder = make_transport(lambda request: httpx.Response(200, json=HELLO_BODY))
    provider = OpenAIProvider(PARAMS, transport=transport)

    response = await provider.send(_request())

    assert response.content == "Hello!"  # nosec B101
    assert response.usage == Usage(prompt_tokens=1, completion_tokens=1, total_tokens=2)  # nosec B101
    assert str(recorder.last.url) == "https://api.test/v1/chat/completions"  # nosec B101
    assert recorder.last.headers["authorization"] == "Bearer sk-test"  # nosec B101
    assert recorder.last_json() == {  # nosec B101
        "model": "gpt-4o-mini",
        "messages": [{"role": "user", "content": "Hi"}],
        "temperature": 0.7,
        "max_tokens": 2000,
        "stream": False,
    }
    end = log_capture.events("send.end")[-1]
    assert end["provider"] == "openai" and end["emitted"] is True  # nosec B101
    assert end["tokens"] == {"promptTokens": 1, "completionTokens": 1, "totalTokens": 2}  # nosec B101


@pytest.mark.asyncio
async def test_explicit_zero_values_are_not_replaced(make_transport):
    transport, recorder = make_transport(lambda request: httpx.Response(200, json=HELLO_BODY))
    await ChatCompletionsAdapter(PARAMS, transport=transport).send(_request(temperature=0.0, max_tokens=5))
    body = recorder.last_json()
    assert body["temperature"] == 0.0 and body["max_tokens"] == 5  # nosec B101


@pytest.mark.asyncio
async def test_missing_usage_and_null_content(make_transport):
    body = {"choices": [{"message": {"content": None}}]}
    transport, _ = make_transport(lambda request: httpx.Response(200, json=body))
    response = await ChatCompletionsAdapter(PARAMS, transport=transport).send(_request())
    assert response.content == ""  # nosec B101
    assert response.usage is None  # nosec B101


@pytest.mark.asyncio
async def test_empty_choices_raise_empty_response(make_transport):
    transport, _ = make_transport(lambda request: httpx.Response(200, json={"choices": []}))
    with pytest.raises(EmptyResponseError, match="No response from OpenAI API"):
        await OpenAIProvider(PARAMS, transport=transport).send(_request())


@pytest.mark.asyncio
async def test_http_401_is_classified_once(make_transport, log_capture):
    transport, _ = make_transport(lambda request: httpx.Response(401, json={"error": "invalid key"}))
    with pytest.raises(AuthenticationError) as info:
        await OpenAIProvider(PARAMS, transport=transport).send(_request())
    assert str(info.value) == "API key authentication failed"  # nosec B101
    assert isinstance(info.value.__cause__, HttpStatusError)  # nosec B101
    assert info.value.provider == "openai" and info.value.model == "gpt-4o-mini"  # nosec B101
    assert log_capture.events("send.error")[-1]["error_code"] == "auth"  # nosec B101


@pytest.mark.asyncio
async def test_connection_failure_is_network_error(make_transport):
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    transport, _ = make_transport(refuse)
    with pytest.raises(NetworkError):
        await ChatCompletionsAdapter(PARAMS, transport=transport).send(_request())


@pytest.mark.asyncio
async def test_openai_lists_only_gpt_models_sorted(make_transport):
    listing = {"data": [{"id": "gpt-4o"}, {"id": "whisper-1"}, {"id": "gpt-3.5-turbo"}]}
    transport, recorder = make_transport(lambda request: httpx.Response(200, json=listing))

    assert await OpenAIProvider(PARAMS, transport=transport).list_models() == ["gpt-3.5-turbo", "gpt-4o"]  # nosec B101
    assert recorder.last.method == "GET"  # nosec B101
    assert await ChatCompletionsAdapter(PARAMS, transport=transport).list_models() == [  # nosec B101
        "gpt-3.5-turbo",
        "gpt-4o",
        "whisper-1",
    ]


@pytest.mark.asyncio
async def test_list_models_failure_degrades_to_empty(make_transport, log_capture):
    transport, _ = make_transport(lambda request: httpx.Response(500, text="down"))
    assert await OpenAIProvider(PARAMS, transport=transport).list_models() == []  # nosec B101
    assert log_capture.events("models.list_failed")  # nosec B101


@pytest.mark.asyncio
async def test_connection_test_never_raises(make_transport):
    ok, _ = make_transport(lambda request: httpx.Response(200, json={"data": [{"id": "m"}]}))
    empty, _ = make_transport(lambda request: httpx.Response(200, json={"data": []}))
    denied, _ = make_transport(lambda request: httpx.Response(401, text="nope"))

    assert await ChatCompletionsAdapter(PARAMS, transport=ok).test_connection() is True  # nosec B101
    assert await ChatCompletionsAdapter(PARAMS, transport=empty).test_connection() is False  # nosec B101
    assert await ChatCompletionsAdapter(PARAMS, transport=denied).test_connection() is False  # nosec B101
