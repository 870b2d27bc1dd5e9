"""OpenAI-compatible vendor adapters: OpenRouter, DeepSeek, Kimi and GLM."""

from __future__ import annotations

import httpx
import pytest

from atai_providers.base.dto import AdapterParams
from atai_providers.base.errors import EmptyResponseError
from atai_providers.base.interfaces import GenerationProvider
from atai_providers.base.models import GenerationRequest, Message
from atai_providers.config.defaults import DEEPSEEK_MODELS, GLM_MODELS, KIMI_MODELS
from atai_providers.deepseek import DeepseekProvider
from atai_providers.glm import GLMProvider
from atai_providers.kimi import KimiProvider
from atai_providers.openrouter import OpenRouterProvider

PARAMS = AdapterParams(api_key="k", base_url="https://api.test/v1")
OK = {"choices": [{"message": {"content": "ok"}}]}


def _request() -> GenerationRequest:
    return GenerationRequest(messages=[Message(role="user", content="Hi")], model="m")


@pytest.mark.asyncio
async def test_openrouter_adds_attribution_headers(make_transport):
    transport, recorder = make_transport(lambda request: httpx.Response(200, json=OK))
    await OpenRouterProvider(PARAMS, transport=transport).send(_request())
    headers = recorder.last.headers
    assert headers["http-referer"] == "https://github.com/yourusername/obsidian-at-ai"  # nosec B101
    assert headers["x-title"] == "@AI Obsidian Plugin"  # nosec B101
    assert headers["authorization"] == "Bearer k"  # nosec B101


@pytest.mark.asyncio
async def test_openrouter_caller_headers_win(make_transport):
    transport, recorder = make_transport(lambda request: httpx.Response(200, json={"data": []}))
    params = AdapterParams(api_key="k", base_url="https://api.test/v1", headers={"X-Title": "Mine"})
    provider = OpenRouterProvider(params, transport=transport)
    await provider.list_models()
    assert recorder.last.headers["x-title"] == "Mine"  # nosec B101
    assert provider.provider_name == "openrouter"  # nosec B101


@pytest.mark.asyncio
async def test_fixed_catalogs_need_no_network(make_transport):
    transport, recorder = make_transport(lambda request: httpx.Response(500, text="unexpected"))
    for provider, expected in (
        (DeepseekProvider(PARAMS, transport=transport), DEEPSEEK_MODELS),
        (KimiProvider(PARAMS, transport=transport), KIMI_MODELS),
        (GLMProvider(PARAMS, transport=transport), GLM_MODELS),
    ):
        assert isinstance(provider, GenerationProvider)  # nosec B101
        assert await provider.list_models() == list(expected)  # nosec B101
    assert recorder.requests == []  # nosec B101


@pytest.mark.asyncio
async def test_deepseek_send_delegates_to_chat_completions(make_transport):
    transport, recorder = make_transport(lambda request: httpx.Response(200, json=OK))
    provider = DeepseekProvider(PARAMS, transport=transport)
    response = await provider.send(_request())
    assert response.content == "ok"  # nosec B101
    assert provider.provider_name == "deepseek"  # nosec B101
    assert recorder.last.url.path == "/v1/chat/completions"  # nosec B101


@pytest.mark.asyncio
async def test_vendor_name_in_empty_response_message(make_transport):
    transport, _ = make_transport(lambda request: httpx.Response(200, json={"choices": []}))
    with pytest.raises(EmptyResponseError, match="No response from Kimi API"):
        await KimiProvider(PARAMS, transport=transport).send(_request())


@pytest.mark.asyncio
async def test_glm_connection_test_is_a_one_token_probe(make_transport):
    transport, recorder = make_transport(lambda request: httpx.Response(200, json=OK))
    assert await GLMProvider(PARAMS, transport=transport).test_connection() is True  # nosec B101
    assert recorder.last.url.path == "/v1/chat/completions"  # nosec B101
    probe = recorder.last_json()
    assert probe["model"] == "glm-3-turbo" and probe["max_tokens"] == 1  # nosec B101
