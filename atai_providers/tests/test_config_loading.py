from __future__ import annotations

import pytest
from pydantic import ValidationError

from atai_providers.base.models import ApiType
from atai_providers.config import (
    BUILTIN_PROVIDERS,
    PRESET_MODELS,
    default_provider_configs,
    load_model_configs,
    load_provider_configs,
)


def test_provider_configs_accept_camel_case_settings():
    [config] = load_provider_configs(
        [
            {
                "id": "deepseek",
                "name": "DeepSeek",
                "displayName": "DeepSeek",
                "baseUrl": "https://api.deepseek.com/v1",
                "apiKey": "sk-1",
                "enabled": True,
                "isBuiltIn": True,
                "defaultModel": "deepseek-chat",
                "maxTokens": 1024,
                "models": [{"id": "deepseek-chat", "name": "deepseek-chat", "displayName": "DeepSeek Chat", "maxTokens": 4096}],
            }
        ]
    )
    assert config.base_url == "https://api.deepseek.com/v1"  # nosec B101
    assert config.api_key == "sk-1" and config.has_credentials  # nosec B101
    assert config.default_model == "deepseek-chat"  # nosec B101
    assert config.models[0].display_name == "DeepSeek Chat"  # nosec B101
    assert config.models[0].max_tokens == 4096  # nosec B101
    assert config.api_type is ApiType.CHAT_COMPLETIONS  # nosec B101


def test_api_type_values_and_snake_case_keys():
    configs = load_provider_configs(
        [
            {"id": "openai", "api_key": "k", "apiType": "responses"},
            {"id": "custom", "api_type": None},
        ]
    )
    assert configs[0].api_type is ApiType.RESPONSES  # nosec B101
    assert configs[1].api_type is ApiType.CHAT_COMPLETIONS  # nosec B101


def test_loading_is_lenient_about_ranges_but_requires_an_id():
    [config] = load_provider_configs([{"id": "x", "temperature": 5, "maxTokens": 0}])
    assert config.temperature == 5 and config.max_tokens == 0  # nosec B101
    with pytest.raises(ValidationError):
        load_provider_configs([{"name": "no id"}])


def test_model_configs_accept_camel_case():
    [model] = load_model_configs(
        [
            {
                "id": "m1",
                "name": "Favorite",
                "modelId": "gpt-4o",
                "provider": "openai",
                "providerName": "OpenAI",
                "apiKey": "k",
                "baseUrl": "https://api.openai.com/v1",
                "createdAt": 1700000000000,
                "isActive": True,
            }
        ]
    )
    assert (model.model_id, model.provider_name, model.created_at) == ("gpt-4o", "OpenAI", 1700000000000)  # nosec B101
    assert model.enabled is True and model.api_type is ApiType.CHAT_COMPLETIONS  # nosec B101


def test_builtin_catalog_loads_as_disabled_configs():
    configs = default_provider_configs()
    assert len(configs) == len(BUILTIN_PROVIDERS)  # nosec B101
    assert [c.id for c in configs][:6] == ["openai", "anthropic", "openrouter", "deepseek", "kimi", "glm"]  # nosec B101
    assert all(not c.enabled and c.api_key == "" for c in configs)  # nosec B101
    deepseek = next(c for c in configs if c.id == "deepseek")
    assert deepseek.default_model == "deepseek-chat" and deepseek.temperature == 0.7  # nosec B101
    assert {p["category"] for p in PRESET_MODELS} == {"cloud", "local"}  # nosec B101
