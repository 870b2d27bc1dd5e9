"""Built-in provider catalog and preset models.

``BUILTIN_PROVIDERS`` lists every provider the host offers out of the box
(credentials omitted); ``PRESET_MODELS`` lists model-level templates a user
can start an :class:`~atai_providers.base.models.AIModelConfig` from.
Providers without a dedicated adapter kind (gemini, grok, ollama, lmstudio)
are served by the OpenAI-compatible custom adapter.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

from ..base.models import ModelConfig, ProviderConfig
from .defaults import (
    ANTHROPIC_DEFAULT_BASE_URL,
    DEEPSEEK_DEFAULT_BASE_URL,
    DEFAULT_MAX_TOKENS,
    DEFAULT_TEMPERATURE,
    GLM_DEFAULT_BASE_URL,
    KIMI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_BASE_URL,
    OPENROUTER_DEFAULT_BASE_URL,
)


def _models(*entries: Tuple[str, str]) -> List[Dict[str, str]]:
    return [{"id": model_id, "name": model_id, "display_name": label} for model_id, label in entries]


def _provider(
    provider_id: str,
    name: str,
    display_name: str,
    base_url: str,
    models: List[Dict[str, str]],
    default_model: str,
    *,
    is_built_in: bool = True,
) -> Dict[str, Any]:
    return {
        "id": provider_id,
        "name": name,
        "display_name": display_name,
        "base_url": base_url,
        "is_built_in": is_built_in,
        "api_type": "chat_completions",
        "models": models,
        "default_model": default_model,
        "temperature": DEFAULT_TEMPERATURE,
        "max_tokens": DEFAULT_MAX_TOKENS,
    }


BUILTIN_PROVIDERS: Tuple[Mapping[str, Any], ...] = (
    _provider(
        "openai",
        "OpenAI",
        "OpenAI",
        OPENAI_DEFAULT_BASE_URL,
        _models(
            ("gpt-4o", "GPT-4o"),
            ("gpt-4o-mini", "GPT-4o Mini"),
            ("gpt-4-turbo", "GPT-4 Turbo"),
            ("gpt-3.5-turbo", "GPT-3.5 Turbo"),
        ),
        "gpt-4o-mini",
    ),
    _provider(
        "anthropic",
        "Anthropic",
        "Anthropic Claude",
        ANTHROPIC_DEFAULT_BASE_URL,
        _models(
            ("claude-3-5-sonnet-20241022", "Claude 3.5 Sonnet"),
            ("claude-3-haiku-20240307", "Claude 3 Haiku"),
        ),
        "claude-3-5-sonnet-20241022",
    ),
    _provider(
        "openrouter",
        "OpenRouter",
        "OpenRouter",
        OPENROUTER_DEFAULT_BASE_URL,
        _models(
            ("anthropic/claude-3.5-sonnet", "Claude 3.5 Sonnet"),
            ("openai/gpt-4o", "GPT-4o"),
            ("google/gemini-pro", "Gemini Pro"),
        ),
        "anthropic/claude-3.5-sonnet",
    ),
    _provider(
        "deepseek",
        "DeepSeek",
        "DeepSeek",
        DEEPSEEK_DEFAULT_BASE_URL,
        _models(("deepseek-chat", "DeepSeek Chat"), ("deepseek-coder", "DeepSeek Coder")),
        "deepseek-chat",
    ),
    _provider(
        "kimi",
        "Kimi",
        "Kimi (Moonshot)",
        KIMI_DEFAULT_BASE_URL,
        _models(
            ("moonshot-v1-8k", "Moonshot v1 8K"),
            ("moonshot-v1-32k", "Moonshot v1 32K"),
            ("moonshot-v1-128k", "Moonshot v1 128K"),
        ),
        "moonshot-v1-8k",
    ),
    _provider(
        "glm",
        "GLM",
        "GLM (Zhipu)",
        GLM_DEFAULT_BASE_URL,
        _models(("glm-4", "GLM-4"), ("glm-4-plus", "GLM-4 Plus"), ("glm-3-turbo", "GLM-3 Turbo")),
        "glm-4",
    ),
    _provider(
        "gemini",
        "Gemini",
        "Google Gemini",
        "https://generativelanguage.googleapis.com/v1beta",
        _models(
            ("gemini-1.5-pro", "Gemini 1.5 Pro"),
            ("gemini-1.5-flash", "Gemini 1.5 Flash"),
            ("gemini-pro", "Gemini Pro"),
        ),
        "gemini-1.5-pro",
    ),
    _provider(
        "grok",
        "Grok",
        "xAI Grok",
        "https://api.x.ai/v1",
        _models(("grok-beta", "Grok Beta"), ("grok-vision-beta", "Grok Vision Beta")),
        "grok-beta",
    ),
    _provider(
        "ollama",
        "Ollama",
        "Ollama (local)",
        "http://localhost:11434/v1",
        _models(
            ("llama3.2", "Llama 3.2"),
            ("qwen2.5", "Qwen 2.5"),
            ("deepseek-coder-v2", "DeepSeek Coder V2"),
        ),
        "llama3.2",
    ),
    _provider("lmstudio", "LM Studio", "LM Studio (local)", "http://localhost:1234/v1", [], ""),
    _provider("custom", "Custom", "Custom provider", "", [], "", is_built_in=False),
)


def _preset(name: str, model_id: str, provider: str, provider_name: str, base_url: str, description: str, category: str) -> Dict[str, Any]:
    return {
        "name": name,
        "model_id": model_id,
        "provider": provider,
        "provider_name": provider_name,
        "base_url": base_url,
        "temperature": DEFAULT_TEMPERATURE,
        "max_tokens": DEFAULT_MAX_TOKENS,
        "description": description,
        "category": category,
    }


PRESET_MODELS: Tuple[Mapping[str, Any], ...] = (
    _preset("GPT-4o", "gpt-4o", "openai", "OpenAI", OPENAI_DEFAULT_BASE_URL, "Multimodal flagship model", "cloud"),
    _preset("GPT-4o Mini", "gpt-4o-mini", "openai", "OpenAI", OPENAI_DEFAULT_BASE_URL, "Faster, cheaper GPT-4o", "cloud"),
    _preset(
        "Claude 3.5 Sonnet",
        "claude-3-5-sonnet-20241022",
        "anthropic",
        "Anthropic Claude",
        ANTHROPIC_DEFAULT_BASE_URL,
        "Strong at analysis and writing",
        "cloud",
    ),
    _preset(
        "Gemini 1.5 Pro",
        "gemini-1.5-pro",
        "gemini",
        "Google Gemini",
        "https://generativelanguage.googleapis.com/v1beta",
        "Google's large model",
        "cloud",
    ),
    _preset(
        "Claude 3.5 Sonnet (OpenRouter)",
        "anthropic/claude-3.5-sonnet",
        "openrouter",
        "OpenRouter",
        OPENROUTER_DEFAULT_BASE_URL,
        "Claude through OpenRouter",
        "cloud",
    ),
    _preset("Llama 3.2 (Ollama)", "llama3.2", "ollama", "Ollama", "http://localhost:11434/v1", "Meta open model, runs locally", "local"),
    _preset("Qwen 2.5 (Ollama)", "qwen2.5", "ollama", "Ollama", "http://localhost:11434/v1", "Alibaba open model, runs locally", "local"),
)


def default_provider_configs() -> List[ProviderConfig]:
    """Built-in providers as disabled configs with empty keys."""
    return [
        ProviderConfig(
            **{k: v for k, v in entry.items() if k != "models"},
            models=tuple(ModelConfig(**m) for m in entry["models"]),
            api_key="",
            enabled=False,
        )
        for entry in BUILTIN_PROVIDERS
    ]


__all__ = ["BUILTIN_PROVIDERS", "PRESET_MODELS", "default_provider_configs"]
