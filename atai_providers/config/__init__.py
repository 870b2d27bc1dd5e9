"""Configuration layer for providers.

The host application owns persistence; it hands this layer plain mappings
(its settings JSON, camelCase keys) or snake_case dicts. The loaders here
turn them into frozen value objects:

* ``load_provider_configs(items) -> list[ProviderConfig]``
* ``load_model_configs(items) -> list[AIModelConfig]``

A missing ``apiType`` becomes ``chat_completions``. Values are not range
checked while loading; ``ProviderRegistry.validate`` reports violations.
No environment variables or files are read.
"""
from __future__ import annotations

from typing import Any, Iterable, List, Mapping

from ..base.models import AIModelConfig, ProviderConfig
from .builtin import BUILTIN_PROVIDERS, PRESET_MODELS, default_provider_configs


def load_provider_configs(items: Iterable[Mapping[str, Any]]) -> List[ProviderConfig]:
    """Parse provider config mappings (camelCase or snake_case keys).

    Raises:
        pydantic.ValidationError: An item is structurally invalid (e.g. no ``id``).
    """
    return [ProviderConfig.model_validate(dict(item)) for item in items]


def load_model_configs(items: Iterable[Mapping[str, Any]]) -> List[AIModelConfig]:
    """Parse model-level config mappings (camelCase or snake_case keys)."""
    return [AIModelConfig.model_validate(dict(item)) for item in items]


__all__ = [
    "BUILTIN_PROVIDERS",
    "PRESET_MODELS",
    "default_provider_configs",
    "load_provider_configs",
    "load_model_configs",
]
