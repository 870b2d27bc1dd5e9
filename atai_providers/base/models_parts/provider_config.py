"""
Provider and model configuration value objects.

Purpose
-------
Carry the caller-supplied configuration that the registry turns into live
adapters. Configs are replaced wholesale whenever settings change; they are
never patched in place.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for parsing host settings. Keys may be given in the
  host's camelCase form (``apiKey``, ``baseUrl``) or in snake_case.

Notes
-----
- Models are deliberately lenient: out-of-range temperatures or token limits
  load fine and are reported by ``ProviderRegistry.validate`` instead.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from .api_type import ApiType


_CONFIG = ConfigDict(
    alias_generator=to_camel,
    populate_by_name=True,
    frozen=True,
    extra="ignore",
    protected_namespaces=(),
)


def _coerce_api_type(value: Any) -> Any:
    return value or ApiType.CHAT_COMPLETIONS


class ModelConfig(BaseModel):
    """A model entry listed under a provider config."""

    model_config = _CONFIG

    id: str
    name: str = ""
    display_name: str = ""
    max_tokens: Optional[int] = None


class ProviderConfig(BaseModel):
    """Credentials, endpoint and defaults for one provider id.

    Attributes
    ----------
    id:
        Stable provider key (e.g. ``"openai"``); unknown ids are served by the
        OpenAI-compatible custom adapter.
    api_key / base_url:
        Credentials and endpoint used to build the adapter.
    enabled:
        Adapters are only built for enabled configs with a non-blank key.
    models / default_model:
        Used to resolve the model when a request omits one.
    temperature / max_tokens:
        Defaults filled into requests that omit them.
    api_type:
        ``chat_completions`` (default) or ``responses`` (OpenAI family only).
    """

    model_config = _CONFIG

    id: str
    name: str = ""
    display_name: str = ""
    base_url: str = ""
    api_key: str = ""
    models: Tuple[ModelConfig, ...] = ()
    enabled: bool = False
    is_built_in: bool = False
    default_model: Optional[str] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    api_type: ApiType = ApiType.CHAT_COMPLETIONS

    @field_validator("api_type", mode="before")
    @classmethod
    def default_api_type(cls, value: Any) -> Any:
        return _coerce_api_type(value)

    @property
    def has_credentials(self) -> bool:
        """True when the config is enabled and carries a non-blank API key."""
        return bool(self.enabled and (self.api_key or "").strip())

    def configured_model_ids(self) -> list[str]:
        return [m.id for m in self.models]


class AIModelConfig(BaseModel):
    """A model-level record carrying its own credentials.

    Used by ``ProviderRegistry.send_with_model`` to bypass the provider-level
    configuration entirely. Which model is "active" is tracked by
    :class:`ModelCatalog`, not by a flag on each record.
    """

    model_config = _CONFIG

    id: str
    name: str = ""
    model_id: str = ""
    provider: str = ""
    provider_name: str = ""
    api_key: str = ""
    base_url: str = ""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None
    enabled: bool = True
    created_at: int = 0
    api_type: ApiType = ApiType.CHAT_COMPLETIONS

    @field_validator("api_type", mode="before")
    @classmethod
    def default_api_type(cls, value: Any) -> Any:
        return _coerce_api_type(value)


__all__ = ["ModelConfig", "ProviderConfig", "AIModelConfig"]
