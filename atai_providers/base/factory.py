"""Provider Factory utilities.

Purpose
-------
Create adapter instances for a provider id. Adapter kinds form a closed set
(:class:`ProviderKind`) mapped statically to constructor callables, so every
kind is known at import time and no dynamic module loading happens.

Any id that is not a known kind resolves to ``custom``: an OpenAI-compatible
chat-completions adapter that keeps the caller's id as its provider name.

Failure modes
-------------
- A blank id, or a constructor that raises, surfaces as
  :class:`ProviderConstructionError` chained to the original exception.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from .dto.adapter_params import AdapterParams
from .http import Transport
from .interfaces import GenerationProvider
from .openai_style_parts import ChatCompletionsAdapter
from ..anthropic.client import AnthropicProvider
from ..deepseek.client import DeepseekProvider
from ..glm.client import GLMProvider
from ..kimi.client import KimiProvider
from ..openai.client import create_openai_provider
from ..openrouter.client import OpenRouterProvider


class ProviderKind(str, Enum):
    """Closed set of adapter kinds."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OPENROUTER = "openrouter"
    DEEPSEEK = "deepseek"
    KIMI = "kimi"
    GLM = "glm"
    CUSTOM = "custom"

    @classmethod
    def resolve(cls, provider_id: str) -> "ProviderKind":
        """Map an id to its kind; unknown ids are ``CUSTOM``."""
        try:
            return cls((provider_id or "").strip().lower())
        except ValueError:
            return cls.CUSTOM


class ProviderConstructionError(Exception):
    """Raised when an adapter cannot be built for a provider id."""


Constructor = Callable[[str, AdapterParams, Optional[Transport]], GenerationProvider]


def _custom(provider_id: str, params: AdapterParams, transport: Optional[Transport]) -> GenerationProvider:
    return ChatCompletionsAdapter(params, provider_name=provider_id, vendor="OpenAI", transport=transport)


_CONSTRUCTORS: Dict[ProviderKind, Constructor] = {
    ProviderKind.OPENAI: lambda _, p, t: create_openai_provider(p, transport=t),
    ProviderKind.ANTHROPIC: lambda _, p, t: AnthropicProvider(p, transport=t),
    ProviderKind.OPENROUTER: lambda _, p, t: OpenRouterProvider(p, transport=t),
    ProviderKind.DEEPSEEK: lambda _, p, t: DeepseekProvider(p, transport=t),
    ProviderKind.KIMI: lambda _, p, t: KimiProvider(p, transport=t),
    ProviderKind.GLM: lambda _, p, t: GLMProvider(p, transport=t),
    ProviderKind.CUSTOM: _custom,
}


class ProviderFactory:
    """Create provider adapters from a provider id."""

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        params: Optional[AdapterParams] = None,
        transport: Optional[Transport] = None,
        **kwargs: Any,
    ) -> GenerationProvider:
        """Create an adapter for ``provider``.

        Parameters
        ----------
        provider:
            Provider id (e.g. ``"deepseek"``); unknown ids build a custom
            OpenAI-compatible adapter.
        params:
            Typed construction parameters; merged with ``kwargs`` (explicit
            kwargs win).
        transport:
            HTTP backend shared with the adapter.

        Raises
        ------
        ProviderConstructionError
            Blank id, invalid parameters, or a raising constructor.
        """
        provider_id = (provider or "").strip()
        if not provider_id:
            raise ProviderConstructionError("Provider id is required")
        kind = ProviderKind.resolve(provider_id)
        try:
            merged = AdapterParams(**cls._coerce_params(params, kwargs))
            return _CONSTRUCTORS[kind](provider_id, merged, transport)
        except Exception as exc:
            raise ProviderConstructionError(f"Failed to initialize provider '{provider_id}': {exc}") from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Known kinds in declaration order."""
        return tuple(k.value for k in ProviderKind)

    @staticmethod
    def _coerce_params(params: Optional[AdapterParams], kwargs: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``AdapterParams`` with loose ``kwargs``.

        ``None`` values in ``params`` are ignored; ``headers`` is
        shallow-merged with kwargs winning conflicts.
        """
        if params is None:
            return dict(kwargs)
        merged: Dict[str, Any] = dict(params.model_dump(exclude_none=True))
        if "headers" in kwargs:
            merged["headers"] = {**merged.get("headers", {}), **kwargs["headers"]}
        merged.update({k: v for k, v in kwargs.items() if k != "headers"})
        return merged


__all__ = [
    "ProviderConstructionError",
    "ProviderFactory",
    "ProviderKind",
]
