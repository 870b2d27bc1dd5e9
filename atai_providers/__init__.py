"""atai_providers package

Asynchronous client layer that sends chat-style generation requests to
several AI HTTP APIs (OpenAI chat completions and responses, Anthropic
messages, and OpenAI-compatible vendors such as OpenRouter, DeepSeek, Kimi
and GLM) and returns one normalized ``GenerationResponse``.

Public API (re-exported):
    - Version: ``__version__``
    - DTOs: :class:`GenerationRequest`, :class:`GenerationResponse`,
      :class:`Message`, :class:`Usage`, :class:`ProviderConfig`,
      :class:`AIModelConfig`, :class:`ModelCatalog`, :class:`ApiType`
    - Errors: :class:`ProviderError` and its subclasses, :class:`ErrorCode`
    - Routing: :class:`ProviderRegistry`
    - Factory: :func:`create`, :class:`ProviderFactory`, :class:`ProviderKind`
"""

from typing import Optional, Union

from .base.dto import AdapterParams
from .base.errors import (
    AuthenticationError,
    ConfigNotFoundError,
    EmptyResponseError,
    ErrorCode,
    NetworkError,
    ProviderError,
    ProviderNotFoundError,
    ProviderTimeoutError,
    QuotaExceededError,
    StreamError,
    UnknownError,
    classify_error,
)
from .base.factory import ProviderConstructionError, ProviderFactory, ProviderKind
from .base.http import BridgeTransport, HttpxTransport, Transport
from .base.interfaces import GenerationProvider
from .base.models import (
    AIModelConfig,
    ApiType,
    GenerationRequest,
    GenerationResponse,
    Message,
    ModelCatalog,
    ModelConfig,
    ProviderConfig,
    Usage,
)
from .base.routing import ProviderRegistry, ProviderStats, ValidationResult
from .base.tokens import estimate_tokens
from .config import default_provider_configs, load_model_configs, load_provider_configs

__version__ = "0.1.0"


def create(
    provider_id: str,
    *,
    api_key: str = "",
    base_url: str = "",
    api_type: Union[ApiType, str, None] = None,
    transport: Optional[Transport] = None,
) -> GenerationProvider:
    """Build a provider adapter for ``provider_id``.

    Unknown ids get the OpenAI-compatible custom adapter.

    Raises
    ------
    ProviderConstructionError
        Blank id or a failing adapter constructor.
    """
    params = AdapterParams(api_key=api_key, base_url=base_url, api_type=api_type)
    return ProviderFactory.create(provider_id, params=params, transport=transport)


__all__ = [
    "__version__",
    "create",
    # DTOs
    "AIModelConfig",
    "AdapterParams",
    "ApiType",
    "GenerationRequest",
    "GenerationResponse",
    "Message",
    "ModelCatalog",
    "ModelConfig",
    "ProviderConfig",
    "Usage",
    # Errors
    "AuthenticationError",
    "ConfigNotFoundError",
    "EmptyResponseError",
    "ErrorCode",
    "NetworkError",
    "ProviderConstructionError",
    "ProviderError",
    "ProviderNotFoundError",
    "ProviderTimeoutError",
    "QuotaExceededError",
    "StreamError",
    "UnknownError",
    "classify_error",
    # Providers & routing
    "BridgeTransport",
    "GenerationProvider",
    "HttpxTransport",
    "ProviderFactory",
    "ProviderKind",
    "ProviderRegistry",
    "ProviderStats",
    "Transport",
    "ValidationResult",
    # Config & utilities
    "default_provider_configs",
    "estimate_tokens",
    "load_model_configs",
    "load_provider_configs",
]
