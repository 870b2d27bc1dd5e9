"""
Providers Base Package

Provider-agnostic contracts and DTOs shared by every adapter:

- Models (DTOs): requests, responses, configs and the model catalog
- Errors: the normalized ``ProviderError`` taxonomy
- Interfaces: the ``GenerationProvider`` protocol

The factory, registry, transports and adapter bases live in submodules and
are imported from there (``base.factory``, ``base.routing``, ``base.http``).
"""

from .errors import ErrorCode, ProviderError
from .interfaces import GenerationProvider
from .models import (
    AIModelConfig,
    ApiType,
    GenerationRequest,
    GenerationResponse,
    Message,
    ModelCatalog,
    ModelConfig,
    ProviderConfig,
    Role,
    Usage,
)

__all__ = [
    # Models
    "AIModelConfig",
    "ApiType",
    "GenerationRequest",
    "GenerationResponse",
    "Message",
    "ModelCatalog",
    "ModelConfig",
    "ProviderConfig",
    "Role",
    "Usage",
    # Errors
    "ErrorCode",
    "ProviderError",
    # Interfaces
    "GenerationProvider",
]
