"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the implementations under
``atai_providers.base.models_parts`` to preserve a stable import path.
"""

from .models_parts.api_type import ApiType
from .models_parts.message import Message, Role
from .models_parts.generation_request import GenerationRequest
from .models_parts.generation_response import GenerationResponse, Usage
from .models_parts.provider_config import AIModelConfig, ModelConfig, ProviderConfig
from .models_parts.model_catalog import ModelCatalog

__all__ = [
    "ApiType",
    "Message",
    "Role",
    "GenerationRequest",
    "GenerationResponse",
    "Usage",
    "ModelConfig",
    "ProviderConfig",
    "AIModelConfig",
    "ModelCatalog",
]
