"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`atai_providers.base.models_parts` if needed, while `atai_providers.base.models`
remains the primary stable import path.
"""

from .api_type import ApiType
from .message import Message, Role
from .generation_request import GenerationRequest
from .generation_response import GenerationResponse, Usage
from .provider_config import AIModelConfig, ModelConfig, ProviderConfig
from .model_catalog import ModelCatalog

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
