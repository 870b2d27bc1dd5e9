"""DeepSeek provider."""

from .client import DeepseekProvider

__all__ = ["DeepseekProvider"]
