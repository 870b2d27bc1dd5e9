"""OpenRouter provider."""

from .client import OpenRouterProvider

__all__ = ["OpenRouterProvider"]
