"""Anthropic messages provider."""

from .client import AnthropicProvider

__all__ = ["AnthropicProvider"]
