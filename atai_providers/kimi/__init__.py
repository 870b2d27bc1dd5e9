"""Kimi (Moonshot) provider."""

from .client import KimiProvider

__all__ = ["KimiProvider"]
