"""GLM (Zhipu) provider."""

from .client import GLMProvider

__all__ = ["GLMProvider"]
