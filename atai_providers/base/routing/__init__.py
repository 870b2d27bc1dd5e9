"""Provider routing: the registry that maps provider ids to adapters."""

from .registry import ProviderRegistry, ProviderStats, ValidationResult

__all__ = ["ProviderRegistry", "ProviderStats", "ValidationResult"]
