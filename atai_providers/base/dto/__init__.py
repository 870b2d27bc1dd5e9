"""DTO package for provider construction parameters."""

from .adapter_params import AdapterParams

__all__ = ["AdapterParams"]
