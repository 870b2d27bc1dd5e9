"""Interfaces (Protocols) split into single-class modules.

``atai_providers.base.interfaces`` re-exports these as the stable API.
"""

from .generation_provider import GenerationProvider

__all__ = [
    "GenerationProvider",
]
