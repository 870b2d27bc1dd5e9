"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports the Protocols split into single-class modules under
``atai_providers.base.interfaces_parts`` so imports stay stable.
"""

from __future__ import annotations

from .interfaces_parts import GenerationProvider

__all__ = [
    "GenerationProvider",
]
