"""
GenerationResponse DTO returned by every provider adapter.

Usage numbers are passed through from vendor fields unmodified; a field the
vendor did not report stays ``None`` rather than becoming zero.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional


@dataclass(frozen=True)
class Usage:
    """Vendor-reported token accounting."""

    prompt_tokens: Optional[float] = None
    completion_tokens: Optional[float] = None
    total_tokens: Optional[float] = None

    def is_empty(self) -> bool:
        return self.prompt_tokens is None and self.completion_tokens is None and self.total_tokens is None

    def to_dict(self) -> Dict[str, float]:
        """Return only the fields that were reported."""
        data = {
            "promptTokens": self.prompt_tokens,
            "completionTokens": self.completion_tokens,
            "totalTokens": self.total_tokens,
        }
        return {k: v for k, v in data.items() if v is not None}


@dataclass(frozen=True)
class GenerationResponse:
    """Normalized generation result.

    Attributes:
        content: Generated text; always present, possibly empty.
        usage: Token accounting when the vendor reported any.
    """

    content: str
    usage: Optional[Usage] = None


__all__ = [
    "Usage",
    "GenerationResponse",
]
