"""
GenerationRequest DTO for provider-agnostic generation calls.

A request is immutable for the duration of a call. The registry derives a new
request when it fills provider defaults; the caller's object is never mutated.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .message import Message


@dataclass(frozen=True)
class GenerationRequest:
    """Normalized generation request sent to provider adapters.

    Attributes:
        messages: Ordered tuple of chat `Message` instances.
        model: Target model identifier (may be empty; the registry resolves it).
        temperature: Sampling temperature in ``[0, 2]`` when provided.
        max_tokens: Maximum completion tokens (``> 0``) when provided.
    """

    messages: Tuple[Message, ...]
    model: str = ""
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None

    def __post_init__(self) -> None:
        # Accept any iterable of messages (lists are common at call sites).
        if not isinstance(self.messages, tuple):
            object.__setattr__(self, "messages", tuple(self.messages))

    def with_defaults(
        self,
        *,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> "GenerationRequest":
        """Return a copy with missing fields filled from the given defaults.

        Only fields the caller omitted (empty model, ``None`` numbers) are
        filled; explicit values always win.
        """
        return replace(
            self,
            model=self.model or (model or ""),
            temperature=self.temperature if self.temperature is not None else temperature,
            max_tokens=self.max_tokens if self.max_tokens is not None else max_tokens,
        )


__all__ = [
    "GenerationRequest",
]
