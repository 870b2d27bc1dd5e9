"""
Message DTO used across providers.

Defines the `Message` dataclass and the `Role` literal representing the sender
role. Messages are plain text; adapters reshape them into vendor wire formats.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal


# Message roles accepted by every adapter.
Role = Literal["system", "user", "assistant"]


@dataclass(frozen=True)
class Message:
    """A single chat message.

    Attributes:
        role: The role of the message author (``"system"``, ``"user"`` or
            ``"assistant"``).
        content: Plain text content.
    """

    role: Role
    content: str

    def to_dict(self) -> Dict[str, Any]:
        """Return the OpenAI-style ``{"role", "content"}`` mapping."""
        return {"role": self.role, "content": self.content}


__all__ = [
    "Message",
    "Role",
]
