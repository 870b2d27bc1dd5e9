"""
OpenAI-family API surface selector.
"""
from __future__ import annotations

from enum import Enum


class ApiType(str, Enum):
    """Which OpenAI endpoint family an adapter talks to."""

    CHAT_COMPLETIONS = "chat_completions"
    RESPONSES = "responses"


__all__ = ["ApiType"]
