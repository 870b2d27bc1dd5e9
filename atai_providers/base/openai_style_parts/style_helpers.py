"""
Helper utilities for OpenAI-style Chat Completions adapters.

Purpose:
- Translate a :class:`GenerationRequest` into the chat-completions JSON body.
- Interpret a parsed chat-completions body into a :class:`GenerationResponse`.
- Pull model ids out of a ``GET models`` listing.

All functions are pure; network I/O lives in the adapter.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional

from ..constants import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from ..errors import EmptyResponseError
from ..models import GenerationRequest, GenerationResponse
from ..tokens import extract_openai_token_usage


def no_response_message(vendor: str) -> str:
    return f"No response from {vendor} API"


def build_chat_body(request: GenerationRequest) -> Dict[str, Any]:
    """Chat-completions body; defaults fill only fields the request left ``None``."""
    return {
        "model": request.model,
        "messages": [m.to_dict() for m in request.messages],
        "temperature": request.temperature if request.temperature is not None else DEFAULT_TEMPERATURE,
        "max_tokens": request.max_tokens if request.max_tokens is not None else DEFAULT_MAX_TOKENS,
        "stream": False,
    }


def build_probe_body(model: str) -> Dict[str, Any]:
    """Minimal one-token request used as a connection probe."""
    return {
        "model": model,
        "messages": [{"role": "user", "content": "Hi"}],
        "max_tokens": 1,
    }


def parse_chat_completion(
    data: Any,
    vendor: str,
    provider: Optional[str] = None,
    model: Optional[str] = None,
) -> GenerationResponse:
    """Normalize a chat-completions response body.

    Raises:
        EmptyResponseError: When ``choices`` is missing or empty.
    """
    choices = data.get("choices") if isinstance(data, Mapping) else None
    if not isinstance(choices, list) or not choices:
        raise EmptyResponseError(no_response_message(vendor), provider=provider, model=model)
    first = choices[0] if isinstance(choices[0], Mapping) else {}
    message = first.get("message")
    content = message.get("content") if isinstance(message, Mapping) else None
    return GenerationResponse(
        content=content if isinstance(content, str) else "",
        usage=extract_openai_token_usage(data.get("usage")),
    )


def model_ids(data: Any) -> List[str]:
    """Return ids from a ``{"data": [{"id": ...}, ...]}`` listing."""
    items = data.get("data") if isinstance(data, Mapping) else None
    if not isinstance(items, list):
        return []
    return [m["id"] for m in items if isinstance(m, Mapping) and isinstance(m.get("id"), str)]


def has_models(data: Any) -> bool:
    items = data.get("data") if isinstance(data, Mapping) else None
    return isinstance(items, list) and len(items) > 0


__all__ = [
    "build_chat_body",
    "build_probe_body",
    "has_models",
    "model_ids",
    "no_response_message",
    "parse_chat_completion",
]
