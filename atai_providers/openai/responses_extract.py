"""Structured text extraction for OpenAI responses API payloads.

The responses API has returned several body shapes over time. Extraction
tries the known shapes in a fixed priority order and the first non-empty
match wins:

1. top-level ``output_text`` (string, or array of strings joined by ``\\n``)
2. the first usable element of ``output``: a bare string, else its
   ``content`` array's text-bearing parts joined by ``\\n``, else a nested
   ``content.text``
3. ``result`` coerced to a string
4. ``message.content`` (string, or array joined by ``\\n``)
5. top-level ``content`` (string, or array of strings / ``{text|content}``
   objects joined by ``\\n``)

All helpers are pure; they return ``""`` rather than raising.
"""

from __future__ import annotations

import json
from typing import Any, Callable, List, Mapping, Optional, Sequence


def _join(pieces: Sequence[str]) -> str:
    return "\n".join(p for p in pieces if p and p.strip())


def _part_text(part: Any) -> str:
    """Text carried by one content part (string or ``{text|content}`` object)."""
    if isinstance(part, str):
        return part
    if isinstance(part, Mapping):
        text = part.get("text")
        if isinstance(text, str):
            return text
        if isinstance(text, Mapping) and isinstance(text.get("value"), str):
            return text["value"]
        content = part.get("content")
        if isinstance(content, str):
            return content
    return ""


def _parts_text(parts: Any) -> str:
    if isinstance(parts, str):
        return parts
    if isinstance(parts, list):
        return _join([_part_text(p) for p in parts])
    return ""


def _from_output_text(payload: Mapping[str, Any]) -> str:
    value = payload.get("output_text")
    if isinstance(value, str):
        return value
    if isinstance(value, list):
        return _join([v for v in value if isinstance(v, str)])
    return ""


def _from_output_item(item: Any) -> str:
    if isinstance(item, str):
        return item
    if not isinstance(item, Mapping):
        return ""
    content = item.get("content")
    if isinstance(content, list):
        text = _parts_text(content)
        if text.strip():
            return text
    if isinstance(content, Mapping) and isinstance(content.get("text"), str):
        return content["text"]
    return ""


def _from_output(payload: Mapping[str, Any]) -> str:
    output = payload.get("output")
    if not isinstance(output, list):
        return ""
    for item in output:
        text = _from_output_item(item)
        if text.strip():
            return text
    return ""


def _from_result(payload: Mapping[str, Any]) -> str:
    result = payload.get("result")
    if result is None:
        return ""
    if isinstance(result, str):
        return result
    if isinstance(result, (Mapping, list)):
        return json.dumps(result, ensure_ascii=False)
    return str(result)


def _from_message(payload: Mapping[str, Any]) -> str:
    message = payload.get("message")
    if not isinstance(message, Mapping):
        return ""
    return _parts_text(message.get("content"))


def _from_content(payload: Mapping[str, Any]) -> str:
    return _parts_text(payload.get("content"))


_STRATEGIES: List[Callable[[Mapping[str, Any]], str]] = [
    _from_output_text,
    _from_output,
    _from_result,
    _from_message,
    _from_content,
]


def extract_structured_text(payload: Any) -> str:
    """Return the first non-empty text found by the ordered strategies."""
    if not isinstance(payload, Mapping):
        return payload.strip() if isinstance(payload, str) else ""
    for strategy in _STRATEGIES:
        text = strategy(payload)
        if text and text.strip():
            return text.strip()
    return ""


def extract_error_message(payload: Any) -> Optional[str]:
    """Return an explicit vendor error message carried by ``payload``.

    Checks ``error.message``, a string ``error`` and a string top-level
    ``message``, in that order.
    """
    if not isinstance(payload, Mapping):
        return None
    error = payload.get("error")
    if isinstance(error, Mapping):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    elif isinstance(error, str) and error:
        return error
    message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    return None


__all__ = ["extract_structured_text", "extract_error_message"]
