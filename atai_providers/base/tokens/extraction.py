"""Token usage extraction helpers.

This module maps vendor-specific usage objects found in parsed JSON bodies
onto the normalized :class:`~atai_providers.base.models.Usage` value:

    chat completions:  prompt_tokens / completion_tokens / total_tokens
    anthropic messages: input_tokens / output_tokens / total_tokens
    responses API:     input_tokens|prompt_tokens / output_tokens|completion_tokens / total_tokens

Design Principles
-----------------
1. Pass-through: vendor numbers are returned unchanged. Only JSON numbers
   count; strings and other shapes map to ``None``. Nothing is derived;
   a ``total`` the vendor did not report stays ``None`` even when both
   components are present.
2. Absent is not zero: a missing field maps to ``None``.
3. No usage object at all (or a non-mapping one) yields ``None`` so callers
   can omit usage from the response entirely.

All helpers are pure and never raise.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional, Sequence

from ..models import Usage


def _coerce_number(value: Any) -> Optional[float]:
    """Return ``value`` unchanged when it is a JSON number, else ``None``."""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value
    return None


def _first_present(usage: Mapping[str, Any], keys: Sequence[str]) -> Optional[float]:
    for key in keys:
        val = _coerce_number(usage.get(key))

        if val is not None:
            return val
    return None


def _map_usage(
    usage: Any,
    prompt_keys: Sequence[str],
    completion_keys: Sequence[str],
) -> Optional[Usage]:
    if not isinstance(usage, Mapping):
        return None
    return Usage(
        prompt_tokens=_first_present(usage, prompt_keys),
        completion_tokens=_first_present(usage, completion_keys),
        total_tokens=_coerce_number(usage.get("total_tokens")),
    )


def extract_openai_token_usage(usage: Any) -> Optional[Usage]:
    """Map a chat-completions ``usage`` object."""
    return _map_usage(usage, ("prompt_tokens",), ("completion_tokens",))


def extract_anthropic_token_usage(usage: Any) -> Optional[Usage]:
    """Map an Anthropic messages ``usage`` object.

    ``total_tokens`` is only filled when the vendor sends it.
    """
    return _map_usage(usage, ("input_tokens",), ("output_tokens",))


def extract_responses_token_usage(usage: Any) -> Optional[Usage]:
    """Map a responses API ``usage`` object, accepting both naming schemes."""
    return _map_usage(usage, ("input_tokens", "prompt_tokens"), ("output_tokens", "completion_tokens"))


_CJK = re.compile(r"[一-龥]")
_WORD = re.compile(r"[a-zA-Z]+")
_PUNCT = re.compile(r"[^\w\s一-龥]")


def estimate_tokens(text: str) -> int:
    """Rough token estimate for display purposes.

    CJK characters count 1.5, English words 1 and punctuation marks 0.5; the
    sum is rounded up. Never used to fill :class:`Usage`.
    """
    if not text:
        return 0
    cjk = len(_CJK.findall(text))
    words = len(_WORD.findall(text))
    punct = len(_PUNCT.findall(text))
    return math.ceil(cjk * 1.5 + words + punct * 0.5)


__all__ = [
    "extract_openai_token_usage",
    "extract_anthropic_token_usage",
    "extract_responses_token_usage",
    "estimate_tokens",
]
