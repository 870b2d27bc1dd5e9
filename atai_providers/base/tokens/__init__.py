"""Token usage helpers package."""

from .extraction import (
    estimate_tokens,
    extract_anthropic_token_usage,
    extract_openai_token_usage,
    extract_responses_token_usage,
)

__all__ = [
    "extract_openai_token_usage",
    "extract_anthropic_token_usage",
    "extract_responses_token_usage",
    "estimate_tokens",
]
