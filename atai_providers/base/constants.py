"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings and default numbers.
Generation defaults are owned by ``atai_providers.config.defaults`` and
re-exported here for the base layer.

Security
--------
This module contains only generic sentinel strings and numeric defaults.
There are no credentials or tokens embedded.
"""
from __future__ import annotations

from typing import Optional

from ..config.defaults import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE, FALLBACK_MODEL

# SSE sentinel terminating an event stream
SSE_DONE_SENTINEL = "[DONE]"
SSE_CONTENT_TYPE = "text/event-stream"

# HTTP timeout (seconds); None disables timeouts at this layer
DEFAULT_HTTP_TIMEOUT: Optional[float] = None

__all__ = [
    "DEFAULT_TEMPERATURE",
    "DEFAULT_MAX_TOKENS",
    "FALLBACK_MODEL",
    "SSE_DONE_SENTINEL",
    "SSE_CONTENT_TYPE",
    "DEFAULT_HTTP_TIMEOUT",
]
