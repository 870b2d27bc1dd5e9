"""Streaming package for provider layer.

Holds the SSE block decoder used by adapters that receive
``text/event-stream`` bodies.
"""

from .sse import DEFAULT_EVENT_NAME, SseEvent, iter_sse_events, looks_like_sse, parse_sse_block

__all__ = [
    "DEFAULT_EVENT_NAME",
    "SseEvent",
    "iter_sse_events",
    "looks_like_sse",
    "parse_sse_block",
]
