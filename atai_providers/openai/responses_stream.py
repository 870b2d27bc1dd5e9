"""Event dispatch for OpenAI responses API event streams.

:class:`ResponsesStreamParser` consumes the ordered events produced by
:func:`~atai_providers.base.streaming.iter_sse_events` and reduces them to a
:class:`StreamResult`. It is a one-pass state machine with three outcomes:
accumulating, error raised, completed.

Dispatch by event name (the ``event:`` field, else the payload ``type``,
else ``message``):

- ``response.error``: raise :class:`StreamError` immediately.
- ``response.output_text.delta`` / ``response.content_part.delta``: append
  the delta text to the output buffer.
- ``response.output_item.added|done`` / ``response.content_part.added``:
  run the structured extractor over the item or part and stash the result as
  a fallback candidate.
- any event carrying ``response.usage``: captured when no usage is held yet.
- ``response.completed``: its usage overwrites any snapshot, a last-resort
  extraction runs if the buffer is still empty, and parsing stops.

Malformed JSON payloads are skipped and logged at debug level.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional

from ..base.errors import StreamError
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.models import Usage
from ..base.streaming import DEFAULT_EVENT_NAME, SseEvent, iter_sse_events
from ..base.tokens import extract_responses_token_usage
from .responses_extract import extract_structured_text

EVENT_ERROR = "response.error"
EVENT_COMPLETED = "response.completed"
DELTA_EVENTS = frozenset({"response.output_text.delta", "response.content_part.delta"})
ITEM_EVENTS = frozenset({"response.output_item.added", "response.output_item.done"})
PART_EVENTS = frozenset({"response.content_part.added"})

STREAM_ERROR_FALLBACK = "Responses stream error"


@dataclass(frozen=True)
class StreamResult:
    """Reduced outcome of one event stream.

    Attributes:
        content: Trimmed delta text, else joined fallback candidates, else ``""``.
        usage: Last captured usage snapshot, if any.
        completed: Whether a ``response.completed`` event was seen.
        events: Number of decoded events dispatched.
    """

    content: str
    usage: Optional[Usage] = None
    completed: bool = False
    events: int = 0


def _event_name(ev: SseEvent, payload: Mapping[str, Any]) -> str:
    if ev.event:
        return ev.event
    kind = payload.get("type")
    if isinstance(kind, str) and kind:
        return kind
    return DEFAULT_EVENT_NAME


def _delta_text(payload: Mapping[str, Any]) -> str:
    delta = payload.get("delta")
    if isinstance(delta, Mapping):
        text = delta.get("text")
        return text if isinstance(text, str) else ""
    if isinstance(delta, str):
        return delta
    text = payload.get("text")
    return text if isinstance(text, str) else ""


def _stream_error_message(payload: Mapping[str, Any]) -> str:
    error = payload.get("error")
    if isinstance(error, Mapping):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    if isinstance(error, str) and error:
        return error
    message = payload.get("message")
    if isinstance(message, str) and message:
        return message
    return STREAM_ERROR_FALLBACK


def _response_usage(payload: Mapping[str, Any]) -> Optional[Usage]:
    response = payload.get("response")
    if isinstance(response, Mapping) and isinstance(response.get("usage"), Mapping):
        return extract_responses_token_usage(response["usage"])
    return None


class ResponsesStreamParser:
    """Reduce a buffered responses API event stream to text and usage."""

    def __init__(self, provider: str = "openai", model: Optional[str] = None, logger: Optional[logging.Logger] = None) -> None:
        self._ctx = LogContext(provider=provider, model=model, operation="responses.stream")
        self._logger = logger or get_logger("providers.openai.responses")

    def parse(self, text: str) -> StreamResult:
        """Parse ``text``; raises :class:`StreamError` on a ``response.error`` event."""
        buffer: List[str] = []
        fallbacks: List[str] = []
        usage: Optional[Usage] = None
        completed = False
        count = 0

        for ev in iter_sse_events(text):
            try:
                payload = json.loads(ev.data)
            except ValueError as exc:
                log_event(
                    self._logger,
                    "stream.decode_error",
                    self._ctx,
                    level=logging.DEBUG,
                    event_name=ev.name,
                    error=str(exc),
                )
                continue
            if not isinstance(payload, Mapping):
                continue
            count += 1
            name = _event_name(ev, payload)

            if name == EVENT_ERROR:
                message = _stream_error_message(payload)
                normalized_log_event(
                    self._logger,
                    "stream.error",
                    self._ctx,
                    phase="stream",
                    level=logging.WARNING,
                    error_code=StreamError.code.value,
                    emitted=bool(buffer),
                    message=message,
                )
                raise StreamError(message, provider=self._ctx.provider, model=self._ctx.model, raw=None)

            if name in DELTA_EVENTS:
                piece = _delta_text(payload)
                if piece:
                    buffer.append(piece)
            elif name in ITEM_EVENTS:
                candidate = extract_structured_text(payload.get("item"))
                if candidate:
                    fallbacks.append(candidate)
            elif name in PART_EVENTS:
                part = payload.get("part")
                candidate = extract_structured_text({"content": [part]}) if part is not None else ""
                if candidate:
                    fallbacks.append(candidate)

            snapshot = _response_usage(payload)
            if name == EVENT_COMPLETED:
                if snapshot is not None:
                    usage = snapshot
                if not "".join(buffer).strip():
                    response = payload.get("response")
                    candidate = extract_structured_text(response if isinstance(response, Mapping) else payload)
                    if candidate:
                        fallbacks.append(candidate)
                completed = True
                break
            if snapshot is not None and usage is None:
                usage = snapshot

        content = "".join(buffer).strip()
        if not content:
            content = "\n".join(c.strip() for c in fallbacks if c.strip()).strip()
        return StreamResult(content=content, usage=usage, completed=completed, events=count)


__all__ = ["ResponsesStreamParser", "StreamResult"]
