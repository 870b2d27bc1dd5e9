"""Server-Sent-Events block decoder.

Turns a fully buffered ``text/event-stream`` body into ordered
:class:`SseEvent` values. Parsing is a single forward pass over blank-line
separated blocks; block order in the source text is preserved. A chunked
reader can reuse :func:`parse_sse_block` one block at a time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional

from ..constants import SSE_DONE_SENTINEL

_BLOCK_SPLIT = re.compile(r"\n{2,}")
DEFAULT_EVENT_NAME = "message"


@dataclass(frozen=True)
class SseEvent:
    """One decoded SSE block.

    ``event`` is the raw ``event:`` field (``None`` when the block had none);
    ``data`` is every ``data:`` line joined with ``\\n``.
    """

    event: Optional[str]
    data: str

    @property
    def name(self) -> str:
        return self.event or DEFAULT_EVENT_NAME

    @property
    def is_done(self) -> bool:
        return self.data == SSE_DONE_SENTINEL


def parse_sse_block(block: str) -> Optional[SseEvent]:
    """Decode a single block; returns ``None`` when it carries no data."""
    event: Optional[str] = None
    data_lines = []
    for line in block.split("\n"):
        if line.startswith("event:"):
            event = line[len("event:"):].strip() or None
        elif line.startswith("data:"):
            data_lines.append(line[len("data:"):].strip())
    if not data_lines:
        return None
    return SseEvent(event=event, data="\n".join(data_lines))


def iter_sse_events(text: str) -> Iterator[SseEvent]:
    """Yield events from ``text`` in order, stopping at a ``[DONE]`` payload."""
    normalized = text.replace("\r\n", "\n")
    for raw_block in _BLOCK_SPLIT.split(normalized):
        block = raw_block.strip()
        if not block:
            continue
        ev = parse_sse_block(block)
        if ev is None:
            continue
        if ev.is_done:
            return
        yield ev


def looks_like_sse(text: str) -> bool:
    """Heuristic for event-stream bodies served without the SSE content type."""
    head = text.lstrip()
    return head.startswith("event:") or head.startswith("data:")


__all__ = [
    "DEFAULT_EVENT_NAME",
    "SseEvent",
    "iter_sse_events",
    "looks_like_sse",
    "parse_sse_block",
]
