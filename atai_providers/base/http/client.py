"""Shared request helper used by every provider adapter.

Purpose:
    Centralize URL joining, default headers, JSON body serialization, and the
    "raise on non-2xx" rule so adapters only describe *what* to send.

Failure modes:
    - Any non-success status raises :class:`HttpStatusError` whose message
      embeds the numeric status and the raw body text. A failed response is
      never returned as if it were successful.
    - Backend exceptions (connection resets, timeouts) propagate unchanged;
      adapters classify them at their boundary.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from .transport import RawHttpResponse, Transport

DEFAULT_HEADERS: Mapping[str, str] = {"Content-Type": "application/json"}


class HttpStatusError(Exception):
    """Raw transport error for a non-2xx response (classified by adapters)."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"HTTP {status_code}: {body}")
        self.status_code = status_code
        self.body = body


def join_url(base_url: str, endpoint: str) -> str:
    """Join ``base_url`` and ``endpoint`` trimming one redundant slash at the seam."""
    base = base_url[:-1] if base_url.endswith("/") else base_url
    tail = endpoint[1:] if endpoint.startswith("/") else endpoint
    return f"{base}/{tail}"


async def make_request(
    transport: Transport,
    base_url: str,
    endpoint: str,
    method: str = "POST",
    body: Any = None,
    headers: Optional[Mapping[str, str]] = None,
) -> RawHttpResponse:
    """Issue an HTTP call through ``transport`` and return the raw response.

    Parameters:
        transport: Delivery backend.
        base_url: Provider base URL (e.g. ``https://api.openai.com/v1``).
        endpoint: Path fragment relative to ``base_url``.
        method: HTTP method; ``GET`` never carries a body.
        body: JSON-serializable payload for non-GET methods.
        headers: Extra headers merged over ``Content-Type: application/json``.

    Raises:
        HttpStatusError: When the response status is outside 2xx.
    """
    url = join_url(base_url, endpoint)
    merged = {**DEFAULT_HEADERS, **(headers or {})}
    method = method.upper()
    content = None
    if body is not None and method != "GET":
        content = json.dumps(body, ensure_ascii=False).encode("utf-8")
    resp = await transport.send(method, url, merged, content)
    if not resp.ok:
        raise HttpStatusError(resp.status, resp.text)
    return resp


__all__ = ["DEFAULT_HEADERS", "HttpStatusError", "join_url", "make_request"]
