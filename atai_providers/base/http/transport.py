"""HTTP delivery backends normalized behind one ``Transport`` protocol.

Purpose:
    Adapters never talk to a concrete HTTP library. They hand a fully built
    request to a ``Transport`` and receive a :class:`RawHttpResponse`. Two
    backends exist:

    - :class:`HttpxTransport`: the generic fetch path built on
      ``httpx.AsyncClient``.
    - :class:`BridgeTransport`: wraps a host-embedded async HTTP bridge
      (an application shell that owns networking) whose replies are mappings.

    Callers never branch on which backend is active.

External dependencies:
    - ``httpx`` for the generic asynchronous client and case-insensitive
      header container.

Lifecycle:
    ``HttpxTransport`` opens a client per call so each request owns its own
    lifecycle; an ``httpx.AsyncBaseTransport`` may be injected (tests use
    ``httpx.MockTransport``).
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Mapping, Optional, Protocol, runtime_checkable

import httpx

from ..constants import DEFAULT_HTTP_TIMEOUT


@dataclass(frozen=True)
class RawHttpResponse:
    """Backend-neutral view of an HTTP response.

    Attributes:
        status: Numeric HTTP status code.
        headers: Case-insensitive response headers.
        content: Raw body bytes.
        encoding: Text encoding used by :attr:`text`.
    """

    status: int
    headers: httpx.Headers = field(default_factory=httpx.Headers)
    content: bytes = b""
    encoding: str = "utf-8"

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    @property
    def text(self) -> str:
        return self.content.decode(self.encoding or "utf-8", errors="replace")

    @property
    def content_type(self) -> str:
        return self.headers.get("content-type", "").lower()

    def json(self) -> Any:
        return json.loads(self.text)


@runtime_checkable
class Transport(Protocol):
    """Deliver a single HTTP request and return the raw response."""

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        content: Optional[bytes] = None,
    ) -> RawHttpResponse:
        ...


class HttpxTransport:
    """Generic fetch backend using ``httpx.AsyncClient``.

    Parameters:
        timeout: Optional per-request timeout in seconds. ``None`` (default)
            disables timeouts so a hung call blocks until the socket resolves.
        transport: Optional ``httpx.AsyncBaseTransport`` override (e.g.
            ``httpx.MockTransport`` in tests).
    """

    def __init__(
        self,
        timeout: Optional[float] = DEFAULT_HTTP_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self._timeout = timeout
        self._transport = transport

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        content: Optional[bytes] = None,
    ) -> RawHttpResponse:
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            resp = await client.request(method, url, headers=dict(headers), content=content)
            body = await resp.aread()
        return RawHttpResponse(
            status=resp.status_code,
            headers=httpx.Headers(resp.headers),
            content=body,
            encoding=resp.encoding or "utf-8",
        )


BridgeCallable = Callable[..., Awaitable[Mapping[str, Any]]]


class BridgeTransport:
    """Backend for a host-embedded HTTP bridge.

    The bridge is awaited as ``bridge(url=..., method=..., headers=...,
    body=...)`` where ``body`` is the serialized text (or ``None``). It must
    return a mapping with ``status`` and optionally ``headers`` and either
    ``text`` or a binary ``body``; text wins when both are present.
    """

    def __init__(self, bridge: BridgeCallable) -> None:
        self._bridge = bridge

    async def send(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str],
        content: Optional[bytes] = None,
    ) -> RawHttpResponse:
        reply = await self._bridge(
            url=url,
            method=method,
            headers=dict(headers),
            body=content.decode("utf-8") if content is not None else None,
        )
        text = reply.get("text")
        if text is not None:
            body = str(text).encode("utf-8")
        else:
            raw = reply.get("body") or b""
            body = bytes(raw) if not isinstance(raw, str) else raw.encode("utf-8")
        return RawHttpResponse(
            status=int(reply.get("status", 0)),
            headers=httpx.Headers(dict(reply.get("headers") or {})),
            content=body,
        )


__all__ = [
    "RawHttpResponse",
    "Transport",
    "HttpxTransport",
    "BridgeTransport",
    "BridgeCallable",
]
