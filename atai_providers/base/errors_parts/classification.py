"""
Error classification mapping raw transport failures to the provider taxonomy.

Implements HTTP status extraction, status-to-error mapping, and message-based
heuristics for timeouts and connection failures. Classification is applied
exactly once, at the adapter boundary, right before an error leaves the
provider layer.
"""
from __future__ import annotations

import asyncio
import re
from typing import Dict, Optional, Type

import httpx

from .provider_error import (
    AuthenticationError,
    NetworkError,
    ProviderError,
    ProviderTimeoutError,
    QuotaExceededError,
    UnknownError,
)

AUTH_FAILED_MESSAGE = "API key authentication failed"
QUOTA_EXCEEDED_MESSAGE = "API quota exceeded"
TIMEOUT_MESSAGE = "Request timeout"
NETWORK_MESSAGE = "Network connection error"
UNKNOWN_MESSAGE = "Unknown error"

_STATUS_PREFIX = re.compile(r"^HTTP (\d{3})\b")
_NETWORK_HINT = re.compile(r"\bconnect|fetch")


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from a raised exception.

    Supported shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    - an ``HTTP <code>`` prefix in the message (transport error text)
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    match = _STATUS_PREFIX.match(str(exc))
    if match:
        return int(match.group(1))
    return None


_HTTP_STATUS_MAP: Dict[int, tuple[Type[ProviderError], str]] = {
    401: (AuthenticationError, AUTH_FAILED_MESSAGE),
    403: (AuthenticationError, AUTH_FAILED_MESSAGE),
    429: (QuotaExceededError, QUOTA_EXCEEDED_MESSAGE),
}


def _is_timeout(exc: BaseException, msg: str) -> bool:
    if isinstance(exc, (httpx.TimeoutException, TimeoutError, asyncio.TimeoutError)):
        return True
    return "timeout" in type(exc).__name__.lower() or "timeout" in msg


def _is_network(exc: BaseException, msg: str) -> bool:
    if isinstance(exc, (httpx.TransportError, ConnectionError)):
        return True
    return _NETWORK_HINT.search(msg) is not None


def classify_error(exc: BaseException, provider: Optional[str] = None, model: Optional[str] = None) -> ProviderError:
    """Classify an exception into the normalized :class:`ProviderError` taxonomy.

    Precedence:
        1. ProviderError passthrough (never reclassified).
        2. HTTP status mapping (401/403 auth, 429 quota).
        3. Any other HTTP status: ``UnknownError`` with the original message.
        4. Timeout exceptions or messages.
        5. Connection-level failures.
        6. ``UnknownError`` preserving the original message.
    """
    if isinstance(exc, ProviderError):
        return exc
    status = _extract_status(exc)
    if status is not None:
        if status in _HTTP_STATUS_MAP:
            klass, message = _HTTP_STATUS_MAP[status]
            return klass(message, provider=provider, model=model, raw=exc)
        # error bodies are vendor text; only transport failures get heuristics
        return UnknownError(str(exc) or UNKNOWN_MESSAGE, provider=provider, model=model, raw=exc)
    msg = str(exc).lower()
    if _is_timeout(exc, msg):
        return ProviderTimeoutError(TIMEOUT_MESSAGE, provider=provider, model=model, raw=exc)
    if _is_network(exc, msg):
        return NetworkError(NETWORK_MESSAGE, provider=provider, model=model, raw=exc)
    return UnknownError(str(exc) or UNKNOWN_MESSAGE, provider=provider, model=model, raw=exc)


__all__ = [
    "classify_error",
    "_extract_status",
    "_HTTP_STATUS_MAP",
    "AUTH_FAILED_MESSAGE",
    "QUOTA_EXCEEDED_MESSAGE",
    "TIMEOUT_MESSAGE",
    "NETWORK_MESSAGE",
]
