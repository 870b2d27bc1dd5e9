"""HTTP utilities for providers.

Exports the transport backends and the shared ``make_request`` helper.
"""

from .client import DEFAULT_HEADERS, HttpStatusError, join_url, make_request
from .transport import BridgeTransport, HttpxTransport, RawHttpResponse, Transport

__all__ = [
    "BridgeTransport",
    "DEFAULT_HEADERS",
    "HttpStatusError",
    "HttpxTransport",
    "RawHttpResponse",
    "Transport",
    "join_url",
    "make_request",
]
