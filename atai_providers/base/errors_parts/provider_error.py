"""
Structured provider error exception types.

Every failure that leaves the provider layer is a `ProviderError` subclass
whose class-level `code` places it in the normalized taxonomy. The
human-readable ``message`` is what ``str(error)`` returns so callers can
surface it as-is.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        message: Human-readable error message suitable for display.
        provider: Provider key where the error originated (e.g., ``"openai"``).
        model: Optional model name associated with the failure.
        raw: Optional original exception for diagnostics.
    """

    message: str
    provider: Optional[str] = None
    model: Optional[str] = None
    raw: Optional[BaseException] = None

    code: ClassVar[ErrorCode] = ErrorCode.UNKNOWN

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class AuthenticationError(ProviderError):
    """The vendor rejected the credentials (HTTP 401/403)."""

    code = ErrorCode.AUTH


class QuotaExceededError(ProviderError):
    """The vendor reported rate limiting or exhausted quota (HTTP 429)."""

    code = ErrorCode.QUOTA_EXCEEDED


class ProviderTimeoutError(ProviderError):
    """The transport timed out before the vendor answered."""

    code = ErrorCode.TIMEOUT


class NetworkError(ProviderError):
    """A connection-level failure prevented the request from completing."""

    code = ErrorCode.NETWORK


class ProviderNotFoundError(ProviderError):
    """No live adapter exists for the requested provider id."""

    code = ErrorCode.PROVIDER_NOT_FOUND


class ConfigNotFoundError(ProviderError):
    """Configuration required to reach a provider is missing."""

    code = ErrorCode.CONFIG_NOT_FOUND


class StreamError(ProviderError):
    """An event stream carried an explicit ``response.error`` event."""

    code = ErrorCode.STREAM


class EmptyResponseError(ProviderError):
    """The vendor answered but no content could be extracted."""

    code = ErrorCode.EMPTY_RESPONSE


class UnknownError(ProviderError):
    """Fallback classification; ``message`` preserves the original text."""

    code = ErrorCode.UNKNOWN


__all__ = [
    "ProviderError",
    "AuthenticationError",
    "QuotaExceededError",
    "ProviderTimeoutError",
    "NetworkError",
    "ProviderNotFoundError",
    "ConfigNotFoundError",
    "StreamError",
    "EmptyResponseError",
    "UnknownError",
]
