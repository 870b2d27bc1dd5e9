"""
Normalized provider error codes (taxonomy).

Defines the `ErrorCode` enumeration carried by every `ProviderError`
subclass. Values are lowercase snake_case and are considered a stable public
contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    QUOTA_EXCEEDED = "quota_exceeded"
    TIMEOUT = "timeout"
    NETWORK = "network"
    PROVIDER_NOT_FOUND = "provider_not_found"
    CONFIG_NOT_FOUND = "config_not_found"
    STREAM = "stream"
    EMPTY_RESPONSE = "empty_response"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
