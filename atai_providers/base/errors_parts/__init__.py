"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `atai_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import (
    AuthenticationError,
    ConfigNotFoundError,
    EmptyResponseError,
    NetworkError,
    ProviderError,
    ProviderNotFoundError,
    ProviderTimeoutError,
    QuotaExceededError,
    StreamError,
    UnknownError,
)
from .classification import classify_error

__all__ = [
    "ErrorCode",
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
    "classify_error",
]
