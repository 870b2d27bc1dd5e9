"""Unified provider error taxonomy public surface.

This module re-exports the implementations under
``atai_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import (
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
from .errors_parts.classification import classify_error

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
