"""Typed parameter object for provider adapter construction.

Purpose
-------
Carry the values every adapter constructor needs (credentials, endpoint and
API flavor) through the factory as one validated object instead of a long
argument list. ``headers`` carries vendor-specific static headers.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()``.

Failure modes
-------------
- Pure data container. Pydantic raises ``ValidationError`` for wrongly typed
  input; the factory surfaces it as a construction error.
"""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..models import ApiType


class AdapterParams(BaseModel):
    """Common provider adapter initialization parameters.

    Attributes
    ----------
    api_key:
        Bearer credential sent with every call.
    base_url:
        Vendor API root (e.g. ``https://api.deepseek.com/v1``).
    api_type:
        Which OpenAI wire format to speak; only the openai kind honors
        ``responses``.
    headers:
        Static headers added to every transport call.
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    base_url: str = ""
    api_type: ApiType = ApiType.CHAT_COMPLETIONS
    headers: Mapping[str, str] = Field(default_factory=dict)

    @field_validator("api_type", mode="before")
    @classmethod
    def default_api_type(cls, value: Any) -> Any:
        return value or ApiType.CHAT_COMPLETIONS


__all__ = ["AdapterParams"]
