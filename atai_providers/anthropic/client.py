"""Anthropic messages adapter.

Wire format:
- ``POST v1/messages``; the first ``system`` message becomes the top-level
  ``system`` field and every other message goes into ``messages``.
- Headers: bearer ``Authorization``, ``x-api-key`` and ``anthropic-version``.
- ``content[0].text`` carries the answer; usage maps ``input_tokens`` /
  ``output_tokens`` and keeps ``total_tokens`` only when the vendor sends it.

There is no list-models endpoint: ``test_connection`` sends a one-token probe
and ``list_models`` answers from a static catalog.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..base.constants import DEFAULT_MAX_TOKENS, DEFAULT_TEMPERATURE
from ..base.dto.adapter_params import AdapterParams
from ..base.errors import EmptyResponseError
from ..base.http import Transport
from ..base.models import GenerationRequest, GenerationResponse
from ..base.openai_style_parts.base import BaseHttpProvider
from ..base.openai_style_parts.style_helpers import build_probe_body, no_response_message
from ..base.tokens import extract_anthropic_token_usage
from ..config.defaults import ANTHROPIC_MODELS, ANTHROPIC_PROBE_MODEL, ANTHROPIC_VERSION

__all__ = ["AnthropicProvider", "build_messages_body"]

MESSAGES_ENDPOINT = "v1/messages"


def build_messages_body(request: GenerationRequest) -> Dict[str, Any]:
    """Split the system prompt out and apply defaults to ``None`` fields."""
    system = next((m.content for m in request.messages if m.role == "system"), None)
    body: Dict[str, Any] = {
        "model": request.model,
        "messages": [m.to_dict() for m in request.messages if m.role != "system"],
        "max_tokens": request.max_tokens if request.max_tokens is not None else DEFAULT_MAX_TOKENS,
        "temperature": request.temperature if request.temperature is not None else DEFAULT_TEMPERATURE,
    }
    if system is not None:
        body["system"] = system
    return body


class AnthropicProvider(BaseHttpProvider):
    """Adapter for the Anthropic messages API."""

    def __init__(self, params: AdapterParams, *, transport: Optional[Transport] = None) -> None:
        super().__init__(params, provider_name="anthropic", transport=transport)

    def _auth_headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._params.api_key}",
            "x-api-key": self._params.api_key,
            "anthropic-version": ANTHROPIC_VERSION,
        }

    async def _send(self, request: GenerationRequest) -> GenerationResponse:
        resp = await self._request(MESSAGES_ENDPOINT, "POST", build_messages_body(request))
        data = resp.json()
        content = data.get("content") if isinstance(data, Mapping) else None
        if not isinstance(content, list) or not content:
            raise EmptyResponseError(no_response_message("Anthropic"), provider=self.provider_name, model=request.model)
        first = content[0] if isinstance(content[0], Mapping) else {}
        text = first.get("text")
        return GenerationResponse(
            content=text if isinstance(text, str) else "",
            usage=extract_anthropic_token_usage(data.get("usage")),
        )

    async def _test_connection(self) -> bool:
        await self._request(MESSAGES_ENDPOINT, "POST", build_probe_body(ANTHROPIC_PROBE_MODEL))
        return True

    async def _list_models(self) -> List[str]:
        return list(ANTHROPIC_MODELS)

    def _fallback_models(self) -> Sequence[str]:
        return ANTHROPIC_MODELS
