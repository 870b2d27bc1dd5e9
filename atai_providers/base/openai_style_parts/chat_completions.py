"""ChatCompletionsAdapter for OpenAI-compatible vendors.

Used directly for the openai, custom and openrouter kinds and wrapped by the
deepseek, kimi and glm providers.

Wire format:
- ``POST chat/completions`` with ``{model, messages, temperature,
  max_tokens, stream: false}`` and a bearer token.
- ``GET models`` for discovery and the default connection test.
"""

from __future__ import annotations

from typing import List, Optional

from ..dto.adapter_params import AdapterParams
from ..http import Transport
from ..models import GenerationRequest, GenerationResponse
from .base import BaseHttpProvider
from .style_helpers import build_chat_body, build_probe_body, has_models, model_ids, parse_chat_completion


class ChatCompletionsAdapter(BaseHttpProvider):
    """OpenAI-style chat-completions adapter.

    Parameters:
        params: Credentials and endpoint.
        provider_name: Canonical id used in logs and errors.
        vendor: Display name used in ``No response from <vendor> API``.
        model_filter: When set, ``list_models`` keeps only ids containing it.
        probe_model: When set, ``test_connection`` sends a one-token request
            to this model instead of listing models.
        transport: HTTP backend.
    """

    def __init__(
        self,
        params: AdapterParams,
        *,
        provider_name: str = "custom",
        vendor: str = "OpenAI",
        model_filter: Optional[str] = None,
        probe_model: Optional[str] = None,
        transport: Optional[Transport] = None,
    ) -> None:
        super().__init__(params, provider_name=provider_name, transport=transport)
        self._vendor = vendor
        self._model_filter = model_filter
        self._probe_model = probe_model

    async def _send(self, request: GenerationRequest) -> GenerationResponse:
        resp = await self._request("chat/completions", "POST", build_chat_body(request))
        return parse_chat_completion(resp.json(), self._vendor, provider=self.provider_name, model=request.model)

    async def _test_connection(self) -> bool:
        if self._probe_model:
            await self._request("chat/completions", "POST", build_probe_body(self._probe_model))
            return True
        resp = await self._request("models", "GET")
        return has_models(resp.json())

    async def _list_models(self) -> List[str]:
        resp = await self._request("models", "GET")
        ids = model_ids(resp.json())
        if self._model_filter:
            ids = [i for i in ids if self._model_filter in i]
        return sorted(ids)


__all__ = ["ChatCompletionsAdapter"]
