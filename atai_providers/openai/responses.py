"""OpenAI responses API adapter.

Wire format:
- ``POST responses`` with ``{model, input, stream: true}``; each message
  becomes ``{role, content: [{type, text}]}`` where ``type`` is
  ``output_text`` for assistant messages and ``input_text`` otherwise.
  ``temperature`` / ``max_output_tokens`` are sent only when given.
- The reply is either an event stream (``text/event-stream``, or a body that
  starts with ``event:`` / ``data:``) handled by
  :class:`~atai_providers.openai.responses_stream.ResponsesStreamParser`, or
  a single JSON document handled by the structured extractor.

There is no discovery endpoint for this flavor: ``list_models`` returns ``[]``.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from ..base.constants import SSE_CONTENT_TYPE
from ..base.dto.adapter_params import AdapterParams
from ..base.errors import EmptyResponseError, UnknownError
from ..base.http import RawHttpResponse, Transport
from ..base.models import GenerationRequest, GenerationResponse, Message
from ..base.openai_style_parts.base import BaseHttpProvider
from ..base.openai_style_parts.style_helpers import has_models
from ..base.streaming import looks_like_sse
from ..base.tokens import extract_responses_token_usage
from .responses_extract import extract_error_message, extract_structured_text
from .responses_stream import ResponsesStreamParser

__all__ = ["ResponsesAdapter", "build_responses_body"]

RESPONSES_ENDPOINT = "responses"
NO_RESPONSE_MESSAGE = "No response from OpenAI Responses API"


def _input_item(message: Message) -> Dict[str, Any]:
    part_type = "output_text" if message.role == "assistant" else "input_text"
    return {"role": message.role, "content": [{"type": part_type, "text": message.content}]}


def build_responses_body(request: GenerationRequest) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "model": request.model,
        "input": [_input_item(m) for m in request.messages],
        "stream": True,
    }
    if request.temperature is not None:
        body["temperature"] = request.temperature
    if request.max_tokens is not None:
        body["max_output_tokens"] = request.max_tokens
    return body


def _is_event_stream(resp: RawHttpResponse) -> bool:
    if SSE_CONTENT_TYPE in resp.content_type:
        return True
    return looks_like_sse(resp.text)


class ResponsesAdapter(BaseHttpProvider):
    """Adapter for the OpenAI responses API (``api_type=responses``)."""

    def __init__(
        self,
        params: AdapterParams,
        *,
        provider_name: str = "openai",
        transport: Optional[Transport] = None,
    ) -> None:
        super().__init__(params, provider_name=provider_name, transport=transport)

    async def _send(self, request: GenerationRequest) -> GenerationResponse:
        resp = await self._request(RESPONSES_ENDPOINT, "POST", build_responses_body(request))
        if _is_event_stream(resp):
            parser = ResponsesStreamParser(provider=self.provider_name, model=request.model, logger=self._logger)
            result = parser.parse(resp.text)
            content, usage = result.content, result.usage
        else:
            data = resp.json()
            error = extract_error_message(data)
            if error:
                raise UnknownError(error, provider=self.provider_name, model=request.model)
            content = extract_structured_text(data)
            usage = extract_responses_token_usage(data.get("usage")) if isinstance(data, dict) else None
        if not content:
            raise EmptyResponseError(NO_RESPONSE_MESSAGE, provider=self.provider_name, model=request.model)
        return GenerationResponse(content=content, usage=usage)

    async def _test_connection(self) -> bool:
        resp = await self._request("models", "GET")
        return has_models(resp.json())

    async def _list_models(self) -> List[str]:
        return []
