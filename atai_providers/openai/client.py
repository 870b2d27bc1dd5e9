"""OpenAI provider.

The openai kind speaks one of two wire formats, chosen by ``api_type``:

- ``chat_completions`` (default): :class:`OpenAIProvider`, a chat-completions
  adapter whose model listing keeps only ``gpt`` ids.
- ``responses``: :class:`~atai_providers.openai.responses.ResponsesAdapter`.

:func:`create_openai_provider` is the constructor the factory registers.
"""

from __future__ import annotations

from typing import Optional, Union

from ..base.dto.adapter_params import AdapterParams
from ..base.http import Transport
from ..base.models import ApiType
from ..base.openai_style_parts import ChatCompletionsAdapter
from ..config.defaults import OPENAI_MODEL_FILTER
from .responses import ResponsesAdapter

__all__ = ["OpenAIProvider", "create_openai_provider"]


class OpenAIProvider(ChatCompletionsAdapter):
    """OpenAI chat-completions adapter."""

    def __init__(self, params: AdapterParams, *, transport: Optional[Transport] = None) -> None:
        super().__init__(
            params,
            provider_name="openai",
            vendor="OpenAI",
            model_filter=OPENAI_MODEL_FILTER,
            transport=transport,
        )


def create_openai_provider(
    params: AdapterParams, *, transport: Optional[Transport] = None
) -> Union[OpenAIProvider, ResponsesAdapter]:
    if params.api_type == ApiType.RESPONSES:
        return ResponsesAdapter(params, provider_name="openai", transport=transport)
    return OpenAIProvider(params, transport=transport)
