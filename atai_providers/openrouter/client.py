"""OpenRouter provider adapter.

OpenRouter speaks the OpenAI chat-completions format; the only difference is
two attribution headers (``HTTP-Referer`` and ``X-Title``) added to every
transport call. Headers supplied through ``AdapterParams.headers`` win.
"""

from __future__ import annotations

from typing import Dict, Optional

from ..base.dto.adapter_params import AdapterParams
from ..base.http import Transport
from ..base.openai_style_parts import ChatCompletionsAdapter
from ..config.defaults import OPENROUTER_REFERER, OPENROUTER_TITLE

__all__ = ["OpenRouterProvider", "OPENROUTER_HEADERS"]

OPENROUTER_HEADERS: Dict[str, str] = {
    "HTTP-Referer": OPENROUTER_REFERER,
    "X-Title": OPENROUTER_TITLE,
}


class OpenRouterProvider(ChatCompletionsAdapter):
    """Chat-completions adapter with OpenRouter attribution headers."""

    def __init__(self, params: AdapterParams, *, transport: Optional[Transport] = None) -> None:
        headers = {**OPENROUTER_HEADERS, **params.headers}
        super().__init__(
            params.model_copy(update={"headers": headers}),
            provider_name="openrouter",
            vendor="OpenRouter",
            transport=transport,
        )
