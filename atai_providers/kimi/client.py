"""Kimi (Moonshot) provider.

OpenAI-compatible chat completions with a fixed Moonshot model catalog.
"""

from __future__ import annotations

from typing import Optional

from ..base.dto.adapter_params import AdapterParams
from ..base.http import Transport
from ..base.openai_style_parts import ChatCompletionsAdapter, FixedCatalogProvider
from ..config.defaults import KIMI_MODELS

__all__ = ["KimiProvider"]


class KimiProvider(FixedCatalogProvider):
    def __init__(self, params: AdapterParams, *, transport: Optional[Transport] = None) -> None:
        inner = ChatCompletionsAdapter(params, provider_name="kimi", vendor="Kimi", transport=transport)
        super().__init__(inner, KIMI_MODELS)
