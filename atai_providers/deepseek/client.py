"""DeepSeek provider.

Plain OpenAI-compatible chat completions; only the model listing differs,
answered from a fixed catalog.
"""

from __future__ import annotations

from typing import Optional

from ..base.dto.adapter_params import AdapterParams
from ..base.http import Transport
from ..base.openai_style_parts import ChatCompletionsAdapter, FixedCatalogProvider
from ..config.defaults import DEEPSEEK_MODELS

__all__ = ["DeepseekProvider"]


class DeepseekProvider(FixedCatalogProvider):
    """Chat-completions adapter with the DeepSeek model catalog."""

    def __init__(self, params: AdapterParams, *, transport: Optional[Transport] = None) -> None:
        inner = ChatCompletionsAdapter(params, provider_name="deepseek", vendor="DeepSeek", transport=transport)
        super().__init__(inner, DEEPSEEK_MODELS)
