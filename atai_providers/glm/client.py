"""GLM (Zhipu) provider.

OpenAI-compatible chat completions. GLM has no usable models endpoint for
this purpose, so the connection test is a one-token ``glm-3-turbo`` request
and ``list_models`` answers from a fixed catalog.
"""

from __future__ import annotations

from typing import Optional

from ..base.dto.adapter_params import AdapterParams
from ..base.http import Transport
from ..base.openai_style_parts import ChatCompletionsAdapter, FixedCatalogProvider
from ..config.defaults import GLM_MODELS, GLM_PROBE_MODEL

__all__ = ["GLMProvider"]


class GLMProvider(FixedCatalogProvider):
    def __init__(self, params: AdapterParams, *, transport: Optional[Transport] = None) -> None:
        inner = ChatCompletionsAdapter(
            params,
            provider_name="glm",
            vendor="GLM",
            probe_model=GLM_PROBE_MODEL,
            transport=transport,
        )
        super().__init__(inner, GLM_MODELS)
