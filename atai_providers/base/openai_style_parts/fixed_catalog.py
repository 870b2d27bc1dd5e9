"""FixedCatalogProvider: composition wrapper with a static model list.

Delegates ``send`` and ``test_connection`` to the wrapped adapter unchanged
and answers ``list_models`` from a fixed catalog without any network call.
"""

from __future__ import annotations

from typing import List, Sequence

from ..interfaces import GenerationProvider
from ..models import GenerationRequest, GenerationResponse


class FixedCatalogProvider:
    """Wrap ``inner`` and replace only its model listing."""

    def __init__(self, inner: GenerationProvider, models: Sequence[str]) -> None:
        self._inner = inner
        self._models = tuple(models)

    @property
    def provider_name(self) -> str:
        return self._inner.provider_name

    async def send(self, request: GenerationRequest) -> GenerationResponse:
        return await self._inner.send(request)

    async def test_connection(self) -> bool:
        return await self._inner.test_connection()

    async def list_models(self) -> List[str]:
        return list(self._models)


__all__ = ["FixedCatalogProvider"]
