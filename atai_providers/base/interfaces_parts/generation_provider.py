"""GenerationProvider Protocol (single-class module).

The one contract every vendor adapter satisfies, whatever its wire format.
"""

from __future__ import annotations

from typing import List, Protocol, runtime_checkable

from ..models import GenerationRequest, GenerationResponse


@runtime_checkable
class GenerationProvider(Protocol):
    """Uniform adapter surface: ``send``, ``test_connection``, ``list_models``.

    ``send`` raises a :class:`~atai_providers.base.errors.ProviderError`
    subclass on failure. ``test_connection`` and ``list_models`` never raise;
    they degrade to ``False`` and an empty (or static) list.
    """

    @property
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"`` or ``"kimi"``."""
        ...

    async def send(self, request: GenerationRequest) -> GenerationResponse:
        ...

    async def test_connection(self) -> bool:
        ...

    async def list_models(self) -> List[str]:
        ...
