"""Provider registry: resolve a provider id to a live adapter and send.

The registry holds one immutable snapshot of ``{id: ProviderConfig}`` and
``{id: adapter}``. :meth:`ProviderRegistry.replace_all` builds a fresh
snapshot and swaps the single reference, so a concurrent reader sees either
the old maps or the new ones and never a mix. Adapters are never patched in
place; a config change always rebuilds them.

Invariant: an adapter exists for an id iff its config is enabled and carries
a non-blank API key. A constructor failure is logged and skipped without
affecting the remaining configs.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from urllib.parse import urlparse

from ...config.defaults import (
    AUTO_PICK_PRIORITY,
    FALLBACK_MODEL,
    MAX_TOKENS_MAX,
    MAX_TOKENS_MIN,
    TEMPERATURE_MAX,
    TEMPERATURE_MIN,
)
from ..dto.adapter_params import AdapterParams
from ..errors import ConfigNotFoundError, ProviderNotFoundError
from ..factory import ProviderConstructionError, ProviderFactory, ProviderKind
from ..http import Transport
from ..interfaces import GenerationProvider
from ..logging import LogContext, get_logger, log_event
from ..models import AIModelConfig, ApiType, GenerationRequest, GenerationResponse, ProviderConfig

MODEL_MISSING_CREDENTIALS = "Model missing apiKey or baseUrl"


@dataclass(frozen=True)
class ProviderStats:
    """Counts over the current configs."""

    total: int
    enabled: int
    configured: int


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of :meth:`ProviderRegistry.validate`."""

    valid: bool
    errors: Tuple[str, ...] = ()


@dataclass(frozen=True)
class _Snapshot:
    configs: Mapping[str, ProviderConfig] = field(default_factory=lambda: MappingProxyType({}))
    providers: Mapping[str, GenerationProvider] = field(default_factory=lambda: MappingProxyType({}))


def _is_valid_url(value: str) -> bool:
    parsed = urlparse(value.strip())
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class ProviderRegistry:
    """Routes generation requests to adapters built from provider configs.

    Example usage::

        registry = ProviderRegistry()
        registry.replace_all(load_provider_configs(settings["providers"]))
        provider_id = registry.pick_automatic()
        response = await registry.send(provider_id, request)
    """

    def __init__(
        self,
        configs: Optional[Iterable[ProviderConfig]] = None,
        *,
        transport: Optional[Transport] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._transport = transport
        self._logger = logger or get_logger("providers.registry")
        self._snapshot = _Snapshot()
        if configs is not None:
            self.replace_all(configs)

    # ----- configuration -----
    def replace_all(self, configs: Iterable[ProviderConfig]) -> None:
        """Replace every config and rebuild adapters for the usable ones."""
        new_configs: Dict[str, ProviderConfig] = {}
        new_providers: Dict[str, GenerationProvider] = {}
        for config in configs:
            new_configs[config.id] = config
            if not config.has_credentials:
                continue
            try:
                new_providers[config.id] = self._build(config.id, config.api_key, config.base_url, config.api_type)
            except ProviderConstructionError as exc:
                log_event(
                    self._logger,
                    "registry.provider_init_failed",
                    LogContext(provider=config.id, operation="replace_all"),
                    level=logging.WARNING,
                    error=str(exc),
                )
        self._snapshot = _Snapshot(
            configs=MappingProxyType(new_configs),
            providers=MappingProxyType(new_providers),
        )
        log_event(
            self._logger,
            "registry.replace",
            LogContext(operation="replace_all"),
            total=len(new_configs),
            built=len(new_providers),
        )

    def _build(self, provider_id: str, api_key: str, base_url: str, api_type: ApiType) -> GenerationProvider:
        params = AdapterParams(api_key=api_key, base_url=base_url, api_type=api_type)
        return ProviderFactory.create(provider_id, params=params, transport=self._transport)

    # ----- lookups -----
    def available_providers(self) -> List[ProviderConfig]:
        """Configs that currently have a live adapter, in config order."""
        snap = self._snapshot
        return [c for c in snap.configs.values() if c.has_credentials and c.id in snap.providers]

    def get_provider(self, provider_id: str) -> Optional[GenerationProvider]:
        return self._snapshot.providers.get(provider_id)

    def get_config(self, provider_id: str) -> Optional[ProviderConfig]:
        return self._snapshot.configs.get(provider_id)

    def stats(self) -> ProviderStats:
        configs = list(self._snapshot.configs.values())
        return ProviderStats(
            total=len(configs),
            enabled=sum(1 for c in configs if c.enabled),
            configured=sum(1 for c in configs if c.has_credentials),
        )

    def pick_automatic(self, priority: Sequence[str] = AUTO_PICK_PRIORITY) -> Optional[str]:
        """First available id in ``priority`` order, else any available id."""
        available = [c.id for c in self.available_providers()]
        if not available:
            return None
        for provider_id in priority:
            if provider_id in available:
                return provider_id
        return available[0]

    # ----- generation -----
    async def send(self, provider_id: str, request: GenerationRequest) -> GenerationResponse:
        """Fill provider defaults into ``request`` and delegate to the adapter.

        Raises:
            ProviderNotFoundError: No adapter for ``provider_id``.
            ConfigNotFoundError: Adapter without a config (internal inconsistency).
            ProviderError: Whatever the adapter raised, unchanged.
        """
        snap = self._snapshot
        provider = snap.providers.get(provider_id)
        if provider is None:
            raise ProviderNotFoundError(f"Provider {provider_id} not found or not enabled", provider=provider_id)
        config = snap.configs.get(provider_id)
        if config is None:
            raise ConfigNotFoundError(f"Provider config {provider_id} not found", provider=provider_id)
        final = request.with_defaults(
            model=config.default_model or next(iter(config.configured_model_ids()), None) or FALLBACK_MODEL,
            temperature=config.temperature,
            max_tokens=config.max_tokens,
        )
        return await provider.send(final)

    async def send_with_model(self, model: AIModelConfig, request: GenerationRequest) -> GenerationResponse:
        """Send through a throwaway adapter built from a model-level config.

        Raises:
            ConfigNotFoundError: The model config lacks an API key or base URL.
        """
        if not (model.api_key or "").strip() or not (model.base_url or "").strip():
            raise ConfigNotFoundError(MODEL_MISSING_CREDENTIALS, provider=model.provider, model=model.model_id)
        provider_id = (model.provider or "").strip() or ProviderKind.CUSTOM.value
        provider = self._build(provider_id, model.api_key, model.base_url, model.api_type)
        final = request.with_defaults(
            model=model.model_id,
            temperature=model.temperature,
            max_tokens=model.max_tokens,
        )
        return await provider.send(final)

    async def test_provider(self, provider_id: str) -> bool:
        provider = self.get_provider(provider_id)
        if provider is None:
            return False
        try:
            return await provider.test_connection()
        except Exception as exc:  # noqa: BLE001 - never propagates
            log_event(
                self._logger,
                "connection.test_failed",
                LogContext(provider=provider_id, operation="test_provider"),
                level=logging.WARNING,
                error=str(exc),
            )
            return False

    async def get_provider_models(self, provider_id: str) -> List[str]:
        """Adapter model list; configured ids if the adapter raises anyway."""
        provider = self.get_provider(provider_id)
        if provider is None:
            return []
        try:
            return await provider.list_models()
        except Exception as exc:  # noqa: BLE001 - degrade to configured ids
            config = self.get_config(provider_id)
            fallback = config.configured_model_ids() if config else []
            log_event(
                self._logger,
                "registry.models_fallback",
                LogContext(provider=provider_id, operation="get_provider_models"),
                level=logging.WARNING,
                error=str(exc),
                fallback=len(fallback),
            )
            return fallback

    # ----- validation -----
    @staticmethod
    def validate(config: ProviderConfig) -> ValidationResult:
        """Collect human-readable violations for ``config``; never raises."""
        errors: List[str] = []
        if not (config.name or "").strip():
            errors.append("Provider name is required")
        base_url = (config.base_url or "").strip()
        if not base_url:
            errors.append("Base URL is required")
        elif not _is_valid_url(base_url):
            errors.append("Invalid base URL format")
        if config.enabled and not (config.api_key or "").strip():
            errors.append("API key is required for enabled providers")
        if not config.models:
            errors.append("At least one model must be configured")
        if config.temperature is not None and not TEMPERATURE_MIN <= config.temperature <= TEMPERATURE_MAX:
            errors.append("Temperature must be between 0 and 2")
        if config.max_tokens is not None and not MAX_TOKENS_MIN <= config.max_tokens <= MAX_TOKENS_MAX:
            errors.append("Max tokens must be between 1 and 100000")
        return ValidationResult(valid=not errors, errors=tuple(errors))


__all__ = ["ProviderRegistry", "ProviderStats", "ValidationResult", "MODEL_MISSING_CREDENTIALS"]
