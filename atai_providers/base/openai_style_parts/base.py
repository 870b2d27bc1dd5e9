"""BaseHttpProvider: shared plumbing for every HTTP adapter.

Purpose:
- Hold the adapter's immutable construction parameters, its transport and
  its logger.
- Provide the error boundary: ``send`` runs the vendor-specific ``_send``
  inside ``_guarded``, which lets ``ProviderError`` through unchanged and
  classifies any other exception exactly once.
- Make ``test_connection`` and ``list_models`` total: vendor hooks may raise,
  the public methods log and degrade to ``False`` / a fallback list.

Subclasses implement ``_send`` and may override ``_test_connection``,
``_list_models``, ``_fallback_models`` and ``_auth_headers``.

Timeout strategy:
- None at this layer; the transport's timeout (``None`` by default) applies.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Sequence, TypeVar

from ..dto.adapter_params import AdapterParams
from ..errors import ProviderError, classify_error
from ..http import HttpxTransport, RawHttpResponse, Transport, make_request
from ..logging import LogContext, get_logger, log_event, normalized_log_event
from ..models import GenerationRequest, GenerationResponse

T = TypeVar("T")


class BaseHttpProvider:
    """Reusable base for adapters speaking JSON over HTTP.

    Parameters:
        params: Credentials, base URL, API flavor and static headers.
        provider_name: Canonical provider id used in logs and errors.
        transport: HTTP backend; defaults to :class:`HttpxTransport`.
    """

    def __init__(
        self,
        params: AdapterParams,
        *,
        provider_name: str,
        transport: Optional[Transport] = None,
    ) -> None:
        self._params = params
        self._provider_name = provider_name
        self._transport: Transport = transport or HttpxTransport()
        self._logger = get_logger(f"providers.{provider_name}")

    @property
    def provider_name(self) -> str:
        return self._provider_name

    @property
    def params(self) -> AdapterParams:
        return self._params

    # ----- vendor hooks -----
    async def _send(self, request: GenerationRequest) -> GenerationResponse:  # pragma: no cover - abstract
        raise NotImplementedError

    async def _test_connection(self) -> bool:  # pragma: no cover - abstract
        raise NotImplementedError

    async def _list_models(self) -> List[str]:
        return list(self._fallback_models())

    def _fallback_models(self) -> Sequence[str]:
        """Models returned when listing fails."""
        return ()

    def _auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self._params.api_key}"}

    # ----- HTTP -----
    async def _request(
        self,
        endpoint: str,
        method: str = "POST",
        body: Any = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> RawHttpResponse:
        """Call ``endpoint`` with auth, static and per-call headers (later wins)."""
        merged = {**self._auth_headers(), **self._params.headers, **(headers or {})}
        return await make_request(self._transport, self._params.base_url, endpoint, method, body, merged)

    # ----- error boundary -----
    async def _guarded(self, ctx: LogContext, operation: Callable[[], Awaitable[T]]) -> T:
        """Run ``operation``; every failure leaves as a classified ``ProviderError``."""
        try:
            return await operation()
        except ProviderError as exc:
            self._log_send_error(ctx, exc)
            raise
        except Exception as exc:  # noqa: BLE001 - classified below
            err = classify_error(exc, provider=self._provider_name, model=ctx.model)
            self._log_send_error(ctx, err)
            raise err from exc

    def _log_send_error(self, ctx: LogContext, err: ProviderError) -> None:
        normalized_log_event(
            self._logger,
            "send.error",
            ctx,
            phase="finalize",
            level=logging.WARNING,
            error_code=err.code.value,
            emitted=False,
            message=err.message,
        )

    # ----- public contract -----
    async def send(self, request: GenerationRequest) -> GenerationResponse:
        """Send ``request`` and return the normalized response.

        Raises:
            ProviderError: Classified failure (auth, quota, timeout, network,
                empty response, stream error or unknown).
        """
        ctx = LogContext(provider=self._provider_name, model=request.model, operation="send")
        normalized_log_event(
            self._logger,
            "send.start",
            ctx,
            phase="start",
            messages=len(request.messages),
            temperature=request.temperature,
            max_tokens=request.max_tokens,
        )
        started = time.perf_counter()
        response = await self._guarded(ctx, lambda: self._send(request))
        normalized_log_event(
            self._logger,
            "send.end",
            ctx,
            phase="finalize",
            emitted=bool(response.content),
            tokens=response.usage,
            latency_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        return response

    async def test_connection(self) -> bool:
        """Return whether the vendor accepts our credentials; never raises."""
        try:
            return bool(await self._test_connection())
        except Exception as exc:  # noqa: BLE001 - degrade to False
            log_event(
                self._logger,
                "connection.test_failed",
                LogContext(provider=self._provider_name, operation="test_connection"),
                level=logging.WARNING,
                error=str(exc),
            )
            return False

    async def list_models(self) -> List[str]:
        """Return the model ids this vendor serves; never raises."""
        try:
            return await self._list_models()
        except Exception as exc:  # noqa: BLE001 - degrade to fallback list
            log_event(
                self._logger,
                "models.list_failed",
                LogContext(provider=self._provider_name, operation="list_models"),
                level=logging.WARNING,
                error=str(exc),
            )
            return list(self._fallback_models())


__all__ = ["BaseHttpProvider"]
