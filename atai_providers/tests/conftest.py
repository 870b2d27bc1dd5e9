"""Pytest configuration for the providers test suite.

Fixtures:
- ``make_transport``: builds an :class:`HttpxTransport` over
  ``httpx.MockTransport`` and records every request it serves.
- ``log_capture``: attaches a JSON handler to the shared ``providers`` logger
  for the duration of a test (the logger does not propagate, so ``caplog``
  never sees its records).
"""

from __future__ import annotations

import io
import json
import logging
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

import httpx
import pytest

from atai_providers.base.http import HttpxTransport
from atai_providers.base.logging import ROOT_LOGGER_NAME, get_logger
from atai_providers.base.log_support import JsonFormatter

Responder = Callable[[httpx.Request], httpx.Response]


class RequestRecorder:
    """``httpx.MockTransport`` handler that keeps every request it answers."""

    def __init__(self, responder: Responder) -> None:
        self._responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.last.content)


class LogCapture:
    """JSON log lines written to the shared providers logger."""

    def __init__(self) -> None:
        self.stream = io.StringIO()

    def events(self, name: Optional[str] = None) -> List[Dict[str, Any]]:
        lines = [json.loads(line) for line in self.stream.getvalue().splitlines() if line.strip()]
        return [e for e in lines if name is None or e.get("event") == name]


@pytest.fixture()
def make_transport() -> Callable[[Responder], Tuple[HttpxTransport, RequestRecorder]]:
    """Return a factory producing ``(transport, recorder)`` pairs."""

    def _make(responder: Responder) -> Tuple[HttpxTransport, RequestRecorder]:
        recorder = RequestRecorder(responder)
        return HttpxTransport(transport=httpx.MockTransport(recorder)), recorder

    return _make


@pytest.fixture()
def log_capture() -> Iterator[LogCapture]:
    base = get_logger(ROOT_LOGGER_NAME)
    capture = LogCapture()
    handler = logging.StreamHandler(capture.stream)
    handler.setFormatter(JsonFormatter())
    handler.setLevel(logging.DEBUG)
    previous = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    yield capture
    base.removeHandler(handler)
    base.setLevel(previous)
