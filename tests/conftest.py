# SPDX-License-Identifier: Apache-2.0
"""
Shared fixtures: an in-process Weaviate stand-in built on httpx.MockTransport.

`MockServer` records every request and answers from per-(method, path)
queues of canned responses. When a queue is down to its last response,
that response keeps being served, which keeps polling tests short.
"""

from __future__ import annotations

import json
from collections import defaultdict, deque
from typing import Any, Deque, Dict, List, Optional, Tuple

import httpx
import pytest

from weaviate_sdk import InMemoryMetrics, PollPolicy, WeaviateClient

BASE_URL = "http://weaviate.test:8080"

_NO_BODY = object()


class MockServer:
    def __init__(self) -> None:
        self.requests: List[httpx.Request] = []
        self._routes: Dict[Tuple[str, str], Deque[httpx.Response]] = defaultdict(deque)
        self.raise_on: Dict[Tuple[str, str], Exception] = {}

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = _NO_BODY,
        text: Optional[str] = None,
    ) -> "MockServer":
        if json_body is not _NO_BODY:
            response = httpx.Response(status, json=json_body)
        elif text is not None:
            response = httpx.Response(status, text=text)
        else:
            response = httpx.Response(status)
        self._routes[(method, path)].append(response)
        return self

    def fail(self, method: str, path: str, exc: Exception) -> "MockServer":
        self.raise_on[(method, path)] = exc
        return self

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key in self.raise_on:
            raise self.raise_on[key]
        queue = self._routes.get(key)
        if not queue:
            raise AssertionError(f"unexpected request {request.method} {request.url}")
        if len(queue) > 1:
            return queue.popleft()
        return queue[0]

    # -- inspection helpers -------------------------------------------------

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no request was made"
        return self.requests[-1]

    @staticmethod
    def body(request: httpx.Request) -> Any:
        return json.loads(request.content) if request.content else None

    @staticmethod
    def params(request: httpx.Request) -> Dict[str, str]:
        return dict(request.url.params)


class RecordingSleep:
    """Stand-in for asyncio.sleep that returns immediately."""

    def __init__(self) -> None:
        self.delays: List[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def server() -> MockServer:
    return MockServer()


@pytest.fixture
def metrics() -> InMemoryMetrics:
    return InMemoryMetrics()


@pytest.fixture
def client(server: MockServer, metrics: InMemoryMetrics) -> WeaviateClient:
    http = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))
    return (
        WeaviateClient.builder(BASE_URL)
        .with_auth_secret("test-key")
        .with_provider_key("X-OpenAI-Api-Key", "sk-test")
        .with_http_client(http)
        .with_metrics(metrics)
        .build()
    )


@pytest.fixture
def sleep() -> RecordingSleep:
    return RecordingSleep()


@pytest.fixture
def fast_poll(sleep: RecordingSleep) -> PollPolicy:
    return PollPolicy(interval_s=0.5, sleep=sleep)
