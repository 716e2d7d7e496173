# weaviate_sdk/client.py
# SPDX-License-Identifier: Apache-2.0
"""
WeaviateClient: entry point bundling every endpoint façade.

Purpose
-------
Owns one `httpx.AsyncClient` (or borrows one the caller provides) and a
shared `HttpTransport`, and exposes one façade per endpoint family:

    async with WeaviateClient("http://localhost:8080", api_key="...") as client:
        article = await client.schema.get_class("Article")
        ready = await client.is_ready()

Configuration
-------------
- `ClientConfig.from_env()` reads WEAVIATE_URL (default
  http://localhost:8080), WEAVIATE_API_KEY and WEAVIATE_TIMEOUT_S.
- `WeaviateClient.builder(url)` offers chained setters for the API key,
  module provider keys (e.g. ``X-OpenAI-Api-Key``), extra headers, timeout,
  a caller-owned `httpx.AsyncClient` and a metrics sink.

Design notes
------------
- The client is read-only after construction and safe to share between
  asyncio tasks; httpx pools connections underneath.
- No retries and no background tasks. Cancelling the awaiting task
  cancels the in-flight request or poll sleep.
- A caller-supplied `httpx.AsyncClient` is never closed by `close()`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional
from urllib.parse import urlparse

import httpx

from weaviate_sdk.api.backups import BackupsApi
from weaviate_sdk.api.batch import BatchApi
from weaviate_sdk.api.classification import ClassificationApi
from weaviate_sdk.api.health import HealthApi
from weaviate_sdk.api.meta import MetaApi
from weaviate_sdk.api.modules import ModulesApi
from weaviate_sdk.api.nodes import NodesApi
from weaviate_sdk.api.objects import ObjectsApi
from weaviate_sdk.api.oidc import OidcApi
from weaviate_sdk.api.query import QueryApi
from weaviate_sdk.api.schema import SchemaApi
from weaviate_sdk.core.errors import ValidationError
from weaviate_sdk.core.metrics import MetricsSink
from weaviate_sdk.core.transport import HttpTransport

LOG = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:8080"
DEFAULT_TIMEOUT_S = 30.0


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings.

    Attributes:
        url: Server base URL (scheme http or https)
        api_key: Sent as ``Authorization: Bearer <api_key>`` when set
        provider_keys: Module provider headers, e.g. {"X-OpenAI-Api-Key": "sk-..."}
        timeout_s: Per-request timeout for the owned httpx client
        headers: Any other static headers
    """
    url: str = DEFAULT_URL
    api_key: Optional[str] = None
    provider_keys: Mapping[str, str] = field(default_factory=dict)
    timeout_s: float = DEFAULT_TIMEOUT_S
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        parsed = urlparse(self.url or "")
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValidationError(
                f"url must be an absolute http(s) URL, got {self.url!r}",
                details={"field": "url"},
            )
        if self.timeout_s is None or self.timeout_s <= 0:
            raise ValidationError(
                f"timeout_s must be positive, got {self.timeout_s}",
                details={"field": "timeout_s"},
            )

    @classmethod
    def from_env(cls, **overrides) -> "ClientConfig":
        """Build a config from WEAVIATE_* environment variables; keyword overrides win."""
        url = overrides.pop("url", None) or os.getenv("WEAVIATE_URL") or DEFAULT_URL
        api_key = overrides.pop("api_key", None) or os.getenv("WEAVIATE_API_KEY")
        timeout_s = overrides.pop("timeout_s", None)
        if timeout_s is None:
            raw = os.getenv("WEAVIATE_TIMEOUT_S")
            try:
                timeout_s = float(raw) if raw else DEFAULT_TIMEOUT_S
            except ValueError:
                raise ValidationError(
                    f"WEAVIATE_TIMEOUT_S must be a number, got {raw!r}",
                    details={"field": "timeout_s"},
                ) from None
        return cls(url=url, api_key=api_key, timeout_s=timeout_s, **overrides)

    def request_headers(self) -> Dict[str, str]:
        out: Dict[str, str] = dict(self.headers)
        out.update(self.provider_keys)
        if self.api_key:
            out["Authorization"] = f"Bearer {self.api_key}"
        return out


class WeaviateClient:
    """
    Async Weaviate client.

    Connection settings come either from the individual keyword arguments
    or from a ready-made `config`; passing both raises `ValidationError`.

    Attributes:
        schema, objects, batch, backups, classification, query, meta,
        nodes, oidc, modules, health: endpoint façades sharing one transport
    """

    def __init__(
        self,
        url: Optional[str] = None,
        *,
        api_key: Optional[str] = None,
        provider_keys: Optional[Mapping[str, str]] = None,
        headers: Optional[Mapping[str, str]] = None,
        timeout_s: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        metrics: Optional[MetricsSink] = None,
        config: Optional[ClientConfig] = None,
    ) -> None:
        if config is None:
            config = ClientConfig(
                url=url or DEFAULT_URL,
                api_key=api_key,
                provider_keys=dict(provider_keys or {}),
                timeout_s=DEFAULT_TIMEOUT_S if timeout_s is None else timeout_s,
                headers=dict(headers or {}),
            )
        else:
            given = {
                "url": url,
                "api_key": api_key,
                "provider_keys": provider_keys,
                "headers": headers,
                "timeout_s": timeout_s,
            }
            conflicting = sorted(name for name, value in given.items() if value is not None)
            if conflicting:
                raise ValidationError(
                    f"pass connection settings either via config or as arguments, not both: {conflicting}",
                    details={"field": "config", "conflicting": conflicting},
                )
        self._config = config

        owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=config.timeout_s)

        self._transport = HttpTransport(
            config.url,
            client=http_client,
            headers=config.request_headers(),
            metrics=metrics,
            owns_client=owns_client,
        )

        self.schema = SchemaApi(self._transport)
        self.objects = ObjectsApi(self._transport)
        self.batch = BatchApi(self._transport)
        self.backups = BackupsApi(self._transport)
        self.classification = ClassificationApi(self._transport)
        self.query = QueryApi(self._transport)
        self.meta = MetaApi(self._transport)
        self.nodes = NodesApi(self._transport)
        self.oidc = OidcApi(self._transport)
        self.modules = ModulesApi(self._transport)
        self.health = HealthApi(self._transport)

        LOG.debug(
            "WeaviateClient for %s (auth=%s, provider_headers=%d)",
            config.url,
            "bearer" if config.api_key else "none",
            len(config.provider_keys),
        )

    @staticmethod
    def builder(url: str = DEFAULT_URL) -> "WeaviateClientBuilder":
        return WeaviateClientBuilder(url)

    @classmethod
    def from_env(cls, **kwargs) -> "WeaviateClient":
        """Client configured from WEAVIATE_* environment variables."""
        http_client = kwargs.pop("http_client", None)
        metrics = kwargs.pop("metrics", None)
        return cls(config=ClientConfig.from_env(**kwargs), http_client=http_client, metrics=metrics)

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def url(self) -> str:
        return self._config.url

    async def is_live(self) -> bool:
        return await self.health.is_live()

    async def is_ready(self) -> bool:
        return await self.health.is_ready()

    async def close(self) -> None:
        """Release the connection pool (only when this client created it)."""
        await self._transport.aclose()

    async def __aenter__(self) -> "WeaviateClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.close()


class WeaviateClientBuilder:
    """Construction-only builder for `WeaviateClient`."""

    def __init__(self, url: str = DEFAULT_URL) -> None:
        self._url = url
        self._api_key: Optional[str] = None
        self._provider_keys: Dict[str, str] = {}
        self._headers: Dict[str, str] = {}
        self._timeout_s = DEFAULT_TIMEOUT_S
        self._http_client: Optional[httpx.AsyncClient] = None
        self._metrics: Optional[MetricsSink] = None

    def with_auth_secret(self, api_key: str) -> "WeaviateClientBuilder":
        self._api_key = api_key
        return self

    def with_provider_key(self, header: str, key: str) -> "WeaviateClientBuilder":
        """Add a module provider header such as ``X-OpenAI-Api-Key``."""
        self._provider_keys[header] = key
        return self

    def with_header(self, name: str, value: str) -> "WeaviateClientBuilder":
        self._headers[name] = value
        return self

    def with_timeout(self, timeout_s: float) -> "WeaviateClientBuilder":
        self._timeout_s = timeout_s
        return self

    def with_http_client(self, http_client: httpx.AsyncClient) -> "WeaviateClientBuilder":
        self._http_client = http_client
        return self

    def with_metrics(self, metrics: MetricsSink) -> "WeaviateClientBuilder":
        self._metrics = metrics
        return self

    def build(self) -> WeaviateClient:
        config = ClientConfig(
            url=self._url,
            api_key=self._api_key,
            provider_keys=dict(self._provider_keys),
            timeout_s=self._timeout_s,
            headers=dict(self._headers),
        )
        return WeaviateClient(config=config, http_client=self._http_client, metrics=self._metrics)


__all__ = [
    "DEFAULT_URL",
    "DEFAULT_TIMEOUT_S",
    "ClientConfig",
    "WeaviateClient",
    "WeaviateClientBuilder",
]
