# weaviate_sdk/core/transport.py
# SPDX-License-Identifier: Apache-2.0
"""
HTTP transport shared by every endpoint façade.

Purpose
-------
`HttpTransport` wraps a single `httpx.AsyncClient` and is the only place
that touches the network. It:

- joins the configured base URL with a `/v1/...` path,
- adds the authorization and module-provider headers to every request,
- maps failures onto the SDK error taxonomy:
    * no HTTP response at all             -> TransportError
    * a status outside 2xx (and not accepted by the caller) -> RequestError
    * a success body that is not JSON     -> DecodeError
- records one metrics observation per call and logs it at DEBUG,
- attaches `operation`, `method` and `path` context to propagating errors.

Design notes
------------
- No retries. A failed call is surfaced as-is; retrying is up to the caller.
- Error bodies are never decoded as success payloads; they are kept as raw
  text on `RequestError.body`.
- Header values are never logged.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Tuple

import httpx

from weaviate_sdk.core.error_context import attach_context
from weaviate_sdk.core.errors import (
    DecodeError,
    RequestError,
    TransportError,
    WeaviateError,
)
from weaviate_sdk.core.metrics import MetricsSink, NoopMetrics

logger = logging.getLogger(__name__)

COMPONENT = "weaviate"


class HttpTransport:
    """
    Thin async request layer over `httpx.AsyncClient`.

    The transport does not own the client's lifecycle unless `owns_client`
    is set; `WeaviateClient` decides that depending on whether the caller
    supplied their own `httpx.AsyncClient`.
    """

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient,
        headers: Optional[Mapping[str, str]] = None,
        metrics: Optional[MetricsSink] = None,
        owns_client: bool = False,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client
        self._headers: Dict[str, str] = dict(headers or {})
        self._metrics: MetricsSink = metrics or NoopMetrics()
        self._owns_client = owns_client

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def metrics(self) -> MetricsSink:
        return self._metrics

    def url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    async def request(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        accept: Iterable[int] = (),
    ) -> httpx.Response:
        """
        Issue one request and return the response.

        Any status in 2xx is a success. Statuses listed in `accept` are
        returned to the caller instead of raising, which lets façades treat
        e.g. a 404 on HEAD as "does not exist".
        """
        response, _ = await self._exchange(
            method, path, operation, params, json, frozenset(accept), decode=False
        )
        return response

    async def request_json(
        self,
        method: str,
        path: str,
        *,
        operation: str,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
    ) -> Any:
        """Issue a request whose 2xx body must be JSON, and return it decoded."""
        _, body = await self._exchange(
            method, path, operation, params, json, frozenset(), decode=True
        )
        return body

    async def _exchange(
        self,
        method: str,
        path: str,
        operation: str,
        params: Optional[Mapping[str, Any]],
        json: Any,
        accepted: FrozenSet[int],
        *,
        decode: bool,
    ) -> Tuple[httpx.Response, Any]:
        # one metrics observation per call; a body that fails to decode counts as a failure
        t0 = time.monotonic()
        body: Any = None
        try:
            try:
                response = await self._client.request(
                    method,
                    self.url(path),
                    params=_query(params),
                    json=json,
                    headers=self._headers,
                )
            except httpx.RequestError as e:
                raise TransportError(
                    f"{method} {path} failed: {type(e).__name__}: {e}",
                    details={"exception": type(e).__name__},
                ) from e

            status = response.status_code
            if not (200 <= status < 300) and status not in accepted:
                raise RequestError(
                    f"{method} {path} returned HTTP {status}",
                    status_code=status,
                    body=response.text,
                )
            if decode:
                body = decode_json(response, operation=operation, method=method, path=path)
        except WeaviateError as e:
            self._record(operation, t0, False, code=e.code or type(e).__name__, method=method)
            logger.debug(
                "%s %s failed after %.1f ms: %s",
                method,
                path,
                (time.monotonic() - t0) * 1000.0,
                e.code,
            )
            attach_context(e, operation=operation, method=method, path=path)
            raise

        self._record(operation, t0, True, method=method, status=response.status_code)
        logger.debug(
            "%s %s -> %d in %.1f ms",
            method,
            path,
            response.status_code,
            (time.monotonic() - t0) * 1000.0,
        )
        return response, body

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _record(
        self,
        op: str,
        t0: float,
        ok: bool,
        *,
        code: str = "OK",
        **extra: Any,
    ) -> None:
        try:
            ms = (time.monotonic() - t0) * 1000.0
            self._metrics.observe(
                component=COMPONENT,
                op=op,
                ms=ms,
                ok=ok,
                code=code,
                extra=extra or None,
            )
        except Exception as e:  # noqa: BLE001
            # Never let metrics recording break the operation
            logger.debug("metrics sink failed for %s: %s", op, e)


def decode_json(
    response: httpx.Response,
    *,
    operation: str,
    method: str,
    path: str,
) -> Any:
    try:
        return response.json()
    except ValueError as e:
        err = DecodeError(
            f"{method} {path}: response body is not valid JSON",
            details={"status_code": response.status_code},
        )
        attach_context(err, operation=operation, method=method, path=path)
        raise err from e


def _query(params: Optional[Mapping[str, Any]]) -> Optional[Dict[str, str]]:
    if not params:
        return None
    out: Dict[str, str] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            out[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            out[key] = ",".join(str(v) for v in value)
        else:
            out[key] = str(getattr(value, "value", value))
    return out or None


__all__ = [
    "COMPONENT",
    "HttpTransport",
    "decode_json",
]
