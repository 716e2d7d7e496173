# weaviate_sdk/api/base.py
# SPDX-License-Identifier: Apache-2.0
"""
Shared plumbing for endpoint façades.

Each façade owns one endpoint family (schema, objects, batch, ...) and
holds a reference to the client's `HttpTransport`. Path parameters are
validated and percent-encoded here, before any request is made, so a
blank class name or id fails with `ValidationError` instead of hitting an
unrelated server route.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional
from urllib.parse import quote

from weaviate_sdk.core.errors import ValidationError
from weaviate_sdk.core.transport import HttpTransport
from weaviate_sdk.core.wire import enum_value


class Endpoint:
    """Base class for endpoint façades."""

    #: Family name used as the prefix of metric / log operation names.
    family: str = ""

    def __init__(self, transport: HttpTransport) -> None:
        self._transport = transport

    def _op(self, name: str) -> str:
        return f"{self.family}.{name}"

    @staticmethod
    def _require(field: str, value: Any) -> str:
        """Reject missing or blank path parameters."""
        if value is None or not str(value).strip():
            raise ValidationError(f"{field} must be a non-empty string", details={"field": field})
        return str(value)

    @classmethod
    def _segment(cls, field: str, value: Any) -> str:
        return quote(cls._require(field, value), safe="")

    @staticmethod
    def _params(**params: Any) -> Optional[Mapping[str, Any]]:
        out = {k: enum_value(v) if hasattr(v, "value") else v for k, v in params.items() if v is not None}
        return out or None


__all__ = ["Endpoint"]
