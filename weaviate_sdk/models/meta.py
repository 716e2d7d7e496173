# weaviate_sdk/models/meta.py
# SPDX-License-Identifier: Apache-2.0
"""Server metadata from `GET /v1/meta`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from weaviate_sdk.core.wire import JSONObject, expect_object, opt_object, req_str


@dataclass(frozen=True)
class Metadata:
    """
    Attributes:
        hostname: Address the server reports for itself
        version: Server version string
        modules: Enabled modules and their metadata, open JSON
    """
    hostname: str
    version: str
    modules: Optional[JSONObject] = None
    grpc_max_message_size: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Metadata":
        what = "Metadata"
        data = expect_object(data, what)
        grpc = data.get("grpcMaxMessageSize")
        return cls(
            hostname=req_str(data, "hostname", what),
            version=req_str(data, "version", what),
            modules=opt_object(data, "modules", what),
            grpc_max_message_size=None if grpc is None else str(grpc),
        )


__all__ = ["Metadata"]
