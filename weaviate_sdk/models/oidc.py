# weaviate_sdk/models/oidc.py
# SPDX-License-Identifier: Apache-2.0
"""OpenID Connect discovery document from `/v1/.well-known/openid-configuration`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional

from weaviate_sdk.core.wire import expect_object, opt_str_list, req_str


@dataclass(frozen=True)
class OidcConfig:
    """
    Attributes:
        href: URL of the identity provider's discovery document
        client_id: OAuth client id to authenticate with
        scopes: Scopes the server expects, when it reports any
    """
    href: str
    client_id: str
    scopes: Optional[List[str]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "OidcConfig":
        what = "OidcConfig"
        data = expect_object(data, what)
        # older servers spell the key clientID
        key = "clientId" if "clientId" in data else "clientID"
        return cls(
            href=req_str(data, "href", what),
            client_id=req_str(data, key, what),
            scopes=opt_str_list(data, "scopes", what),
        )


__all__ = ["OidcConfig"]
