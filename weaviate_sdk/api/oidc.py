# weaviate_sdk/api/oidc.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.models.oidc import OidcConfig


class OidcApi(Endpoint):
    family = "oidc"

    async def get_open_id_configuration(self) -> OidcConfig:
        """OIDC discovery; servers without OIDC answer 404, raised as RequestError."""
        data = await self._transport.request_json(
            "GET",
            "/v1/.well-known/openid-configuration",
            operation=self._op("get_open_id_configuration"),
        )
        return OidcConfig.from_dict(data)


__all__ = ["OidcApi"]
