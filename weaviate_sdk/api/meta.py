# weaviate_sdk/api/meta.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.models.meta import Metadata


class MetaApi(Endpoint):
    family = "meta"

    async def get(self) -> Metadata:
        data = await self._transport.request_json("GET", "/v1/meta", operation=self._op("get"))
        return Metadata.from_dict(data)


__all__ = ["MetaApi"]
