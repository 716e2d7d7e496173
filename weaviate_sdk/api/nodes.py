# weaviate_sdk/api/nodes.py
# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from typing import Optional

from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.models.nodes import NodesOutput, NodesStatus


class NodesApi(Endpoint):
    family = "nodes"

    async def get_nodes_status(
        self,
        class_name: Optional[str] = None,
        output: Optional[NodesOutput] = None,
    ) -> NodesStatus:
        """Status of every node, optionally restricted to the shards of one class."""
        path = "/v1/nodes"
        if class_name is not None:
            path = f"{path}/{self._segment('class_name', class_name)}"
        data = await self._transport.request_json(
            "GET", path, operation=self._op("get_nodes_status"), params=self._params(output=output)
        )
        return NodesStatus.from_dict(data)


__all__ = ["NodesApi"]
