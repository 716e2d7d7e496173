# weaviate_sdk/api/query.py
# SPDX-License-Identifier: Apache-2.0
"""GraphQL façade: every query kind is a POST of `{"query": ...}` to `/v1/graphql`."""

from __future__ import annotations

from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.models.query import (
    AggregateQuery,
    ExploreQuery,
    GetQuery,
    GraphQLQuery,
    GraphQLResponse,
    RawQuery,
)

PATH = "/v1/graphql"


class QueryApi(Endpoint):
    family = "query"

    async def _run(self, name: str, query: GraphQLQuery) -> GraphQLResponse:
        self._require("query", query.query)
        data = await self._transport.request_json(
            "POST", PATH, operation=self._op(name), json=query.to_dict()
        )
        return GraphQLResponse.from_dict(data)

    async def get(self, query: GetQuery) -> GraphQLResponse:
        return await self._run("get", query)

    async def aggregate(self, query: AggregateQuery) -> GraphQLResponse:
        return await self._run("aggregate", query)

    async def explore(self, query: ExploreQuery) -> GraphQLResponse:
        return await self._run("explore", query)

    async def raw(self, query: RawQuery) -> GraphQLResponse:
        return await self._run("raw", query)


__all__ = ["QueryApi"]
