# weaviate_sdk/api/batch.py
# SPDX-License-Identifier: Apache-2.0
"""
Batch façade under `/v1/batch`.

A batch call is one HTTP request; per-item failures come back as results
with `status=FAILED`, never as an exception. Empty batches are rejected
locally.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.core.errors import ValidationError
from weaviate_sdk.models.batch import (
    BatchDeleteRequest,
    BatchDeleteResponse,
    BatchObjectResult,
    BatchReferenceResult,
)
from weaviate_sdk.models.objects import ConsistencyLevel, Object, Reference

BASE = "/v1/batch"


class BatchApi(Endpoint):
    family = "batch"

    async def objects_add(
        self,
        objects: Sequence[Object],
        consistency_level: Optional[ConsistencyLevel] = None,
    ) -> List[BatchObjectResult]:
        """Create or overwrite many objects in one request, preserving order."""
        if not objects:
            raise ValidationError("batch must contain at least one object")
        for obj in objects:
            self._require("class name", obj.class_name)
        data = await self._transport.request_json(
            "POST",
            f"{BASE}/objects",
            operation=self._op("objects_add"),
            params=self._params(consistency_level=consistency_level),
            json={"objects": [o.to_dict() for o in objects]},
        )
        return BatchObjectResult.list_from(data)

    async def objects_delete(
        self,
        request: BatchDeleteRequest,
        consistency_level: Optional[ConsistencyLevel] = None,
        tenant: Optional[str] = None,
    ) -> BatchDeleteResponse:
        """Delete every object of a class matching a `where` filter."""
        self._require("class name", request.matches.class_name)
        data = await self._transport.request_json(
            "DELETE",
            f"{BASE}/objects",
            operation=self._op("objects_delete"),
            params=self._params(consistency_level=consistency_level, tenant=tenant),
            json=request.to_dict(),
        )
        return BatchDeleteResponse.from_dict(data)

    async def references_add(
        self,
        references: Sequence[Reference],
        consistency_level: Optional[ConsistencyLevel] = None,
    ) -> List[BatchReferenceResult]:
        if not references:
            raise ValidationError("batch must contain at least one reference")
        data = await self._transport.request_json(
            "POST",
            f"{BASE}/references",
            operation=self._op("references_add"),
            params=self._params(consistency_level=consistency_level),
            json=[r.to_dict() for r in references],
        )
        return BatchReferenceResult.list_from(data)


__all__ = ["BatchApi"]
