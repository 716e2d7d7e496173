# weaviate_sdk/api/objects.py
# SPDX-License-Identifier: Apache-2.0
"""
Objects façade: CRUD and cross-references under `/v1/objects`.

Write calls accept an optional `ConsistencyLevel`, sent as the
`consistency_level` query parameter. For multi-tenant classes `tenant`
selects the partition and is sent as the `tenant` query parameter.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.core.errors import ValidationError
from weaviate_sdk.models.objects import (
    ConsistencyLevel,
    MultiObjects,
    Object,
    ObjectListParameters,
    Reference,
    UUIDLike,
    beacon,
)

BASE = "/v1/objects"


class ObjectsApi(Endpoint):
    family = "objects"

    def _object_path(self, class_name: str, object_id: UUIDLike) -> str:
        return f"{BASE}/{self._segment('class_name', class_name)}/{self._segment('id', object_id)}"

    def _reference_path(self, class_name: str, object_id: UUIDLike, property_name: str) -> str:
        return (
            f"{self._object_path(class_name, object_id)}/references/"
            f"{self._segment('property_name', property_name)}"
        )

    async def list(self, parameters: Optional[ObjectListParameters] = None) -> MultiObjects:
        """
        List objects, optionally filtered by class.

        Raises:
            ValidationError: `after` combined with `offset` or `sort`, or
                `after` without a class name.
        """
        parameters = parameters or ObjectListParameters()
        if parameters.after is not None:
            if not parameters.class_name:
                raise ValidationError("'after' requires 'class_name'", details={"field": "after"})
            if parameters.offset is not None:
                raise ValidationError("'after' cannot be combined with 'offset'", details={"field": "after"})
            if parameters.sort:
                raise ValidationError("'after' cannot be combined with 'sort'", details={"field": "after"})
        data = await self._transport.request_json(
            "GET", BASE, operation=self._op("list"), params=parameters.to_query()
        )
        return MultiObjects.from_dict(data)

    async def create(
        self,
        new_object: Object,
        consistency_level: Optional[ConsistencyLevel] = None,
    ) -> Object:
        self._require("class name", new_object.class_name)
        data = await self._transport.request_json(
            "POST",
            BASE,
            operation=self._op("create"),
            params=self._params(consistency_level=consistency_level),
            json=new_object.to_dict(),
        )
        return Object.from_dict(data)

    async def get(
        self,
        class_name: str,
        object_id: UUIDLike,
        include: Optional[str] = None,
        consistency_level: Optional[ConsistencyLevel] = None,
        tenant: Optional[str] = None,
    ) -> Object:
        path = self._object_path(class_name, object_id)
        data = await self._transport.request_json(
            "GET",
            path,
            operation=self._op("get"),
            params=self._params(consistency_level=consistency_level, tenant=tenant, include=include),
        )
        return Object.from_dict(data)

    async def exists(
        self,
        class_name: str,
        object_id: UUIDLike,
        consistency_level: Optional[ConsistencyLevel] = None,
        tenant: Optional[str] = None,
    ) -> bool:
        """True when the object exists, False on 404; other statuses raise."""
        path = self._object_path(class_name, object_id)
        response = await self._transport.request(
            "HEAD",
            path,
            operation=self._op("exists"),
            params=self._params(consistency_level=consistency_level, tenant=tenant),
            accept=(404,),
        )
        return response.status_code != 404

    async def update(
        self,
        class_name: str,
        object_id: UUIDLike,
        properties: Mapping[str, Any],
        consistency_level: Optional[ConsistencyLevel] = None,
        tenant: Optional[str] = None,
    ) -> bool:
        """Merge `properties` into the stored object (PATCH)."""
        path = self._object_path(class_name, object_id)
        body = Object(class_name=class_name, properties=dict(properties), id=str(object_id), tenant=tenant)
        await self._transport.request(
            "PATCH",
            path,
            operation=self._op("update"),
            params=self._params(consistency_level=consistency_level),
            json=body.to_dict(),
        )
        return True

    async def replace(
        self,
        class_name: str,
        object_id: UUIDLike,
        properties: Mapping[str, Any],
        consistency_level: Optional[ConsistencyLevel] = None,
        tenant: Optional[str] = None,
    ) -> Object:
        """Replace all property values of the stored object (PUT)."""
        path = self._object_path(class_name, object_id)
        body = Object(class_name=class_name, properties=dict(properties), id=str(object_id), tenant=tenant)
        data = await self._transport.request_json(
            "PUT",
            path,
            operation=self._op("replace"),
            params=self._params(consistency_level=consistency_level),
            json=body.to_dict(),
        )
        return Object.from_dict(data)

    async def delete(
        self,
        class_name: str,
        object_id: UUIDLike,
        consistency_level: Optional[ConsistencyLevel] = None,
        tenant: Optional[str] = None,
    ) -> bool:
        path = self._object_path(class_name, object_id)
        await self._transport.request(
            "DELETE",
            path,
            operation=self._op("delete"),
            params=self._params(consistency_level=consistency_level, tenant=tenant),
        )
        return True

    async def validate(
        self,
        class_name: str,
        properties: Mapping[str, Any],
        object_id: UUIDLike,
    ) -> bool:
        """Check an object against the schema without storing it."""
        self._require("class name", class_name)
        self._require("id", object_id)
        body = {"class": class_name, "id": str(object_id), "properties": dict(properties)}
        await self._transport.request(
            "POST", f"{BASE}/validate", operation=self._op("validate"), json=body
        )
        return True

    async def reference_add(self, reference: Reference) -> bool:
        """Append one beacon to the source object's reference property."""
        path = self._reference_path(
            reference.from_class_name, reference.from_uuid, reference.from_property_name
        )
        self._require("to_class_name", reference.to_class_name)
        self._require("to_uuid", reference.to_uuid)
        await self._transport.request(
            "POST",
            path,
            operation=self._op("reference_add"),
            params=self._params(
                consistency_level=reference.consistency_level, tenant=reference.tenant
            ),
            json={"beacon": reference.target_beacon},
        )
        return True

    async def reference_update(
        self,
        from_class_name: str,
        from_uuid: UUIDLike,
        from_property_name: str,
        to_class_names: Sequence[str],
        to_uuids: Sequence[UUIDLike],
        consistency_level: Optional[ConsistencyLevel] = None,
        tenant: Optional[str] = None,
    ) -> bool:
        """
        Replace all beacons of a reference property.

        `to_class_names[i]` pairs with `to_uuids[i]`; the two sequences must
        have the same length.
        """
        path = self._reference_path(from_class_name, from_uuid, from_property_name)
        if len(to_class_names) != len(to_uuids):
            raise ValidationError(
                "to_class_names and to_uuids must have the same length",
                details={"to_class_names": len(to_class_names), "to_uuids": len(to_uuids)},
            )
        beacons = [
            {"beacon": beacon(self._require("to_class_name", c), self._require("to_uuid", u))}
            for c, u in zip(to_class_names, to_uuids)
        ]
        await self._transport.request(
            "PUT",
            path,
            operation=self._op("reference_update"),
            params=self._params(consistency_level=consistency_level, tenant=tenant),
            json=beacons,
        )
        return True

    async def reference_delete(self, reference: Reference) -> bool:
        path = self._reference_path(
            reference.from_class_name, reference.from_uuid, reference.from_property_name
        )
        await self._transport.request(
            "DELETE",
            path,
            operation=self._op("reference_delete"),
            params=self._params(
                consistency_level=reference.consistency_level, tenant=reference.tenant
            ),
            json={"beacon": reference.target_beacon},
        )
        return True


__all__ = ["ObjectsApi"]
