# weaviate_sdk/api/schema.py
# SPDX-License-Identifier: Apache-2.0
"""Schema façade: classes, properties, shards and tenants under `/v1/schema`."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.core.errors import ValidationError
from weaviate_sdk.core.wire import expect_object, parse_enum, req_str
from weaviate_sdk.models.schema import Class, Property, Schema, Shard, ShardStatus, Tenant

BASE = "/v1/schema"


class SchemaApi(Endpoint):
    family = "schema"

    def _class_path(self, class_name: str) -> str:
        return f"{BASE}/{self._segment('class_name', class_name)}"

    async def get(self) -> Schema:
        """Return every class definition."""
        data = await self._transport.request_json("GET", BASE, operation=self._op("get"))
        return Schema.from_dict(data)

    async def get_class(self, class_name: str) -> Class:
        path = self._class_path(class_name)
        data = await self._transport.request_json("GET", path, operation=self._op("get_class"))
        return Class.from_dict(data)

    async def create_class(self, schema_class: Class) -> Class:
        """Create a class; returns the definition as stored, server defaults included."""
        self._require("class name", schema_class.name)
        data = await self._transport.request_json(
            "POST", BASE, operation=self._op("create_class"), json=schema_class.to_dict()
        )
        return Class.from_dict(data)

    async def update_class(self, schema_class: Class) -> Class:
        path = self._class_path(schema_class.name)
        data = await self._transport.request_json(
            "PUT", path, operation=self._op("update_class"), json=schema_class.to_dict()
        )
        return Class.from_dict(data)

    async def delete_class(self, class_name: str) -> bool:
        """Delete a class and all of its objects."""
        path = self._class_path(class_name)
        await self._transport.request("DELETE", path, operation=self._op("delete_class"))
        return True

    async def add_property(self, class_name: str, prop: Property) -> Property:
        path = f"{self._class_path(class_name)}/properties"
        self._require("property name", prop.name)
        data = await self._transport.request_json(
            "POST", path, operation=self._op("add_property"), json=prop.to_dict()
        )
        return Property.from_dict(data)

    async def get_shards(self, class_name: str) -> List[Shard]:
        path = f"{self._class_path(class_name)}/shards"
        data = await self._transport.request_json("GET", path, operation=self._op("get_shards"))
        return Shard.list_from(data)

    async def update_shard(self, class_name: str, shard_name: str, status: ShardStatus) -> ShardStatus:
        """Mark one shard READY or READONLY; returns the status the server applied."""
        path = f"{self._class_path(class_name)}/shards/{self._segment('shard_name', shard_name)}"
        data = await self._transport.request_json(
            "PUT", path, operation=self._op("update_shard"), json={"status": status.value}
        )
        data = expect_object(data, "ShardStatus")
        return parse_enum(ShardStatus, req_str(data, "status", "ShardStatus"), "ShardStatus.status")

    async def list_tenants(self, class_name: str) -> List[Tenant]:
        path = f"{self._class_path(class_name)}/tenants"
        data = await self._transport.request_json("GET", path, operation=self._op("list_tenants"))
        return Tenant.list_from(data)

    async def add_tenants(self, class_name: str, tenants: Sequence[Tenant]) -> List[Tenant]:
        path = f"{self._class_path(class_name)}/tenants"
        body = self._tenant_body(tenants)
        data = await self._transport.request_json(
            "POST", path, operation=self._op("add_tenants"), json=body
        )
        return Tenant.list_from(data)

    async def update_tenants(self, class_name: str, tenants: Sequence[Tenant]) -> List[Tenant]:
        """Change tenants' activity status."""
        path = f"{self._class_path(class_name)}/tenants"
        body = self._tenant_body(tenants)
        data = await self._transport.request_json(
            "PUT", path, operation=self._op("update_tenants"), json=body
        )
        return Tenant.list_from(data)

    async def remove_tenants(self, class_name: str, tenant_names: Iterable[str]) -> bool:
        path = f"{self._class_path(class_name)}/tenants"
        names = [self._require("tenant name", n) for n in tenant_names]
        if not names:
            raise ValidationError("at least one tenant name is required")
        await self._transport.request(
            "DELETE", path, operation=self._op("remove_tenants"), json=names
        )
        return True

    def _tenant_body(self, tenants: Sequence[Tenant]) -> list:
        if not tenants:
            raise ValidationError("at least one tenant is required")
        for tenant in tenants:
            self._require("tenant name", tenant.name)
        return [t.to_dict() for t in tenants]


__all__ = ["SchemaApi"]
