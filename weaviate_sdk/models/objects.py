# weaviate_sdk/models/objects.py
# SPDX-License-Identifier: Apache-2.0
"""
Data objects, cross-references and object listing parameters.

An `Object`'s `properties` bag is user-defined JSON and is kept verbatim,
nested structures included. Ids are UUID strings; `uuid.UUID` values are
accepted by the builders and normalized with `str()`.

Cross-references are addressed by beacons of the form
`weaviate://localhost/<Class>/<uuid>`.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional, Union

from weaviate_sdk.core.errors import DecodeError
from weaviate_sdk.core.wire import (
    JSONObject,
    compact,
    expect_object,
    opt_float_list,
    opt_int,
    opt_list,
    opt_object,
    opt_str,
    req_str,
)

BEACON_PREFIX = "weaviate://localhost/"

UUIDLike = Union[str, uuid.UUID]


class ConsistencyLevel(Enum):
    """Per-request replication quorum for reads and writes."""
    ONE = "ONE"
    QUORUM = "QUORUM"
    ALL = "ALL"


class OrderBy(Enum):
    ASC = "asc"
    DESC = "desc"


def beacon(class_name: str, object_id: UUIDLike, property_name: Optional[str] = None) -> str:
    """Build a beacon URI, optionally pointing at one property of the object."""
    out = f"{BEACON_PREFIX}{class_name}/{object_id}"
    if property_name:
        out = f"{out}/{property_name}"
    return out


def parse_beacon(value: str) -> tuple:
    """
    Split a beacon into ``(class_name, object_id, property_name_or_None)``.

    Raises DecodeError when `value` is not a `weaviate://localhost/...` URI.
    """
    if not isinstance(value, str) or not value.startswith(BEACON_PREFIX):
        raise DecodeError(f"not a beacon: {value!r}", details={"field": "beacon"})
    parts = value[len(BEACON_PREFIX):].split("/")
    if len(parts) == 2:
        return parts[0], parts[1], None
    if len(parts) == 3:
        return parts[0], parts[1], parts[2]
    raise DecodeError(f"malformed beacon: {value!r}", details={"field": "beacon"})


# --------------------------------------------------------------------------- #
# Objects
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Object:
    """
    A data object.

    Attributes:
        class_name: Class the object belongs to (wire key `class`)
        properties: Property bag, open JSON
        id: Object UUID; leave unset to let the server assign one
        vector: Explicit vector, when not produced by a vectorizer
        tenant: Tenant name for multi-tenant classes
        creation_time_unix: Server-assigned creation timestamp (ms)
        last_update_time_unix: Server-assigned update timestamp (ms)
        vector_weights: Vectorizer weighting hints, open JSON
        additional: Extra metadata requested via `include`, open JSON
    """
    class_name: str
    properties: JSONObject = field(default_factory=dict)
    id: Optional[str] = None
    vector: Optional[List[float]] = None
    tenant: Optional[str] = None
    creation_time_unix: Optional[int] = None
    last_update_time_unix: Optional[int] = None
    vector_weights: Optional[JSONObject] = None
    additional: Optional[JSONObject] = None

    @staticmethod
    def builder(class_name: str, properties: Optional[Mapping[str, Any]] = None) -> "ObjectBuilder":
        return ObjectBuilder(class_name, properties)

    def to_dict(self) -> JSONObject:
        return compact({
            "class": self.class_name,
            "properties": dict(self.properties),
            "id": self.id,
            "vector": list(self.vector) if self.vector is not None else None,
            "tenant": self.tenant,
            "creationTimeUnix": self.creation_time_unix,
            "lastUpdateTimeUnix": self.last_update_time_unix,
            "vectorWeights": self.vector_weights,
            "additional": self.additional,
        })

    @classmethod
    def from_dict(cls, data: Any) -> "Object":
        what = "Object"
        data = expect_object(data, what)
        return cls(
            class_name=req_str(data, "class", what),
            properties=opt_object(data, "properties", what) or {},
            id=opt_str(data, "id", what),
            vector=opt_float_list(data, "vector", what),
            tenant=opt_str(data, "tenant", what),
            creation_time_unix=opt_int(data, "creationTimeUnix", what),
            last_update_time_unix=opt_int(data, "lastUpdateTimeUnix", what),
            vector_weights=opt_object(data, "vectorWeights", what),
            additional=opt_object(data, "additional", what),
        )


class ObjectBuilder:
    def __init__(self, class_name: str, properties: Optional[Mapping[str, Any]] = None) -> None:
        self._class_name = class_name
        self._properties: JSONObject = dict(properties or {})
        self._id: Optional[str] = None
        self._vector: Optional[List[float]] = None
        self._tenant: Optional[str] = None
        self._vector_weights: Optional[JSONObject] = None

    def with_property(self, name: str, value: Any) -> "ObjectBuilder":
        self._properties[name] = value
        return self

    def with_properties(self, properties: Mapping[str, Any]) -> "ObjectBuilder":
        self._properties.update(properties)
        return self

    def with_id(self, object_id: UUIDLike) -> "ObjectBuilder":
        self._id = str(object_id)
        return self

    def with_vector(self, vector: Iterable[float]) -> "ObjectBuilder":
        self._vector = [float(v) for v in vector]
        return self

    def with_tenant(self, tenant: str) -> "ObjectBuilder":
        self._tenant = tenant
        return self

    def with_vector_weights(self, weights: Mapping[str, Any]) -> "ObjectBuilder":
        self._vector_weights = dict(weights)
        return self

    def build(self) -> Object:
        return Object(
            class_name=self._class_name,
            properties=dict(self._properties),
            id=self._id,
            vector=list(self._vector) if self._vector is not None else None,
            tenant=self._tenant,
            vector_weights=dict(self._vector_weights) if self._vector_weights is not None else None,
        )


@dataclass(frozen=True)
class MultiObjects:
    """A page of objects from `GET /v1/objects`."""
    objects: List[Object] = field(default_factory=list)
    total_results: Optional[int] = None
    deprecations: Optional[List[Any]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "MultiObjects":
        what = "MultiObjects"
        data = expect_object(data, what)
        objects = opt_list(data, "objects", what) or []
        return cls(
            objects=[Object.from_dict(o) for o in objects],
            total_results=opt_int(data, "totalResults", what),
            deprecations=opt_list(data, "deprecations", what),
        )


@dataclass(frozen=True)
class ObjectListParameters:
    """
    Query parameters for listing objects.

    Cursor pagination (`after`) requires `class_name` and excludes both
    `offset` and `sort`; the objects façade enforces this before sending.
    """
    class_name: Optional[str] = None
    limit: Optional[int] = None
    offset: Optional[int] = None
    after: Optional[str] = None
    include: Optional[str] = None
    sort: Optional[List[str]] = None
    order: Optional[List[OrderBy]] = None
    tenant: Optional[str] = None

    @staticmethod
    def builder() -> "ObjectListParametersBuilder":
        return ObjectListParametersBuilder()

    def to_query(self) -> JSONObject:
        return compact({
            "class": self.class_name,
            "limit": self.limit,
            "offset": self.offset,
            "after": self.after,
            "include": self.include,
            "sort": ",".join(self.sort) if self.sort else None,
            "order": ",".join(o.value for o in self.order) if self.order else None,
            "tenant": self.tenant,
        })


class ObjectListParametersBuilder:
    def __init__(self) -> None:
        self._class_name: Optional[str] = None
        self._limit: Optional[int] = None
        self._offset: Optional[int] = None
        self._after: Optional[str] = None
        self._include: Optional[str] = None
        self._sort: Optional[List[str]] = None
        self._order: Optional[List[OrderBy]] = None
        self._tenant: Optional[str] = None

    def with_class_name(self, class_name: str) -> "ObjectListParametersBuilder":
        self._class_name = class_name
        return self

    def with_limit(self, limit: int) -> "ObjectListParametersBuilder":
        self._limit = limit
        return self

    def with_offset(self, offset: int) -> "ObjectListParametersBuilder":
        self._offset = offset
        return self

    def with_after(self, after: UUIDLike) -> "ObjectListParametersBuilder":
        self._after = str(after)
        return self

    def with_include(self, include: str) -> "ObjectListParametersBuilder":
        self._include = include
        return self

    def with_sort(self, *properties: str) -> "ObjectListParametersBuilder":
        self._sort = (self._sort or []) + list(properties)
        return self

    def with_order(self, *order: OrderBy) -> "ObjectListParametersBuilder":
        self._order = (self._order or []) + list(order)
        return self

    def with_tenant(self, tenant: str) -> "ObjectListParametersBuilder":
        self._tenant = tenant
        return self

    def build(self) -> ObjectListParameters:
        return ObjectListParameters(
            class_name=self._class_name,
            limit=self._limit,
            offset=self._offset,
            after=self._after,
            include=self._include,
            sort=list(self._sort) if self._sort is not None else None,
            order=list(self._order) if self._order is not None else None,
            tenant=self._tenant,
        )


# --------------------------------------------------------------------------- #
# References
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Reference:
    """
    A cross-reference from one object's property to another object.

    Attributes:
        from_class_name: Class of the object holding the reference
        from_uuid: Id of the object holding the reference
        from_property_name: Reference property on the source object
        to_class_name: Class of the target object
        to_uuid: Id of the target object
        consistency_level: Write quorum; sent as a query parameter, not in the body
        tenant: Tenant of the source object
    """
    from_class_name: str
    from_uuid: str
    from_property_name: str
    to_class_name: str
    to_uuid: str
    consistency_level: Optional[ConsistencyLevel] = None
    tenant: Optional[str] = None

    @staticmethod
    def builder(
        from_class_name: str,
        from_uuid: UUIDLike,
        from_property_name: str,
        to_class_name: str,
        to_uuid: UUIDLike,
    ) -> "ReferenceBuilder":
        return ReferenceBuilder(
            from_class_name, from_uuid, from_property_name, to_class_name, to_uuid
        )

    @property
    def source_beacon(self) -> str:
        return beacon(self.from_class_name, self.from_uuid, self.from_property_name)

    @property
    def target_beacon(self) -> str:
        return beacon(self.to_class_name, self.to_uuid)

    def to_dict(self) -> JSONObject:
        """Batch wire shape: ``{"from": <source beacon>, "to": <target beacon>}``."""
        return compact({
            "from": self.source_beacon,
            "to": self.target_beacon,
            "tenant": self.tenant,
        })

    @classmethod
    def from_dict(cls, data: Any) -> "Reference":
        what = "Reference"
        data = expect_object(data, what)
        from_class, from_id, prop = parse_beacon(req_str(data, "from", what))
        to_class, to_id, _ = parse_beacon(req_str(data, "to", what))
        if prop is None:
            raise DecodeError(
                "Reference.from: beacon has no property name",
                details={"field": "Reference.from"},
            )
        return cls(
            from_class_name=from_class,
            from_uuid=from_id,
            from_property_name=prop,
            to_class_name=to_class,
            to_uuid=to_id,
            tenant=opt_str(data, "tenant", what),
        )


class ReferenceBuilder:
    def __init__(
        self,
        from_class_name: str,
        from_uuid: UUIDLike,
        from_property_name: str,
        to_class_name: str,
        to_uuid: UUIDLike,
    ) -> None:
        self._from_class_name = from_class_name
        self._from_uuid = str(from_uuid)
        self._from_property_name = from_property_name
        self._to_class_name = to_class_name
        self._to_uuid = str(to_uuid)
        self._consistency_level: Optional[ConsistencyLevel] = None
        self._tenant: Optional[str] = None

    def with_consistency_level(self, level: ConsistencyLevel) -> "ReferenceBuilder":
        self._consistency_level = level
        return self

    def with_tenant(self, tenant: str) -> "ReferenceBuilder":
        self._tenant = tenant
        return self

    def build(self) -> Reference:
        return Reference(
            from_class_name=self._from_class_name,
            from_uuid=self._from_uuid,
            from_property_name=self._from_property_name,
            to_class_name=self._to_class_name,
            to_uuid=self._to_uuid,
            consistency_level=self._consistency_level,
            tenant=self._tenant,
        )


__all__ = [
    "BEACON_PREFIX",
    "ConsistencyLevel",
    "OrderBy",
    "beacon",
    "parse_beacon",
    "Object",
    "ObjectBuilder",
    "MultiObjects",
    "ObjectListParameters",
    "ObjectListParametersBuilder",
    "Reference",
    "ReferenceBuilder",
]
