# weaviate_sdk/models/query.py
# SPDX-License-Identifier: Apache-2.0
"""
GraphQL query construction and response decoding.

Purpose
-------
Builders render `Get`, `Aggregate` and `Explore` queries into a GraphQL
string held by an immutable query value; `RawQuery` wraps a hand-written
query. The query façade POSTs `{"query": <string>}` to `/v1/graphql`.

Arguments
---------
Argument values (`where`, `nearText`, `bm25`, `sort`, ...) can be given as:

- a Mapping or clause object, rendered as a GraphQL input object
  (``{"path": ["wordCount"], "operator": "GreaterThan", "valueInt": 1000}``
  becomes ``{path: ["wordCount"], operator: GreaterThan, valueInt: 1000}``),
- a plain string, which is inserted verbatim.

Strings inside a rendered Mapping are JSON-quoted, except for the enum-typed
keys listed in `ENUM_KEYS` and values wrapped in `GraphQLEnum`.

The response's `data` tree is returned as open JSON; GraphQL-level errors
reported inside a 200 response are surfaced on `GraphQLResponse.errors`.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from weaviate_sdk.core.wire import (
    JSONObject,
    compact,
    expect_object,
    opt_list,
    opt_object,
    req_str,
)

ENUM_KEYS = frozenset({"operator", "order", "fusionType"})


@dataclass(frozen=True)
class GraphQLEnum:
    """A bare enum literal, rendered without quotes."""
    name: str


def render_value(value: Any, key: Optional[str] = None) -> str:
    """Render a Python value as a GraphQL input literal."""
    if isinstance(value, GraphQLEnum):
        return value.name
    if hasattr(value, "to_graphql"):
        return render_value(value.to_graphql())
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return json.dumps(value)
    if isinstance(value, str):
        if key in ENUM_KEYS:
            return value
        return json.dumps(value)
    if isinstance(value, Mapping):
        inner = ", ".join(f"{k}: {render_value(v, k)}" for k, v in value.items())
        return "{" + inner + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(render_value(v, key) for v in value) + "]"
    return json.dumps(str(value))


Argument = Union[str, Mapping[str, Any], "NearVector", "NearText", "NearObject"]


def render_argument(value: Any) -> str:
    # top-level strings are raw GraphQL supplied by the caller
    if isinstance(value, str):
        return value
    return render_value(value)


# --------------------------------------------------------------------------- #
# Similarity clauses
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class NearVector:
    vector: List[float]
    certainty: Optional[float] = None
    distance: Optional[float] = None

    def to_graphql(self) -> JSONObject:
        return compact({
            "vector": list(self.vector),
            "certainty": self.certainty,
            "distance": self.distance,
        })


@dataclass(frozen=True)
class Move:
    """`moveTo` / `moveAwayFrom` target for `NearText`."""
    force: float
    concepts: Optional[List[str]] = None
    objects: Optional[List[Mapping[str, str]]] = None

    def to_graphql(self) -> JSONObject:
        return compact({
            "concepts": list(self.concepts) if self.concepts is not None else None,
            "objects": [dict(o) for o in self.objects] if self.objects is not None else None,
            "force": self.force,
        })


@dataclass(frozen=True)
class NearText:
    concepts: List[str]
    certainty: Optional[float] = None
    distance: Optional[float] = None
    move_to: Optional[Move] = None
    move_away_from: Optional[Move] = None

    def to_graphql(self) -> JSONObject:
        return compact({
            "concepts": list(self.concepts),
            "certainty": self.certainty,
            "distance": self.distance,
            "moveTo": self.move_to.to_graphql() if self.move_to else None,
            "moveAwayFrom": self.move_away_from.to_graphql() if self.move_away_from else None,
        })


@dataclass(frozen=True)
class NearObject:
    """Similarity to an existing object, addressed by `id` or by `beacon`."""
    id: Optional[str] = None
    beacon: Optional[str] = None
    certainty: Optional[float] = None
    distance: Optional[float] = None

    def to_graphql(self) -> JSONObject:
        return compact({
            "id": self.id,
            "beacon": self.beacon,
            "certainty": self.certainty,
            "distance": self.distance,
        })


# --------------------------------------------------------------------------- #
# Query values
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class GraphQLQuery:
    query: str

    def to_dict(self) -> JSONObject:
        return {"query": self.query}


@dataclass(frozen=True)
class GetQuery(GraphQLQuery):
    @staticmethod
    def builder(class_name: str, properties: Iterable[str] = ()) -> "GetQueryBuilder":
        return GetQueryBuilder(class_name, properties)


@dataclass(frozen=True)
class AggregateQuery(GraphQLQuery):
    @staticmethod
    def builder(class_name: str) -> "AggregateQueryBuilder":
        return AggregateQueryBuilder(class_name)


@dataclass(frozen=True)
class ExploreQuery(GraphQLQuery):
    @staticmethod
    def builder() -> "ExploreQueryBuilder":
        return ExploreQueryBuilder()


@dataclass(frozen=True)
class RawQuery(GraphQLQuery):
    """A caller-written GraphQL query, sent unchanged."""


def _render_operation(
    operation: str,
    class_name: Optional[str],
    args: List[Tuple[str, str]],
    body: List[str],
) -> str:
    # Explore has no class level, so its arguments and body sit one level up
    if class_name is None:
        lines = ["{", f"  {operation}"]
        indent = "  "
    else:
        lines = ["{", f"  {operation} {{", f"    {class_name}"]
        indent = "    "
    if args:
        lines.append(f"{indent}(")
        lines.extend(f"{indent}  {name}: {value}" for name, value in args)
        lines.append(f"{indent})")
    lines.append(f"{indent}{{")
    lines.extend(f"{indent}  {line}" for line in body)
    lines.append(f"{indent}}}")
    if class_name is not None:
        lines.append("  }")
    lines.append("}")
    return "\n".join(lines)


class _ArgumentsBuilder:
    """Collects named GraphQL arguments; each name is set at most once."""

    _ORDER: Tuple[str, ...] = ()

    def __init__(self) -> None:
        self._args = {}

    def _arg(self, name: str, value: Any):
        self._args[name] = render_argument(value)
        return self

    def _rendered_args(self) -> List[Tuple[str, str]]:
        return [(name, self._args[name]) for name in self._ORDER if name in self._args]


class GetQueryBuilder(_ArgumentsBuilder):
    """
    Builder for `Get` queries.

    Properties and `_additional` fields append in call order; every argument
    setter overwrites its previous value.
    """

    _ORDER = (
        "where", "limit", "offset", "nearText", "nearVector", "nearObject",
        "nearImage", "nearAudio", "nearVideo", "nearThermal", "nearIMU",
        "nearDepth", "bm25", "hybrid", "groupBy", "after", "tenant",
        "autocut", "sort", "ask",
    )

    def __init__(self, class_name: str, properties: Iterable[str] = ()) -> None:
        super().__init__()
        self._class_name = class_name
        self._properties: List[str] = list(properties)
        self._additional: List[str] = []

    def with_properties(self, *properties: str) -> "GetQueryBuilder":
        self._properties.extend(properties)
        return self

    def with_additional(self, *fields: str) -> "GetQueryBuilder":
        self._additional.extend(fields)
        return self

    def with_where(self, where: Argument) -> "GetQueryBuilder":
        return self._arg("where", where)

    def with_limit(self, limit: int) -> "GetQueryBuilder":
        return self._arg("limit", limit)

    def with_offset(self, offset: int) -> "GetQueryBuilder":
        return self._arg("offset", offset)

    def with_near_text(self, near_text: Argument) -> "GetQueryBuilder":
        return self._arg("nearText", near_text)

    def with_near_vector(self, near_vector: Argument) -> "GetQueryBuilder":
        return self._arg("nearVector", near_vector)

    def with_near_object(self, near_object: Argument) -> "GetQueryBuilder":
        return self._arg("nearObject", near_object)

    def with_near_image(self, near_image: Argument) -> "GetQueryBuilder":
        return self._arg("nearImage", near_image)

    def with_near_audio(self, near_audio: Argument) -> "GetQueryBuilder":
        return self._arg("nearAudio", near_audio)

    def with_near_video(self, near_video: Argument) -> "GetQueryBuilder":
        return self._arg("nearVideo", near_video)

    def with_near_thermal(self, near_thermal: Argument) -> "GetQueryBuilder":
        return self._arg("nearThermal", near_thermal)

    def with_near_imu(self, near_imu: Argument) -> "GetQueryBuilder":
        return self._arg("nearIMU", near_imu)

    def with_near_depth(self, near_depth: Argument) -> "GetQueryBuilder":
        return self._arg("nearDepth", near_depth)

    def with_bm25(self, bm25: Argument) -> "GetQueryBuilder":
        return self._arg("bm25", bm25)

    def with_hybrid(self, hybrid: Argument) -> "GetQueryBuilder":
        return self._arg("hybrid", hybrid)

    def with_group_by(self, group_by: Argument) -> "GetQueryBuilder":
        return self._arg("groupBy", group_by)

    def with_after(self, after: str) -> "GetQueryBuilder":
        return self._arg("after", json.dumps(str(after)))

    def with_tenant(self, tenant: str) -> "GetQueryBuilder":
        return self._arg("tenant", json.dumps(tenant))

    def with_autocut(self, autocut: int) -> "GetQueryBuilder":
        return self._arg("autocut", autocut)

    def with_sort(self, sort: Union[str, Mapping[str, Any], List[Mapping[str, Any]]]) -> "GetQueryBuilder":
        return self._arg("sort", sort)

    def with_ask(self, ask: Argument) -> "GetQueryBuilder":
        return self._arg("ask", ask)

    def build(self) -> GetQuery:
        body = [" ".join(self._properties)] if self._properties else []
        if self._additional:
            body.extend(["_additional {", f"  {' '.join(self._additional)}", "}"])
        return GetQuery(
            query=_render_operation("Get", self._class_name, self._rendered_args(), body)
        )


class AggregateQueryBuilder(_ArgumentsBuilder):
    """Builder for `Aggregate` queries; fields append in call order."""

    _ORDER = (
        "where", "groupBy", "nearText", "nearVector", "nearObject",
        "objectLimit", "tenant", "limit",
    )

    def __init__(self, class_name: str) -> None:
        super().__init__()
        self._class_name = class_name
        self._meta_count = False
        self._fields: List[str] = []

    def with_meta_count(self) -> "AggregateQueryBuilder":
        self._meta_count = True
        return self

    def with_fields(self, *fields: str) -> "AggregateQueryBuilder":
        self._fields.extend(fields)
        return self

    def with_where(self, where: Argument) -> "AggregateQueryBuilder":
        return self._arg("where", where)

    def with_group_by(self, *properties: str) -> "AggregateQueryBuilder":
        return self._arg("groupBy", list(properties))

    def with_near_text(self, near_text: Argument) -> "AggregateQueryBuilder":
        return self._arg("nearText", near_text)

    def with_near_vector(self, near_vector: Argument) -> "AggregateQueryBuilder":
        return self._arg("nearVector", near_vector)

    def with_near_object(self, near_object: Argument) -> "AggregateQueryBuilder":
        return self._arg("nearObject", near_object)

    def with_object_limit(self, object_limit: int) -> "AggregateQueryBuilder":
        return self._arg("objectLimit", object_limit)

    def with_tenant(self, tenant: str) -> "AggregateQueryBuilder":
        return self._arg("tenant", json.dumps(tenant))

    def with_limit(self, limit: int) -> "AggregateQueryBuilder":
        return self._arg("limit", limit)

    def build(self) -> AggregateQuery:
        body = []
        if self._meta_count:
            body.append("meta{count}")
        if self._fields:
            body.append(" ".join(self._fields))
        return AggregateQuery(
            query=_render_operation("Aggregate", self._class_name, self._rendered_args(), body)
        )


class ExploreQueryBuilder(_ArgumentsBuilder):
    """Builder for cross-class `Explore` queries; fields append in call order."""

    _ORDER = ("limit", "nearText", "nearVector")

    def __init__(self) -> None:
        super().__init__()
        self._fields: List[str] = []

    def with_fields(self, *fields: str) -> "ExploreQueryBuilder":
        self._fields.extend(fields)
        return self

    def with_limit(self, limit: int) -> "ExploreQueryBuilder":
        return self._arg("limit", limit)

    def with_near_text(self, near_text: Argument) -> "ExploreQueryBuilder":
        return self._arg("nearText", near_text)

    def with_near_vector(self, near_vector: Argument) -> "ExploreQueryBuilder":
        return self._arg("nearVector", near_vector)

    def build(self) -> ExploreQuery:
        body = [" ".join(self._fields)] if self._fields else []
        return ExploreQuery(
            query=_render_operation("Explore", None, self._rendered_args(), body)
        )


# --------------------------------------------------------------------------- #
# Responses
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class GraphQLError:
    message: str
    path: Optional[List[Any]] = None
    locations: Optional[List[Any]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "GraphQLError":
        data = expect_object(data, "GraphQLError")
        return cls(
            message=req_str(data, "message", "GraphQLError"),
            path=opt_list(data, "path", "GraphQLError"),
            locations=opt_list(data, "locations", "GraphQLError"),
        )


@dataclass(frozen=True)
class GraphQLResponse:
    """
    Attributes:
        data: The result tree, e.g. ``{"Get": {"Article": [...]}}``; open JSON
        errors: GraphQL errors reported alongside (or instead of) `data`
    """
    data: Optional[JSONObject] = None
    errors: List[GraphQLError] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "GraphQLResponse":
        what = "GraphQLResponse"
        data = expect_object(data, what)
        errors = opt_list(data, "errors", what) or []
        return cls(
            data=opt_object(data, "data", what),
            errors=[GraphQLError.from_dict(e) for e in errors],
        )


__all__ = [
    "ENUM_KEYS",
    "GraphQLEnum",
    "render_value",
    "render_argument",
    "NearVector",
    "NearText",
    "NearObject",
    "Move",
    "GraphQLQuery",
    "GetQuery",
    "AggregateQuery",
    "ExploreQuery",
    "RawQuery",
    "GetQueryBuilder",
    "AggregateQueryBuilder",
    "ExploreQueryBuilder",
    "GraphQLError",
    "GraphQLResponse",
]
