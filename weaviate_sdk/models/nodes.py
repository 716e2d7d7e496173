# weaviate_sdk/models/nodes.py
# SPDX-License-Identifier: Apache-2.0
"""
Cluster node status from `GET /v1/nodes`.

Every member is optional: which ones the server fills in depends on the
requested `output` verbosity (`minimal` omits shards).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from weaviate_sdk.core.wire import (
    expect_object,
    opt_enum,
    opt_float,
    opt_int,
    opt_list,
    opt_str,
)


class NodeStatus(Enum):
    HEALTHY = "HEALTHY"
    UNHEALTHY = "UNHEALTHY"
    UNAVAILABLE = "UNAVAILABLE"
    INDEXING = "INDEXING"


class NodesOutput(Enum):
    """Verbosity of the nodes endpoint."""
    MINIMAL = "minimal"
    VERBOSE = "verbose"


@dataclass(frozen=True)
class BatchStats:
    queue_length: Optional[int] = None
    rate_per_second: Optional[float] = None

    @classmethod
    def from_dict(cls, data: Any) -> "BatchStats":
        data = expect_object(data, "BatchStats")
        return cls(
            queue_length=opt_int(data, "queueLength", "BatchStats"),
            rate_per_second=opt_float(data, "ratePerSecond", "BatchStats"),
        )


@dataclass(frozen=True)
class NodeShard:
    class_name: Optional[str] = None
    name: Optional[str] = None
    object_count: Optional[int] = None
    vector_indexing_status: Optional[str] = None
    vector_queue_length: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "NodeShard":
        what = "NodeShard"
        data = expect_object(data, what)
        return cls(
            class_name=opt_str(data, "class", what),
            name=opt_str(data, "name", what),
            object_count=opt_int(data, "objectCount", what),
            vector_indexing_status=opt_str(data, "vectorIndexingStatus", what),
            vector_queue_length=opt_int(data, "vectorQueueLength", what),
        )


@dataclass(frozen=True)
class NodeStats:
    object_count: Optional[int] = None
    shard_count: Optional[int] = None

    @classmethod
    def from_dict(cls, data: Any) -> "NodeStats":
        data = expect_object(data, "NodeStats")
        return cls(
            object_count=opt_int(data, "objectCount", "NodeStats"),
            shard_count=opt_int(data, "shardCount", "NodeStats"),
        )


@dataclass(frozen=True)
class Node:
    name: Optional[str] = None
    status: Optional[NodeStatus] = None
    version: Optional[str] = None
    git_hash: Optional[str] = None
    batch_stats: Optional[BatchStats] = None
    stats: Optional[NodeStats] = None
    shards: Optional[List[NodeShard]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Node":
        what = "Node"
        data = expect_object(data, what)
        batch_stats = data.get("batchStats")
        stats = data.get("stats")
        shards = opt_list(data, "shards", what)
        return cls(
            name=opt_str(data, "name", what),
            status=opt_enum(NodeStatus, data, "status", what),
            version=opt_str(data, "version", what),
            git_hash=opt_str(data, "gitHash", what),
            batch_stats=BatchStats.from_dict(batch_stats) if batch_stats is not None else None,
            stats=NodeStats.from_dict(stats) if stats is not None else None,
            shards=[NodeShard.from_dict(s) for s in shards] if shards is not None else None,
        )


@dataclass(frozen=True)
class NodesStatus:
    nodes: List[Node] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "NodesStatus":
        data = expect_object(data, "NodesStatus")
        nodes = opt_list(data, "nodes", "NodesStatus") or []
        return cls(nodes=[Node.from_dict(n) for n in nodes])


__all__ = [
    "NodeStatus",
    "NodesOutput",
    "BatchStats",
    "NodeShard",
    "NodeStats",
    "Node",
    "NodesStatus",
]
