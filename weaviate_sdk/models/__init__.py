# weaviate_sdk/models/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""Immutable request / response values and their builders."""

from weaviate_sdk.models.backups import (
    BackupBackend,
    BackupCreateRequest,
    BackupJob,
    BackupRestoreRequest,
    BackupStatus,
)
from weaviate_sdk.models.batch import (
    BatchDeleteRequest,
    BatchDeleteResponse,
    BatchObjectResult,
    BatchReferenceResult,
    GeneralStatus,
    MatchConfig,
    Verbosity,
)
from weaviate_sdk.models.classification import (
    ClassificationJob,
    ClassificationRequest,
    ClassificationStatus,
    ClassificationType,
)
from weaviate_sdk.models.meta import Metadata
from weaviate_sdk.models.modules import ContextionaryConcept, ContextionaryExtension
from weaviate_sdk.models.nodes import Node, NodesOutput, NodesStatus, NodeStatus
from weaviate_sdk.models.objects import (
    ConsistencyLevel,
    MultiObjects,
    Object,
    ObjectListParameters,
    OrderBy,
    Reference,
)
from weaviate_sdk.models.oidc import OidcConfig
from weaviate_sdk.models.query import (
    AggregateQuery,
    ExploreQuery,
    GetQuery,
    GraphQLEnum,
    GraphQLQuery,
    GraphQLResponse,
    NearObject,
    NearText,
    NearVector,
    RawQuery,
)
from weaviate_sdk.models.schema import (
    ActivityStatus,
    Class,
    Distance,
    InvertedIndexConfig,
    MultiTenancyConfig,
    PqConfig,
    Property,
    ReplicationConfig,
    Schema,
    Shard,
    ShardingConfig,
    ShardStatus,
    Tenant,
    Tokenization,
    VectorIndexConfig,
)

__all__ = [
    "BackupBackend",
    "BackupCreateRequest",
    "BackupJob",
    "BackupRestoreRequest",
    "BackupStatus",
    "BatchDeleteRequest",
    "BatchDeleteResponse",
    "BatchObjectResult",
    "BatchReferenceResult",
    "GeneralStatus",
    "MatchConfig",
    "Verbosity",
    "ClassificationJob",
    "ClassificationRequest",
    "ClassificationStatus",
    "ClassificationType",
    "Metadata",
    "ContextionaryConcept",
    "ContextionaryExtension",
    "Node",
    "NodesOutput",
    "NodesStatus",
    "NodeStatus",
    "ConsistencyLevel",
    "MultiObjects",
    "Object",
    "ObjectListParameters",
    "OrderBy",
    "Reference",
    "OidcConfig",
    "AggregateQuery",
    "ExploreQuery",
    "GetQuery",
    "GraphQLEnum",
    "GraphQLQuery",
    "GraphQLResponse",
    "NearObject",
    "NearText",
    "NearVector",
    "RawQuery",
    "ActivityStatus",
    "Class",
    "Distance",
    "InvertedIndexConfig",
    "MultiTenancyConfig",
    "PqConfig",
    "Property",
    "ReplicationConfig",
    "Schema",
    "Shard",
    "ShardingConfig",
    "ShardStatus",
    "Tenant",
    "Tokenization",
    "VectorIndexConfig",
]
