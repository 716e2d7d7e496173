# weaviate_sdk/models/schema.py
# SPDX-License-Identifier: Apache-2.0
"""
Schema definitions: classes, properties and their index / sharding /
replication / tenancy configuration, plus tenants and shards.

Purpose
-------
Immutable value types mirroring the `/v1/schema` JSON documents, with
`to_dict()` producing the wire shape (camelCase keys, unset fields omitted)
and `from_dict()` decoding it back.

Builders
--------
Types with many optional members come with a `<Type>Builder`. Builders are
mutable and only meant for construction: chain `with_*()` setters, then call
`build()` to get the frozen value with documented defaults filled in:

    ClassBuilder("Article")              -> vector_index_type "hnsw"
    ShardingConfigBuilder()              -> strategy hash, function murmur3, key "_id"
    PqConfigBuilder()                    -> enabled False

Scalar setters overwrite, list setters append in call order. `build()` can be
called more than once and every call returns an independent value.

`module_config` members are open JSON owned by the server-side modules and
are carried verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Mapping, Optional

from weaviate_sdk.core.wire import (
    JSONObject,
    compact,
    enum_value,
    expect_list,
    expect_object,
    opt_bool,
    opt_enum,
    opt_float,
    opt_int,
    opt_list,
    opt_object,
    opt_str,
    opt_str_list,
    req_bool,
    req_int,
    req_str,
)

# --------------------------------------------------------------------------- #
# Enums
# --------------------------------------------------------------------------- #


class VectorIndexType(Enum):
    HNSW = "hnsw"
    FLAT = "flat"


class Distance(Enum):
    """Vector distance metric used by the vector index."""
    COSINE = "cosine"
    DOT = "dot"
    L2_SQUARED = "l2-squared"
    HAMMING = "hamming"
    MANHATTAN = "manhattan"


class EncoderType(Enum):
    KMEANS = "kmeans"
    TILE = "tile"


class EncoderDistribution(Enum):
    LOG_NORMAL = "log-normal"
    NORMAL = "normal"


class ShardingStrategy(Enum):
    HASH = "hash"


class ShardingFunction(Enum):
    MURMUR3 = "murmur3"


class StopwordPreset(Enum):
    EN = "en"
    NONE = "none"


class Tokenization(Enum):
    WORD = "word"
    LOWERCASE = "lowercase"
    WHITESPACE = "whitespace"
    FIELD = "field"


class ActivityStatus(Enum):
    """Tenant activity status; only HOT tenants serve reads and writes."""
    HOT = "HOT"
    COLD = "COLD"
    FROZEN = "FROZEN"


class ShardStatus(Enum):
    READY = "READY"
    READONLY = "READONLY"


# --------------------------------------------------------------------------- #
# Vector index
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class EncoderConfig:
    """
    Product-quantization encoder settings.

    Attributes:
        type: Encoder kind (kmeans or tile)
        distribution: Input distribution, only meaningful for the tile encoder
    """
    type: EncoderType = EncoderType.KMEANS
    distribution: Optional[EncoderDistribution] = None

    def to_dict(self) -> JSONObject:
        return compact({
            "type": self.type.value,
            "distribution": enum_value(self.distribution),
        })

    @classmethod
    def from_dict(cls, data: Any) -> "EncoderConfig":
        data = expect_object(data, "EncoderConfig")
        return cls(
            type=opt_enum(EncoderType, data, "type", "EncoderConfig") or EncoderType.KMEANS,
            distribution=opt_enum(EncoderDistribution, data, "distribution", "EncoderConfig"),
        )


@dataclass(frozen=True)
class PqConfig:
    """Product quantization (vector compression) settings."""
    enabled: bool = False
    training_limit: Optional[int] = None
    segments: Optional[int] = None
    centroids: Optional[int] = None
    bit_compression: Optional[bool] = None
    encoder: Optional[EncoderConfig] = None

    @staticmethod
    def builder() -> "PqConfigBuilder":
        return PqConfigBuilder()

    def to_dict(self) -> JSONObject:
        return compact({
            "enabled": self.enabled,
            "trainingLimit": self.training_limit,
            "segments": self.segments,
            "centroids": self.centroids,
            "bitCompression": self.bit_compression,
            "encoder": self.encoder.to_dict() if self.encoder else None,
        })

    @classmethod
    def from_dict(cls, data: Any) -> "PqConfig":
        what = "PqConfig"
        data = expect_object(data, what)
        encoder = data.get("encoder")
        return cls(
            enabled=bool(opt_bool(data, "enabled", what)),
            training_limit=opt_int(data, "trainingLimit", what),
            segments=opt_int(data, "segments", what),
            centroids=opt_int(data, "centroids", what),
            bit_compression=opt_bool(data, "bitCompression", what),
            encoder=EncoderConfig.from_dict(encoder) if encoder is not None else None,
        )


class PqConfigBuilder:
    def __init__(self) -> None:
        self._enabled: Optional[bool] = None
        self._training_limit: Optional[int] = None
        self._segments: Optional[int] = None
        self._centroids: Optional[int] = None
        self._bit_compression: Optional[bool] = None
        self._encoder: Optional[EncoderConfig] = None

    def with_enabled(self, enabled: bool) -> "PqConfigBuilder":
        self._enabled = enabled
        return self

    def with_training_limit(self, training_limit: int) -> "PqConfigBuilder":
        self._training_limit = training_limit
        return self

    def with_segments(self, segments: int) -> "PqConfigBuilder":
        self._segments = segments
        return self

    def with_centroids(self, centroids: int) -> "PqConfigBuilder":
        self._centroids = centroids
        return self

    def with_bit_compression(self, bit_compression: bool) -> "PqConfigBuilder":
        self._bit_compression = bit_compression
        return self

    def with_encoder(self, encoder: EncoderConfig) -> "PqConfigBuilder":
        self._encoder = encoder
        return self

    def build(self) -> PqConfig:
        return PqConfig(
            enabled=False if self._enabled is None else self._enabled,
            training_limit=self._training_limit,
            segments=self._segments,
            centroids=self._centroids,
            bit_compression=self._bit_compression,
            encoder=self._encoder,
        )


@dataclass(frozen=True)
class VectorIndexConfig:
    """
    HNSW index tuning.

    Attributes:
        distance: Distance metric
        ef: Query-time candidate list size (-1 lets the server pick dynamically)
        ef_construction: Build-time candidate list size
        max_connections: Max graph edges per node
        dynamic_ef_min / dynamic_ef_max / dynamic_ef_factor: Dynamic ef bounds
        vector_cache_max_objects: In-memory vector cache size
        flat_search_cutoff: Filter size below which a flat search is used
        cleanup_interval_seconds: Tombstone cleanup period
        skip: Skip indexing entirely
        pq: Product quantization settings
    """
    distance: Optional[Distance] = None
    ef: Optional[int] = None
    ef_construction: Optional[int] = None
    max_connections: Optional[int] = None
    dynamic_ef_min: Optional[int] = None
    dynamic_ef_max: Optional[int] = None
    dynamic_ef_factor: Optional[int] = None
    vector_cache_max_objects: Optional[int] = None
    flat_search_cutoff: Optional[int] = None
    cleanup_interval_seconds: Optional[int] = None
    skip: Optional[bool] = None
    pq: Optional[PqConfig] = None

    @staticmethod
    def builder() -> "VectorIndexConfigBuilder":
        return VectorIndexConfigBuilder()

    def to_dict(self) -> JSONObject:
        return compact({
            "distance": enum_value(self.distance),
            "ef": self.ef,
            "efConstruction": self.ef_construction,
            "maxConnections": self.max_connections,
            "dynamicEfMin": self.dynamic_ef_min,
            "dynamicEfMax": self.dynamic_ef_max,
            "dynamicEfFactor": self.dynamic_ef_factor,
            "vectorCacheMaxObjects": self.vector_cache_max_objects,
            "flatSearchCutoff": self.flat_search_cutoff,
            "cleanupIntervalSeconds": self.cleanup_interval_seconds,
            "skip": self.skip,
            "pq": self.pq.to_dict() if self.pq else None,
        })

    @classmethod
    def from_dict(cls, data: Any) -> "VectorIndexConfig":
        what = "VectorIndexConfig"
        data = expect_object(data, what)
        pq = data.get("pq")
        return cls(
            distance=opt_enum(Distance, data, "distance", what),
            ef=opt_int(data, "ef", what),
            ef_construction=opt_int(data, "efConstruction", what),
            max_connections=opt_int(data, "maxConnections", what),
            dynamic_ef_min=opt_int(data, "dynamicEfMin", what),
            dynamic_ef_max=opt_int(data, "dynamicEfMax", what),
            dynamic_ef_factor=opt_int(data, "dynamicEfFactor", what),
            vector_cache_max_objects=opt_int(data, "vectorCacheMaxObjects", what),
            flat_search_cutoff=opt_int(data, "flatSearchCutoff", what),
            cleanup_interval_seconds=opt_int(data, "cleanupIntervalSeconds", what),
            skip=opt_bool(data, "skip", what),
            pq=PqConfig.from_dict(pq) if pq is not None else None,
        )


class VectorIndexConfigBuilder:
    def __init__(self) -> None:
        self._fields: Dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> "VectorIndexConfigBuilder":
        self._fields[name] = value
        return self

    def with_distance(self, distance: Distance) -> "VectorIndexConfigBuilder":
        return self._set("distance", distance)

    def with_ef(self, ef: int) -> "VectorIndexConfigBuilder":
        return self._set("ef", ef)

    def with_ef_construction(self, ef_construction: int) -> "VectorIndexConfigBuilder":
        return self._set("ef_construction", ef_construction)

    def with_max_connections(self, max_connections: int) -> "VectorIndexConfigBuilder":
        return self._set("max_connections", max_connections)

    def with_dynamic_ef_min(self, value: int) -> "VectorIndexConfigBuilder":
        return self._set("dynamic_ef_min", value)

    def with_dynamic_ef_max(self, value: int) -> "VectorIndexConfigBuilder":
        return self._set("dynamic_ef_max", value)

    def with_dynamic_ef_factor(self, value: int) -> "VectorIndexConfigBuilder":
        return self._set("dynamic_ef_factor", value)

    def with_vector_cache_max_objects(self, value: int) -> "VectorIndexConfigBuilder":
        return self._set("vector_cache_max_objects", value)

    def with_flat_search_cutoff(self, value: int) -> "VectorIndexConfigBuilder":
        return self._set("flat_search_cutoff", value)

    def with_cleanup_interval_seconds(self, value: int) -> "VectorIndexConfigBuilder":
        return self._set("cleanup_interval_seconds", value)

    def with_skip(self, skip: bool) -> "VectorIndexConfigBuilder":
        return self._set("skip", skip)

    def with_pq(self, pq: PqConfig) -> "VectorIndexConfigBuilder":
        return self._set("pq", pq)

    def build(self) -> VectorIndexConfig:
        return VectorIndexConfig(**self._fields)


# --------------------------------------------------------------------------- #
# Sharding / replication / multi-tenancy
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class ShardingConfig:
    """
    Sharding settings.

    `actual_count` and `actual_virtual_count` are reported by the server and
    never sent; `to_dict()` leaves them out.
    """
    virtual_per_physical: Optional[int] = None
    desired_count: Optional[int] = None
    desired_virtual_count: Optional[int] = None
    actual_count: Optional[int] = None
    actual_virtual_count: Optional[int] = None
    key: str = "_id"
    strategy: ShardingStrategy = ShardingStrategy.HASH
    function: ShardingFunction = ShardingFunction.MURMUR3

    @staticmethod
    def builder() -> "ShardingConfigBuilder":
        return ShardingConfigBuilder()

    def to_dict(self) -> JSONObject:
        return compact({
            "virtualPerPhysical": self.virtual_per_physical,
            "desiredCount": self.desired_count,
            "desiredVirtualCount": self.desired_virtual_count,
            "key": self.key,
            "strategy": self.strategy.value,
            "function": self.function.value,
        })

    @classmethod
    def from_dict(cls, data: Any) -> "ShardingConfig":
        what = "ShardingConfig"
        data = expect_object(data, what)
        return cls(
            virtual_per_physical=opt_int(data, "virtualPerPhysical", what),
            desired_count=opt_int(data, "desiredCount", what),
            desired_virtual_count=opt_int(data, "desiredVirtualCount", what),
            actual_count=opt_int(data, "actualCount", what),
            actual_virtual_count=opt_int(data, "actualVirtualCount", what),
            key=opt_str(data, "key", what) or "_id",
            strategy=opt_enum(ShardingStrategy, data, "strategy", what) or ShardingStrategy.HASH,
            function=opt_enum(ShardingFunction, data, "function", what) or ShardingFunction.MURMUR3,
        )


class ShardingConfigBuilder:
    def __init__(self) -> None:
        self._virtual_per_physical: Optional[int] = None
        self._desired_count: Optional[int] = None
        self._desired_virtual_count: Optional[int] = None
        self._key: Optional[str] = None
        self._strategy: Optional[ShardingStrategy] = None
        self._function: Optional[ShardingFunction] = None

    def with_virtual_per_physical(self, value: int) -> "ShardingConfigBuilder":
        self._virtual_per_physical = value
        return self

    def with_desired_count(self, value: int) -> "ShardingConfigBuilder":
        self._desired_count = value
        return self

    def with_desired_virtual_count(self, value: int) -> "ShardingConfigBuilder":
        self._desired_virtual_count = value
        return self

    def with_key(self, key: str) -> "ShardingConfigBuilder":
        self._key = key
        return self

    def with_strategy(self, strategy: ShardingStrategy) -> "ShardingConfigBuilder":
        self._strategy = strategy
        return self

    def with_function(self, function: ShardingFunction) -> "ShardingConfigBuilder":
        self._function = function
        return self

    def build(self) -> ShardingConfig:
        return ShardingConfig(
            virtual_per_physical=self._virtual_per_physical,
            desired_count=self._desired_count,
            desired_virtual_count=self._desired_virtual_count,
            key=self._key or "_id",
            strategy=self._strategy or ShardingStrategy.HASH,
            function=self._function or ShardingFunction.MURMUR3,
        )


@dataclass(frozen=True)
class ReplicationConfig:
    factor: int

    def to_dict(self) -> JSONObject:
        return {"factor": self.factor}

    @classmethod
    def from_dict(cls, data: Any) -> "ReplicationConfig":
        data = expect_object(data, "ReplicationConfig")
        return cls(factor=req_int(data, "factor", "ReplicationConfig"))


@dataclass(frozen=True)
class MultiTenancyConfig:
    enabled: bool

    def to_dict(self) -> JSONObject:
        return {"enabled": self.enabled}

    @classmethod
    def from_dict(cls, data: Any) -> "MultiTenancyConfig":
        data = expect_object(data, "MultiTenancyConfig")
        return cls(enabled=req_bool(data, "enabled", "MultiTenancyConfig"))


# --------------------------------------------------------------------------- #
# Inverted index
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class StopwordsConfig:
    preset: Optional[StopwordPreset] = None
    additions: Optional[List[str]] = None
    removals: Optional[List[str]] = None

    def to_dict(self) -> JSONObject:
        return compact({
            "preset": enum_value(self.preset),
            "additions": list(self.additions) if self.additions is not None else None,
            "removals": list(self.removals) if self.removals is not None else None,
        })

    @classmethod
    def from_dict(cls, data: Any) -> "StopwordsConfig":
        what = "StopwordsConfig"
        data = expect_object(data, what)
        return cls(
            preset=opt_enum(StopwordPreset, data, "preset", what),
            additions=opt_str_list(data, "additions", what),
            removals=opt_str_list(data, "removals", what),
        )


class StopwordsConfigBuilder:
    def __init__(self) -> None:
        self._preset: Optional[StopwordPreset] = None
        self._additions: Optional[List[str]] = None
        self._removals: Optional[List[str]] = None

    def with_preset(self, preset: StopwordPreset) -> "StopwordsConfigBuilder":
        self._preset = preset
        return self

    def with_additions(self, words: Iterable[str]) -> "StopwordsConfigBuilder":
        self._additions = (self._additions or []) + list(words)
        return self

    def with_removals(self, words: Iterable[str]) -> "StopwordsConfigBuilder":
        self._removals = (self._removals or []) + list(words)
        return self

    def build(self) -> StopwordsConfig:
        return StopwordsConfig(
            preset=self._preset,
            additions=list(self._additions) if self._additions is not None else None,
            removals=list(self._removals) if self._removals is not None else None,
        )


@dataclass(frozen=True)
class Bm25Config:
    b: float
    k1: float

    def to_dict(self) -> JSONObject:
        return {"b": self.b, "k1": self.k1}

    @classmethod
    def from_dict(cls, data: Any) -> "Bm25Config":
        what = "Bm25Config"
        data = expect_object(data, what)
        b = opt_float(data, "b", what)
        k1 = opt_float(data, "k1", what)
        # server defaults
        return cls(b=0.75 if b is None else b, k1=1.2 if k1 is None else k1)


@dataclass(frozen=True)
class InvertedIndexConfig:
    stopwords: Optional[StopwordsConfig] = None
    index_timestamps: Optional[bool] = None
    index_null_state: Optional[bool] = None
    index_property_length: Optional[bool] = None
    bm25: Optional[Bm25Config] = None
    cleanup_interval_seconds: Optional[int] = None

    @staticmethod
    def builder() -> "InvertedIndexConfigBuilder":
        return InvertedIndexConfigBuilder()

    def to_dict(self) -> JSONObject:
        return compact({
            "stopwords": self.stopwords.to_dict() if self.stopwords else None,
            "indexTimestamps": self.index_timestamps,
            "indexNullState": self.index_null_state,
            "indexPropertyLength": self.index_property_length,
            "bm25": self.bm25.to_dict() if self.bm25 else None,
            "cleanupIntervalSeconds": self.cleanup_interval_seconds,
        })

    @classmethod
    def from_dict(cls, data: Any) -> "InvertedIndexConfig":
        what = "InvertedIndexConfig"
        data = expect_object(data, what)
        stopwords = data.get("stopwords")
        bm25 = data.get("bm25")
        return cls(
            stopwords=StopwordsConfig.from_dict(stopwords) if stopwords is not None else None,
            index_timestamps=opt_bool(data, "indexTimestamps", what),
            index_null_state=opt_bool(data, "indexNullState", what),
            index_property_length=opt_bool(data, "indexPropertyLength", what),
            bm25=Bm25Config.from_dict(bm25) if bm25 is not None else None,
            cleanup_interval_seconds=opt_int(data, "cleanupIntervalSeconds", what),
        )


class InvertedIndexConfigBuilder:
    def __init__(self) -> None:
        self._fields: Dict[str, Any] = {}

    def _set(self, name: str, value: Any) -> "InvertedIndexConfigBuilder":
        self._fields[name] = value
        return self

    def with_stopwords(self, stopwords: StopwordsConfig) -> "InvertedIndexConfigBuilder":
        return self._set("stopwords", stopwords)

    def with_index_timestamps(self, value: bool) -> "InvertedIndexConfigBuilder":
        return self._set("index_timestamps", value)

    def with_index_null_state(self, value: bool) -> "InvertedIndexConfigBuilder":
        return self._set("index_null_state", value)

    def with_index_property_length(self, value: bool) -> "InvertedIndexConfigBuilder":
        return self._set("index_property_length", value)

    def with_bm25(self, bm25: Bm25Config) -> "InvertedIndexConfigBuilder":
        return self._set("bm25", bm25)

    def with_cleanup_interval_seconds(self, value: int) -> "InvertedIndexConfigBuilder":
        return self._set("cleanup_interval_seconds", value)

    def build(self) -> InvertedIndexConfig:
        return InvertedIndexConfig(**self._fields)


# --------------------------------------------------------------------------- #
# Properties and classes
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Property:
    """
    A typed field of a class.

    Attributes:
        name: Property name
        data_type: Primitive type names (e.g. ["text"]) or, for a
            cross-reference, the target class names (e.g. ["Author"])
        description: Free-form description
        tokenization: How text is split for the inverted index
        module_config: Per-module settings, open JSON
        index_filterable: Build the filterable (roaring bitmap) index
        index_searchable: Build the searchable (BM25) index
        inverted_index_config: Property-level inverted index override
    """
    name: str
    data_type: List[str]
    description: Optional[str] = None
    tokenization: Optional[Tokenization] = None
    module_config: Optional[JSONObject] = None
    index_filterable: Optional[bool] = None
    index_searchable: Optional[bool] = None
    inverted_index_config: Optional[InvertedIndexConfig] = None

    @staticmethod
    def builder(name: str, data_type: Iterable[str] = ()) -> "PropertyBuilder":
        return PropertyBuilder(name, data_type)

    def to_dict(self) -> JSONObject:
        return compact({
            "name": self.name,
            "dataType": list(self.data_type),
            "description": self.description,
            "tokenization": enum_value(self.tokenization),
            "moduleConfig": self.module_config,
            "indexFilterable": self.index_filterable,
            "indexSearchable": self.index_searchable,
            "invertedIndexConfig": (
                self.inverted_index_config.to_dict() if self.inverted_index_config else None
            ),
        })

    @classmethod
    def from_dict(cls, data: Any) -> "Property":
        what = "Property"
        data = expect_object(data, what)
        inverted = data.get("invertedIndexConfig")
        return cls(
            name=req_str(data, "name", what),
            data_type=opt_str_list(data, "dataType", what) or [],
            description=opt_str(data, "description", what),
            tokenization=opt_enum(Tokenization, data, "tokenization", what),
            module_config=opt_object(data, "moduleConfig", what),
            index_filterable=opt_bool(data, "indexFilterable", what),
            index_searchable=opt_bool(data, "indexSearchable", what),
            inverted_index_config=(
                InvertedIndexConfig.from_dict(inverted) if inverted is not None else None
            ),
        )


class PropertyBuilder:
    def __init__(self, name: str, data_type: Iterable[str] = ()) -> None:
        self._name = name
        self._data_type: List[str] = list(data_type)
        self._description: Optional[str] = None
        self._tokenization: Optional[Tokenization] = None
        self._module_config: Optional[JSONObject] = None
        self._index_filterable: Optional[bool] = None
        self._index_searchable: Optional[bool] = None
        self._inverted_index_config: Optional[InvertedIndexConfig] = None

    def with_data_type(self, *data_types: str) -> "PropertyBuilder":
        self._data_type.extend(data_types)
        return self

    def with_description(self, description: str) -> "PropertyBuilder":
        self._description = description
        return self

    def with_tokenization(self, tokenization: Tokenization) -> "PropertyBuilder":
        self._tokenization = tokenization
        return self

    def with_module_config(self, module_config: Mapping[str, Any]) -> "PropertyBuilder":
        self._module_config = dict(module_config)
        return self

    def with_index_filterable(self, value: bool) -> "PropertyBuilder":
        self._index_filterable = value
        return self

    def with_index_searchable(self, value: bool) -> "PropertyBuilder":
        self._index_searchable = value
        return self

    def with_inverted_index_config(self, config: InvertedIndexConfig) -> "PropertyBuilder":
        self._inverted_index_config = config
        return self

    def build(self) -> Property:
        return Property(
            name=self._name,
            data_type=list(self._data_type),
            description=self._description,
            tokenization=self._tokenization,
            module_config=dict(self._module_config) if self._module_config is not None else None,
            index_filterable=self._index_filterable,
            index_searchable=self._index_searchable,
            inverted_index_config=self._inverted_index_config,
        )


@dataclass(frozen=True)
class Class:
    """
    A named schema definition, serialized with the wire key `class`.

    Attributes:
        name: Class name (capitalized by the server)
        description: Free-form description
        properties: Property definitions, in declaration order
        vectorizer: Vectorizer module name, e.g. "text2vec-openai" or "none"
        vector_index_type: Vector index kind
        vector_index_config: Vector index tuning
        module_config: Per-module class settings, open JSON
        inverted_index_config: Inverted index settings
        sharding_config: Sharding settings
        multi_tenancy_config: Multi-tenancy switch
        replication_config: Replication factor
    """
    name: str
    description: Optional[str] = None
    properties: Optional[List[Property]] = None
    vectorizer: Optional[str] = None
    vector_index_type: Optional[VectorIndexType] = None
    vector_index_config: Optional[VectorIndexConfig] = None
    module_config: Optional[JSONObject] = None
    inverted_index_config: Optional[InvertedIndexConfig] = None
    sharding_config: Optional[ShardingConfig] = None
    multi_tenancy_config: Optional[MultiTenancyConfig] = None
    replication_config: Optional[ReplicationConfig] = None

    @staticmethod
    def builder(name: str) -> "ClassBuilder":
        return ClassBuilder(name)

    def to_dict(self) -> JSONObject:
        return compact({
            "class": self.name,
            "description": self.description,
            "properties": (
                [p.to_dict() for p in self.properties] if self.properties is not None else None
            ),
            "vectorizer": self.vectorizer,
            "vectorIndexType": enum_value(self.vector_index_type),
            "vectorIndexConfig": (
                self.vector_index_config.to_dict() if self.vector_index_config else None
            ),
            "moduleConfig": self.module_config,
            "invertedIndexConfig": (
                self.inverted_index_config.to_dict() if self.inverted_index_config else None
            ),
            "shardingConfig": self.sharding_config.to_dict() if self.sharding_config else None,
            "multiTenancyConfig": (
                self.multi_tenancy_config.to_dict() if self.multi_tenancy_config else None
            ),
            "replicationConfig": (
                self.replication_config.to_dict() if self.replication_config else None
            ),
        })

    @classmethod
    def from_dict(cls, data: Any) -> "Class":
        what = "Class"
        data = expect_object(data, what)
        props = opt_list(data, "properties", what)
        vic = data.get("vectorIndexConfig")
        iic = data.get("invertedIndexConfig")
        sc = data.get("shardingConfig")
        mtc = data.get("multiTenancyConfig")
        rc = data.get("replicationConfig")
        return cls(
            name=req_str(data, "class", what),
            description=opt_str(data, "description", what),
            properties=[Property.from_dict(p) for p in props] if props is not None else None,
            vectorizer=opt_str(data, "vectorizer", what),
            vector_index_type=opt_enum(VectorIndexType, data, "vectorIndexType", what),
            vector_index_config=VectorIndexConfig.from_dict(vic) if vic is not None else None,
            module_config=opt_object(data, "moduleConfig", what),
            inverted_index_config=InvertedIndexConfig.from_dict(iic) if iic is not None else None,
            sharding_config=ShardingConfig.from_dict(sc) if sc is not None else None,
            multi_tenancy_config=MultiTenancyConfig.from_dict(mtc) if mtc is not None else None,
            replication_config=ReplicationConfig.from_dict(rc) if rc is not None else None,
        )


class ClassBuilder:
    """Construction-only builder for `Class`."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._description: Optional[str] = None
        self._properties: Optional[List[Property]] = None
        self._vectorizer: Optional[str] = None
        self._vector_index_type: Optional[VectorIndexType] = None
        self._vector_index_config: Optional[VectorIndexConfig] = None
        self._module_config: Optional[JSONObject] = None
        self._inverted_index_config: Optional[InvertedIndexConfig] = None
        self._sharding_config: Optional[ShardingConfig] = None
        self._multi_tenancy_config: Optional[MultiTenancyConfig] = None
        self._replication_config: Optional[ReplicationConfig] = None

    def with_description(self, description: str) -> "ClassBuilder":
        self._description = description
        return self

    def with_property(self, prop: Property) -> "ClassBuilder":
        return self.with_properties([prop])

    def with_properties(self, props: Iterable[Property]) -> "ClassBuilder":
        self._properties = (self._properties or []) + list(props)
        return self

    def with_vectorizer(self, vectorizer: str) -> "ClassBuilder":
        self._vectorizer = vectorizer
        return self

    def with_vector_index_type(self, index_type: VectorIndexType) -> "ClassBuilder":
        self._vector_index_type = index_type
        return self

    def with_vector_index_config(self, config: VectorIndexConfig) -> "ClassBuilder":
        self._vector_index_config = config
        return self

    def with_module_config(self, module_config: Mapping[str, Any]) -> "ClassBuilder":
        self._module_config = dict(module_config)
        return self

    def with_inverted_index_config(self, config: InvertedIndexConfig) -> "ClassBuilder":
        self._inverted_index_config = config
        return self

    def with_sharding_config(self, config: ShardingConfig) -> "ClassBuilder":
        self._sharding_config = config
        return self

    def with_multi_tenancy_config(self, config: MultiTenancyConfig) -> "ClassBuilder":
        self._multi_tenancy_config = config
        return self

    def with_replication_config(self, config: ReplicationConfig) -> "ClassBuilder":
        self._replication_config = config
        return self

    def build(self) -> Class:
        return Class(
            name=self._name,
            description=self._description,
            properties=list(self._properties) if self._properties is not None else None,
            vectorizer=self._vectorizer,
            vector_index_type=self._vector_index_type or VectorIndexType.HNSW,
            vector_index_config=self._vector_index_config,
            module_config=dict(self._module_config) if self._module_config is not None else None,
            inverted_index_config=self._inverted_index_config,
            sharding_config=self._sharding_config,
            multi_tenancy_config=self._multi_tenancy_config,
            replication_config=self._replication_config,
        )


@dataclass(frozen=True)
class Schema:
    """The full schema as returned by `GET /v1/schema`."""
    classes: List[Class] = field(default_factory=list)

    def to_dict(self) -> JSONObject:
        return {"classes": [c.to_dict() for c in self.classes]}

    @classmethod
    def from_dict(cls, data: Any) -> "Schema":
        data = expect_object(data, "Schema")
        classes = opt_list(data, "classes", "Schema") or []
        return cls(classes=[Class.from_dict(c) for c in classes])


# --------------------------------------------------------------------------- #
# Tenants and shards
# --------------------------------------------------------------------------- #


@dataclass(frozen=True)
class Tenant:
    name: str
    activity_status: ActivityStatus = ActivityStatus.HOT

    def to_dict(self) -> JSONObject:
        return {"name": self.name, "activityStatus": self.activity_status.value}

    @classmethod
    def from_dict(cls, data: Any) -> "Tenant":
        data = expect_object(data, "Tenant")
        return cls(
            name=req_str(data, "name", "Tenant"),
            activity_status=(
                opt_enum(ActivityStatus, data, "activityStatus", "Tenant") or ActivityStatus.HOT
            ),
        )

    @classmethod
    def list_from(cls, data: Any) -> List["Tenant"]:
        return [cls.from_dict(t) for t in expect_list(data, "tenants")]


@dataclass(frozen=True)
class Shard:
    name: str
    status: ShardStatus

    def to_dict(self) -> JSONObject:
        return {"name": self.name, "status": self.status.value}

    @classmethod
    def from_dict(cls, data: Any) -> "Shard":
        data = expect_object(data, "Shard")
        return cls(
            name=req_str(data, "name", "Shard"),
            status=opt_enum(ShardStatus, data, "status", "Shard") or ShardStatus.READY,
        )

    @classmethod
    def list_from(cls, data: Any) -> List["Shard"]:
        return [cls.from_dict(s) for s in expect_list(data, "shards")]


__all__ = [
    "VectorIndexType",
    "Distance",
    "EncoderType",
    "EncoderDistribution",
    "ShardingStrategy",
    "ShardingFunction",
    "StopwordPreset",
    "Tokenization",
    "ActivityStatus",
    "ShardStatus",
    "EncoderConfig",
    "PqConfig",
    "PqConfigBuilder",
    "VectorIndexConfig",
    "VectorIndexConfigBuilder",
    "ShardingConfig",
    "ShardingConfigBuilder",
    "ReplicationConfig",
    "MultiTenancyConfig",
    "StopwordsConfig",
    "StopwordsConfigBuilder",
    "Bm25Config",
    "InvertedIndexConfig",
    "InvertedIndexConfigBuilder",
    "Property",
    "PropertyBuilder",
    "Class",
    "ClassBuilder",
    "Schema",
    "Tenant",
    "Shard",
]
