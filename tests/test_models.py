# SPDX-License-Identifier: Apache-2.0
"""
Builders and wire encoding of the request / response values.
"""

import uuid

import pytest

from weaviate_sdk import (
    Class,
    DecodeError,
    Distance,
    InvertedIndexConfig,
    MultiTenancyConfig,
    Object,
    ObjectListParameters,
    OrderBy,
    PqConfig,
    Property,
    Reference,
    ShardingConfig,
    Tenant,
    Tokenization,
    VectorIndexConfig,
)
from weaviate_sdk.models.objects import beacon, parse_beacon
from weaviate_sdk.models.schema import (
    ActivityStatus,
    Bm25Config,
    StopwordPreset,
    StopwordsConfigBuilder,
    VectorIndexType,
)

ARTICLE_ID = "9f6a2a3e-1b7c-4c7e-9d6a-2f1e0a4b5c6d"
AUTHOR_ID = "36ddd591-2dee-4e7e-a3cc-eb86d30a4303"


# --------------------------------------------------------------------------- #
# Builder defaults and accumulation
# --------------------------------------------------------------------------- #


def test_class_builder_defaults():
    article = Class.builder("Article").build()

    assert article.vector_index_type is VectorIndexType.HNSW
    assert article.properties is None
    assert article.to_dict() == {"class": "Article", "vectorIndexType": "hnsw"}


def test_class_builder_properties_append_in_call_order():
    title = Property.builder("title", ["text"]).build()
    body = Property.builder("body", ["text"]).build()
    count = Property.builder("wordCount", ["int"]).build()

    article = Class.builder("Article").with_property(title).with_properties([body, count]).build()

    assert [p.name for p in article.properties] == ["title", "body", "wordCount"]


def test_scalar_setters_overwrite():
    article = (
        Class.builder("Article")
        .with_vectorizer("text2vec-openai")
        .with_vectorizer("none")
        .build()
    )
    assert article.vectorizer == "none"


def test_repeated_build_yields_independent_values():
    builder = Class.builder("Article").with_property(Property.builder("title", ["text"]).build())
    first = builder.build()
    builder.with_property(Property.builder("body", ["text"]).build())
    second = builder.build()

    assert len(first.properties) == 1
    assert len(second.properties) == 2


def test_property_data_type_appends():
    prop = Property.builder("author").with_data_type("Author").with_data_type("Editor").build()
    assert prop.data_type == ["Author", "Editor"]


def test_sharding_defaults():
    sharding = ShardingConfig.builder().with_desired_count(2).build()

    assert sharding.to_dict() == {
        "desiredCount": 2,
        "key": "_id",
        "strategy": "hash",
        "function": "murmur3",
    }


def test_sharding_server_counts_are_decode_only():
    decoded = ShardingConfig.from_dict({"actualCount": 3, "actualVirtualCount": 384})

    assert decoded.actual_count == 3
    assert "actualCount" not in decoded.to_dict()


def test_pq_defaults_to_disabled():
    assert PqConfig.builder().with_segments(96).build().to_dict() == {"enabled": False, "segments": 96}


def test_stopwords_lists_accumulate():
    stopwords = (
        StopwordsConfigBuilder()
        .with_preset(StopwordPreset.EN)
        .with_additions(["a"])
        .with_additions(["b"])
        .with_removals(["the"])
        .build()
    )
    assert stopwords.to_dict() == {"preset": "en", "additions": ["a", "b"], "removals": ["the"]}


def test_bm25_missing_values_take_server_defaults():
    assert Bm25Config.from_dict({}) == Bm25Config(b=0.75, k1=1.2)


def test_object_list_parameters_query():
    params = (
        ObjectListParameters.builder()
        .with_class_name("Article")
        .with_limit(10)
        .with_sort("title")
        .with_sort("wordCount")
        .with_order(OrderBy.ASC, OrderBy.DESC)
        .build()
    )

    assert params.to_query() == {
        "class": "Article",
        "limit": 10,
        "sort": "title,wordCount",
        "order": "asc,desc",
    }


def test_object_builder_normalizes_uuid_and_vector():
    obj = Object.builder("Article").with_id(uuid.UUID(ARTICLE_ID)).with_vector([1, 2]).build()

    assert obj.id == ARTICLE_ID
    assert obj.vector == [1.0, 2.0]


# --------------------------------------------------------------------------- #
# Wire round trips
# --------------------------------------------------------------------------- #


def test_full_class_round_trip():
    article = (
        Class.builder("Article")
        .with_description("News articles")
        .with_vectorizer("text2vec-openai")
        .with_property(
            Property.builder("title", ["text"])
            .with_tokenization(Tokenization.WORD)
            .with_index_searchable(True)
            .build()
        )
        .with_vector_index_config(
            VectorIndexConfig.builder()
            .with_distance(Distance.COSINE)
            .with_ef(-1)
            .with_flat_search_cutoff(40000)
            .build()
        )
        .with_inverted_index_config(
            InvertedIndexConfig.builder().with_bm25(Bm25Config(b=0.7, k1=1.1)).build()
        )
        .with_module_config({"text2vec-openai": {"model": "ada"}})
        .with_multi_tenancy_config(MultiTenancyConfig(enabled=True))
        .build()
    )

    wire = article.to_dict()

    assert wire["vectorIndexConfig"] == {"distance": "cosine", "ef": -1, "flatSearchCutoff": 40000}
    assert wire["properties"][0]["tokenization"] == "word"
    assert Class.from_dict(wire) == article


def test_object_round_trip_keeps_nested_properties():
    props = {"title": "Pizza", "meta": {"tags": ["food", "italy"], "score": 0.5}}
    obj = Object("Article", props, id=ARTICLE_ID, tenant="tenantA")

    wire = obj.to_dict()

    assert wire == {"class": "Article", "properties": props, "id": ARTICLE_ID, "tenant": "tenantA"}
    assert Object.from_dict(wire) == obj


def test_reference_wire_shape_and_round_trip():
    ref = Reference.builder("Article", ARTICLE_ID, "hasAuthor", "Author", AUTHOR_ID).build()

    assert ref.to_dict() == {
        "from": f"weaviate://localhost/Article/{ARTICLE_ID}/hasAuthor",
        "to": f"weaviate://localhost/Author/{AUTHOR_ID}",
    }
    assert Reference.from_dict(ref.to_dict()) == ref


def test_beacon_parsing():
    assert parse_beacon(beacon("Author", AUTHOR_ID)) == ("Author", AUTHOR_ID, None)
    with pytest.raises(DecodeError):
        parse_beacon("http://example.com/Author/1")
    with pytest.raises(DecodeError):
        Reference.from_dict({"from": beacon("Article", ARTICLE_ID), "to": beacon("Author", AUTHOR_ID)})


def test_tenant_defaults_to_hot():
    assert Tenant.from_dict({"name": "tenantA"}).activity_status is ActivityStatus.HOT
    assert Tenant("tenantB", ActivityStatus.COLD).to_dict() == {"name": "tenantB", "activityStatus": "COLD"}


@pytest.mark.parametrize(
    "payload",
    [
        [],
        {"class": "Article", "properties": ["not", "an", "object"]},
        {"class": "Article", "vectorIndexType": "annoy"},
        {"class": "Article", "vectorIndexConfig": {"ef": "large"}},
    ],
)
def test_class_decode_rejects_wrong_shapes(payload):
    with pytest.raises(DecodeError):
        Class.from_dict(payload)
