# SPDX-License-Identifier: Apache-2.0
"""
Batch façade: bulk object writes, delete-by-filter and bulk references.
"""

import pytest

from weaviate_sdk import (
    BatchDeleteRequest,
    ConsistencyLevel,
    GeneralStatus,
    MatchConfig,
    Object,
    Reference,
    ValidationError,
    Verbosity,
)

pytestmark = pytest.mark.asyncio

ID_1 = "b7a5e3b2-8b47-4b0e-9c59-4d4f0a6d0b01"
ID_2 = "b7a5e3b2-8b47-4b0e-9c59-4d4f0a6d0b02"


async def test_batch_add_two_articles_with_consistency_all(client, server):
    server.add(
        "POST",
        "/v1/batch/objects",
        json_body=[
            {"class": "Article", "id": ID_1, "properties": {"title": "one"}, "result": {}},
            {"class": "Article", "id": ID_2, "properties": {"title": "two"}, "result": {"status": "SUCCESS"}},
        ],
    )
    objects = [
        Object.builder("Article", {"title": "one"}).with_id(ID_1).build(),
        Object.builder("Article", {"title": "two"}).with_id(ID_2).build(),
    ]

    results = await client.batch.objects_add(objects, ConsistencyLevel.ALL)

    assert len(server.requests) == 1
    request = server.last
    assert request.method == "POST"
    assert request.url.path == "/v1/batch/objects"
    assert server.params(request) == {"consistency_level": "ALL"}
    assert server.body(request) == {
        "objects": [
            {"class": "Article", "properties": {"title": "one"}, "id": ID_1},
            {"class": "Article", "properties": {"title": "two"}, "id": ID_2},
        ]
    }
    assert [r.object.id for r in results] == [ID_1, ID_2]
    assert all(r.status is GeneralStatus.SUCCESS for r in results)


async def test_batch_add_reports_item_failures_without_raising(client, server):
    server.add(
        "POST",
        "/v1/batch/objects",
        json_body=[
            {
                "class": "Article",
                "id": ID_1,
                "properties": {},
                "result": {"status": "FAILED", "errors": {"error": [{"message": "no such prop"}]}},
            }
        ],
    )

    results = await client.batch.objects_add([Object("Article", {"bogus": 1}, id=ID_1)])

    assert results[0].status is GeneralStatus.FAILED
    assert results[0].errors == ["no such prop"]


async def test_batch_delete_by_match(client, server):
    server.add(
        "DELETE",
        "/v1/batch/objects",
        json_body={
            "match": {"class": "Article", "where": {"path": ["title"], "operator": "Like", "valueText": "x*"}},
            "output": "verbose",
            "dryRun": True,
            "results": {
                "matches": 2,
                "limit": 10000,
                "successful": 0,
                "failed": 0,
                "objects": [{"id": ID_1, "status": "DRYRUN"}, {"id": ID_2, "status": "DRYRUN"}],
            },
        },
    )
    where = {"path": ["title"], "operator": "Like", "valueText": "x*"}
    request = (
        BatchDeleteRequest.builder(MatchConfig("Article", where))
        .with_output(Verbosity.VERBOSE)
        .with_dry_run(True)
        .build()
    )

    response = await client.batch.objects_delete(request)

    assert server.body(server.last) == {
        "match": {"class": "Article", "where": where},
        "output": "verbose",
        "dryRun": True,
    }
    assert response.results.matches == 2
    assert [o.status for o in response.results.objects] == [GeneralStatus.DRYRUN] * 2
    assert response.matches.where == where


async def test_batch_references(client, server):
    server.add("POST", "/v1/batch/references", json_body=[{"result": {"status": "SUCCESS"}}])
    ref = Reference.builder("Article", ID_1, "hasAuthors", "Author", ID_2).build()

    results = await client.batch.references_add([ref], ConsistencyLevel.QUORUM)

    assert server.body(server.last) == [
        {
            "from": f"weaviate://localhost/Article/{ID_1}/hasAuthors",
            "to": f"weaviate://localhost/Author/{ID_2}",
        }
    ]
    assert server.params(server.last) == {"consistency_level": "QUORUM"}
    assert results[0].status is GeneralStatus.SUCCESS


async def test_empty_batches_rejected(client, server):
    with pytest.raises(ValidationError):
        await client.batch.objects_add([])
    with pytest.raises(ValidationError):
        await client.batch.references_add([])
    assert server.requests == []
