# SPDX-License-Identifier: Apache-2.0
"""
Every façade call that decodes a JSON body maps failures the same way:
a status outside 2xx raises RequestError with the exact status and body,
and a 2xx body that is not JSON raises DecodeError.
"""

import pytest

from weaviate_sdk import (
    BackupBackend,
    BackupCreateRequest,
    BatchDeleteRequest,
    Class,
    ClassificationRequest,
    ContextionaryExtension,
    DecodeError,
    GetQuery,
    MatchConfig,
    NodesOutput,
    Object,
    Property,
    RawQuery,
    Reference,
    RequestError,
    ShardStatus,
    Tenant,
)
from weaviate_sdk.core.error_context import get_context

pytestmark = pytest.mark.asyncio

OBJ_ID = "9f6a2a3e-1b7c-4c7e-9d6a-2f1e0a4b5c6d"
AUTHOR_ID = "36ddd591-2dee-4e7e-a3cc-eb86d30a4303"
RAW_BODY = '{"error":[{"message":"I\'m a teapot"}]}'

ARTICLE = Class.builder("Article").build()
TITLE = Property.builder("title", ["text"]).build()
REFERENCE = Reference.builder("Article", OBJ_ID, "hasAuthor", "Author", AUTHOR_ID).build()
CLASSIFY = ClassificationRequest.builder("Article").with_classify_properties(["hasPopularity"]).build()

CALLS = [
    ("schema.get", "GET", "/v1/schema", lambda c: c.schema.get()),
    ("schema.get_class", "GET", "/v1/schema/Article", lambda c: c.schema.get_class("Article")),
    ("schema.create_class", "POST", "/v1/schema", lambda c: c.schema.create_class(ARTICLE)),
    ("schema.update_class", "PUT", "/v1/schema/Article", lambda c: c.schema.update_class(ARTICLE)),
    (
        "schema.add_property",
        "POST",
        "/v1/schema/Article/properties",
        lambda c: c.schema.add_property("Article", TITLE),
    ),
    ("schema.get_shards", "GET", "/v1/schema/Article/shards", lambda c: c.schema.get_shards("Article")),
    (
        "schema.update_shard",
        "PUT",
        "/v1/schema/Article/shards/s1",
        lambda c: c.schema.update_shard("Article", "s1", ShardStatus.READONLY),
    ),
    ("schema.list_tenants", "GET", "/v1/schema/Article/tenants", lambda c: c.schema.list_tenants("Article")),
    (
        "schema.add_tenants",
        "POST",
        "/v1/schema/Article/tenants",
        lambda c: c.schema.add_tenants("Article", [Tenant("tenantA")]),
    ),
    (
        "schema.update_tenants",
        "PUT",
        "/v1/schema/Article/tenants",
        lambda c: c.schema.update_tenants("Article", [Tenant("tenantA")]),
    ),
    ("objects.list", "GET", "/v1/objects", lambda c: c.objects.list()),
    ("objects.create", "POST", "/v1/objects", lambda c: c.objects.create(Object("Article", {"title": "x"}))),
    ("objects.get", "GET", f"/v1/objects/Article/{OBJ_ID}", lambda c: c.objects.get("Article", OBJ_ID)),
    (
        "objects.replace",
        "PUT",
        f"/v1/objects/Article/{OBJ_ID}",
        lambda c: c.objects.replace("Article", OBJ_ID, {"title": "y"}),
    ),
    (
        "batch.objects_add",
        "POST",
        "/v1/batch/objects",
        lambda c: c.batch.objects_add([Object("Article", {"title": "x"})]),
    ),
    (
        "batch.objects_delete",
        "DELETE",
        "/v1/batch/objects",
        lambda c: c.batch.objects_delete(
            BatchDeleteRequest(MatchConfig("Article", {"path": ["id"], "operator": "Like", "valueText": "*"}))
        ),
    ),
    ("batch.references_add", "POST", "/v1/batch/references", lambda c: c.batch.references_add([REFERENCE])),
    (
        "backups.create",
        "POST",
        "/v1/backups/filesystem",
        lambda c: c.backups.create(BackupBackend.FILESYSTEM, BackupCreateRequest("nightly")),
    ),
    (
        "backups.get_create_status",
        "GET",
        "/v1/backups/filesystem/nightly",
        lambda c: c.backups.get_create_status(BackupBackend.FILESYSTEM, "nightly"),
    ),
    (
        "backups.restore",
        "POST",
        "/v1/backups/filesystem/nightly/restore",
        lambda c: c.backups.restore(BackupBackend.FILESYSTEM, "nightly"),
    ),
    (
        "backups.get_restore_status",
        "GET",
        "/v1/backups/filesystem/nightly/restore",
        lambda c: c.backups.get_restore_status(BackupBackend.FILESYSTEM, "nightly"),
    ),
    ("classification.schedule", "POST", "/v1/classifications", lambda c: c.classification.schedule(CLASSIFY)),
    (
        "classification.get",
        "GET",
        f"/v1/classifications/{OBJ_ID}",
        lambda c: c.classification.get(OBJ_ID),
    ),
    (
        "query.get",
        "POST",
        "/v1/graphql",
        lambda c: c.query.get(GetQuery.builder("Article", ["title"]).build()),
    ),
    ("query.raw", "POST", "/v1/graphql", lambda c: c.query.raw(RawQuery("{ Get { Article { title } } }"))),
    ("meta.get", "GET", "/v1/meta", lambda c: c.meta.get()),
    ("nodes.get_nodes_status", "GET", "/v1/nodes", lambda c: c.nodes.get_nodes_status()),
    (
        "nodes.get_nodes_status",
        "GET",
        "/v1/nodes/Article",
        lambda c: c.nodes.get_nodes_status("Article", NodesOutput.MINIMAL),
    ),
    (
        "oidc.get_open_id_configuration",
        "GET",
        "/v1/.well-known/openid-configuration",
        lambda c: c.oidc.get_open_id_configuration(),
    ),
    (
        "modules.contextionary_get_concept",
        "GET",
        "/v1/modules/text2vec-contextionary/concepts/pizza",
        lambda c: c.modules.contextionary_get_concept("pizza"),
    ),
    (
        "modules.contextionary_extend",
        "POST",
        "/v1/modules/text2vec-contextionary/extensions",
        lambda c: c.modules.contextionary_extend(ContextionaryExtension("weaviate", "vector database", 1.0)),
    ),
]

IDS = [f"{op}-{path}" for op, _, path, _ in CALLS]


@pytest.mark.parametrize("operation, method, path, call", CALLS, ids=IDS)
async def test_non_2xx_raises_request_error_with_exact_body(client, server, operation, method, path, call):
    server.add(method, path, status=418, text=RAW_BODY)

    with pytest.raises(RequestError) as exc_info:
        await call(client)

    assert exc_info.value.status_code == 418
    assert exc_info.value.body == RAW_BODY
    assert exc_info.value.error_messages == ["I'm a teapot"]
    assert get_context(exc_info.value)["operation"] == operation


@pytest.mark.parametrize("operation, method, path, call", CALLS, ids=IDS)
async def test_malformed_json_raises_decode_error(client, server, metrics, operation, method, path, call):
    server.add(method, path, text="{not json")

    with pytest.raises(DecodeError) as exc_info:
        await call(client)

    assert get_context(exc_info.value) == {"operation": operation, "method": method, "path": path}
    [observation] = metrics.observations
    assert (observation.op, observation.ok, observation.code) == (operation, False, "DECODE_ERROR")
