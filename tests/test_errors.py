# SPDX-License-Identifier: Apache-2.0
"""
Error mapping, error context and metrics reporting at the transport layer.
"""

import json

import httpx
import pytest

from weaviate_sdk import (
    BackupBackend,
    BackupCreateRequest,
    BackupStatus,
    Class,
    DecodeError,
    PollPolicy,
    RequestError,
    TransportError,
    ValidationError,
    WeaviateClient,
)
from weaviate_sdk.core.error_context import get_context

from .conftest import BASE_URL

pytestmark = pytest.mark.asyncio

CLASS_PATH = "/v1/schema/Article"


async def test_non_2xx_keeps_status_and_raw_body(client, server):
    body = json.dumps({"error": [{"message": "class Article already exists"}]})
    server.add("POST", "/v1/schema", status=422, text=body)

    with pytest.raises(RequestError) as exc_info:
        await client.schema.create_class(Class.builder("Article").build())

    err = exc_info.value
    assert err.status_code == 422
    assert err.body == body
    assert err.error_messages == ["class Article already exists"]
    assert err.code == "REQUEST_ERROR"
    assert err.details == {"status_code": 422}


async def test_non_json_error_body_is_kept_verbatim(client, server):
    server.add("GET", CLASS_PATH, status=502, text="<html>bad gateway</html>")

    with pytest.raises(RequestError) as exc_info:
        await client.schema.get_class("Article")

    assert exc_info.value.body == "<html>bad gateway</html>"
    assert exc_info.value.error_messages == []


async def test_error_context_is_attached(client, server):
    server.add("GET", CLASS_PATH, status=404)

    with pytest.raises(RequestError) as exc_info:
        await client.schema.get_class("Article")

    assert get_context(exc_info.value) == {
        "operation": "schema.get_class",
        "method": "GET",
        "path": CLASS_PATH,
    }


async def test_malformed_json_is_a_decode_error(client, server, metrics):
    server.add("GET", CLASS_PATH, text="{not json")

    with pytest.raises(DecodeError) as exc_info:
        await client.schema.get_class("Article")

    assert exc_info.value.code == "DECODE_ERROR"
    assert get_context(exc_info.value)["operation"] == "schema.get_class"
    [observation] = metrics.observations
    assert observation.ok is False
    assert observation.code == "DECODE_ERROR"
    assert observation.extra == {"method": "GET"}


async def test_wrong_shape_is_a_decode_error(client, server):
    server.add("GET", CLASS_PATH, json_body={"class": 42})

    with pytest.raises(DecodeError) as exc_info:
        await client.schema.get_class("Article")

    assert exc_info.value.details["field"] == "Class.class"


async def test_connection_failure_is_a_transport_error(client, server, metrics):
    server.fail("GET", CLASS_PATH, httpx.ConnectError("connection refused"))

    with pytest.raises(TransportError) as exc_info:
        await client.schema.get_class("Article")

    assert isinstance(exc_info.value.__cause__, httpx.ConnectError)
    assert exc_info.value.details == {"exception": "ConnectError"}
    [observation] = metrics.observations
    assert observation.ok is False
    assert observation.code == "TRANSPORT_ERROR"


async def test_metrics_observe_every_call(client, server, metrics):
    server.add("GET", CLASS_PATH, json_body={"class": "Article"})
    server.add("DELETE", CLASS_PATH, status=500, text="boom")

    await client.schema.get_class("Article")
    with pytest.raises(RequestError):
        await client.schema.delete_class("Article")

    ok, failed = metrics.observations
    assert (ok.component, ok.op, ok.ok) == ("weaviate", "schema.get_class", True)
    assert ok.extra == {"method": "GET", "status": 200}
    assert (failed.op, failed.ok, failed.code) == ("schema.delete_class", False, "REQUEST_ERROR")


async def test_broken_metrics_sink_does_not_break_calls(server, sleep):
    class ExplodingSink:
        def observe(self, **_):
            raise RuntimeError("sink down")

        def counter(self, **_):
            raise RuntimeError("sink down")

    server.add("GET", "/v1/meta", json_body={"hostname": "h", "version": "1.24.0"})
    http = httpx.AsyncClient(transport=httpx.MockTransport(server.handler))
    client = WeaviateClient(BASE_URL, http_client=http, metrics=ExplodingSink())

    meta = await client.meta.get()
    assert meta.version == "1.24.0"

    backup = {"backend": "filesystem", "id": "nightly"}
    server.add("POST", "/v1/backups/filesystem", json_body={**backup, "status": "STARTED"})
    server.add("GET", "/v1/backups/filesystem/nightly", json_body={**backup, "status": "SUCCESS"})

    job = await client.backups.create(
        BackupBackend.FILESYSTEM,
        BackupCreateRequest("nightly"),
        wait_for_completion=True,
        poll_policy=PollPolicy(interval_s=0.5, sleep=sleep),
    )
    assert job.status is BackupStatus.SUCCESS
    assert sleep.delays == [0.5]


async def test_validation_errors_never_reach_the_server(client, server):
    with pytest.raises(ValidationError) as exc_info:
        await client.schema.get_class("")

    assert exc_info.value.details == {"field": "class_name"}
    assert server.requests == []
