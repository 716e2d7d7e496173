# SPDX-License-Identifier: Apache-2.0
"""
Classification scheduling and status.
"""

import pytest

from weaviate_sdk import (
    ClassificationRequest,
    ClassificationStatus,
    ClassificationType,
    DecodeError,
    ValidationError,
)

pytestmark = pytest.mark.asyncio

JOB_ID = "ee722219-b8ec-4db1-8f8d-5150bb1a9e0c"
JOB_PATH = f"/v1/classifications/{JOB_ID}"


def job(status, **extra):
    body = {
        "id": JOB_ID,
        "class": "Article",
        "classifyProperties": ["hasPopularity"],
        "basedOnProperties": ["summary"],
        "status": status,
        "type": "knn",
        "meta": {"started": "2024-01-01T10:00:00Z", "count": 3, "countSucceeded": 2, "countFailed": 1},
    }
    body.update(extra)
    return body


def knn_request():
    return (
        ClassificationRequest.builder()
        .with_class("Article")
        .with_type(ClassificationType.KNN)
        .with_classify_properties(["hasPopularity"])
        .with_based_on_properties(["summary"])
        .with_settings({"k": 3})
        .build()
    )


async def test_schedule_sends_request_body(client, server):
    server.add("POST", "/v1/classifications", status=201, json_body=job("running"))

    result = await client.classification.schedule(knn_request())

    assert server.body(server.last) == {
        "type": "knn",
        "class": "Article",
        "classifyProperties": ["hasPopularity"],
        "basedOnProperties": ["summary"],
        "settings": {"k": 3},
    }
    assert result.id == JOB_ID
    assert result.status is ClassificationStatus.RUNNING
    assert result.meta.count_succeeded == 2
    assert not result.is_terminal


async def test_schedule_wait_polls_until_completed(client, server, sleep, fast_poll, metrics):
    server.add("POST", "/v1/classifications", status=201, json_body=job("running"))
    server.add("GET", JOB_PATH, json_body=job("running"))
    server.add("GET", JOB_PATH, json_body=job("completed"))

    result = await client.classification.schedule(
        knn_request(), wait_for_completion=True, poll_policy=fast_poll
    )

    assert result.status is ClassificationStatus.COMPLETED
    assert len(server.calls("GET", JOB_PATH)) == 2
    assert sleep.delays == [0.5, 0.5]
    assert metrics.counters["weaviate.poll_attempts"] == 2


async def test_failed_classification_is_returned(client, server, fast_poll):
    server.add("POST", "/v1/classifications", status=201, json_body=job("running"))
    server.add("GET", JOB_PATH, json_body=job("failed", error="no training data"))

    result = await client.classification.schedule(
        knn_request(), wait_for_completion=True, poll_policy=fast_poll
    )

    assert result.status is ClassificationStatus.FAILED
    assert result.error == "no training data"


async def test_get_classification(client, server):
    server.add("GET", JOB_PATH, json_body=job("completed", type="zeroshot"))

    result = await client.classification.get(JOB_ID)

    assert result.type is ClassificationType.ZEROSHOT
    assert result.classify_properties == ["hasPopularity"]
    assert result.meta.started == "2024-01-01T10:00:00Z"


async def test_unknown_status_is_a_decode_error(client, server):
    server.add("GET", JOB_PATH, json_body=job("paused"))

    with pytest.raises(DecodeError):
        await client.classification.get(JOB_ID)


async def test_schedule_validates_locally(client, server):
    with pytest.raises(ValidationError):
        await client.classification.schedule(
            ClassificationRequest.builder().with_classify_properties(["x"]).build()
        )
    with pytest.raises(ValidationError):
        await client.classification.schedule(ClassificationRequest.builder("Article").build())
    assert server.requests == []
