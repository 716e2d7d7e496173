# weaviate_sdk/core/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""Transport, errors, metrics and polling primitives shared by the façades."""

from weaviate_sdk.core.error_context import attach_context, get_context
from weaviate_sdk.core.errors import (
    DeadlineExceeded,
    DecodeError,
    RequestError,
    TransportError,
    ValidationError,
    WeaviateError,
)
from weaviate_sdk.core.metrics import InMemoryMetrics, MetricsSink, NoopMetrics
from weaviate_sdk.core.polling import PollPolicy, poll_until_terminal
from weaviate_sdk.core.transport import HttpTransport
from weaviate_sdk.core.wire import JSONObject, JSONValue

__all__ = [
    "attach_context",
    "get_context",
    "WeaviateError",
    "TransportError",
    "RequestError",
    "DecodeError",
    "ValidationError",
    "DeadlineExceeded",
    "MetricsSink",
    "NoopMetrics",
    "InMemoryMetrics",
    "PollPolicy",
    "poll_until_terminal",
    "HttpTransport",
    "JSONValue",
    "JSONObject",
]
