# weaviate_sdk/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""
Weaviate SDK: typed async client for the Weaviate REST and GraphQL API.

    from weaviate_sdk import WeaviateClient, Class, Property

    async with WeaviateClient.builder("http://localhost:8080").build() as client:
        article = Class.builder("Article").with_property(
            Property.builder("title", ["text"]).build()
        ).build()
        await client.schema.create_class(article)
"""

from weaviate_sdk.client import ClientConfig, WeaviateClient, WeaviateClientBuilder
from weaviate_sdk.core.errors import (
    DeadlineExceeded,
    DecodeError,
    RequestError,
    TransportError,
    ValidationError,
    WeaviateError,
)
from weaviate_sdk.core.metrics import InMemoryMetrics, MetricsSink, NoopMetrics
from weaviate_sdk.core.polling import PollPolicy
from weaviate_sdk.models import *  # noqa: F401,F403
from weaviate_sdk.models import __all__ as _models_all

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ClientConfig",
    "WeaviateClient",
    "WeaviateClientBuilder",
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
] + list(_models_all)
