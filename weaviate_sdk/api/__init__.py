# weaviate_sdk/api/__init__.py
# SPDX-License-Identifier: Apache-2.0
"""Endpoint façades, one per REST family."""

from weaviate_sdk.api.backups import BackupsApi
from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.api.batch import BatchApi
from weaviate_sdk.api.classification import ClassificationApi
from weaviate_sdk.api.health import HealthApi
from weaviate_sdk.api.meta import MetaApi
from weaviate_sdk.api.modules import ModulesApi
from weaviate_sdk.api.nodes import NodesApi
from weaviate_sdk.api.objects import ObjectsApi
from weaviate_sdk.api.oidc import OidcApi
from weaviate_sdk.api.query import QueryApi
from weaviate_sdk.api.schema import SchemaApi

__all__ = [
    "Endpoint",
    "BackupsApi",
    "BatchApi",
    "ClassificationApi",
    "HealthApi",
    "MetaApi",
    "ModulesApi",
    "NodesApi",
    "ObjectsApi",
    "OidcApi",
    "QueryApi",
    "SchemaApi",
]
