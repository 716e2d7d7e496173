# weaviate_sdk/models/classification.py
# SPDX-License-Identifier: Apache-2.0
"""
Classification jobs.

A scheduled classification is `running` until it becomes `completed` or
`failed`; both are terminal, and `failed` is reported through the returned
job rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, List, Mapping, Optional

from weaviate_sdk.core.wire import (
    JSONObject,
    compact,
    expect_object,
    opt_int,
    opt_object,
    opt_str,
    opt_str_list,
    parse_enum,
    req_str,
)


class ClassificationType(Enum):
    KNN = "knn"
    ZEROSHOT = "zeroshot"


class ClassificationStatus(Enum):
    RUNNING = "running"
    COMPLETED = "completed"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self is not ClassificationStatus.RUNNING


@dataclass(frozen=True)
class ClassificationRequest:
    """
    Attributes:
        class_name: Class whose objects get classified
        classify_properties: Reference properties to fill in
        type: Classification algorithm
        based_on_properties: Text properties the decision is based on
        filters: sourceWhere / trainingSetWhere / targetWhere filters, open JSON
        settings: Algorithm settings such as ``{"k": 3}``, open JSON
    """
    class_name: str
    classify_properties: List[str]
    type: ClassificationType = ClassificationType.KNN
    based_on_properties: Optional[List[str]] = None
    filters: Optional[JSONObject] = None
    settings: Optional[JSONObject] = None

    @staticmethod
    def builder(class_name: str = "") -> "ClassificationRequestBuilder":
        return ClassificationRequestBuilder(class_name)

    def to_dict(self) -> JSONObject:
        return compact({
            "type": self.type.value,
            "class": self.class_name,
            "classifyProperties": list(self.classify_properties),
            "basedOnProperties": (
                list(self.based_on_properties) if self.based_on_properties is not None else None
            ),
            "filters": self.filters,
            "settings": self.settings,
        })


class ClassificationRequestBuilder:
    def __init__(self, class_name: str = "") -> None:
        self._class_name = class_name
        self._type: Optional[ClassificationType] = None
        self._classify_properties: List[str] = []
        self._based_on_properties: Optional[List[str]] = None
        self._filters: Optional[JSONObject] = None
        self._settings: Optional[JSONObject] = None

    def with_type(self, classification_type: ClassificationType) -> "ClassificationRequestBuilder":
        self._type = classification_type
        return self

    def with_class(self, class_name: str) -> "ClassificationRequestBuilder":
        self._class_name = class_name
        return self

    def with_classify_properties(self, properties: Iterable[str]) -> "ClassificationRequestBuilder":
        self._classify_properties.extend(properties)
        return self

    def with_based_on_properties(self, properties: Iterable[str]) -> "ClassificationRequestBuilder":
        self._based_on_properties = (self._based_on_properties or []) + list(properties)
        return self

    def with_filters(self, filters: Mapping[str, Any]) -> "ClassificationRequestBuilder":
        self._filters = dict(filters)
        return self

    def with_settings(self, settings: Mapping[str, Any]) -> "ClassificationRequestBuilder":
        self._settings = dict(settings)
        return self

    def build(self) -> ClassificationRequest:
        return ClassificationRequest(
            class_name=self._class_name,
            classify_properties=list(self._classify_properties),
            type=self._type or ClassificationType.KNN,
            based_on_properties=(
                list(self._based_on_properties) if self._based_on_properties is not None else None
            ),
            filters=dict(self._filters) if self._filters is not None else None,
            settings=dict(self._settings) if self._settings is not None else None,
        )


@dataclass(frozen=True)
class ClassificationMeta:
    started: Optional[str] = None
    completed: Optional[str] = None
    count: int = 0
    count_succeeded: int = 0
    count_failed: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> "ClassificationMeta":
        what = "ClassificationMeta"
        data = expect_object(data, what)
        return cls(
            started=opt_str(data, "started", what),
            completed=opt_str(data, "completed", what),
            count=opt_int(data, "count", what) or 0,
            count_succeeded=opt_int(data, "countSucceeded", what) or 0,
            count_failed=opt_int(data, "countFailed", what) or 0,
        )


@dataclass(frozen=True)
class ClassificationJob:
    id: str
    class_name: str
    status: ClassificationStatus
    type: ClassificationType
    classify_properties: List[str] = field(default_factory=list)
    based_on_properties: Optional[List[str]] = None
    meta: ClassificationMeta = field(default_factory=ClassificationMeta)
    settings: Optional[JSONObject] = None
    filters: Optional[JSONObject] = None
    error: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @classmethod
    def from_dict(cls, data: Any) -> "ClassificationJob":
        what = "ClassificationJob"
        data = expect_object(data, what)
        meta = data.get("meta")
        return cls(
            id=req_str(data, "id", what),
            class_name=req_str(data, "class", what),
            status=parse_enum(ClassificationStatus, req_str(data, "status", what), f"{what}.status"),
            type=parse_enum(
                ClassificationType, opt_str(data, "type", what) or "knn", f"{what}.type"
            ),
            classify_properties=opt_str_list(data, "classifyProperties", what) or [],
            based_on_properties=opt_str_list(data, "basedOnProperties", what),
            meta=ClassificationMeta.from_dict(meta) if meta is not None else ClassificationMeta(),
            settings=opt_object(data, "settings", what),
            filters=opt_object(data, "filters", what),
            error=opt_str(data, "error", what),
        )


__all__ = [
    "ClassificationType",
    "ClassificationStatus",
    "ClassificationRequest",
    "ClassificationRequestBuilder",
    "ClassificationMeta",
    "ClassificationJob",
]
