# weaviate_sdk/models/batch.py
# SPDX-License-Identifier: Apache-2.0
"""
Batch request and result types.

Batch endpoints report per-item outcomes inside a 200 response; an item
that failed on the server is a normal result carrying `status=FAILED` and
its error messages, not a raised error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional

from weaviate_sdk.core.wire import (
    JSONObject,
    compact,
    enum_value,
    expect_list,
    expect_object,
    opt_bool,
    opt_enum,
    opt_list,
    opt_object,
    req_int,
    req_str,
)
from weaviate_sdk.models.objects import Object


class Verbosity(Enum):
    MINIMAL = "minimal"
    VERBOSE = "verbose"


class GeneralStatus(Enum):
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    DRYRUN = "DRYRUN"


def _error_messages(data: Any, what: str) -> List[str]:
    # {"error": [{"message": "..."}, ...]}
    if data is None:
        return []
    data = expect_object(data, what)
    entries = opt_list(data, "error", what) or []
    return [req_str(expect_object(e, what), "message", what) for e in entries]


@dataclass(frozen=True)
class MatchConfig:
    """Which objects a batch delete targets: a class and a `where` filter (open JSON)."""
    class_name: str
    where: JSONObject

    def to_dict(self) -> JSONObject:
        return {"class": self.class_name, "where": self.where}

    @classmethod
    def from_dict(cls, data: Any) -> "MatchConfig":
        data = expect_object(data, "MatchConfig")
        return cls(
            class_name=req_str(data, "class", "MatchConfig"),
            where=opt_object(data, "where", "MatchConfig") or {},
        )


@dataclass(frozen=True)
class BatchDeleteRequest:
    matches: MatchConfig
    output: Optional[Verbosity] = None
    dry_run: Optional[bool] = None

    @staticmethod
    def builder(matches: MatchConfig) -> "BatchDeleteRequestBuilder":
        return BatchDeleteRequestBuilder(matches)

    def to_dict(self) -> JSONObject:
        return compact({
            "match": self.matches.to_dict(),
            "output": enum_value(self.output),
            "dryRun": self.dry_run,
        })


class BatchDeleteRequestBuilder:
    def __init__(self, matches: MatchConfig) -> None:
        self._matches = matches
        self._output: Optional[Verbosity] = None
        self._dry_run: Optional[bool] = None

    def with_output(self, output: Verbosity) -> "BatchDeleteRequestBuilder":
        self._output = output
        return self

    def with_dry_run(self, dry_run: bool) -> "BatchDeleteRequestBuilder":
        self._dry_run = dry_run
        return self

    def build(self) -> BatchDeleteRequest:
        return BatchDeleteRequest(matches=self._matches, output=self._output, dry_run=self._dry_run)


@dataclass(frozen=True)
class DeleteObject:
    id: str
    status: GeneralStatus
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "DeleteObject":
        what = "DeleteObject"
        data = expect_object(data, what)
        return cls(
            id=req_str(data, "id", what),
            status=opt_enum(GeneralStatus, data, "status", what) or GeneralStatus.SUCCESS,
            errors=_error_messages(data.get("errors"), f"{what}.errors"),
        )


@dataclass(frozen=True)
class BatchDeleteResult:
    matches: int
    limit: int
    successful: int
    failed: int
    objects: Optional[List[DeleteObject]] = None

    @classmethod
    def from_dict(cls, data: Any) -> "BatchDeleteResult":
        what = "BatchDeleteResult"
        data = expect_object(data, what)
        objects = opt_list(data, "objects", what)
        return cls(
            matches=req_int(data, "matches", what),
            limit=req_int(data, "limit", what),
            successful=req_int(data, "successful", what),
            failed=req_int(data, "failed", what),
            objects=[DeleteObject.from_dict(o) for o in objects] if objects is not None else None,
        )


@dataclass(frozen=True)
class BatchDeleteResponse:
    matches: MatchConfig
    results: BatchDeleteResult
    output: Optional[Verbosity] = None
    dry_run: Optional[bool] = None

    @classmethod
    def from_dict(cls, data: Any) -> "BatchDeleteResponse":
        what = "BatchDeleteResponse"
        data = expect_object(data, what)
        return cls(
            matches=MatchConfig.from_dict(data.get("match")),
            results=BatchDeleteResult.from_dict(data.get("results")),
            output=opt_enum(Verbosity, data, "output", what),
            dry_run=opt_bool(data, "dryRun", what),
        )


@dataclass(frozen=True)
class BatchObjectResult:
    """One entry of a batch-add response: the stored object plus its outcome."""
    object: Object
    status: GeneralStatus
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "BatchObjectResult":
        what = "BatchObjectResult"
        data = expect_object(data, what)
        result = expect_object(data.get("result") or {}, f"{what}.result")
        return cls(
            object=Object.from_dict(data),
            status=opt_enum(GeneralStatus, result, "status", f"{what}.result") or GeneralStatus.SUCCESS,
            errors=_error_messages(result.get("errors"), f"{what}.result.errors"),
        )

    @classmethod
    def list_from(cls, data: Any) -> List["BatchObjectResult"]:
        return [cls.from_dict(item) for item in expect_list(data, "batch objects")]


@dataclass(frozen=True)
class BatchReferenceResult:
    status: GeneralStatus
    errors: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> "BatchReferenceResult":
        what = "BatchReferenceResult"
        data = expect_object(data, what)
        result = expect_object(data.get("result") or {}, f"{what}.result")
        return cls(
            status=opt_enum(GeneralStatus, result, "status", f"{what}.result") or GeneralStatus.SUCCESS,
            errors=_error_messages(result.get("errors"), f"{what}.result.errors"),
        )

    @classmethod
    def list_from(cls, data: Any) -> List["BatchReferenceResult"]:
        return [cls.from_dict(item) for item in expect_list(data, "batch references")]


__all__ = [
    "Verbosity",
    "GeneralStatus",
    "MatchConfig",
    "BatchDeleteRequest",
    "BatchDeleteRequestBuilder",
    "DeleteObject",
    "BatchDeleteResult",
    "BatchDeleteResponse",
    "BatchObjectResult",
    "BatchReferenceResult",
]
