# weaviate_sdk/models/backups.py
# SPDX-License-Identifier: Apache-2.0
"""
Backup requests and job status.

A backup (or restore) job moves through
STARTED -> (TRANSFERRING -> TRANSFERRED)? -> SUCCESS | FAILED.
SUCCESS and FAILED are terminal; a FAILED job is a normal outcome and is
returned to the caller like any other status.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple

from weaviate_sdk.core.wire import (
    JSONObject,
    compact,
    expect_object,
    opt_str,
    opt_str_list,
    parse_enum,
    req_str,
)


class BackupBackend(Enum):
    S3 = "s3"
    GCS = "gcs"
    AZURE = "azure"
    FILESYSTEM = "filesystem"


class BackupStatus(Enum):
    STARTED = "STARTED"
    TRANSFERRING = "TRANSFERRING"
    TRANSFERRED = "TRANSFERRED"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"

    @property
    def is_terminal(self) -> bool:
        return self in (BackupStatus.SUCCESS, BackupStatus.FAILED)


@dataclass(frozen=True)
class BackupCreateRequest:
    """
    Attributes:
        id: Backup id, unique per backend
        include: Classes to back up (all when unset)
        exclude: Classes to leave out; mutually exclusive with `include` on the server
    """
    id: str
    include: Optional[List[str]] = None
    exclude: Optional[List[str]] = None

    @staticmethod
    def builder(backup_id: str) -> "BackupCreateRequestBuilder":
        return BackupCreateRequestBuilder(backup_id)

    def to_dict(self) -> JSONObject:
        return compact({
            "id": self.id,
            "include": list(self.include) if self.include is not None else None,
            "exclude": list(self.exclude) if self.exclude is not None else None,
        })


@dataclass(frozen=True)
class BackupRestoreRequest:
    include: Optional[List[str]] = None
    exclude: Optional[List[str]] = None

    @staticmethod
    def builder() -> "BackupRestoreRequestBuilder":
        return BackupRestoreRequestBuilder()

    def to_dict(self) -> JSONObject:
        return compact({
            "include": list(self.include) if self.include is not None else None,
            "exclude": list(self.exclude) if self.exclude is not None else None,
        })


class _ClassFilterBuilder:
    def __init__(self) -> None:
        self._include: Optional[List[str]] = None
        self._exclude: Optional[List[str]] = None

    def with_include(self, classes: Iterable[str]) -> "_ClassFilterBuilder":
        self._include = (self._include or []) + list(classes)
        return self

    def with_exclude(self, classes: Iterable[str]) -> "_ClassFilterBuilder":
        self._exclude = (self._exclude or []) + list(classes)
        return self

    def _lists(self) -> Tuple[Optional[List[str]], Optional[List[str]]]:
        return (
            list(self._include) if self._include is not None else None,
            list(self._exclude) if self._exclude is not None else None,
        )


class BackupCreateRequestBuilder(_ClassFilterBuilder):
    def __init__(self, backup_id: str) -> None:
        super().__init__()
        self._id = backup_id

    def build(self) -> BackupCreateRequest:
        include, exclude = self._lists()
        return BackupCreateRequest(id=self._id, include=include, exclude=exclude)


class BackupRestoreRequestBuilder(_ClassFilterBuilder):
    def build(self) -> BackupRestoreRequest:
        include, exclude = self._lists()
        return BackupRestoreRequest(include=include, exclude=exclude)


@dataclass(frozen=True)
class BackupJob:
    """
    Status of a backup or restore job, as returned by both the initiating
    call and the status calls.

    Attributes:
        backend: Storage backend
        id: Backup id
        status: Current job status
        path: Backend-specific location of the backup
        classes: Classes covered by the job
        error: Server-side failure description, set when status is FAILED
    """
    backend: BackupBackend
    id: str
    status: BackupStatus
    path: Optional[str] = None
    classes: Optional[List[str]] = None
    error: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @classmethod
    def from_dict(cls, data: Any) -> "BackupJob":
        what = "BackupJob"
        data = expect_object(data, what)
        return cls(
            backend=parse_enum(BackupBackend, req_str(data, "backend", what), f"{what}.backend"),
            id=req_str(data, "id", what),
            status=parse_enum(BackupStatus, req_str(data, "status", what), f"{what}.status"),
            path=opt_str(data, "path", what),
            classes=opt_str_list(data, "classes", what),
            error=opt_str(data, "error", what),
        )


__all__ = [
    "BackupBackend",
    "BackupStatus",
    "BackupCreateRequest",
    "BackupCreateRequestBuilder",
    "BackupRestoreRequest",
    "BackupRestoreRequestBuilder",
    "BackupJob",
]
