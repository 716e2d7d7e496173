# weaviate_sdk/api/backups.py
# SPDX-License-Identifier: Apache-2.0
"""
Backups façade under `/v1/backups/{backend}`.

`create` and `restore` start a job and, with `wait_for_completion=True`,
poll its status until SUCCESS or FAILED (see `core.polling`). A FAILED
job is returned like any other status.
"""

from __future__ import annotations

from typing import Optional

from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.core.polling import PollPolicy, poll_until_terminal
from weaviate_sdk.models.backups import (
    BackupBackend,
    BackupCreateRequest,
    BackupJob,
    BackupRestoreRequest,
)

BASE = "/v1/backups"


class BackupsApi(Endpoint):
    family = "backups"

    def _backup_path(self, backend: BackupBackend, backup_id: str) -> str:
        return f"{BASE}/{backend.value}/{self._segment('backup_id', backup_id)}"

    async def create(
        self,
        backend: BackupBackend,
        request: BackupCreateRequest,
        wait_for_completion: bool = False,
        poll_policy: Optional[PollPolicy] = None,
    ) -> BackupJob:
        self._require("backup_id", request.id)
        data = await self._transport.request_json(
            "POST",
            f"{BASE}/{backend.value}",
            operation=self._op("create"),
            json=request.to_dict(),
        )
        job = BackupJob.from_dict(data)
        if not wait_for_completion:
            return job
        return await poll_until_terminal(
            job,
            lambda: self.get_create_status(backend, request.id),
            lambda j: j.is_terminal,
            poll_policy,
            metrics=self._transport.metrics,
            op=self._op("create"),
        )

    async def get_create_status(self, backend: BackupBackend, backup_id: str) -> BackupJob:
        data = await self._transport.request_json(
            "GET", self._backup_path(backend, backup_id), operation=self._op("get_create_status")
        )
        return BackupJob.from_dict(data)

    async def restore(
        self,
        backend: BackupBackend,
        backup_id: str,
        request: Optional[BackupRestoreRequest] = None,
        wait_for_completion: bool = False,
        poll_policy: Optional[PollPolicy] = None,
    ) -> BackupJob:
        path = f"{self._backup_path(backend, backup_id)}/restore"
        request = request or BackupRestoreRequest()
        data = await self._transport.request_json(
            "POST", path, operation=self._op("restore"), json=request.to_dict()
        )
        job = BackupJob.from_dict(data)
        if not wait_for_completion:
            return job
        return await poll_until_terminal(
            job,
            lambda: self.get_restore_status(backend, backup_id),
            lambda j: j.is_terminal,
            poll_policy,
            metrics=self._transport.metrics,
            op=self._op("restore"),
        )

    async def get_restore_status(self, backend: BackupBackend, backup_id: str) -> BackupJob:
        path = f"{self._backup_path(backend, backup_id)}/restore"
        data = await self._transport.request_json(
            "GET", path, operation=self._op("get_restore_status")
        )
        return BackupJob.from_dict(data)


__all__ = ["BackupsApi"]
