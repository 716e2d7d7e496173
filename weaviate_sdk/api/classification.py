# weaviate_sdk/api/classification.py
# SPDX-License-Identifier: Apache-2.0
"""Classification façade under `/v1/classifications`."""

from __future__ import annotations

from typing import Optional

from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.core.errors import ValidationError
from weaviate_sdk.core.polling import PollPolicy, poll_until_terminal
from weaviate_sdk.models.classification import ClassificationJob, ClassificationRequest

BASE = "/v1/classifications"


class ClassificationApi(Endpoint):
    family = "classification"

    async def schedule(
        self,
        request: ClassificationRequest,
        wait_for_completion: bool = False,
        poll_policy: Optional[PollPolicy] = None,
    ) -> ClassificationJob:
        """
        Start a classification.

        With `wait_for_completion`, polls until the job is `completed` or
        `failed` and returns that final state.
        """
        self._require("class name", request.class_name)
        if not request.classify_properties:
            raise ValidationError(
                "classify_properties must not be empty", details={"field": "classify_properties"}
            )
        data = await self._transport.request_json(
            "POST", BASE, operation=self._op("schedule"), json=request.to_dict()
        )
        job = ClassificationJob.from_dict(data)
        if not wait_for_completion:
            return job
        return await poll_until_terminal(
            job,
            lambda: self.get(job.id),
            lambda j: j.is_terminal,
            poll_policy,
            metrics=self._transport.metrics,
            op=self._op("schedule"),
        )

    async def get(self, classification_id: str) -> ClassificationJob:
        path = f"{BASE}/{self._segment('classification_id', classification_id)}"
        data = await self._transport.request_json("GET", path, operation=self._op("get"))
        return ClassificationJob.from_dict(data)


__all__ = ["ClassificationApi"]
