# weaviate_sdk/api/modules.py
# SPDX-License-Identifier: Apache-2.0
"""Module-specific endpoints; currently the text2vec-contextionary helpers."""

from __future__ import annotations

from weaviate_sdk.api.base import Endpoint
from weaviate_sdk.models.modules import ContextionaryConcept, ContextionaryExtension

CONTEXTIONARY = "/v1/modules/text2vec-contextionary"


class ModulesApi(Endpoint):
    family = "modules"

    async def contextionary_get_concept(self, concept: str) -> ContextionaryConcept:
        path = f"{CONTEXTIONARY}/concepts/{self._segment('concept', concept)}"
        data = await self._transport.request_json(
            "GET", path, operation=self._op("contextionary_get_concept")
        )
        return ContextionaryConcept.from_dict(data)

    async def contextionary_extend(self, extension: ContextionaryExtension) -> ContextionaryExtension:
        self._require("concept", extension.concept)
        self._require("definition", extension.definition)
        data = await self._transport.request_json(
            "POST",
            f"{CONTEXTIONARY}/extensions",
            operation=self._op("contextionary_extend"),
            json=extension.to_dict(),
        )
        return ContextionaryExtension.from_dict(data)


__all__ = ["ModulesApi"]
