# weaviate_sdk/api/health.py
# SPDX-License-Identifier: Apache-2.0
"""
Liveness and readiness checks.

503 is the server's "not yet" answer and maps to False; anything else
outside 2xx is a real failure and raises RequestError.
"""

from __future__ import annotations

from weaviate_sdk.api.base import Endpoint

WELL_KNOWN = "/v1/.well-known"


class HealthApi(Endpoint):
    family = "health"

    async def is_live(self) -> bool:
        return await self._check("is_live", f"{WELL_KNOWN}/live")

    async def is_ready(self) -> bool:
        return await self._check("is_ready", f"{WELL_KNOWN}/ready")

    async def _check(self, name: str, path: str) -> bool:
        response = await self._transport.request("GET", path, operation=self._op(name), accept=(503,))
        return response.status_code != 503


__all__ = ["HealthApi"]
