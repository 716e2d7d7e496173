# weaviate_sdk/core/metrics.py
# SPDX-License-Identifier: Apache-2.0
"""
Metrics sinks for the Weaviate SDK.

The transport reports one `observe()` per HTTP call and the completion
pollers report `counter()` increments. Metric names and `extra` keys are
low-cardinality: the operation name, the HTTP method, the status code.
Object ids, tenant names and payloads never reach a sink.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Protocol


class MetricsSink(Protocol):
    """
    Protocol for metrics collection implementations.

    Used for operational monitoring without exposing sensitive information.
    """
    def observe(
        self,
        *,
        component: str,
        op: str,
        ms: float,
        ok: bool,
        code: str = "OK",
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Record operation timing and status.
        """
        ...

    def counter(
        self,
        *,
        component: str,
        name: str,
        value: int = 1,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        """
        Increment a counter metric.
        """
        ...


class NoopMetrics:
    """No-operation metrics sink, used when no sink is configured."""
    def observe(self, **_: Any) -> None: ...
    def counter(self, **_: Any) -> None: ...


@dataclass(frozen=True)
class Observation:
    """One recorded `observe()` call."""
    component: str
    op: str
    ms: float
    ok: bool
    code: str
    extra: Mapping[str, Any]


@dataclass
class InMemoryMetrics:
    """
    Sink that keeps everything in memory.

    Handy in tests and when debugging a session interactively; not meant
    for long-running processes since nothing is ever evicted.
    """
    observations: List[Observation] = field(default_factory=list)
    counters: Dict[str, int] = field(default_factory=dict)

    def observe(
        self,
        *,
        component: str,
        op: str,
        ms: float,
        ok: bool,
        code: str = "OK",
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.observations.append(
            Observation(
                component=component,
                op=op,
                ms=ms,
                ok=ok,
                code=code,
                extra=dict(extra or {}),
            )
        )

    def counter(
        self,
        *,
        component: str,
        name: str,
        value: int = 1,
        extra: Optional[Mapping[str, Any]] = None,
    ) -> None:
        key = f"{component}.{name}"
        self.counters[key] = self.counters.get(key, 0) + value

    def ops(self) -> List[str]:
        return [o.op for o in self.observations]


__all__ = [
    "MetricsSink",
    "NoopMetrics",
    "Observation",
    "InMemoryMetrics",
]
