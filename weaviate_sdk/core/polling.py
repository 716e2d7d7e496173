# weaviate_sdk/core/polling.py
# SPDX-License-Identifier: Apache-2.0
"""
Wait-for-completion loop for server-side jobs (backups, classifications).

The loop is an explicit state machine over whatever status type the job
exposes: after the initiating call, while the last observed status is not
terminal, sleep `interval_s` and issue exactly one status call. A terminal
status is returned as-is, including failure states; a failed job is a
normal outcome, not an error.

Errors raised by a status call propagate immediately and abort the wait.
Bounds are supplied by the caller through `PollPolicy`; with neither
`timeout_s` nor `max_attempts` set the loop runs until the job finishes.
A sleep never runs past `timeout_s`, and no status call is issued once
the deadline has passed.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, TypeVar

from weaviate_sdk.core.errors import DeadlineExceeded, ValidationError
from weaviate_sdk.core.metrics import MetricsSink, NoopMetrics

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class PollPolicy:
    """
    Pacing and bounds for a completion poll.

    Attributes:
        interval_s: Delay before each status call
        timeout_s: Give up once this much time has passed since polling began
        max_attempts: Give up after this many status calls
        sleep: Awaitable sleep function; tests inject a no-op
        clock: Monotonic clock used for `timeout_s`
    """
    interval_s: float = 1.0
    timeout_s: Optional[float] = None
    max_attempts: Optional[int] = None
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep
    clock: Callable[[], float] = time.monotonic

    def __post_init__(self) -> None:
        if self.interval_s < 0:
            raise ValidationError("interval_s must be >= 0")
        if self.timeout_s is not None and self.timeout_s <= 0:
            raise ValidationError("timeout_s must be positive when set")
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValidationError("max_attempts must be >= 1 when set")


async def poll_until_terminal(
    initial: T,
    fetch: Callable[[], Awaitable[T]],
    is_terminal: Callable[[T], bool],
    policy: Optional[PollPolicy] = None,
    *,
    metrics: Optional[MetricsSink] = None,
    op: str = "poll",
) -> T:
    """
    Poll `fetch` until `is_terminal` holds, starting from `initial`.

    Raises:
        DeadlineExceeded: a bound in `policy` was reached first; the last
            observed status is on `DeadlineExceeded.last_status`.
    """
    policy = policy or PollPolicy()
    sink = metrics or NoopMetrics()
    status = initial
    attempts = 0
    started = policy.clock()

    while not is_terminal(status):
        if policy.max_attempts is not None and attempts >= policy.max_attempts:
            raise DeadlineExceeded(
                f"{op}: job not finished after {attempts} status calls",
                last_status=status,
                details={"attempts": attempts},
            )

        delay = policy.interval_s
        if policy.timeout_s is not None:
            remaining = policy.timeout_s - (policy.clock() - started)
            if remaining <= 0:
                raise _timed_out(op, status, attempts, policy)
            # never sleep past the deadline
            delay = min(delay, remaining)

        await policy.sleep(delay)
        if policy.timeout_s is not None and policy.clock() - started >= policy.timeout_s:
            raise _timed_out(op, status, attempts, policy)

        status = await fetch()
        attempts += 1
        _count_attempt(sink, op)
        logger.debug("%s: status call %d -> %r", op, attempts, status)

    return status


def _timed_out(op: str, status: Any, attempts: int, policy: PollPolicy) -> DeadlineExceeded:
    return DeadlineExceeded(
        f"{op}: job not finished within {policy.timeout_s}s",
        last_status=status,
        details={"attempts": attempts, "timeout_s": policy.timeout_s},
    )


def _count_attempt(sink: MetricsSink, op: str) -> None:
    try:
        sink.counter(component="weaviate", name="poll_attempts", extra={"op": op})
    except Exception as e:  # noqa: BLE001
        # Never let metrics recording break the wait
        logger.debug("metrics sink failed for %s: %s", op, e)


__all__ = [
    "PollPolicy",
    "poll_until_terminal",
]
