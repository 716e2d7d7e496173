# SPDX-License-Identifier: Apache-2.0
"""
Error taxonomy, error context helpers and the completion poller in isolation.
"""

import pytest

from weaviate_sdk import (
    DeadlineExceeded,
    InMemoryMetrics,
    PollPolicy,
    RequestError,
    ValidationError,
    WeaviateError,
)
from weaviate_sdk.core.error_context import (
    attach_context,
    clear_context,
    get_context,
    has_context,
)
from weaviate_sdk.core.polling import poll_until_terminal


def test_error_hierarchy_and_asdict():
    err = RequestError("nope", status_code=403, body="forbidden")
    assert isinstance(err, WeaviateError)
    assert err.asdict() == {
        "error": "RequestError",
        "message": "nope",
        "code": "REQUEST_ERROR",
        "details": {"status_code": 403},
    }


def test_attach_context_keeps_innermost_keys():
    err = ValueError("x")
    attach_context(err, operation="inner", path="/v1/a")
    attach_context(err, operation="outer", method="GET")

    assert get_context(err) == {"operation": "inner", "path": "/v1/a", "method": "GET"}
    assert has_context(err)
    clear_context(err)
    assert not has_context(err)
    assert get_context(err) == {}


def test_poll_policy_rejects_bad_bounds():
    with pytest.raises(ValidationError):
        PollPolicy(interval_s=-1)
    with pytest.raises(ValidationError):
        PollPolicy(timeout_s=0)
    with pytest.raises(ValidationError):
        PollPolicy(max_attempts=0)


@pytest.mark.asyncio
async def test_poller_issues_one_fetch_per_interval(sleep):
    statuses = iter(["running", "running", "done"])
    metrics = InMemoryMetrics()

    async def fetch():
        return next(statuses)

    result = await poll_until_terminal(
        "running",
        fetch,
        lambda s: s == "done",
        PollPolicy(interval_s=2.0, sleep=sleep),
        metrics=metrics,
        op="test.job",
    )

    assert result == "done"
    assert sleep.delays == [2.0, 2.0, 2.0]
    assert metrics.counters == {"weaviate.poll_attempts": 3}


@pytest.mark.asyncio
async def test_poller_returns_terminal_initial_status_without_fetching(sleep):
    async def fetch():
        raise AssertionError("no status call expected")

    assert await poll_until_terminal("done", fetch, lambda s: s == "done", PollPolicy(sleep=sleep)) == "done"
    assert sleep.delays == []


@pytest.mark.asyncio
async def test_poller_attempt_bound(sleep):
    async def fetch():
        return "running"

    with pytest.raises(DeadlineExceeded) as exc_info:
        await poll_until_terminal(
            "running", fetch, lambda s: s == "done", PollPolicy(max_attempts=3, sleep=sleep)
        )

    assert exc_info.value.last_status == "running"
    assert exc_info.value.details == {"attempts": 3}
    assert len(sleep.delays) == 3


class FakeTime:
    """Clock and sleep pair where sleeping advances the clock."""

    def __init__(self) -> None:
        self.now = 0.0
        self.delays = []

    def clock(self) -> float:
        return self.now

    async def sleep(self, delay: float) -> None:
        self.delays.append(delay)
        self.now += delay


@pytest.mark.asyncio
async def test_poller_never_sleeps_past_the_timeout():
    fake = FakeTime()

    async def fetch():
        raise AssertionError("no status call expected after the deadline")

    with pytest.raises(DeadlineExceeded) as exc_info:
        await poll_until_terminal(
            "running",
            fetch,
            lambda s: s == "done",
            PollPolicy(interval_s=5.0, timeout_s=1.0, sleep=fake.sleep, clock=fake.clock),
        )

    assert fake.delays == [1.0]
    assert fake.now == 1.0
    assert exc_info.value.last_status == "running"
    assert exc_info.value.details == {"attempts": 0, "timeout_s": 1.0}


@pytest.mark.asyncio
async def test_poller_shortens_the_last_sleep_to_the_remaining_budget():
    fake = FakeTime()
    calls = []

    async def fetch():
        calls.append(fake.now)
        return "running"

    with pytest.raises(DeadlineExceeded) as exc_info:
        await poll_until_terminal(
            "running",
            fetch,
            lambda s: s == "done",
            PollPolicy(interval_s=2.0, timeout_s=5.0, sleep=fake.sleep, clock=fake.clock),
        )

    assert fake.delays == [2.0, 2.0, 1.0]
    assert calls == [2.0, 4.0]
    assert exc_info.value.details == {"attempts": 2, "timeout_s": 5.0}


@pytest.mark.asyncio
async def test_poller_survives_a_failing_counter(sleep):
    class ExplodingSink:
        def observe(self, **_):
            raise RuntimeError("sink down")

        def counter(self, **_):
            raise RuntimeError("sink down")

    statuses = iter(["running", "done"])

    async def fetch():
        return next(statuses)

    result = await poll_until_terminal(
        "running", fetch, lambda s: s == "done", PollPolicy(sleep=sleep), metrics=ExplodingSink()
    )

    assert result == "done"
    assert len(sleep.delays) == 2
