"""Request fan-out orchestration.

This module owns the batch flow: build one descriptor, start every request
at once, wait for all of them and hand back outcomes in dispatch order.
Printing stays out of here; UI layers plug in through `FanOutHooks`, which
keeps the runner reusable from the CLI, the doctor command and tests.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Callable

from adapters.http_client import build_async_client
from adapters.http_dispatcher import HttpxDispatcher, describe_error
from core.config import AppSettings
from core.domain.models import BatchReport, Outcome, RequestDescriptor
from core.interfaces.dispatcher import RequestDispatcher


@dataclass
class FanOutHooks:
    """Optional callbacks for UI layers."""

    on_outcome: Callable[[Outcome], None] | None = None
    on_batch_error: Callable[[str], None] | None = None


def build_descriptor(settings: AppSettings | None = None) -> RequestDescriptor:
    """Build the batch descriptor from settings."""

    settings = settings or AppSettings()
    return RequestDescriptor(
        method=settings.http_method.upper(),
        url=settings.target_url,
        headers={"Content-Type": settings.content_type},
    )


async def fan_out(
    descriptor: RequestDescriptor,
    count: int,
    dispatcher: RequestDispatcher,
    hooks: FanOutHooks | None = None,
) -> list[Outcome]:
    """Dispatch `count` copies of `descriptor` concurrently.

    Every request is started before the single wait on the whole set; there
    is no concurrency cap. The result is ordered by dispatch index, not by
    completion time. Request-level failures are already `FailureOutcome`
    values at this point; anything else escaping a dispatch cancels the
    remaining requests and propagates.
    """

    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if count == 0:
        return []

    hooks = hooks or FanOutHooks()

    async def dispatch(index: int) -> Outcome:
        outcome = await dispatcher.send(descriptor, index)
        if hooks.on_outcome:
            hooks.on_outcome(outcome)
        return outcome

    tasks = [asyncio.ensure_future(dispatch(index)) for index in range(count)]
    try:
        return list(await asyncio.gather(*tasks))
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise


async def run_batch(
    settings: AppSettings | None = None,
    *,
    descriptor: RequestDescriptor | None = None,
    count: int | None = None,
    dispatcher: RequestDispatcher | None = None,
    hooks: FanOutHooks | None = None,
) -> BatchReport:
    """Run one complete batch and never raise past it.

    A failure of the aggregation itself is reported once through
    `hooks.on_batch_error` and recorded in `BatchReport.error`.
    """

    settings = settings or AppSettings()
    hooks = hooks or FanOutHooks()
    descriptor = descriptor or build_descriptor(settings)
    count = settings.request_count if count is None else count

    if count == 0:
        return BatchReport(requested=0)

    started = time.perf_counter()
    try:
        if dispatcher is not None:
            outcomes = await fan_out(descriptor, count, dispatcher, hooks)
        else:
            async with build_async_client(settings) as client:
                outcomes = await fan_out(descriptor, count, HttpxDispatcher(client), hooks)
    except Exception as exc:
        message = describe_error(exc)
        if hooks.on_batch_error:
            hooks.on_batch_error(message)
        return BatchReport(
            requested=count,
            elapsed_seconds=time.perf_counter() - started,
            error=message,
        )

    return BatchReport(
        requested=count,
        outcomes=outcomes,
        elapsed_seconds=time.perf_counter() - started,
    )
