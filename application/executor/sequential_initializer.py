# application/executor/sequential_initializer.py
from __future__ import annotations

import asyncio
import time
import uuid
from typing import Optional, Sequence

from application.executor.continuation import StepContinuation
from application.ports.logger import LoggerPort
from application.services.harness_deps import HarnessDeps
from domain.exceptions import StepTimeoutError
from domain.run import RunContext
from domain.steps.base import Step


class SequentialInitializer:
    """
    Runs initialization steps one at a time, in list order.

    Each step receives a continuation and the next step starts only after
    that continuation fires. The first raised or signalled error aborts the
    chain and propagates unchanged to the caller.
    """

    def __init__(self, step_timeout_sec: Optional[float] = None):
        if step_timeout_sec is not None and step_timeout_sec <= 0:
            raise ValueError(f"step_timeout_sec must be positive: {step_timeout_sec}")
        self._step_timeout_sec = step_timeout_sec

    async def run(self, steps: Sequence[Step], ctx: RunContext, deps: HarnessDeps) -> None:
        if not ctx.run_id:
            ctx.run_id = uuid.uuid4().hex

        logger = deps.logger.bind(run_id=ctx.run_id)
        loop = asyncio.get_running_loop()

        total = len(steps)
        for index, step in enumerate(steps):
            await self._run_step(step, index, total, ctx, logger, loop)

        logger.info("init.completed", steps=total)

    async def _run_step(
        self,
        step: Step,
        index: int,
        total: int,
        ctx: RunContext,
        logger: LoggerPort,
        loop: asyncio.AbstractEventLoop,
    ) -> None:
        future = loop.create_future()
        continuation = StepContinuation(step.name, future, loop)

        logger.info("step.start", step=step.name, index=index, total=total)
        t0 = time.perf_counter()

        try:
            step.initialize(continuation)
            await self._wait(step, future)
        except Exception as exc:
            _discard(future)
            logger.error(
                "step.failed",
                step=step.name,
                error=str(exc),
                error_type=type(exc).__name__,
                elapsed_ms=int((time.perf_counter() - t0) * 1000),
            )
            raise

        ctx.completed_steps.append(step.name)
        logger.info(
            "step.done",
            step=step.name,
            elapsed_ms=int((time.perf_counter() - t0) * 1000),
        )

    async def _wait(self, step: Step, future: asyncio.Future) -> None:
        if self._step_timeout_sec is None:
            await future
            return
        try:
            await asyncio.wait_for(future, timeout=self._step_timeout_sec)
        except asyncio.TimeoutError:
            raise StepTimeoutError(step.name, self._step_timeout_sec) from None


def _discard(future: asyncio.Future) -> None:
    """Settle a future nobody will await so asyncio does not warn about it."""
    if not future.done():
        future.cancel()
    elif not future.cancelled():
        future.exception()
