# application/executor/continuation.py
from __future__ import annotations

import asyncio
from threading import Lock
from typing import Optional

from domain.exceptions import ContinuationReusedError


class StepContinuation:
    """
    Completion handle passed to a step's ``initialize``.

    Calling it resumes the chain; ``fail(error)`` aborts it. Either may be
    used from inside ``initialize``, from a later loop callback or from
    another thread. Only the first call counts; any further call raises
    ContinuationReusedError.
    """

    def __init__(self, step_name: str, future: asyncio.Future, loop: asyncio.AbstractEventLoop):
        self._step_name = step_name
        self._future = future
        self._loop = loop
        self._lock = Lock()
        self._invoked = False

    @property
    def invoked(self) -> bool:
        return self._invoked

    def __call__(self) -> None:
        self._settle(None)

    def fail(self, error: BaseException) -> None:
        self._settle(error)

    def _settle(self, error: Optional[BaseException]) -> None:
        with self._lock:
            if self._invoked:
                raise ContinuationReusedError(self._step_name)
            self._invoked = True

        if self._on_loop_thread():
            self._resolve(error)
            return

        # the run already ended (timeout or failure) and its loop is gone
        if self._loop.is_closed():
            return
        try:
            self._loop.call_soon_threadsafe(self._resolve, error)
        except RuntimeError:
            if not self._loop.is_closed():
                raise

    def _on_loop_thread(self) -> bool:
        try:
            return asyncio.get_running_loop() is self._loop
        except RuntimeError:
            return False

    def _resolve(self, error: Optional[BaseException]) -> None:
        # timed out or cancelled while the step was still pending
        if self._future.done():
            return
        if error is None:
            self._future.set_result(None)
        else:
            self._future.set_exception(error)
