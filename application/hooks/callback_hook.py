# application/hooks/callback_hook.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, FrozenSet, List

from application.ports.logger import LoggerPort
from domain.exceptions import HookSignalError
from domain.steps.base import Step

ALL_CHANNELS: FrozenSet[str] = frozenset({"log", "error", "send"})


@dataclass
class CallbackHook:
    """
    Callback-style initialization hook.

    ``init(callback)`` runs the callback and re-raises anything it throws.
    ``channels`` names which of ``log``/``error``/``send`` the hook offers to
    the loaded bundle; calling one it lacks raises AttributeError.
    """

    name: str
    title: str
    logger: LoggerPort
    channels: FrozenSet[str] = ALL_CHANNELS
    outbox: List[str] = field(default_factory=list)

    def init(self, callback: Callable[[], None]) -> None:
        self.logger.info("hook.init", hook=self.name, title=self.title)
        try:
            self.logger.debug("hook.callback_start", hook=self.name)
            callback()
            self.logger.debug("hook.callback_done", hook=self.name)
        except Exception as exc:
            self.logger.error("hook.failed", hook=self.name, error=str(exc))
            raise

    def log(self, message: str) -> None:
        self._require("log")
        self.logger.info("hook.log", hook=self.name, message=message)

    def error(self, message: str) -> None:
        self._require("error")
        self.logger.error("hook.error", hook=self.name, message=message)
        raise HookSignalError(self.name, message)

    def send(self, message: str) -> None:
        self._require("send")
        self.logger.info("hook.send", hook=self.name, message=message)
        self.outbox.append(message)

    def as_step(self) -> Step:
        return Step(name=self.name, initialize=self.init)

    def _require(self, channel: str) -> None:
        if channel not in self.channels:
            raise AttributeError(f"Hook {self.name!r} has no {channel} channel")
