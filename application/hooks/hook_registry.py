# application/hooks/hook_registry.py
from __future__ import annotations

from typing import Callable, Dict, FrozenSet, List, Sequence, Tuple

from application.hooks.callback_hook import CallbackHook
from application.ports.logger import LoggerPort
from domain.exceptions import UnknownHookError

HookFactory = Callable[[LoggerPort], CallbackHook]

DEFAULT_HOOK_NAMES = ("com", "test_bridge", "test_adapter", "test_runner")

# name -> (title, channels offered to the bundle)
_DEFAULT_HOOKS: Dict[str, Tuple[str, FrozenSet[str]]] = {
    "com": ("test environment", frozenset()),
    "test_bridge": ("test bridge", frozenset({"log", "error", "send"})),
    "test_adapter": ("test adapter", frozenset({"log", "error"})),
    "test_runner": ("test runner", frozenset({"log", "error"})),
}


def _hook_factory(name: str, title: str, channels: FrozenSet[str]) -> HookFactory:
    def factory(logger: LoggerPort) -> CallbackHook:
        return CallbackHook(name=name, title=title, logger=logger, channels=channels)

    return factory


class HookRegistry:
    def __init__(self, factories: Dict[str, HookFactory]):
        self._factories = dict(factories)

    @classmethod
    def default(cls) -> "HookRegistry":
        return cls({
            name: _hook_factory(name, title, channels)
            for name, (title, channels) in _DEFAULT_HOOKS.items()
        })

    def names(self) -> List[str]:
        return list(self._factories)

    def build(self, names: Sequence[str], logger: LoggerPort) -> List[CallbackHook]:
        """Build a fresh hook per name, keeping the given order."""
        hooks: List[CallbackHook] = []
        for name in names:
            factory = self._factories.get(name)
            if factory is None:
                raise UnknownHookError(name, self.names())
            hooks.append(factory(logger))
        return hooks
