from application.hooks.callback_hook import CallbackHook
from application.hooks.hook_registry import DEFAULT_HOOK_NAMES, HookFactory, HookRegistry

__all__ = [
    "CallbackHook",
    "DEFAULT_HOOK_NAMES",
    "HookFactory",
    "HookRegistry",
]
