# domain/exceptions.py
from __future__ import annotations


class HarnessError(Exception):
    """Base class for errors raised by the harness itself."""


class HookSignalError(HarnessError):
    """A hook channel reported an error explicitly."""

    def __init__(self, hook: str, message: str):
        super().__init__(message)
        self.hook = hook
        self.message = message


class StepTimeoutError(HarnessError):
    def __init__(self, step_name: str, timeout_sec: float):
        super().__init__(f"Step did not complete within {timeout_sec}s: {step_name}")
        self.step_name = step_name
        self.timeout_sec = timeout_sec


class ContinuationReusedError(HarnessError):
    def __init__(self, step_name: str):
        super().__init__(f"Continuation invoked more than once: {step_name}")
        self.step_name = step_name


class ArtifactLoadError(HarnessError):
    def __init__(self, path: str, reason: str):
        super().__init__(f"Failed to load artifact {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigLoadError(HarnessError):
    pass


class UnknownHookError(HarnessError):
    def __init__(self, name: str, known: list[str]):
        super().__init__(f"Unknown hook: {name} (known: {', '.join(known)})")
        self.name = name
        self.known = known
