# domain/steps/base.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Protocol


class Continuation(Protocol):
    def __call__(self) -> None:
        ...

    def fail(self, error: BaseException) -> None:
        ...


@dataclass(frozen=True)
class Step:
    name: str
    initialize: Callable[[Continuation], None]
