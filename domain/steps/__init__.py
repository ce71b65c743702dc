from domain.steps.base import Continuation, Step

__all__ = [
    "Continuation",
    "Step",
]
