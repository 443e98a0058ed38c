"""Core chain combinator."""

from .result import Result, Outcome
from .chain import TryChain, start, step_name
from .guard import guarded, start_guarded

__all__ = [
    "Result",
    "Outcome",
    "TryChain",
    "start",
    "step_name",
    "guarded",
    "start_guarded",
]
