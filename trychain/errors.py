from __future__ import annotations

"""Exceptions raised for library misuse.

Errors travelling *through* a chain are never wrapped in these; a step's
error object reaches ``catch`` exactly as the step reported it.
"""

from typing import Any

__all__ = ["ChainError", "StepOutcomeError"]


class ChainError(Exception):
    """Base class for trychain's own exceptions."""

    def __init__(self, message: str, error: Any = None) -> None:
        super().__init__(message)
        self.error = error


class StepOutcomeError(ChainError, TypeError):
    """A step returned something other than ``(value, error)`` or a Result."""

    def __init__(self, outcome: Any) -> None:
        super().__init__(
            f"step must return a (value, error) pair or a Result, got {type(outcome).__name__}: {outcome!r}"
        )
        self.outcome = outcome
