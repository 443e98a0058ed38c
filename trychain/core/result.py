from __future__ import annotations
"""Minimal Result dataclass capturing what a single step reported.

A step reports either a plain ``(value, error)`` pair or a :class:`Result`;
:meth:`Result.of` folds both shapes into one so the chain only deals with
Results internally.
"""
from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, TypeVar, Union, Tuple

from trychain.errors import ChainError, StepOutcomeError

T = TypeVar("T")

__all__ = ["Result", "Outcome"]


@dataclass(frozen=True, slots=True)
class Result(Generic[T]):  # noqa: D101
    value: Optional[T] = None
    error: Any = None

    # ------------------------------------------------------------------ #
    @property
    def ok(self) -> bool:  # noqa: D401
        """Return True when *error* is None."""
        return self.error is None

    # Convenience constructors ----------------------------------------- #
    @staticmethod
    def success(val: T) -> "Result[T]":  # noqa: D401
        return Result(value=val)

    @staticmethod
    def failure(err: Any, value: Optional[T] = None) -> "Result[T]":  # noqa: D401
        if err is None:
            raise ValueError("failure() needs a non-None error")
        return Result(value=value, error=err)

    @staticmethod
    def of(outcome: "Outcome[T]") -> "Result[T]":
        """Normalise a step outcome.

        Accepts a :class:`Result` (returned as is) or a 2-item tuple
        ``(value, error)``. Anything else raises :class:`StepOutcomeError`.
        """
        if isinstance(outcome, Result):
            return outcome
        if isinstance(outcome, tuple) and len(outcome) == 2:
            value, error = outcome
            return Result(value=value, error=error)
        raise StepOutcomeError(outcome)

    # ------------------------------------------------------------------ #
    def unwrap(self) -> T:  # noqa: D401
        """Return *value* or raise *error* if present (Rust-like).

        Errors that are not exceptions are wrapped in :class:`ChainError`.
        """
        if self.error is not None:
            if isinstance(self.error, BaseException):
                raise self.error
            raise ChainError(f"unwrap() on failed result: {self.error}", error=self.error)
        return self.value  # type: ignore[return-value]

    def __iter__(self) -> Iterator[Any]:
        # allows ``value, error = result``
        yield self.value
        yield self.error


Outcome = Union[Result[T], Tuple[T, Any]]
