from __future__ import annotations

"""TryChain: a linear chain of fallible steps.

``start`` runs the first step, ``then`` adds further steps that are skipped
once any step has reported an error, ``finally_`` registers a hook that
always runs and ``catch`` ends the chain with a plain value::

    total = (
        start(lambda: (10, None))
        .then(lambda v: (v * 2, None))
        .finally_(lambda: print("done"))
        .catch(lambda err: -1)
    )

Every callable runs synchronously, exactly when its operation is called.
Exceptions raised inside a callable are not intercepted; see
:mod:`trychain.core.guard` for the opt-in alternative.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from trychain.core.result import Outcome, Result
from trychain.utils import events
from trychain.utils.events import (
    ChainCaught,
    ChainStarted,
    FinallyRan,
    StepFinished,
    StepSkipped,
)

T = TypeVar("T")

__all__ = ["TryChain", "start", "step_name"]


def step_name(fn: Callable[..., Any]) -> str:
    """Return a readable identifier for *fn* (used in events)."""
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


def _emit(event_type, **fields) -> None:
    if events.has_subscribers(event_type):
        events.publish(event_type(**fields))


@dataclass(frozen=True, slots=True)
class TryChain(Generic[T]):
    """Current ``(value, error)`` state of a chain.

    Instances are immutable; each operation hands back a chain snapshot.
    """

    value: Optional[T] = None
    error: Any = None

    # ------------------------------------------------------------------ #
    @property
    def ok(self) -> bool:  # noqa: D401
        """Return True while no step has reported an error."""
        return self.error is None

    @property
    def result(self) -> Result[T]:
        return Result(value=self.value, error=self.error)

    # ------------------------------------------------------------------ #
    def then(self, fn: Callable[[T], Outcome[T]]) -> "TryChain[T]":
        """Run *fn* on the current value unless the chain already failed.

        A failed chain is returned untouched and *fn* is never called.
        """
        if self.error is not None:
            _emit(StepSkipped, step=step_name(fn), error=self.error)
            return self

        outcome = Result.of(fn(self.value))
        _emit(StepFinished, step=step_name(fn), ok=outcome.ok, value=outcome.value, error=outcome.error)
        return TryChain(value=outcome.value, error=outcome.error)

    def finally_(self, fn: Callable[[], Any]) -> "TryChain[T]":
        """Call *fn* once, whatever the state; its return value is ignored."""
        fn()
        _emit(FinallyRan, step=step_name(fn), ok=self.ok)
        return self

    def catch(self, fn: Callable[[Any], T]) -> T:
        """End the chain: ``fn(error)`` if a step failed, else the value."""
        if self.error is not None:
            recovered = fn(self.error)
            _emit(ChainCaught, step=step_name(fn), recovered=True, value=recovered)
            return recovered
        _emit(ChainCaught, step=step_name(fn), recovered=False, value=self.value)
        return self.value  # type: ignore[return-value]

    # ------------------------------------------------------------------ #
    def then_guarded(self, fn: Callable[[T], T], *, exceptions=(Exception,)) -> "TryChain[T]":
        """Like :meth:`then` for a plain function; raised *exceptions* become the error."""
        from trychain.core.guard import guarded  # local import to avoid cycles

        return self.then(guarded(fn, exceptions=exceptions))

    def __repr__(self) -> str:
        if self.error is None:
            return f"TryChain.ok(value={self.value!r})"
        return f"TryChain.failed(error={self.error!r})"


def start(fn: Callable[[], Outcome[T]]) -> TryChain[T]:
    """Run *fn* immediately and wrap what it reported in a new chain."""
    outcome = Result.of(fn())
    _emit(ChainStarted, step=step_name(fn), ok=outcome.ok, value=outcome.value, error=outcome.error)
    return TryChain(value=outcome.value, error=outcome.error)
