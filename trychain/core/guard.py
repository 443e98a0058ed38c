from __future__ import annotations

"""Opt-in fault isolation for plain, raising functions.

``start`` and ``then`` let exceptions escape on purpose. When a step is an
ordinary function that signals failure by raising (``int``, ``json.loads``,
a pydantic validator…), wrap it with :func:`guarded` so the exception
travels down the chain's error channel instead::

    start_guarded(lambda: int(raw)).then_guarded(check_range).catch(lambda e: 0)
"""

import functools
from typing import Any, Callable, Tuple, Type, TypeVar

from trychain.core.chain import TryChain, start

T = TypeVar("T")

__all__ = ["guarded", "start_guarded"]

_Exceptions = Tuple[Type[BaseException], ...]


def guarded(fn: Callable[..., T], *, exceptions: _Exceptions = (Exception,)) -> Callable[..., Tuple[Any, Any]]:
    """Return *fn* adapted to report ``(value, error)``.

    Only *exceptions* are converted; anything else propagates. The wrapper
    keeps *fn*'s name so chain events still identify the step.
    """
    if not exceptions:
        raise ValueError("guarded() needs at least one exception type")

    @functools.wraps(fn, updated=())
    def _wrapper(*args: Any, **kwargs: Any) -> Tuple[Any, Any]:
        try:
            return fn(*args, **kwargs), None
        except exceptions as exc:
            return None, exc

    return _wrapper


def start_guarded(fn: Callable[[], T], *, exceptions: _Exceptions = (Exception,)) -> TryChain[T]:
    """Start a chain from a plain function; raised *exceptions* become the error."""
    return start(guarded(fn, exceptions=exceptions))
