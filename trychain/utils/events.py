from __future__ import annotations
"""Ultra-lightweight pub/sub **EventBus** fed by every chain operation.

Events are pure observation: nothing a subscriber does can change the
state of the chain that published them.

Example
-------
```python
from trychain.utils.events import subscribe, StepSkipped

@subscribe(StepSkipped)
def _on_skip(evt: StepSkipped):
    print(f"skipped {evt.step}")
```
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Type, TypeVar

__all__ = [
    "Event",
    "ChainStarted",
    "StepFinished",
    "StepSkipped",
    "FinallyRan",
    "ChainCaught",
    "subscribe",
    "unsubscribe",
    "has_subscribers",
    "is_subscribed",
    "publish",
    "clear",
]

T = TypeVar("T", bound="Event")
_Handler = Callable[[Any], None]
_REGISTRY: Dict[Type["Event"], List[_Handler]] = {}


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True, kw_only=True)
class Event:  # noqa: D101 – base event
    ts: datetime = field(default_factory=_now)


# --------------------------------------------------------------------------- #
# Concrete events
# --------------------------------------------------------------------------- #
@dataclass(slots=True)
class ChainStarted(Event):
    step: str
    ok: bool
    value: Any = None
    error: Any = None


@dataclass(slots=True)
class StepFinished(Event):
    step: str
    ok: bool
    value: Any = None
    error: Any = None


@dataclass(slots=True)
class StepSkipped(Event):
    step: str
    error: Any = None  # the error that caused the short-circuit


@dataclass(slots=True)
class FinallyRan(Event):
    step: str
    ok: bool  # chain state when the hook ran


@dataclass(slots=True)
class ChainCaught(Event):
    step: str
    recovered: bool  # True when the recovery function was invoked
    value: Any = None


# --------------------------------------------------------------------------- #
# API helpers
# --------------------------------------------------------------------------- #

def subscribe(event_type: Type[T]):  # noqa: D401
    """Decorator: register *func* to receive *event_type* events."""

    def _decorator(func: _Handler) -> _Handler:
        _REGISTRY.setdefault(event_type, []).append(func)
        return func

    return _decorator


def unsubscribe(event_type: Type[Event], func: _Handler) -> bool:
    """Remove *func* from *event_type*; return False if it was not registered."""
    handlers = _REGISTRY.get(event_type, [])
    if func not in handlers:
        return False
    handlers.remove(func)
    return True


def is_subscribed(event_type: Type[Event], func: _Handler) -> bool:
    return func in _REGISTRY.get(event_type, [])


def has_subscribers(event_type: Type[Event]) -> bool:
    return bool(_REGISTRY.get(event_type))


def clear() -> None:
    """Drop every registered handler (mostly for tests)."""
    _REGISTRY.clear()


def publish(evt: Event) -> None:  # noqa: D401
    """Publish an event to all registered subscribers."""
    for func in list(_REGISTRY.get(type(evt), [])):
        try:
            func(evt)
        except Exception as e:  # noqa: BLE001
            # Failure to handle an event must never crash the chain.
            from trychain.utils.logging import log

            log.warning("event handler %s failed: %s", getattr(func, "__name__", func), e)
