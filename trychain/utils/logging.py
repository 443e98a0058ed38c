from __future__ import annotations
"""Rich-backed logging and opt-in chain tracing.

The chain itself never logs. Tracing works by subscribing DEBUG-level
handlers to the chain's lifecycle events::

    from trychain.utils import logging as tlog

    tlog.configure("debug")
    tlog.enable_tracing()
"""
from logging import DEBUG, ERROR, INFO, WARNING, Formatter, Logger, getLogger
from typing import Any, Callable, List, Tuple, Type

from rich.console import Console
from rich.logging import RichHandler

from trychain.utils.constants import SYMBOLS
from trychain.utils.events import (
    ChainCaught,
    ChainStarted,
    Event,
    FinallyRan,
    StepFinished,
    StepSkipped,
    is_subscribed,
    subscribe,
    unsubscribe,
)

console = Console(stderr=True)

__all__ = [
    "get",
    "log",
    "configure",
    "enable_tracing",
    "disable_tracing",
    "tracing_enabled",
    "shorten",
]

_LEVEL_MAP = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

log: Logger = getLogger("trychain")

_handler: RichHandler | None = None


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the trychain logger with *level* (str)."""
    lvl = _LEVEL_MAP.get(level.lower(), INFO)
    lg = getLogger("trychain")
    lg.setLevel(lvl)
    return lg


def configure(level: str = "info") -> Logger:
    """Attach a RichHandler to the trychain logger (once) and set *level*."""
    global _handler
    if _handler is None:
        _handler = RichHandler(console=console, rich_tracebacks=True, markup=True, show_path=False)
        _handler.setFormatter(Formatter("%(message)s", datefmt="%H:%M:%S"))
        log.addHandler(_handler)
    return get(level)


# --------------------------------------------------------------------------- #
# Tracing subscribers
# --------------------------------------------------------------------------- #

_truncate = 120


def shorten(value: Any, limit: int | None = None) -> str:
    """Return ``repr(value)`` cut down to *limit* characters."""
    limit = _truncate if limit is None else limit
    text = repr(value)
    if limit and len(text) > limit:
        return text[: max(limit - 1, 0)] + "…"
    return text


def _on_started(evt: ChainStarted) -> None:
    if evt.ok:
        log.debug("%sstart %s %s", SYMBOLS["chain"], evt.step, shorten(evt.value))
    else:
        log.debug("%sstart %s failed: %s", SYMBOLS["error"], evt.step, shorten(evt.error))


def _on_step(evt: StepFinished) -> None:
    if evt.ok:
        log.debug("%sthen %s %s", SYMBOLS["success"], evt.step, shorten(evt.value))
    else:
        log.debug("%sthen %s failed: %s", SYMBOLS["error"], evt.step, shorten(evt.error))


def _on_skipped(evt: StepSkipped) -> None:
    log.debug("%sskip %s", SYMBOLS["skip"], evt.step)


def _on_finally(evt: FinallyRan) -> None:
    log.debug("%sfinally %s (%s)", SYMBOLS["finally"], evt.step, "ok" if evt.ok else "failed")


def _on_caught(evt: ChainCaught) -> None:
    if evt.recovered:
        log.debug("%scatch %s recovered %s", SYMBOLS["catch"], evt.step, shorten(evt.value))
    else:
        log.debug("%scatch %s not needed", SYMBOLS["catch"], evt.step)


_SUBSCRIBERS: List[Tuple[Type[Event], Callable[[Any], None]]] = [
    (ChainStarted, _on_started),
    (StepFinished, _on_step),
    (StepSkipped, _on_skipped),
    (FinallyRan, _on_finally),
    (ChainCaught, _on_caught),
]


def enable_tracing(truncate: int | None = None) -> None:
    """Log every chain event at DEBUG level. Calling it twice is harmless."""
    global _truncate
    if truncate is not None:
        _truncate = truncate
    for event_type, handler in _SUBSCRIBERS:
        if not is_subscribed(event_type, handler):
            subscribe(event_type)(handler)


def disable_tracing() -> None:
    for event_type, handler in _SUBSCRIBERS:
        unsubscribe(event_type, handler)


def tracing_enabled() -> bool:
    return all(is_subscribed(event_type, handler) for event_type, handler in _SUBSCRIBERS)
