from __future__ import annotations

"""Small end-to-end pipelines showing typical chain shapes.

Each demo is a zero-argument function returning the chain's final value.
They double as living documentation and are runnable from the CLI
(``trychain run``).
"""

from typing import Callable, Dict

from pydantic import BaseModel, ValidationError

from trychain.core.chain import start
from trychain.core.guard import start_guarded
from trychain.utils.logging import log

__all__ = ["Person", "Record", "DEMOS", "register_demo", "get_demo"]

DEMOS: Dict[str, Callable[[], object]] = {}


def register_demo(name: str):  # noqa: D401
    """Decorator: expose *func* as demo *name*."""

    def _decorator(func: Callable[[], object]) -> Callable[[], object]:
        if name in DEMOS:
            raise ValueError(f"demo '{name}' already registered")
        DEMOS[name] = func
        return func

    return _decorator


def get_demo(name: str) -> Callable[[], object]:
    try:
        return DEMOS[name]
    except KeyError:
        raise KeyError(f"unknown demo '{name}' (available: {', '.join(sorted(DEMOS))})") from None


# --------------------------------------------------------------------------- #
# Models
# --------------------------------------------------------------------------- #

class Person(BaseModel):
    name: str
    age: int


class Record(BaseModel):
    id: int
    name: str


# --------------------------------------------------------------------------- #
# Demos
# --------------------------------------------------------------------------- #

@register_demo("double")
def double() -> int:
    """42 doubled."""
    return (
        start(lambda: (42, None))
        .then(lambda val: (val * 2, None))
        .catch(lambda err: -1)
    )


@register_demo("failure")
def failure() -> int:
    """The first step fails, so the doubling step never runs."""
    return (
        start(lambda: (0, RuntimeError("something went wrong")))
        .then(lambda val: (val * 2, None))
        .catch(lambda err: -1)
    )


@register_demo("string")
def string_processing(text: str = "  hello world  ") -> str:
    """Strip and upper-case a string, logging once processing is over."""

    def read():
        if text == "":
            return "", ValueError("empty input")
        return text, None

    return (
        start(read)
        .then(lambda s: (s.strip(), None))
        .then(lambda s: (s.upper(), None))
        .finally_(lambda: log.info("String processing completed"))
        .catch(lambda err: "ERROR")
    )


@register_demo("json")
def json_processing(payload: str = '{"name": "john", "age": 30}') -> str:
    """Parse a Person from JSON and title-case the name."""

    def parse():
        if payload == "":
            return Person(name="", age=0), ValueError("empty json")
        try:
            return Person.model_validate_json(payload), None
        except ValidationError as exc:
            return Person(name="", age=0), exc

    person = (
        start(parse)
        .then(lambda p: (p.model_copy(update={"name": p.name.title()}), None))
        .catch(lambda err: Person(name="Unknown", age=-1))
    )
    return f"{person.name} is {person.age} years old"


@register_demo("lines")
def line_count(content: str = "file content\nline 2\nline 3") -> str:
    """Count the lines of a text, then annotate the summary."""
    return (
        start_guarded(lambda: content)
        .then(lambda text: (f"Line count: {len(text.splitlines())}", None))
        .then(lambda summary: (summary + " (processed)", None))
        .catch(lambda err: f"Failed to process file: {err}")
    )


@register_demo("record")
def record_update(record: Record | None = None) -> Record:
    """Validate a record and upper-case its name."""
    fetched = record if record is not None else Record(id=1, name="John")

    def validate(r: Record):
        if not r.name:
            return r, ValueError("name cannot be empty")
        return r, None

    return (
        start(lambda: (fetched, None))
        .then(validate)
        .then(lambda r: (r.model_copy(update={"name": r.name.upper()}), None))
        .catch(lambda err: Record(id=-1, name="ERROR"))
    )
