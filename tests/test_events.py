import logging

from trychain import start
from trychain.utils.events import (
    ChainCaught,
    ChainStarted,
    FinallyRan,
    StepFinished,
    StepSkipped,
    has_subscribers,
    publish,
    subscribe,
    unsubscribe,
)


def _record_all(seen):
    for event_type in (ChainStarted, StepFinished, StepSkipped, FinallyRan, ChainCaught):
        subscribe(event_type)(seen.append)


def test_events_follow_step_order():
    seen = []
    _record_all(seen)

    def double(v):
        return v * 2, None

    start(lambda: (10, None)).then(double).finally_(lambda: None).catch(lambda err: -1)

    assert [type(e) for e in seen] == [ChainStarted, StepFinished, FinallyRan, ChainCaught]
    assert seen[1].step.endswith("double")
    assert seen[1].value == 20 and seen[1].ok
    assert seen[3].recovered is False


def test_events_on_failure():
    seen = []
    _record_all(seen)
    err = RuntimeError("boom")

    start(lambda: (0, err)).then(lambda v: (v, None)).finally_(lambda: None).catch(lambda e: -1)

    assert [type(e) for e in seen] == [ChainStarted, StepSkipped, FinallyRan, ChainCaught]
    assert seen[0].ok is False and seen[0].error is err
    assert seen[1].error is err
    assert seen[2].ok is False
    assert seen[3].recovered is True and seen[3].value == -1


def test_failing_handler_does_not_break_chain(caplog):
    @subscribe(StepFinished)
    def _broken(evt):
        raise RuntimeError("handler bug")

    with caplog.at_level(logging.WARNING, logger="trychain"):
        result = start(lambda: (1, None)).then(lambda v: (v + 1, None)).catch(lambda e: -1)

    assert result == 2
    assert "handler bug" in caplog.text


def test_handlers_cannot_change_state():
    @subscribe(StepFinished)
    def _meddle(evt):
        evt.value = "tampered"

    chain = start(lambda: (1, None)).then(lambda v: (v + 1, None))
    assert chain.value == 2


def test_unsubscribe():
    seen = []
    subscribe(StepSkipped)(seen.append)
    assert has_subscribers(StepSkipped)

    assert unsubscribe(StepSkipped, seen.append) is True
    assert unsubscribe(StepSkipped, seen.append) is False
    publish(StepSkipped(step="x"))
    assert seen == []
