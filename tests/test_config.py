import pytest
from pydantic import ValidationError

from trychain.config import TraceConfig
from trychain.utils import logging as tlog


def test_defaults():
    cfg = TraceConfig.from_env({})
    assert cfg.level == "info"
    assert cfg.trace is False
    assert cfg.truncate == 120


def test_from_env_mapping():
    cfg = TraceConfig.from_env(
        {"TRYCHAIN_LOG_LEVEL": "DEBUG", "TRYCHAIN_TRACE": "yes", "TRYCHAIN_TRUNCATE": "40"}
    )
    assert cfg.level == "debug"
    assert cfg.trace is True
    assert cfg.truncate == 40


def test_from_os_environ(monkeypatch):
    monkeypatch.setenv("TRYCHAIN_LOG_LEVEL", "warning")
    monkeypatch.delenv("TRYCHAIN_TRACE", raising=False)
    monkeypatch.delenv("TRYCHAIN_TRUNCATE", raising=False)
    cfg = TraceConfig.from_env()
    assert cfg.level == "warning"
    assert cfg.trace is False


def test_blank_values_keep_defaults():
    cfg = TraceConfig.from_env({"TRYCHAIN_LOG_LEVEL": "  ", "TRYCHAIN_TRACE": ""})
    assert cfg.level == "info" and cfg.trace is False


@pytest.mark.parametrize(
    "env",
    [
        {"TRYCHAIN_LOG_LEVEL": "verbose"},
        {"TRYCHAIN_TRACE": "maybe"},
        {"TRYCHAIN_TRUNCATE": "-1"},
    ],
)
def test_invalid_values(env):
    with pytest.raises(ValidationError):
        TraceConfig.from_env(env)


def test_apply_enables_tracing():
    TraceConfig(trace=True, truncate=10).apply()
    assert tlog.tracing_enabled()
    assert tlog.log.level == 10  # DEBUG while tracing

    TraceConfig(level="error").apply()
    assert not tlog.tracing_enabled()
    assert tlog.log.level == 40


def test_values_are_stripped():
    cfg = TraceConfig.from_env({"TRYCHAIN_TRACE": " 1 ", "TRYCHAIN_TRUNCATE": " 40\n"})
    assert cfg.trace is True
    assert cfg.truncate == 40


def test_trace_truncate_reset_between_tests():
    assert tlog._truncate == 120
