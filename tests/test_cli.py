from typer.testing import CliRunner

from trychain.cli import app

runner = CliRunner()


def test_demos_lists_all():
    result = runner.invoke(app, ["demos"])
    assert result.exit_code == 0
    for name in ("double", "failure", "string", "json", "lines", "record"):
        assert name in result.output


def test_run_selected(monkeypatch):
    monkeypatch.delenv("TRYCHAIN_TRACE", raising=False)
    monkeypatch.delenv("TRYCHAIN_LOG_LEVEL", raising=False)
    result = runner.invoke(app, ["run", "double", "failure"])
    assert result.exit_code == 0
    assert "84" in result.output
    assert "-1" in result.output
    assert "2 demo(s) completed" in result.output


def test_run_all():
    result = runner.invoke(app, ["run", "--no-trace"])
    assert result.exit_code == 0
    assert "6 demo(s) completed" in result.output


def test_run_unknown_demo():
    result = runner.invoke(app, ["run", "nope"])
    assert result.exit_code == 1
    assert "unknown demo" in result.output


def test_run_invalid_level():
    result = runner.invoke(app, ["run", "double", "--level", "loud"])
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_run_with_trace_from_env(monkeypatch):
    monkeypatch.setenv("TRYCHAIN_TRACE", "1")
    result = runner.invoke(app, ["run", "double"])
    assert result.exit_code == 0

    from trychain.utils import logging as tlog

    assert tlog.tracing_enabled()
    tlog.disable_tracing()
