from __future__ import annotations

"""trychain Command Line Interface."""

from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from trychain.config import TraceConfig
from trychain.demos import DEMOS, get_demo
from trychain.utils.constants import STYLE, SYMBOLS

app = typer.Typer(
    name="trychain",
    help="CLI for trychain: run the bundled demo chains.",
    add_completion=False,
)

console = Console()


def _first_line(text: str | None) -> str:
    lines = (text or "").strip().splitlines()
    return lines[0] if lines else ""


@app.command()
def demos():
    """List the bundled demo chains."""
    table = Table(title="Demo chains")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description")
    for name, func in sorted(DEMOS.items()):
        table.add_row(name, _first_line(func.__doc__))
    console.print(table)


@app.command()
def run(
    names: Optional[List[str]] = typer.Argument(None, help="Demo names to run (default: all)."),
    trace: Optional[bool] = typer.Option(None, "--trace/--no-trace", help="Log every chain event."),
    level: Optional[str] = typer.Option(None, "--level", help="Log level: debug, info, warning, error."),
):
    """Run demo chains and print their results."""
    overrides = {}
    if trace is not None:
        overrides["trace"] = trace
    if level is not None:
        overrides["level"] = level
    try:
        env_cfg = TraceConfig.from_env()
        cfg = TraceConfig.model_validate({**env_cfg.model_dump(), **overrides})
    except ValidationError as e:
        console.print(f"[bold red]Invalid configuration:[/] {escape(str(e))}")
        raise typer.Exit(code=1)
    cfg.apply()

    selected = names or sorted(DEMOS)
    try:
        funcs = [(name, get_demo(name)) for name in selected]
    except KeyError as e:
        console.print(f"[bold red]Error:[/] {escape(e.args[0])}")
        raise typer.Exit(code=1)

    table = Table(title="Results")
    table.add_column("Demo", style="cyan", no_wrap=True)
    table.add_column("Result", style=STYLE["value"])
    for name, func in funcs:
        table.add_row(name, escape(repr(func())))
    console.print(table)
    console.print(f"{SYMBOLS['success']}{len(funcs)} demo(s) completed")


def main() -> None:  # pragma: no cover – console-script entry point
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
