"""
Centralized UI constants for consistent styling across trychain.

This module defines standard symbols and styles used in Rich console
output (trace logs and the CLI).
"""

# Colorblind-friendly symbols and styles
SYMBOLS = {
    "chain": "⛓️ ",
    "success": "[bold green]✓[/bold green] ",
    "error": "[bold red]![/bold red] ",
    "skip": "[dim]↷[/dim] ",
    "finally": "[bold blue]⚑[/bold blue] ",
    "catch": "[bold yellow]⤷[/bold yellow] ",
    "step": "→ ",
}

STYLE = {
    "header": "bold cyan",
    "dim": "dim",
    "info": "blue",
    "warning": "yellow",
    "error": "red",
    "success": "green",
    "demo": "bold",
    "value": "magenta",
}
