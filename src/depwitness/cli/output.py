"""Rich output formatting helpers for the depwitness CLI.

Human-facing summaries go through Rich. Text meant to be copied (the
assertion block and the configuration report) is written by the commands
with plain ``click.echo`` so no markup or wrapping ends up in it.
"""

from __future__ import annotations

import json
from typing import Any

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from depwitness.core import DigestConflict

console = Console()
error_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(
        f"[bold red]Error:[/bold red] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )


def print_verification_summary(project: str, checked: int, excluded: list[str]) -> None:
    """Print the result of a successful verification run.

    Args:
        project: Project name.
        checked: Number of assertions that passed.
        excluded: Exclusions that were in effect.
    """
    console.print(
        Panel(
            f"[bold green]{checked} integrity assertion(s) verified[/bold green]",
            title=f"Dependency Verification: {project}",
        )
    )
    if excluded:
        console.print(
            f"  [dim]Excluded: {escape(', '.join(sorted(excluded)))}[/dim]",
            soft_wrap=True,
        )


def print_conflicts(conflicts: list[DigestConflict]) -> None:
    """Print a table of digest conflicts to stderr."""
    table = Table(title="Conflicting Digests", show_header=True, header_style="bold")
    table.add_column("Dependency", style="bold")
    table.add_column("Configuration")
    table.add_column("Kept", style="green")
    table.add_column("Rejected", style="red")
    for conflict in conflicts:
        table.add_row(
            conflict.key.all,
            str(conflict.configuration),
            conflict.kept,
            conflict.rejected,
        )
    error_console.print(table)


def print_json(data: Any) -> None:
    """Print data as formatted JSON to stdout.

    Args:
        data: Any JSON-serializable data structure.
    """
    click.echo(json.dumps(data, indent=2, default=str))
