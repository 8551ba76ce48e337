"""
Output formatting utilities for the CLI.

Provides consistent output formatting across all CLI commands.
"""

import json
from typing import Any

from rich.console import Console

from projinit.cli.request import ScaffoldRequest

# Global console instances
console = Console()
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def print_json(data: Any) -> None:
    """Print data as indented JSON without markup processing."""
    console.print_json(json.dumps(data))


def print_summary(request: ScaffoldRequest) -> None:
    """Print the selections and the commands to run next."""
    console.print()
    console.print("  [bold #9ece6a]Project ready to create![/bold #9ece6a]")
    console.print()

    rows = [
        ("Path", str(request.project_dir)),
        ("Language", request.language),
        ("Framework", request.framework),
    ]
    if request.libraries:
        rows.append(("Libraries", ", ".join(request.libraries)))

    for label, value in rows:
        console.print(f"  [#6b7280]{label:<12}[/#6b7280]{value}", highlight=False)

    console.print()
    console.print("  [italic #6b7280]Next steps:[/italic #6b7280]")
    console.print(f"    [#7aa2f7]cd {request.project_dir}[/#7aa2f7]", highlight=False)
    next_cmd = request.next_step_command()
    if next_cmd:
        console.print(f"    [#7aa2f7]{next_cmd}[/#7aa2f7]", highlight=False)
    console.print()
