"""Rich formatting helpers for the Opt-Tools CLI.

Rich auto-detects TTY and degrades gracefully when piped (no ANSI codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markdown import Markdown
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from opt_tools.models.solutions import ReportMetadata


def get_console(stderr: bool = False) -> Console:
    """Create a Rich Console that auto-detects TTY for graceful pipe degradation."""
    return Console(stderr=stderr)


def format_markdown(text: str, console: Console) -> None:
    """Render tool-style Markdown output."""
    console.print(Markdown(text))


def format_json(data: Any, console: Console) -> None:
    """Print a JSON-serializable value."""
    console.print_json(data=data)


def format_report_list(reports: list[ReportMetadata], console: Console) -> None:
    """Display report metadata in compact table format."""
    if not reports:
        console.print("[dim]No reports.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Report ID", style="yellow", no_wrap=True)
    table.add_column("Created", style="dim")
    table.add_column("Type", style="cyan")
    table.add_column("Status", style="green")

    for report in reports:
        table.add_row(
            escape(report.report_id),
            escape(report.created_at),
            escape(report.problem_type),
            escape(report.status),
        )

    console.print(table)


def format_success(message: str, console: Console) -> None:
    """Display a success message."""
    console.print(f"[green]{message}[/green]", highlight=False)


def format_error(message: str, console: Console) -> None:
    """Display an error message."""
    console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)
