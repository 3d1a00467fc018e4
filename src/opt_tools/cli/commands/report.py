"""opt-tools report -- list and fetch HTML reports."""

from __future__ import annotations

import click

from opt_tools.cli.formatting import format_report_list, format_success


@click.group()
def report() -> None:
    """List and retrieve HTML reports."""


@report.command(name="list")
@click.option("-n", "--limit", default=50, type=click.IntRange(min=1), help="Maximum number of reports to show.")
@click.pass_context
def list_reports(ctx: click.Context, limit: int) -> None:
    """Show recent reports."""
    from opt_tools.cli import _run_with_client

    async def operation(client, console) -> None:
        reports = await client.list_reports(limit)
        format_report_list(reports, console)

    _run_with_client(ctx, operation)


@report.command(name="get")
@click.argument("report_id")
@click.option(
    "-o", "--output", type=click.Path(dir_okay=False, writable=True), default=None,
    help="Write the HTML to this file instead of stdout.",
)
@click.pass_context
def get_report(ctx: click.Context, report_id: str, output: str | None) -> None:
    """Fetch report REPORT_ID."""
    from opt_tools.cli import _run_with_client

    async def operation(client, console) -> None:
        if output is None:
            click.echo(await client.get_report(report_id))
            return
        path = await client.save_report(report_id, output)
        format_success(f"Saved report {report_id} to {path}", console)

    _run_with_client(ctx, operation)
