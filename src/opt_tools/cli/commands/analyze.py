"""opt-tools analyze -- classify a natural-language problem description."""

from __future__ import annotations

import click

from opt_tools.cli.formatting import format_json, format_markdown


@click.command()
@click.argument("description", required=False)
@click.option(
    "-f", "--file", "source", type=click.File("r"), default=None,
    help="Read the description from a file ('-' for stdin).",
)
@click.option("--json", "as_json", is_flag=True, help="Print the raw JSON response.")
@click.pass_context
def analyze(ctx: click.Context, description: str | None, source, as_json: bool) -> None:
    """Analyze DESCRIPTION and suggest how to formulate it."""
    from opt_tools.cli import _run_with_client
    from opt_tools.toolkit.formatting import format_analysis_response

    if source is not None:
        description = source.read()
    if not description or not description.strip():
        raise click.UsageError("Provide a DESCRIPTION argument or --file.")

    async def operation(client, console) -> None:
        result = await client.analyze_problem(description)
        if as_json:
            format_json(result.model_dump(mode="json", exclude_none=True), console)
        else:
            format_markdown(format_analysis_response(result), console)

    _run_with_client(ctx, operation)
