"""opt-tools solve -- solve LP, MIP and TSP problems from JSON files."""

from __future__ import annotations

import json
from typing import IO

import click

from opt_tools.cli.formatting import format_json, format_markdown


def _load_problem(source: IO[str], no_report: bool) -> dict:
    try:
        problem = json.load(source)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON: {exc}", param_hint="FILE") from exc
    if not isinstance(problem, dict):
        raise click.BadParameter("expected a JSON object", param_hint="FILE")
    if no_report:
        problem["generate_report"] = False
    return problem


def _solve_command(kind: str, help_text: str) -> click.Command:
    @click.command(name=kind, help=help_text)
    @click.argument("source", metavar="FILE", type=click.File("r"))
    @click.option("--json", "as_json", is_flag=True, help="Print the raw JSON response.")
    @click.option("--no-report", is_flag=True, help="Skip HTML report generation.")
    @click.pass_context
    def command(ctx: click.Context, source, as_json: bool, no_report: bool) -> None:
        from opt_tools.cli import _run_with_client
        from opt_tools.toolkit.formatting import format_solve_response, format_tsp_response

        problem = _load_problem(source, no_report)

        async def operation(client, console) -> None:
            solver = getattr(client, f"solve_{kind}")
            result = await solver(problem)
            if as_json:
                format_json(result.model_dump(mode="json", exclude_none=True), console)
            elif kind == "tsp":
                format_markdown(format_tsp_response(result, client.config.server_url), console)
            else:
                label = "Linear Programming" if kind == "lp" else "Mixed-Integer Programming"
                format_markdown(
                    format_solve_response(result, label, client.config.server_url), console
                )

        _run_with_client(ctx, operation)

    return command


@click.group()
def solve() -> None:
    """Solve an optimization problem described in a JSON file ('-' for stdin)."""


solve.add_command(_solve_command("lp", "Solve a linear programming problem."))
solve.add_command(_solve_command("mip", "Solve a mixed-integer programming problem."))
solve.add_command(_solve_command("tsp", "Solve a traveling salesman problem."))
