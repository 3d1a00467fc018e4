"""Text rendering of service responses for tool-calling agents.

The output is Markdown-flavoured plain text. Layout is fixed: agents and
downstream tooling parse these blocks, so headings, labels and number
formats must stay stable.
"""

from __future__ import annotations

import json
from typing import Any

from opt_tools.models.solutions import AnalysisResponse, SolveResponse

MISSING = "N/A"
DEFAULT_SOLVER = "OR-Tools"
ROUTE_ARROW = " → "


def format_value(value: Any) -> str:
    """Render a scalar the way the service's own clients print it.

    Integral floats drop the trailing ``.0``; booleans are lowercase;
    containers are compact JSON.
    """
    if value is None:
        return MISSING
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


def _fixed(value: float | None, digits: int, scale: float = 1.0) -> str:
    if value is None:
        return MISSING
    return f"{value / scale:.{digits}f}"


def _report_lines(report_id: str | None, label: str, server_url: str) -> list[str]:
    if not report_id:
        return []
    return [
        "",
        f"**Report ID:** {report_id}",
        f"{label}: {server_url}/api/reports/{report_id}",
    ]


def format_solve_response(result: SolveResponse, problem_type: str, server_url: str) -> str:
    """Render an LP/MIP result.

    Args:
        result: Service response.
        problem_type: Heading label, e.g. "Linear Programming".
        server_url: Base URL used in the report link.
    """
    lines = [
        f"## {problem_type} Solution",
        "",
        f"**Status:** {result.status}",
        f"**Objective Value:** {format_value(result.objective_value)}",
        "",
        "### Solution Values:",
    ]
    for name, value in (result.solution or {}).items():
        lines.append(f"- {name} = {format_value(value)}")

    solver = (result.solver_info or {}).get("solver") or DEFAULT_SOLVER
    lines.append("")
    lines.append(f"**Solve Time:** {_fixed(result.execution_time_ms, 2)}ms")
    lines.append(f"**Solver:** {solver}")
    lines.extend(_report_lines(result.report_id, "View the full report at", server_url))
    return "\n".join(lines)


def format_tsp_response(result: SolveResponse, server_url: str) -> str:
    """Render a TSP result. Distances arrive in meters and print in kilometers."""
    lines = [
        "## Traveling Salesman Solution",
        "",
        f"**Status:** {result.status}",
        f"**Total Distance:** {_fixed(result.objective_value, 2, 1000)} km",
        "",
        "### Optimal Route:",
    ]
    solution = result.solution or {}

    route = solution.get("route_names")
    if route:
        lines.append(ROUTE_ARROW.join(str(name) for name in route))

    segments = solution.get("segments")
    if segments:
        lines.append("")
        lines.append("### Route Segments:")
        for seg in segments:
            dist = _fixed(seg.get("distance"), 2, 1000)
            lines.append(f"- {seg.get('from_name')}{ROUTE_ARROW}{seg.get('to_name')}: {dist} km")

    lines.append("")
    lines.append(f"**Solve Time:** {_fixed(result.execution_time_ms, 1, 1000)}s")
    lines.extend(_report_lines(result.report_id, "View the route map at", server_url))
    return "\n".join(lines)


def format_analysis_response(result: AnalysisResponse) -> str:
    """Render a problem analysis with its three itemized lists."""
    lines = [
        "## Problem Analysis",
        "",
        f"**Problem Type:** {result.problem_type}",
        f"**Confidence:** {result.confidence}",
        "",
    ]

    if result.variables_detected:
        lines.append("### Detected Variables:")
        lines.extend(f"- {v}" for v in result.variables_detected)
        lines.append("")

    if result.constraints_detected:
        lines.append("### Detected Constraints:")
        lines.extend(f"- {c}" for c in result.constraints_detected)
        lines.append("")

    if result.recommendations:
        lines.append("### Recommendations:")
        lines.extend(f"- {r}" for r in result.recommendations)

    return "\n".join(lines)


def format_report_response(report_id: str, html: str) -> str:
    """Summarize a retrieved HTML report without echoing its contents."""
    return (
        f"HTML Report ({len(html)} characters):\n\n"
        "The report has been retrieved. To view it, save the content to an "
        "HTML file and open in a browser.\n\n"
        f"Report ID: {report_id}"
    )
