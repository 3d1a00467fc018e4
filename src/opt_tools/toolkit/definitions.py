"""Hand-crafted tool definitions for the optimization API.

Each tool definition includes an action-oriented description, a JSON Schema
for its parameters, the pydantic model the arguments are validated into, and
a handler bound to a specific OptimizationClient.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from opt_tools.models.problems import AnalyzeRequest, LpProblem, MipProblem, TspProblem
from opt_tools.toolkit.formatting import (
    format_analysis_response,
    format_report_response,
    format_solve_response,
    format_tsp_response,
)
from opt_tools.toolkit.models import ToolDefinition

if TYPE_CHECKING:
    from opt_tools.client import OptimizationClient


class ReportRequest(BaseModel):
    """Arguments of the ``get_report`` tool."""

    report_id: str


def _variables_schema(types: list[str], description: str) -> dict:
    return {
        "type": "array",
        "description": description,
        "items": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "description": 'Variable name (e.g., "x", "production_A")'},
                "type": {"type": "string", "enum": types, "description": "Variable type"},
                "lower_bound": {"type": "number", "description": "Lower bound (default: 0)"},
                "upper_bound": {"type": "number", "description": "Upper bound (default: infinity)"},
                "description": {"type": "string", "description": "What this variable represents"},
            },
            "required": ["name", "type"],
        },
    }


_OBJECTIVE_SCHEMA = {
    "type": "object",
    "description": "Objective function to optimize",
    "properties": {
        "sense": {"type": "string", "enum": ["maximize", "minimize"]},
        "expression": {"type": "string", "description": 'Linear expression (e.g., "3*x + 2*y")'},
        "description": {"type": "string", "description": "What the objective measures"},
    },
    "required": ["sense", "expression"],
}

_CONSTRAINTS_SCHEMA = {
    "type": "array",
    "description": "Linear constraints",
    "items": {
        "type": "object",
        "properties": {
            "expression": {"type": "string", "description": 'Constraint expression (e.g., "x + y <= 10")'},
            "type": {"type": "string", "enum": ["equality", "inequality"]},
            "description": {"type": "string", "description": "What this constraint represents"},
        },
        "required": ["expression"],
    },
}

_TIMEOUT_SCHEMA = {"type": "number", "description": "Solver time limit in seconds"}


def _program_schema(types: list[str], variables_description: str) -> dict:
    return {
        "type": "object",
        "properties": {
            "variables": _variables_schema(types, variables_description),
            "objective": _OBJECTIVE_SCHEMA,
            "constraints": _CONSTRAINTS_SCHEMA,
            "timeout": _TIMEOUT_SCHEMA,
            "generate_report": {
                "type": "boolean",
                "description": "Generate an HTML report with visualizations (default: true)",
            },
        },
        "required": ["variables", "objective"],
    }


def get_all_tools(client: OptimizationClient) -> list[ToolDefinition]:
    """Build tool definitions for every optimization API operation.

    Each call returns fresh handlers bound to the passed ``client``.
    No module-level references to any client are stored.

    Args:
        client: The OptimizationClient to bind tool handlers to.

    Returns:
        List of 5 ToolDefinition objects.
    """
    server_url = client.config.server_url

    async def solve_lp(problem: LpProblem) -> str:
        result = await client.solve_lp(problem)
        return format_solve_response(result, "Linear Programming", server_url)

    async def solve_mip(problem: MipProblem) -> str:
        result = await client.solve_mip(problem)
        return format_solve_response(result, "Mixed-Integer Programming", server_url)

    async def solve_tsp(problem: TspProblem) -> str:
        result = await client.solve_tsp(problem)
        return format_tsp_response(result, server_url)

    async def analyze_problem(request: AnalyzeRequest) -> str:
        result = await client.analyze_problem(request.description)
        return format_analysis_response(result)

    async def get_report(request: ReportRequest) -> str:
        html = await client.get_report(request.report_id)
        return format_report_response(request.report_id, html)

    return [
        ToolDefinition(
            name="solve_lp",
            description=(
                "Solve a Linear Programming (LP) optimization problem.\n"
                "Use this for problems where you need to maximize or minimize a linear "
                "objective function subject to linear constraints, with continuous "
                "(real-valued) decision variables.\n\n"
                "Common use cases:\n"
                "- Resource allocation\n"
                "- Production planning\n"
                "- Diet/blending problems\n"
                "- Transportation problems\n\n"
                "Returns the optimal solution values, objective value, and optionally "
                "an HTML report."
            ),
            parameters=_program_schema(
                ["continuous"], "Decision variables for the problem (must be continuous for LP)"
            ),
            input_model=LpProblem,
            handler=solve_lp,
        ),
        ToolDefinition(
            name="solve_mip",
            description=(
                "Solve a Mixed-Integer Programming (MIP) optimization problem.\n"
                "Use this for problems with integer or binary (0/1) decision variables.\n\n"
                "Common use cases:\n"
                "- Knapsack/selection problems\n"
                "- Facility location\n"
                "- Scheduling with discrete choices\n"
                "- Yes/no decisions\n\n"
                "Returns the optimal solution values, objective value, and optionally "
                "an HTML report."
            ),
            parameters=_program_schema(
                ["continuous", "integer", "binary"],
                "Decision variables (can be continuous, integer, or binary)",
            ),
            input_model=MipProblem,
            handler=solve_mip,
        ),
        ToolDefinition(
            name="solve_tsp",
            description=(
                "Solve a Traveling Salesman Problem (TSP).\n"
                "Find the shortest route visiting all locations exactly once and "
                "returning to the start.\n\n"
                "Provide locations with latitude/longitude coordinates. The solver uses "
                "real geographic distances (Haversine formula) to find the optimal tour.\n\n"
                "Returns the optimal route, total distance, and an interactive map "
                "visualization."
            ),
            parameters={
                "type": "object",
                "properties": {
                    "locations": {
                        "type": "array",
                        "description": "List of locations to visit",
                        "items": {
                            "type": "object",
                            "properties": {
                                "name": {"type": "string", "description": "Location name"},
                                "latitude": {"type": "number", "description": "Latitude coordinate"},
                                "longitude": {"type": "number", "description": "Longitude coordinate"},
                            },
                            "required": ["name", "latitude", "longitude"],
                        },
                    },
                    "start_location": {
                        "type": "string",
                        "description": "Name of the starting location (default: first in list)",
                    },
                    "timeout": _TIMEOUT_SCHEMA,
                    "generate_report": {
                        "type": "boolean",
                        "description": "Generate an HTML report with route map (default: true)",
                    },
                },
                "required": ["locations"],
            },
            input_model=TspProblem,
            handler=solve_tsp,
        ),
        ToolDefinition(
            name="analyze_problem",
            description=(
                "Analyze a natural language description of an optimization problem.\n"
                "Identifies the problem type (LP, MIP, TSP), extracts variables and "
                "constraints, and provides recommendations for formulation.\n\n"
                "Use this when the user describes a problem in plain English and you "
                "need to understand what type of optimization problem it is."
            ),
            parameters={
                "type": "object",
                "properties": {
                    "description": {
                        "type": "string",
                        "description": "Natural language description of the optimization problem",
                    },
                },
                "required": ["description"],
            },
            input_model=AnalyzeRequest,
            handler=analyze_problem,
        ),
        ToolDefinition(
            name="get_report",
            description=(
                "Retrieve an HTML optimization report by its ID.\n"
                "Reports contain interactive visualizations, solution details, and "
                "analysis.\n\n"
                "Use this to fetch a previously generated report."
            ),
            parameters={
                "type": "object",
                "properties": {
                    "report_id": {
                        "type": "string",
                        "description": "The report ID returned from a solve operation",
                    },
                },
                "required": ["report_id"],
            },
            input_model=ReportRequest,
            handler=get_report,
        ),
    ]
