"""Agent Toolkit: LLM-consumable tool definitions for the optimization API.

Provides tool definitions, response formatting, and an executor that
expose OptimizationClient operations as function-calling schemas.
"""

from opt_tools.toolkit.definitions import ReportRequest, get_all_tools
from opt_tools.toolkit.executor import ToolExecutor
from opt_tools.toolkit.formatting import (
    format_analysis_response,
    format_report_response,
    format_solve_response,
    format_tsp_response,
)
from opt_tools.toolkit.models import ToolDefinition, ToolResult

__all__ = [
    "ToolDefinition",
    "ToolResult",
    "ToolExecutor",
    "ReportRequest",
    "get_all_tools",
    "format_solve_response",
    "format_tsp_response",
    "format_analysis_response",
    "format_report_response",
]
