"""Opt-Tools: client library and MCP tool server for the optimization API.

Solve linear, mixed-integer and traveling-salesman problems, analyze
natural-language problem descriptions, and retrieve HTML reports from a
remote optimization service.
"""

from opt_tools._version import __version__

# Core entry point
from opt_tools.client import OptimizationClient

# Configuration
from opt_tools.models.config import DEFAULT_SERVER_URL, ClientConfig

# Problem and response models
from opt_tools.models.problems import (
    Constraint,
    Location,
    LpProblem,
    MipProblem,
    Objective,
    TspProblem,
    Variable,
)
from opt_tools.models.solutions import (
    AnalysisResponse,
    ReportMetadata,
    SolveResponse,
)

# Transport
from opt_tools.transport.http import HttpTransport

# Agent toolkit
from opt_tools.toolkit import ToolDefinition, ToolExecutor, ToolResult, get_all_tools

# Exceptions
from opt_tools.exceptions import (
    AuthError,
    ConfigError,
    OptToolsError,
    RateLimitError,
    ResponseError,
    TransportError,
)

__all__ = [
    "__version__",
    "OptimizationClient",
    "ClientConfig",
    "DEFAULT_SERVER_URL",
    "Variable",
    "Objective",
    "Constraint",
    "LpProblem",
    "MipProblem",
    "Location",
    "TspProblem",
    "SolveResponse",
    "AnalysisResponse",
    "ReportMetadata",
    "HttpTransport",
    "ToolDefinition",
    "ToolExecutor",
    "ToolResult",
    "get_all_tools",
    "OptToolsError",
    "ConfigError",
    "TransportError",
    "RateLimitError",
    "AuthError",
    "ResponseError",
]
