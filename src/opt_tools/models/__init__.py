"""Data models for Opt-Tools problems, responses and configuration."""

from opt_tools.models.config import DEFAULT_SERVER_URL, ClientConfig
from opt_tools.models.problems import (
    AnalyzeRequest,
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
    ReportList,
    ReportMetadata,
    SolveResponse,
)

__all__ = [
    "ClientConfig",
    "DEFAULT_SERVER_URL",
    "Variable",
    "Objective",
    "Constraint",
    "LpProblem",
    "MipProblem",
    "Location",
    "TspProblem",
    "AnalyzeRequest",
    "SolveResponse",
    "AnalysisResponse",
    "ReportMetadata",
    "ReportList",
]
