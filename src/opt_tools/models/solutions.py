"""Response models returned by the optimization service.

Every model keeps fields it does not declare, so a response round-trips
through ``model_dump(exclude_none=True)`` without losing data. Identifiers
and labels sent as numbers are kept as their string form.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SolveResponse(BaseModel):
    """Result of an LP, MIP or TSP solve.

    ``status`` is free-form (``OPTIMAL``, ``INFEASIBLE``, ...). For TSP the
    ``solution`` mapping carries ``route_names`` and ``segments``.
    """

    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)

    status: str
    objective_value: float | None = None
    solution: dict[str, Any] | None = None
    report_id: str | None = None
    execution_time_ms: float | None = None
    solver_info: dict[str, Any] | None = None


class AnalysisResponse(BaseModel):
    """Classification of a natural-language problem description."""

    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)

    problem_type: str
    confidence: str
    variables_detected: list[str] = Field(default_factory=list)
    constraints_detected: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    extracted_data: dict[str, Any] | None = None


class ReportMetadata(BaseModel):
    """One entry of the report listing."""

    model_config = ConfigDict(extra="allow", frozen=True, coerce_numbers_to_str=True)

    report_id: str
    created_at: str
    problem_type: str
    status: str


class ReportList(BaseModel):
    """Paginated envelope returned by ``GET /api/reports``."""

    model_config = ConfigDict(extra="allow", frozen=True)

    reports: list[ReportMetadata]
    total: int | None = None
