"""Problem models sent to the optimization service.

Pydantic models describing LP, MIP and TSP problems. Only the shape is
checked here; expression syntax, bound consistency and feasibility are left
to the service. Unknown fields are kept and sent verbatim.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

VariableType = Literal["continuous", "integer", "binary"]
ObjectiveSense = Literal["maximize", "minimize"]
ConstraintType = Literal["equality", "inequality"]


class _ProblemModel(BaseModel):
    """Base for outbound models: extra fields pass through to the service."""

    model_config = ConfigDict(extra="allow")

    def to_payload(self) -> dict:
        """Serialize to the JSON body sent to the service."""
        return self.model_dump(mode="json", exclude_none=True)


class Variable(_ProblemModel):
    """A decision variable. ``name`` must be unique within a problem."""

    name: str
    type: VariableType
    lower_bound: int | float | None = None
    upper_bound: int | float | None = None
    description: str | None = None


class Objective(_ProblemModel):
    """Optimization direction plus a linear expression, e.g. ``3*x + 2*y``."""

    sense: ObjectiveSense
    expression: str
    description: str | None = None


class Constraint(_ProblemModel):
    """A linear constraint such as ``x + y <= 10``."""

    expression: str
    type: ConstraintType | None = None
    description: str | None = None


class LpProblem(_ProblemModel):
    """Linear programming problem."""

    variables: list[Variable]
    objective: Objective
    constraints: list[Constraint] = Field(default_factory=list)
    timeout: int | float | None = None  # seconds
    generate_report: bool = True

    @field_validator("generate_report", mode="before")
    @classmethod
    def _report_unless_disabled(cls, value: object) -> object:
        # null means the default; only an explicit false disables the report
        return True if value is None else value


class MipProblem(LpProblem):
    """Mixed-integer programming problem (integer and binary variables allowed)."""


class Location(_ProblemModel):
    """A named point to visit in a TSP tour."""

    name: str
    latitude: float
    longitude: float


class TspProblem(_ProblemModel):
    """Traveling salesman problem over geographic locations."""

    locations: list[Location]
    start_location: str | None = None
    timeout: int | float | None = None
    generate_report: bool = True

    @field_validator("generate_report", mode="before")
    @classmethod
    def _report_unless_disabled(cls, value: object) -> object:
        # null means the default; only an explicit false disables the report
        return True if value is None else value


class AnalyzeRequest(_ProblemModel):
    """Natural-language problem description for analysis."""

    description: str
