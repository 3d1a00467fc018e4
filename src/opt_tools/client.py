"""OptimizationClient: typed async façade over the optimization API.

One method per remote capability. Problems are sent verbatim after default
filling; responses are returned as pydantic models with every server field
preserved.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Mapping
from pathlib import Path
from typing import Any, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from opt_tools.exceptions import ResponseError
from opt_tools.models.config import ClientConfig
from opt_tools.models.problems import AnalyzeRequest, LpProblem, MipProblem, TspProblem
from opt_tools.models.solutions import (
    AnalysisResponse,
    ReportList,
    ReportMetadata,
    SolveResponse,
)
from opt_tools.transport.http import HttpTransport

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)

SOLVE_LP_PATH = "/api/solve/lp"
SOLVE_MIP_PATH = "/api/solve/mip"
SOLVE_TSP_PATH = "/api/solve/tsp"
ANALYZE_PATH = "/api/analyze"
REPORTS_PATH = "/api/reports"


def _coerce(model: type[_M], value: _M | Mapping[str, Any]) -> _M:
    """Accept either a model instance or a plain mapping."""
    if isinstance(value, model):
        return value
    return model.model_validate(value)


def _parse_response(model: type[_M], data: Any, path: str) -> _M:
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        raise ResponseError(
            f"Unexpected response format from {path}: {exc}. Response: {data!r}"
        ) from exc


class OptimizationClient:
    """Async client for the Opt-Tools optimization API.

    Usage::

        config = ClientConfig(server_url="https://api.opt-tools.com", api_key="...")
        async with OptimizationClient(config) as client:
            result = await client.solve_lp(problem)
            print(result.status, result.objective_value)
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._config = config
        self._transport = HttpTransport(
            config.server_url,
            config.api_key,
            config.timeout_ms,
            config.retries,
            backoff_factor=config.backoff_factor,
            debug=config.debug,
            transport=transport,
            sleep=sleep,
        )

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _debug(self, msg: str, *args: object) -> None:
        if self._config.debug:
            logger.debug(msg, *args)

    async def solve_lp(self, problem: LpProblem | Mapping[str, Any]) -> SolveResponse:
        """Solve a linear programming problem."""
        lp = _coerce(LpProblem, problem)
        self._debug("Solving LP problem: %s", lp)
        data = await self._transport.post(SOLVE_LP_PATH, lp.to_payload())
        return _parse_response(SolveResponse, data, SOLVE_LP_PATH)

    async def solve_mip(self, problem: MipProblem | Mapping[str, Any]) -> SolveResponse:
        """Solve a mixed-integer programming problem."""
        mip = _coerce(MipProblem, problem)
        self._debug("Solving MIP problem: %s", mip)
        data = await self._transport.post(SOLVE_MIP_PATH, mip.to_payload())
        return _parse_response(SolveResponse, data, SOLVE_MIP_PATH)

    async def solve_tsp(self, problem: TspProblem | Mapping[str, Any]) -> SolveResponse:
        """Solve a traveling salesman problem."""
        tsp = _coerce(TspProblem, problem)
        self._debug("Solving TSP problem: %s", tsp)
        data = await self._transport.post(SOLVE_TSP_PATH, tsp.to_payload())
        return _parse_response(SolveResponse, data, SOLVE_TSP_PATH)

    async def analyze_problem(self, description: str) -> AnalysisResponse:
        """Analyze a natural-language problem description."""
        self._debug("Analyzing problem")
        body = AnalyzeRequest(description=description).to_payload()
        data = await self._transport.post(ANALYZE_PATH, body)
        return _parse_response(AnalysisResponse, data, ANALYZE_PATH)

    async def get_report(self, report_id: str) -> str:
        """Fetch an HTML report by ID. The body is returned verbatim."""
        self._debug("Getting report: %s", report_id)
        return await self._transport.get_text(f"{REPORTS_PATH}/{quote(report_id, safe='')}")

    async def list_reports(self, limit: int = 50) -> list[ReportMetadata]:
        """List reports for the authenticated user in server order.

        Returns at most ``limit`` entries.
        """
        self._debug("Listing reports")
        data = await self._transport.get(REPORTS_PATH, params={"limit": limit})
        envelope = _parse_response(ReportList, data, REPORTS_PATH)
        return envelope.reports[: max(limit, 0)]

    async def save_report(self, report_id: str, path: str | Path) -> Path:
        """Fetch a report and write its HTML to ``path``.

        Returns:
            The path written.
        """
        html = await self.get_report(report_id)
        target = Path(path)
        target.write_text(html, encoding="utf-8")
        logger.info("Saved report %s to %s (%d characters)", report_id, target, len(html))
        return target

    async def aclose(self) -> None:
        """Release the connection pool."""
        await self._transport.aclose()

    async def __aenter__(self) -> OptimizationClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()
