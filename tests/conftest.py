"""Shared test fixtures for Opt-Tools.

Provides a stubbed optimization service built on httpx.MockTransport and
helpers to build clients against it without touching the network.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from opt_tools.client import OptimizationClient
from opt_tools.models.config import ClientConfig

SERVER_URL = "http://opt-test"
API_KEY = "test-key"

LP_PROBLEM: dict[str, Any] = {
    "variables": [
        {"name": "x", "type": "continuous", "lower_bound": 0},
        {"name": "y", "type": "continuous", "lower_bound": 0},
    ],
    "objective": {"sense": "maximize", "expression": "3*x+2*y"},
    "constraints": [{"expression": "x+y<=10"}],
}

LP_SOLUTION: dict[str, Any] = {
    "status": "OPTIMAL",
    "objective_value": 20,
    "solution": {"x": 0, "y": 10},
}

TSP_SOLUTION: dict[str, Any] = {
    "status": "OPTIMAL",
    "objective_value": 15000,
    "solution": {
        "route_names": ["Warehouse", "Customer A", "Customer B", "Warehouse"],
        "segments": [
            {"from_name": "Warehouse", "to_name": "Customer A", "distance": 5000},
            {"from_name": "Customer A", "to_name": "Customer B", "distance": 4000},
            {"from_name": "Customer B", "to_name": "Warehouse", "distance": 6000},
        ],
    },
    "execution_time_ms": 1530,
    "report_id": "rpt-tsp-1",
}

ANALYSIS: dict[str, Any] = {
    "problem_type": "LP",
    "confidence": "high",
    "variables_detected": ["loaves", "cakes"],
    "constraints_detected": ["flour <= 100", "hours <= 8"],
    "recommendations": ["Use continuous variables"],
}


def run(coro):
    """Drive a coroutine to completion from a synchronous test."""
    return asyncio.run(coro)


class StubService:
    """Records requests and answers them from a route table.

    Routes map ``"METHOD /path"`` to a callable
    ``(request) -> httpx.Response`` so every request gets a fresh response.
    """

    def __init__(self, routes: dict[str, Any] | None = None) -> None:
        self.routes: dict[str, Any] = dict(routes or {})
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(f"{request.method} {request.url.path}")
        if route is None:
            return httpx.Response(404, json={"detail": "Not Found"})
        return route(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)

    def json_body(self, index: int = -1) -> Any:
        return json.loads(self.requests[index].content)


class SleepRecorder:
    """Stand-in for asyncio.sleep that records backoff delays."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


def make_config(**kwargs: Any) -> ClientConfig:
    values: dict[str, Any] = {"server_url": SERVER_URL, "api_key": API_KEY}
    values.update(kwargs)
    return ClientConfig(**values)


def make_client(
    handler: Callable[[httpx.Request], httpx.Response],
    *,
    sleep: SleepRecorder | None = None,
    **config: Any,
) -> OptimizationClient:
    """Create an OptimizationClient wired to a mock transport."""
    return OptimizationClient(
        make_config(**config),
        transport=httpx.MockTransport(handler),
        sleep=sleep or SleepRecorder(),
    )


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


@pytest.fixture
def service() -> StubService:
    """Stub service answering every documented endpoint."""
    return StubService({
        "POST /api/solve/lp": lambda request: httpx.Response(200, json=LP_SOLUTION),
        "POST /api/solve/mip": lambda request: httpx.Response(200, json=LP_SOLUTION),
        "POST /api/solve/tsp": lambda request: httpx.Response(200, json=TSP_SOLUTION),
        "POST /api/analyze": lambda request: httpx.Response(200, json=ANALYSIS),
        "GET /api/reports/rpt-1": lambda request: httpx.Response(
            200, text="<html><body>report</body></html>",
            headers={"Content-Type": "text/html"},
        ),
        "GET /api/reports": lambda request: httpx.Response(
            200,
            json={
                "reports": [
                    {"report_id": "rpt-2", "created_at": "2024-05-02T10:00:00Z",
                     "problem_type": "mip", "status": "OPTIMAL"},
                    {"report_id": "rpt-1", "created_at": "2024-05-01T10:00:00Z",
                     "problem_type": "lp", "status": "OPTIMAL"},
                ],
                "total": 2,
            },
        ),
    })


@pytest.fixture
def client(service: StubService, sleeper: SleepRecorder):
    c = make_client(service, sleep=sleeper)
    yield c
    run(c.aclose())
