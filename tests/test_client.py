"""Tests for OptimizationClient against a stubbed service.

Tests cover:
- Solve operations: paths, default filling, verbatim payloads, no field loss
- Analysis, report fetch/list/save
- Error propagation and response-shape errors
"""

from __future__ import annotations

import httpx
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from opt_tools import (
    LpProblem,
    Objective,
    OptimizationClient,
    ReportMetadata,
    ResponseError,
    SolveResponse,
    TransportError,
    Variable,
)
from tests.conftest import (
    ANALYSIS,
    LP_PROBLEM,
    LP_SOLUTION,
    StubService,
    make_client,
    run,
)


# ===========================================================================
# Solve operations
# ===========================================================================

class TestSolve:

    def test_lp_scenario_returns_payload_without_field_loss(self, client, service):
        result = run(client.solve_lp(LP_PROBLEM))

        assert isinstance(result, SolveResponse)
        assert result.model_dump(exclude_none=True) == LP_SOLUTION
        assert result.status == "OPTIMAL"
        assert result.objective_value == 20
        assert result.solution == {"x": 0, "y": 10}
        assert service.requests[-1].url.path == "/api/solve/lp"

    def test_lp_request_body_is_problem_with_defaults(self, client, service):
        run(client.solve_lp(LP_PROBLEM))
        body = service.json_body()

        assert body["variables"] == LP_PROBLEM["variables"]
        assert body["objective"] == {"sense": "maximize", "expression": "3*x+2*y"}
        assert body["constraints"] == [{"expression": "x+y<=10"}]
        assert body["generate_report"] is True
        assert "timeout" not in body

    def test_missing_constraints_default_to_empty_list(self, client, service):
        problem = {k: v for k, v in LP_PROBLEM.items() if k != "constraints"}
        run(client.solve_lp(problem))
        assert service.json_body()["constraints"] == []

    def test_explicit_generate_report_false_is_sent(self, client, service):
        run(client.solve_lp({**LP_PROBLEM, "generate_report": False, "timeout": 30}))
        body = service.json_body()
        assert body["generate_report"] is False
        assert body["timeout"] == 30

    def test_accepts_model_instances(self, client, service):
        problem = LpProblem(
            variables=[Variable(name="x", type="continuous")],
            objective=Objective(sense="minimize", expression="x"),
        )
        run(client.solve_lp(problem))
        assert service.json_body()["variables"] == [{"name": "x", "type": "continuous"}]

    def test_integer_bounds_sent_verbatim(self, client, service):
        run(client.solve_lp(LP_PROBLEM))
        sent = service.json_body()["variables"][0]
        assert sent["lower_bound"] == 0
        assert type(sent["lower_bound"]) is int

    def test_unknown_fields_pass_through(self, client, service):
        run(client.solve_lp({**LP_PROBLEM, "solver_hint": "simplex"}))
        assert service.json_body()["solver_hint"] == "simplex"

    def test_objective_with_type_instead_of_sense_is_rejected(self, client, service):
        problem = {**LP_PROBLEM, "objective": {"type": "maximize", "expression": "x"}}
        with pytest.raises(ValidationError, match="sense"):
            run(client.solve_lp(problem))
        assert service.requests == []

    def test_no_local_bound_validation(self, client, service):
        problem = {
            **LP_PROBLEM,
            "variables": [{"name": "x", "type": "continuous", "lower_bound": 5, "upper_bound": 1}],
        }
        run(client.solve_lp(problem))
        assert len(service.requests) == 1

    def test_mip_uses_mip_path(self, client, service):
        problem = {
            **LP_PROBLEM,
            "variables": [{"name": "open_a", "type": "binary"}, {"name": "n", "type": "integer"}],
        }
        run(client.solve_mip(problem))
        assert service.requests[-1].url.path == "/api/solve/mip"
        assert service.json_body()["variables"][0]["type"] == "binary"

    def test_tsp_keeps_route_solution(self, client, service):
        problem = {
            "locations": [
                {"name": "Warehouse", "latitude": 37.77, "longitude": -122.42},
                {"name": "Customer A", "latitude": 37.80, "longitude": -122.27},
            ],
            "start_location": "Warehouse",
        }
        result = run(client.solve_tsp(problem))

        assert service.requests[-1].url.path == "/api/solve/tsp"
        assert service.json_body()["start_location"] == "Warehouse"
        assert service.json_body()["generate_report"] is True
        assert result.solution["route_names"][0] == "Warehouse"
        assert result.report_id == "rpt-tsp-1"

    def test_extra_response_fields_preserved(self):
        payload = {**LP_SOLUTION, "gap": 0.0, "iterations": 7}
        client = make_client(lambda request: httpx.Response(200, json=payload))
        result = run(client.solve_lp(LP_PROBLEM))
        assert result.model_dump(exclude_none=True) == payload
        run(client.aclose())

    def test_response_without_status_raises_response_error(self):
        client = make_client(lambda request: httpx.Response(200, json={"solution": {}}))
        with pytest.raises(ResponseError, match="/api/solve/lp"):
            run(client.solve_lp(LP_PROBLEM))
        run(client.aclose())

    def test_transport_error_propagates_unchanged(self):
        client = make_client(
            lambda request: httpx.Response(400, json={"detail": "invalid constraint syntax"})
        )
        with pytest.raises(TransportError) as exc_info:
            run(client.solve_lp(LP_PROBLEM))
        assert exc_info.value.status_code == 400
        assert "invalid constraint syntax" in exc_info.value.body
        run(client.aclose())


# ===========================================================================
# Analysis and reports
# ===========================================================================

class TestAnalyze:

    def test_analyze_sends_description(self, client, service):
        result = run(client.analyze_problem("I run a bakery"))

        assert service.requests[-1].url.path == "/api/analyze"
        assert service.json_body() == {"description": "I run a bakery"}
        assert result.problem_type == "LP"
        assert result.variables_detected == ANALYSIS["variables_detected"]


class TestReports:

    def test_get_report_returns_raw_html(self, client, service):
        html = run(client.get_report("rpt-1"))
        assert html == "<html><body>report</body></html>"
        assert service.requests[-1].method == "GET"
        assert service.requests[-1].url.path == "/api/reports/rpt-1"

    def test_get_report_missing_raises(self, client):
        with pytest.raises(TransportError) as exc_info:
            run(client.get_report("nope"))
        assert exc_info.value.status_code == 404

    def test_list_reports_unwraps_envelope(self, client, service):
        reports = run(client.list_reports(10))

        assert [r.report_id for r in reports] == ["rpt-2", "rpt-1"]
        assert all(isinstance(r, ReportMetadata) for r in reports)
        assert service.requests[-1].url.params["limit"] == "10"

    def test_list_reports_default_limit(self, client, service):
        run(client.list_reports())
        assert service.requests[-1].url.params["limit"] == "50"

    def test_list_reports_truncates_to_limit(self, client):
        reports = run(client.list_reports(1))
        assert [r.report_id for r in reports] == ["rpt-2"]

    def test_save_report_writes_file(self, client, tmp_path):
        target = tmp_path / "report.html"
        written = run(client.save_report("rpt-1", target))
        assert written == target
        assert target.read_text(encoding="utf-8") == "<html><body>report</body></html>"


_report = st.builds(
    dict,
    report_id=st.text(min_size=1, max_size=12),
    created_at=st.just("2024-01-01T00:00:00Z"),
    problem_type=st.sampled_from(["lp", "mip", "tsp"]),
    status=st.sampled_from(["OPTIMAL", "INFEASIBLE"]),
)


class TestListReportsProperties:

    @settings(max_examples=50, deadline=None)
    @given(reports=st.lists(_report, max_size=20), limit=st.integers(min_value=1, max_value=25))
    def test_length_bounded_and_order_preserved(self, reports, limit):
        service = StubService({
            "GET /api/reports": lambda request: httpx.Response(
                200, json={"reports": reports, "total": len(reports)}
            ),
        })
        client = make_client(service)
        result = run(client.list_reports(limit))
        run(client.aclose())

        assert len(result) <= limit
        assert [r.report_id for r in result] == [r["report_id"] for r in reports][:limit]


# ===========================================================================
# Lifecycle
# ===========================================================================

class TestLifecycle:

    def test_async_context_manager(self, service):
        async def scenario():
            async with make_client(service) as client:
                assert isinstance(client, OptimizationClient)
                return await client.solve_lp(LP_PROBLEM)

        assert run(scenario()).status == "OPTIMAL"

    def test_debug_config_logs_operations(self, service, caplog):
        import logging

        client = make_client(service, debug=True)
        with caplog.at_level(logging.DEBUG, logger="opt_tools.client"):
            run(client.analyze_problem("x"))
        assert any(
            r.name == "opt_tools.client" and "Analyzing problem" in r.getMessage()
            for r in caplog.records
        )
        run(client.aclose())
