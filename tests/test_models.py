"""Tests for opt_tools.models: problems, responses and ClientConfig."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from opt_tools.exceptions import ConfigError
from opt_tools.models import (
    AnalysisResponse,
    ClientConfig,
    Constraint,
    DEFAULT_SERVER_URL,
    LpProblem,
    ReportMetadata,
    SolveResponse,
    TspProblem,
    Variable,
)


class TestProblemModels:

    def test_variable_requires_name_and_type(self):
        with pytest.raises(ValidationError):
            Variable(name="x")
        with pytest.raises(ValidationError):
            Variable(name="x", type="real")

    def test_constraint_relation_kind_optional(self):
        assert Constraint(expression="x <= 1").type is None
        assert Constraint(expression="x == 1", type="equality").type == "equality"

    def test_payload_omits_unset_optionals(self):
        problem = LpProblem.model_validate({
            "variables": [{"name": "x", "type": "continuous"}],
            "objective": {"sense": "maximize", "expression": "x"},
        })
        assert problem.to_payload() == {
            "variables": [{"name": "x", "type": "continuous"}],
            "objective": {"sense": "maximize", "expression": "x"},
            "constraints": [],
            "generate_report": True,
        }

    def test_integer_bounds_keep_their_type(self):
        payload = Variable(name="n", type="integer", lower_bound=0, upper_bound=100).to_payload()
        assert payload == {"name": "n", "type": "integer", "lower_bound": 0, "upper_bound": 100}
        assert type(payload["lower_bound"]) is int
        assert type(payload["upper_bound"]) is int

    def test_fractional_bounds_unchanged(self):
        assert Variable(name="x", type="continuous", upper_bound=2.5).upper_bound == 2.5

    def test_null_generate_report_means_default(self):
        lp = LpProblem.model_validate({
            "variables": [{"name": "x", "type": "continuous"}],
            "objective": {"sense": "maximize", "expression": "x"},
            "generate_report": None,
        })
        tsp = TspProblem.model_validate({
            "locations": [{"name": "A", "latitude": 1.0, "longitude": 2.0}],
            "generate_report": None,
        })
        assert lp.generate_report is True
        assert tsp.generate_report is True

    def test_explicit_false_disables_report(self):
        tsp = TspProblem.model_validate({"locations": [], "generate_report": False})
        assert tsp.generate_report is False

    def test_tsp_requires_coordinates(self):
        with pytest.raises(ValidationError):
            TspProblem.model_validate({"locations": [{"name": "A"}]})


class TestResponseModels:

    def test_solve_response_only_status_required(self):
        r = SolveResponse.model_validate({"status": "INFEASIBLE"})
        assert r.objective_value is None
        assert r.solution is None

    def test_solve_response_is_immutable(self):
        r = SolveResponse(status="OPTIMAL")
        with pytest.raises(ValidationError):
            r.status = "INFEASIBLE"

    def test_numeric_identifiers_kept_as_strings(self):
        r = SolveResponse.model_validate({"status": "OPTIMAL", "report_id": 42})
        assert r.report_id == "42"

    def test_numeric_confidence_kept_as_string(self):
        r = AnalysisResponse.model_validate({"problem_type": "LP", "confidence": 0.85})
        assert r.confidence == "0.85"

    def test_numeric_report_metadata(self):
        r = ReportMetadata.model_validate({
            "report_id": 7, "created_at": 1714557600, "problem_type": "lp", "status": "OPTIMAL",
        })
        assert r.report_id == "7"
        assert r.created_at == "1714557600"

    def test_analysis_lists_default_empty(self):
        r = AnalysisResponse(problem_type="TSP", confidence="low")
        assert r.variables_detected == []
        assert r.recommendations == []


class TestClientConfig:

    def test_defaults(self):
        config = ClientConfig(server_url="http://api/", api_key="k")
        assert config.server_url == "http://api"
        assert config.timeout_ms == 30000
        assert config.retries == 3
        assert config.debug is False
        assert config.timeout_seconds == 30.0

    def test_rejects_empty_api_key(self):
        with pytest.raises(ValidationError):
            ClientConfig(server_url="http://api", api_key="")

    def test_rejects_negative_retries(self):
        with pytest.raises(ValidationError):
            ClientConfig(server_url="http://api", api_key="k", retries=-1)

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OPT_TOOLS_SERVER_URL", "http://env-api")
        monkeypatch.setenv("OPT_TOOLS_API_KEY", "env-key")
        monkeypatch.setenv("OPT_TOOLS_TIMEOUT_MS", "5000")
        monkeypatch.setenv("OPT_TOOLS_RETRIES", "1")
        monkeypatch.setenv("OPT_TOOLS_DEBUG", "true")
        config = ClientConfig.from_env()
        assert config.server_url == "http://env-api"
        assert config.api_key == "env-key"
        assert config.timeout_ms == 5000
        assert config.retries == 1
        assert config.debug is True

    def test_from_env_default_server_url(self, monkeypatch):
        monkeypatch.delenv("OPT_TOOLS_SERVER_URL", raising=False)
        monkeypatch.setenv("OPT_TOOLS_API_KEY", "env-key")
        assert ClientConfig.from_env().server_url == DEFAULT_SERVER_URL

    def test_overrides_beat_env_and_env_beats_defaults(self, monkeypatch):
        monkeypatch.setenv("OPT_TOOLS_API_KEY", "env-key")
        monkeypatch.setenv("OPT_TOOLS_RETRIES", "5")
        monkeypatch.delenv("OPT_TOOLS_TIMEOUT_MS", raising=False)
        config = ClientConfig.from_env(
            defaults={"timeout_ms": 120000, "retries": 2}, api_key="arg-key", debug=None
        )
        assert config.api_key == "arg-key"
        assert config.retries == 5
        assert config.timeout_ms == 120000

    def test_missing_api_key_raises(self, monkeypatch):
        monkeypatch.delenv("OPT_TOOLS_API_KEY", raising=False)
        with pytest.raises(ConfigError, match="No API key"):
            ClientConfig.from_env()

    def test_invalid_env_value_raises_config_error(self, monkeypatch):
        monkeypatch.setenv("OPT_TOOLS_API_KEY", "k")
        monkeypatch.setenv("OPT_TOOLS_RETRIES", "many")
        with pytest.raises(ConfigError, match="Invalid client configuration"):
            ClientConfig.from_env()
