import json

import click
import pytest
from click.testing import CliRunner

from conftest import StubAgent

from agents.supervisors.vacation import main as main_module
from agents.supervisors.vacation.errors import ConfigurationError, ReportError
from agents.supervisors.vacation.main import check_credentials, main
from agents.supervisors.vacation.report import sink
from agents.supervisors.vacation.report.sink import open_report, save_report


def stub_agents(definitions):
    agents = {agent_id: StubAgent(result={"agent": agent_id}) for agent_id in definitions}
    # One job's agent is missing from the run, one fails
    del agents["diningAgent"]
    agents["budgetingAgent"] = StubAgent(error="quota exceeded")
    return agents


@pytest.fixture
def runner():
    return CliRunner()


def test_missing_credentials_abort_before_any_report(runner, tmp_path):
    output = tmp_path / "report.html"

    result = runner.invoke(main, ["--output", str(output), "--no-open"])

    assert result.exit_code == 1
    assert not output.exists()
    with pytest.raises(ConfigurationError):
        check_credentials()


def test_list_shows_teams_and_briefs(runner):
    result = runner.invoke(main, ["--list"])

    assert result.exit_code == 0
    assert "Vacation Planner Agency loaded successfully." in result.output
    assert "- team: [ Vacation Team ]" in result.output
    assert "- brief: [ st-pete-clearwater-trip-001 ]" in result.output


def test_unknown_brief_is_fatal(runner, tmp_path, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(main_module, "create_agents", stub_agents)
    output = tmp_path / "report.html"

    result = runner.invoke(main, ["no-such-trip", "--output", str(output), "--no-open"])

    assert result.exit_code == 1
    assert not output.exists()


def test_invalid_job_name_is_a_logged_configuration_error(runner, tmp_path, monkeypatch, caplog):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(main_module, "create_agents", lambda definitions: {"goalPlanner": StubAgent(result="goals")})
    config_path = tmp_path / "team.json"
    config_path.write_text(json.dumps({
        "name": "Vacation Planner Agency",
        "agents": {"goalPlanner": {"name": "Goal Planner"}},
        "team": {"vacationTeam": {
            "name": "Vacation Team",
            "jobs": {"plan:Goals": {"agent": "goalPlanner"}},
            "workflow": ["plan:Goals"],
        }},
        "brief": {"trip": {"destination": "Tampa"}},
    }), encoding="utf-8")
    output = tmp_path / "report.html"

    result = runner.invoke(main, ["trip", "--config", str(config_path), "--output", str(output), "--no-open"])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Error during workflow execution" in caplog.text
    assert "plan:Goals" in caplog.text
    assert not output.exists()


def test_full_run_writes_report(runner, tmp_path, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(main_module, "create_agents", stub_agents)
    output = tmp_path / "out" / "vacation-results.html"

    result = runner.invoke(main, ["--output", str(output), "--no-open"])

    assert result.exit_code == 0, result.output
    assert "Results object contains keys: [ planGoals, suggestDestinations," in result.output
    assert "plan Goals (length:" in result.output
    assert '"error": "Agent not found"' in result.output
    assert '"error": "quota exceeded"' in result.output
    assert "Vacation planning workflow completed successfully!" in result.output

    page = output.read_text(encoding="utf-8")
    assert page.index("<h2>plan Goals") < page.index("<h2>review Plan")
    assert page.count("<h2>") == 10


def test_report_delivery_failure_keeps_success(runner, tmp_path, monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(main_module, "create_agents", stub_agents)

    def failing_save(content, path):
        raise ReportError("disk full")

    monkeypatch.setattr(main_module, "save_report", failing_save)

    result = runner.invoke(main, ["--output", str(tmp_path / "report.html"), "--no-open"])

    assert result.exit_code == 0
    assert "Vacation planning workflow completed successfully!" in result.output


def test_save_report_overwrites(tmp_path):
    path = tmp_path / "report.html"
    path.write_text("old", encoding="utf-8")

    saved = save_report("<html>new</html>", path)

    assert saved == path.resolve()
    assert path.read_text(encoding="utf-8") == "<html>new</html>"


def test_save_report_failure_raises_report_error(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("x", encoding="utf-8")

    with pytest.raises(ReportError):
        save_report("<html></html>", blocker / "report.html")


def test_open_report_uses_platform_viewer(tmp_path, monkeypatch):
    launched = []
    monkeypatch.setattr(click, "launch", lambda url: launched.append(url) or 0)

    open_report(tmp_path / "report.html")

    assert launched == [str(tmp_path / "report.html")]


def test_open_report_failure_raises_report_error(tmp_path, monkeypatch):
    monkeypatch.setattr(sink.click, "launch", lambda url: 1)

    with pytest.raises(ReportError):
        open_report(tmp_path / "report.html")
