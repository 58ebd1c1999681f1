import json

import pytest

from agents.supervisors.vacation.config_loader import get_brief, get_team, load_vacation_config
from agents.supervisors.vacation.errors import ConfigNotFoundError, ConfigurationError
from config.config import DEFAULT_BRIEF_ID, DEFAULT_TEAM_ID, VACATION_CONFIG_PATH

EXPECTED_WORKFLOW = [
    "planGoals",
    "suggestDestinations",
    "researchDestinations",
    "findAccommodations",
    "findTransportation",
    "planActivities",
    "planDining",
    "createBudget",
    "createItinerary",
    "reviewPlan",
]


@pytest.fixture
def bundled_config():
    return load_vacation_config(VACATION_CONFIG_PATH)


def test_bundled_config_loads(bundled_config):
    team = get_team(bundled_config, DEFAULT_TEAM_ID)

    assert team.workflow == EXPECTED_WORKFLOW
    assert team.mode == "sequential"
    assert set(team.workflow) == set(team.jobs)
    assert {job.agent for job in team.jobs.values()} <= set(bundled_config.agents)
    assert get_brief(bundled_config, DEFAULT_BRIEF_ID)["departureLocation"] == "Philadelphia, PA"


def test_bundled_jobs_only_reference_earlier_jobs(bundled_config):
    team = get_team(bundled_config, DEFAULT_TEAM_ID)
    seen = set()
    for job_name in team.workflow:
        for reference in team.jobs[job_name].inputs.values():
            assert reference == "brief" or reference in seen
        seen.add(job_name)


def test_missing_file_raises_not_found(tmp_path):
    with pytest.raises(ConfigNotFoundError):
        load_vacation_config(tmp_path / "missing.json")


def test_unparsable_file_raises_not_found(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{ not json", encoding="utf-8")
    with pytest.raises(ConfigNotFoundError):
        load_vacation_config(path)


def test_invalid_schema_raises_not_found_with_details(tmp_path):
    path = tmp_path / "invalid.json"
    path.write_text(json.dumps({"agents": {}, "team": {"t": {"workflow": "planGoals"}}}), encoding="utf-8")

    with pytest.raises(ConfigNotFoundError) as exc_info:
        load_vacation_config(path)
    assert exc_info.value.details


def test_unknown_identifiers_raise_configuration_error(bundled_config):
    with pytest.raises(ConfigurationError, match="no-such-trip"):
        get_brief(bundled_config, "no-such-trip")
    with pytest.raises(ConfigurationError, match="beachTeam"):
        get_team(bundled_config, "beachTeam")
