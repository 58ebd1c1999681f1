import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from agents.supervisors.vacation.errors import AgentError
from agents.supervisors.vacation.graph.models import JobDefinition, TeamDefinition


class StubAgent:
    """Agent double that records its inputs and returns canned results."""

    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    async def run(self, payload):
        self.calls.append(payload)
        if self.error:
            raise AgentError(self.error)
        return self.result


def make_team(jobs, workflow=None, mode="sequential"):
    return TeamDefinition(
        name="Test Team",
        jobs={name: JobDefinition(**spec) for name, spec in jobs.items()},
        workflow=workflow or list(jobs),
        mode=mode,
    )


@pytest.fixture
def brief():
    return {"destinationIdeas": ["Tampa"], "totalBudget": "2400"}


@pytest.fixture(autouse=True)
def clear_provider_keys(monkeypatch):
    for name in (
        "GEMINI_API_KEY",
        "ANTHROPIC_API_KEY",
        "OPENAI_API_KEY",
        "GROQ_API_KEY",
        "OPENROUTER_API_KEY",
        "MISTRAL_API_KEY",
    ):
        monkeypatch.delenv(name, raising=False)
