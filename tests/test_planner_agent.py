import pytest
from langchain_core.language_models.fake_chat_models import GenericFakeChatModel
from langchain_core.messages import AIMessage

from agents.planner.agent import PlannerAgent, create_agents, parse_agent_output
from agents.planner.tools import calculator
from agents.supervisors.vacation.config_loader import load_vacation_config
from agents.supervisors.vacation.errors import AgentError, ConfigurationError
from agents.supervisors.vacation.graph.models import AgentDefinition, StructuredResult, TextResult
from config.config import VACATION_CONFIG_PATH


class ToolCallingFakeModel(GenericFakeChatModel):
    def bind_tools(self, tools, **kwargs):
        return self


class ProviderError(Exception):
    status_code = 503
    llm_provider = "gemini"


class BrokenModel(GenericFakeChatModel):
    def _generate(self, messages, stop=None, run_manager=None, **kwargs):
        raise ProviderError("service unavailable")


DEFINITION = AgentDefinition(
    name="Budgeting Agent",
    description="Builds a budget.",
    role="Travel budget analyst",
    goals=["Total the costs", "Compare against the budget"],
    tools=["calculator"],
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ('{"destination": "Tampa"}', StructuredResult(value={"destination": "Tampa"})),
        ('```json\n{"days": [1, 2]}\n```', StructuredResult(value={"days": [1, 2]})),
        ("[1, 2, 3]", StructuredResult(value=[1, 2, 3])),
        ("Visit the Dali Museum.", TextResult(text="Visit the Dali Museum.")),
        ("{not json", TextResult(text="{not json")),
        ('"just a string"', TextResult(text='"just a string"')),
    ],
)
def test_parse_agent_output(text, expected):
    assert parse_agent_output(text) == expected


def test_system_prompt_includes_role_and_goals():
    prompt = PlannerAgent("budgetingAgent", DEFINITION, llm=GenericFakeChatModel(messages=iter([]))).system_prompt()

    assert prompt.startswith("You are Budgeting Agent.")
    assert "Role: Travel budget analyst" in prompt
    assert "- Total the costs" in prompt


async def test_run_returns_structured_result():
    llm = GenericFakeChatModel(messages=iter(['{"total": 2100, "currency": "USD"}']))
    planner = PlannerAgent("budgetingAgent", DEFINITION, llm=llm)

    result = await planner.run('{"budget": 2400}')

    assert result == StructuredResult(value={"total": 2100, "currency": "USD"})


async def test_run_flattens_content_blocks():
    llm = GenericFakeChatModel(messages=iter([AIMessage(content=[{"type": "text", "text": "Relax on the beach."}])]))
    planner = PlannerAgent("activityPlanner", DEFINITION, llm=llm)

    assert await planner.run("{}") == TextResult(text="Relax on the beach.")


async def test_run_loops_through_tool_calls():
    llm = ToolCallingFakeModel(messages=iter([
        AIMessage(
            content="",
            tool_calls=[{"name": "calculator", "args": {"expression": "2400 - 2100"}, "id": "call_1"}],
        ),
        '{"remaining": 300}',
    ]))
    planner = PlannerAgent("budgetingAgent", DEFINITION, tools=[calculator], llm=llm)

    result = await planner.run('{"budget": 2400}')

    assert result == StructuredResult(value={"remaining": 300})


async def test_provider_failure_becomes_agent_error_with_details():
    planner = PlannerAgent("goalPlanner", DEFINITION, llm=BrokenModel(messages=iter([])))

    with pytest.raises(AgentError) as exc_info:
        await planner.run("{}")

    assert "service unavailable" in str(exc_info.value)
    assert exc_info.value.details == {
        "type": "ProviderError",
        "status_code": 503,
        "llm_provider": "gemini",
    }


async def test_empty_answer_is_an_agent_error():
    planner = PlannerAgent("goalPlanner", DEFINITION, llm=GenericFakeChatModel(messages=iter([AIMessage(content="")])))

    with pytest.raises(AgentError, match="no content"):
        await planner.run("{}")


async def test_empty_input_is_an_agent_error():
    planner = PlannerAgent("goalPlanner", DEFINITION, llm=GenericFakeChatModel(messages=iter([])))

    with pytest.raises(AgentError):
        await planner.run("  ")


def test_create_agents_for_bundled_config():
    config = load_vacation_config(VACATION_CONFIG_PATH)
    agents = create_agents(config.agents, llm=GenericFakeChatModel(messages=iter([])))

    assert set(agents) == set(config.agents)
    assert [tool.name for tool in agents["accommodationAgent"].tools] == ["webSearch", "calculator"]
    assert agents["reviewAndRefineAgent"].tools == []


def test_create_agents_rejects_unknown_tools():
    definitions = {"goalPlanner": AgentDefinition(name="Goal Planner", tools=["flightBooker"])}

    with pytest.raises(ConfigurationError, match="flightBooker"):
        create_agents(definitions)
