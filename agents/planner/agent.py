# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Planner Agent

LangGraph-based agent that runs one vacation planning job.
Each agent definition from the team configuration becomes a PlannerAgent:
an LLM node bound to the agent's tools, looping through a ToolNode until
the model answers without calling a tool.

Node Flow:
    agent → tools → agent → ... → END
"""

import json
import logging
import re
from typing import Any, Optional, Union

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, SystemMessage
from langchain_core.tools import BaseTool
from langgraph.graph import END, MessagesState, StateGraph
from langgraph.graph.state import CompiledStateGraph
from langgraph.prebuilt import ToolNode, tools_condition

from agents.planner.tools import resolve_tools
from agents.supervisors.vacation.errors import AgentError
from agents.supervisors.vacation.graph.models import (
    AgentDefinition,
    StructuredResult,
    TextResult,
)
from common.llm import get_llm
from config.config import AGENT_MAX_TOOL_ROUNDS

logger = logging.getLogger("vacation.planner.agent")

_CODE_FENCE = re.compile(r"^```[a-zA-Z]*\s*\n?(.*?)\n?\s*```$", re.DOTALL)


def parse_agent_output(text: str) -> Union[TextResult, StructuredResult]:
    """
    Turn an agent's final answer into a JobResult.

    JSON objects and arrays (optionally wrapped in a Markdown code fence)
    become StructuredResult; everything else stays TextResult.
    """
    candidate = text.strip()
    fenced = _CODE_FENCE.match(candidate)
    if fenced:
        candidate = fenced.group(1).strip()

    if candidate[:1] in ("{", "["):
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError:
            logger.debug("Agent output looked like JSON but did not parse, keeping text")
        else:
            if isinstance(value, (dict, list)):
                return StructuredResult(value=value)

    return TextResult(text=text)


def _message_text(message: BaseMessage) -> str:
    """Flatten string or content-block message content into text."""
    content = message.content
    if isinstance(content, str):
        return content
    parts = []
    for block in content:
        if isinstance(block, str):
            parts.append(block)
        elif isinstance(block, dict) and block.get("type") == "text":
            parts.append(block.get("text", ""))
    return "".join(parts)


def _provider_details(error: Exception) -> Optional[dict[str, Any]]:
    """Collect the nested provider payload litellm attaches to its exceptions."""
    details = {
        "type": type(error).__name__,
        "status_code": getattr(error, "status_code", None),
        "llm_provider": getattr(error, "llm_provider", None),
        "body": getattr(error, "body", None),
    }
    details = {key: value for key, value in details.items() if value is not None}
    return details if len(details) > 1 else None


class PlannerAgent:
    """
    A single LLM-backed vacation planning agent.

    This agent:
    1. Receives the job input as a serialized JSON string
    2. Reasons with its role and goals as the system prompt
    3. Calls its registered tools (webSearch, dateTime, calculator) as needed
    4. Returns its final answer as a TextResult or StructuredResult

    Example usage:
        planner = PlannerAgent("goalPlanner", definition, tools)
        result = await planner.run(json.dumps(brief))
    """

    def __init__(
        self,
        agent_id: str,
        definition: AgentDefinition,
        tools: Optional[list[BaseTool]] = None,
        llm: Optional[BaseChatModel] = None,
    ):
        self.agent_id = agent_id
        self.definition = definition
        self.tools = tools or []
        # Lazy initialized on first use unless injected
        self.llm = llm
        self._bound_llm = None
        self.graph = self._build_graph()

    @property
    def name(self) -> str:
        return self.definition.name

    def _build_graph(self) -> CompiledStateGraph:
        """Build the agent/tool loop."""
        workflow = StateGraph(MessagesState)

        workflow.add_node("agent", self._agent_node)
        workflow.set_entry_point("agent")

        if self.tools:
            workflow.add_node("tools", ToolNode(self.tools, handle_tool_errors=True))
            workflow.add_conditional_edges(
                "agent",
                tools_condition,
                {"tools": "tools", END: END},
            )
            workflow.add_edge("tools", "agent")
        else:
            workflow.add_edge("agent", END)

        return workflow.compile()

    def system_prompt(self) -> str:
        """Build the system prompt from the agent definition."""
        lines = [f"You are {self.definition.name}."]
        if self.definition.role:
            lines.append(f"Role: {self.definition.role}")
        if self.definition.description:
            lines.append(self.definition.description)
        if self.definition.goals:
            lines.append("Goals:")
            lines.extend(f"- {goal}" for goal in self.definition.goals)
        lines.append(
            "The user message is a JSON document with everything known about the trip so far. "
            "When your answer is structured data, reply with a single JSON object and nothing else."
        )
        return "\n".join(lines)

    async def _agent_node(self, state: MessagesState) -> dict:
        if self._bound_llm is None:
            if self.llm is None:
                self.llm = get_llm(model=self.definition.llm)
            self._bound_llm = self.llm.bind_tools(self.tools) if self.tools else self.llm

        messages = [SystemMessage(content=self.system_prompt())] + state["messages"]
        response = await self._bound_llm.ainvoke(messages)
        return {"messages": [response]}

    async def run(self, payload: str) -> Union[TextResult, StructuredResult]:
        """
        Run the agent on a serialized job input.

        Args:
            payload: JSON string describing the job input

        Returns:
            TextResult or StructuredResult with the agent's final answer

        Raises:
            AgentError: If the provider or a tool fails, or no answer is produced
        """
        if not isinstance(payload, str) or not payload.strip():
            raise AgentError(f"Agent '{self.agent_id}' received an empty input.")

        logger.info(f"Running {self.definition.name} ({self.agent_id})")
        try:
            result = await self.graph.ainvoke(
                {"messages": [HumanMessage(content=payload)]},
                {"recursion_limit": 2 * AGENT_MAX_TOOL_ROUNDS + 2},
            )
        except Exception as e:
            logger.error(f"Agent '{self.agent_id}' failed: {e}")
            raise AgentError(
                f"Agent '{self.agent_id}' failed: {e}",
                details=_provider_details(e),
            ) from e

        for message in reversed(result.get("messages", [])):
            if isinstance(message, AIMessage):
                text = _message_text(message)
                if text.strip():
                    return parse_agent_output(text)

        raise AgentError(f"Agent '{self.agent_id}' returned no content.")


def create_agents(
    definitions: dict[str, AgentDefinition],
    registry: Optional[dict[str, BaseTool]] = None,
    llm: Optional[BaseChatModel] = None,
) -> dict[str, PlannerAgent]:
    """
    Create one PlannerAgent per agent definition.

    Args:
        definitions: Agent id to definition, as loaded from the team config
        registry: Tool registry to resolve tool names against (default: TOOL_REGISTRY)
        llm: Optional chat model shared by every agent

    Raises:
        ConfigurationError: If a definition names an unregistered tool
    """
    agents = {}
    for agent_id, definition in definitions.items():
        tools = resolve_tools(definition.tools, registry)
        agents[agent_id] = PlannerAgent(agent_id, definition, tools=tools, llm=llm)
        logger.info(f"Created agent {agent_id} ({definition.name}) with tools: {definition.tools or 'none'}")
    return agents
