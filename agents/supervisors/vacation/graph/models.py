# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Vacation Supervisor Models

Pydantic models for the vacation team configuration and for job outcomes.

Configuration side:
- AgentDefinition, JobDefinition, TeamDefinition, VacationConfig

Result side:
- JobResult: TextResult | StructuredResult (what an agent produced)
- JobOutcome: Ok | Failed (whether the job produced anything at all)
- ResultsTable: ordered mapping of job name to JobOutcome
"""

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

# Input reference that resolves to the brief rather than to a prior job
BRIEF_REFERENCE = "brief"


class AgentDefinition(BaseModel):
    """
    An LLM-backed agent as declared in the team configuration.

    Attributes:
        name: Display name of the agent
        description: What the agent is for
        role: Persona used in the system prompt
        goals: Goals listed in the system prompt
        tools: Registered tool names the agent may call
        llm: Optional litellm model id overriding LLM_MODEL
    """
    model_config = ConfigDict(extra="allow")

    name: str
    description: str = ""
    role: str = ""
    goals: list[str] = Field(default_factory=list)
    tools: list[str] = Field(default_factory=list)
    llm: Optional[str] = None


class JobDefinition(BaseModel):
    """
    One unit of work bound to an agent.

    `inputs` maps the key the agent will see to either a job name or "brief".
    A job without inputs receives the brief itself.
    """
    agent: str
    description: str = ""
    inputs: dict[str, str] = Field(default_factory=dict)


class TeamDefinition(BaseModel):
    """A named group of jobs with an explicit execution order."""
    name: str
    description: str = ""
    jobs: dict[str, JobDefinition] = Field(default_factory=dict)
    workflow: list[str] = Field(default_factory=list)
    mode: Literal["sequential", "parallel"] = "sequential"


class VacationConfig(BaseModel):
    """Top-level vacation agency configuration."""
    name: str
    description: str = ""
    agents: dict[str, AgentDefinition] = Field(default_factory=dict)
    team: dict[str, TeamDefinition] = Field(default_factory=dict)
    brief: dict[str, dict[str, Any]] = Field(default_factory=dict)


class TextResult(BaseModel):
    """Plain text produced by an agent."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["text"] = "text"
    text: str

    @property
    def value(self) -> str:
        return self.text


class StructuredResult(BaseModel):
    """Nested mapping/sequence produced by an agent."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["structured"] = "structured"
    value: Any


JobResult = Annotated[Union[TextResult, StructuredResult], Field(discriminator="kind")]


class Ok(BaseModel):
    """The job ran and produced a result."""
    model_config = ConfigDict(frozen=True)

    status: Literal["ok"] = "ok"
    result: JobResult

    def payload(self) -> Any:
        return self.result.value


class Failed(BaseModel):
    """The job could not run or its agent failed."""
    model_config = ConfigDict(frozen=True)

    status: Literal["failed"] = "failed"
    error: str

    def payload(self) -> dict:
        # Sentinel handed to downstream jobs and rendered in the report
        return {"error": self.error}


JobOutcome = Annotated[Union[Ok, Failed], Field(discriminator="status")]

ResultsTable = dict[str, Union[Ok, Failed]]


def as_job_result(value: Any) -> Union[TextResult, StructuredResult]:
    """Wrap a raw value in the matching JobResult variant."""
    if isinstance(value, (TextResult, StructuredResult)):
        return value
    if isinstance(value, str):
        return TextResult(text=value)
    return StructuredResult(value=value)
