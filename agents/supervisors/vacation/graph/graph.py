# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Vacation Supervisor Graph

LangGraph implementation of the vacation team workflow.
Every job in the team's workflow becomes a node that runs the job's agent
on the job input and records a JobOutcome in the shared results table.

Sequential mode (default):
    START → planGoals → suggestDestinations → ... → reviewPlan → END

Parallel mode:
    each job waits only for the jobs its inputs reference, so jobs such as
    findAccommodations / findTransportation / planActivities / planDining
    run side by side once researchDestinations has finished.
"""

import json
import logging
from typing import Annotated, Any, TypedDict

from langgraph.graph import END, START, StateGraph
from langgraph.graph.state import CompiledStateGraph

from agents.planner.agent import PlannerAgent
from agents.supervisors.vacation.errors import AgentError, ConfigurationError
from agents.supervisors.vacation.graph.models import (
    BRIEF_REFERENCE,
    Failed,
    JobDefinition,
    Ok,
    ResultsTable,
    TeamDefinition,
    as_job_result,
)

logger = logging.getLogger("vacation.supervisor.graph")

AGENT_NOT_FOUND = "Agent not found"


def merge_results(left: dict, right: dict) -> dict:
    """Reducer that records outcomes in completion order."""
    merged = dict(left or {})
    merged.update(right or {})
    return merged


class WorkflowState(TypedDict):
    """
    State object passed between job nodes.

    - brief: Initial traveler payload
    - results: Outcomes recorded so far, keyed by job name
    """
    brief: dict
    results: Annotated[dict, merge_results]


_STATE_KEYS = set(WorkflowState.__annotations__)
# Characters LangGraph keeps for namespacing node names
_NODE_NAME_RESERVED = (":", "|")


def build_job_input(job: JobDefinition, brief: dict, results: ResultsTable) -> Any:
    """
    Assemble the input for a job from the brief and earlier outcomes.

    A job without declared inputs receives the brief itself. Otherwise each
    input key resolves to the brief, to the referenced job's result value,
    or to its {"error": ...} sentinel. References to jobs that have not
    recorded anything are left out.
    """
    if not job.inputs:
        return brief

    payload = {}
    for key, reference in job.inputs.items():
        if reference == BRIEF_REFERENCE:
            payload[key] = brief
        elif reference in results:
            payload[key] = results[reference].payload()
    return payload


class VacationGraph:
    """
    Runs a vacation team's jobs and returns the results table.

    Example usage:
        runner = VacationGraph(config.team["vacationTeam"], create_agents(config.agents))
        results = await runner.execute(config.brief["st-pete-clearwater-trip-001"])
    """

    def __init__(self, team: TeamDefinition, agents: dict[str, PlannerAgent]):
        self.team = team
        self.agents = agents
        self._validate_workflow()
        try:
            self.graph = self.build_graph()
        except ValueError as e:
            raise ConfigurationError(f"Team '{self.team.name}' workflow cannot be built: {e}") from e

    def _validate_workflow(self) -> None:
        workflow = self.team.workflow
        if not workflow:
            raise ConfigurationError(f"Team '{self.team.name}' has an empty workflow.")

        unknown = [name for name in workflow if name not in self.team.jobs]
        if unknown:
            raise ConfigurationError(
                f"Team '{self.team.name}' workflow references undefined job(s): {', '.join(unknown)}"
            )

        if len(set(workflow)) != len(workflow):
            raise ConfigurationError(f"Team '{self.team.name}' workflow lists a job more than once.")

        reserved = _STATE_KEYS.intersection(workflow)
        if reserved:
            raise ConfigurationError(f"Job name(s) reserved by the workflow state: {', '.join(sorted(reserved))}")

        invalid = [name for name in workflow if name in (START, END) or any(c in name for c in _NODE_NAME_RESERVED)]
        if invalid:
            raise ConfigurationError(f"Job name(s) not allowed as graph nodes: {', '.join(invalid)}")

    def dependencies(self, job_name: str) -> list[str]:
        """Jobs inside the workflow that the given job's inputs reference."""
        in_workflow = set(self.team.workflow)
        deps = []
        for reference in self.team.jobs[job_name].inputs.values():
            if reference in in_workflow and reference != job_name and reference not in deps:
                deps.append(reference)
        return deps

    def build_graph(self) -> CompiledStateGraph:
        """
        Construct and compile the job graph for the team's execution mode.

        Returns:
            CompiledStateGraph: Ready-to-execute LangGraph instance
        """
        workflow = StateGraph(WorkflowState)

        for job_name in self.team.workflow:
            workflow.add_node(job_name, self._job_node(job_name))

        if self.team.mode == "parallel":
            self._wire_parallel(workflow)
        else:
            self._wire_sequential(workflow)

        return workflow.compile()

    def _wire_sequential(self, workflow: StateGraph) -> None:
        jobs = self.team.workflow
        workflow.add_edge(START, jobs[0])
        for current, following in zip(jobs, jobs[1:]):
            workflow.add_edge(current, following)
        workflow.add_edge(jobs[-1], END)

    def _wire_parallel(self, workflow: StateGraph) -> None:
        deps = {job_name: self.dependencies(job_name) for job_name in self.team.workflow}
        self._check_acyclic(deps)

        has_dependents = {dep for job_deps in deps.values() for dep in job_deps}
        for job_name, job_deps in deps.items():
            if not job_deps:
                workflow.add_edge(START, job_name)
            elif len(job_deps) == 1:
                workflow.add_edge(job_deps[0], job_name)
            else:
                # Waits until every dependency has finished
                workflow.add_edge(job_deps, job_name)
            if job_name not in has_dependents:
                workflow.add_edge(job_name, END)

    def _check_acyclic(self, deps: dict[str, list[str]]) -> None:
        visiting, done = set(), set()

        def visit(job_name: str) -> None:
            if job_name in done:
                return
            if job_name in visiting:
                raise ConfigurationError(f"Job inputs form a cycle through '{job_name}'.")
            visiting.add(job_name)
            for dep in deps[job_name]:
                visit(dep)
            visiting.discard(job_name)
            done.add(job_name)

        for job_name in deps:
            visit(job_name)

    def _job_node(self, job_name: str):
        async def run_job(state: WorkflowState) -> dict:
            outcome = await self.run_job(job_name, state["brief"], state.get("results") or {})
            return {"results": {job_name: outcome}}

        return run_job

    async def run_job(self, job_name: str, brief: dict, results: ResultsTable):
        """
        Run one job and return its outcome.

        A missing agent or an AgentError becomes a Failed outcome so that
        the remaining jobs still run.
        """
        job = self.team.jobs[job_name]
        logger.info(f"=== EXECUTING: {job_name} ===")

        runner = self.agents.get(job.agent)
        if runner is None:
            logger.error(f'Agent "{job.agent}" not found in the loaded configuration.')
            return Failed(error=AGENT_NOT_FOUND)

        payload = build_job_input(job, brief, results)
        try:
            result = await runner.run(json.dumps(payload, ensure_ascii=False, default=str))
        except AgentError as e:
            logger.error(f"{job_name} failed: {e}")
            if e.details:
                logger.error(f"{job_name} error details: {e.details}")
            return Failed(error=e.message)

        outcome = Ok(result=as_job_result(result))
        logger.info(f"{job_name} completed ({outcome.result.kind} result)")
        logger.debug(f"{job_name} result: {outcome.payload()}")
        return outcome

    async def execute(self, brief: dict) -> ResultsTable:
        """
        Run every job in the workflow and return the results table.

        Args:
            brief: Initial traveler payload

        Returns:
            ResultsTable: Job name to outcome, in the order outcomes were recorded
        """
        logger.info(
            f"Starting {self.team.mode} workflow for team '{self.team.name}' "
            f"({len(self.team.workflow)} jobs)"
        )
        final_state = await self.graph.ainvoke(
            {"brief": brief, "results": {}},
            {"recursion_limit": len(self.team.workflow) + 10},
        )
        results = dict(final_state.get("results") or {})
        logger.info(f"Workflow finished with {len(results)} recorded outcomes")
        return results
