# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Vacation Supervisor Main Entry Point

Command-line driver for the vacation planning team:
1. Checks that an LLM provider key is configured
2. Loads the team configuration (agents, jobs, workflow, briefs)
3. Runs the workflow for the chosen brief
4. Prints the transcript, saves the HTML report and opens it

Example:
    vacation-planner st-pete-clearwater-trip-001 --no-open
"""

import asyncio
import logging
import sys
from typing import Optional

import click

from agents.planner.agent import PlannerAgent, create_agents
from agents.supervisors.vacation.config_loader import get_brief, get_team, load_vacation_config
from agents.supervisors.vacation.errors import ConfigurationError, ReportError
from agents.supervisors.vacation.graph.graph import VacationGraph
from agents.supervisors.vacation.graph.models import VacationConfig
from agents.supervisors.vacation.report import (
    Report,
    open_report,
    render_console,
    render_html,
    render_report,
    save_report,
)
from config.config import (
    DEFAULT_BRIEF_ID,
    DEFAULT_TEAM_ID,
    PROVIDER_API_KEY_VARS,
    VACATION_CONFIG_PATH,
    VACATION_REPORT_PATH,
    configured_provider_keys,
)
from config.logging_config import setup_logging

logger = logging.getLogger("vacation.supervisor.main")


def check_credentials() -> list[str]:
    """
    Make sure at least one provider API key is available.

    Raises:
        ConfigurationError: If none of PROVIDER_API_KEY_VARS is set
    """
    keys = configured_provider_keys()
    if not keys:
        raise ConfigurationError(
            "No LLM provider API key is set. Set one of "
            f"{', '.join(PROVIDER_API_KEY_VARS)} in the environment or a .env file."
        )
    logger.debug(f"Provider keys available: {', '.join(keys)}")
    return keys


def describe_config(config: VacationConfig) -> list[str]:
    """Summary lines printed after the configuration is loaded."""
    teams = ", ".join(team.name for team in config.team.values()) or "No teams found"
    briefs = ", ".join(config.brief) or "No briefs found"
    return [
        f"{config.name} loaded successfully.",
        f"- description: {config.description}",
        f"- team: [ {teams} ]",
        f"- brief: [ {briefs} ]",
    ]


async def plan_vacation(
    config: VacationConfig,
    brief_id: str,
    team_id: str,
    agents: Optional[dict[str, PlannerAgent]] = None,
) -> Report:
    """
    Run the team's workflow for one brief and build the report.

    Args:
        config: Loaded vacation configuration
        brief_id: Key of the brief to plan for
        team_id: Key of the team whose workflow runs
        agents: Agents to use instead of creating them from config.agents

    Raises:
        ConfigurationError: For unknown brief/team ids or an invalid workflow
    """
    team = get_team(config, team_id)
    brief = get_brief(config, brief_id)
    if agents is None:
        agents = create_agents(config.agents)

    runner = VacationGraph(team, agents)
    logger.info(f"Starting workflow for brief ID: {brief_id}")
    results = await runner.execute(brief)
    logger.info("--- Workflow Execution Completed ---")

    return render_report(team.workflow, results)


def deliver_report(report: Report, output_path: str, open_browser: bool) -> None:
    """Save the HTML report and open it. Failures are logged only."""
    try:
        path = save_report(render_html(report), output_path)
        click.echo(f"Results saved to {path}")
        if open_browser:
            open_report(path)
    except ReportError as e:
        logger.warning(f"Report was not delivered: {e}")


@click.command()
@click.argument("brief_id", required=False, default=DEFAULT_BRIEF_ID)
@click.option(
    "--config",
    "config_path",
    default=VACATION_CONFIG_PATH,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Vacation team configuration (JSON).",
)
@click.option("--team", "team_id", default=DEFAULT_TEAM_ID, show_default=True, help="Team whose workflow runs.")
@click.option(
    "--output",
    "output_path",
    default=VACATION_REPORT_PATH,
    show_default=True,
    type=click.Path(dir_okay=False),
    help="Where the HTML report is written.",
)
@click.option("--open/--no-open", "open_browser", default=True, help="Open the report when done.")
@click.option("--list", "list_only", is_flag=True, help="Only show the loaded teams and briefs.")
@click.option("--log-level", default=None, help="Override LOGGING_LEVEL.")
def main(
    brief_id: str,
    config_path: str,
    team_id: str,
    output_path: str,
    open_browser: bool,
    list_only: bool,
    log_level: Optional[str],
) -> None:
    """Plan a vacation for BRIEF_ID and write the HTML report."""
    setup_logging(log_level)

    try:
        if not list_only:
            check_credentials()

        config = load_vacation_config(config_path)
        for line in describe_config(config):
            click.echo(line)
        if list_only:
            return

        report = asyncio.run(plan_vacation(config, brief_id, team_id))
    except ConfigurationError as e:
        logger.error(f"Error during workflow execution: {e}")
        if e.details:
            logger.error(f"Error details: {e.details}")
        sys.exit(1)

    click.echo("\n=== VACATION PLANNING RESULTS ===\n")
    for line in render_console(report):
        click.echo(line)

    deliver_report(report, output_path, open_browser)
    click.echo("Vacation planning workflow completed successfully!")


if __name__ == "__main__":
    main()
