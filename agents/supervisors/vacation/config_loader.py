# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Vacation Config Loader

Loads the JSON team configuration (agents, jobs, team workflow, briefs)
and validates it against the pydantic models.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from pydantic import ValidationError

from agents.supervisors.vacation.errors import ConfigNotFoundError, ConfigurationError
from agents.supervisors.vacation.graph.models import TeamDefinition, VacationConfig

logger = logging.getLogger("vacation.supervisor.config_loader")


def load_vacation_config(path: Union[str, Path]) -> VacationConfig:
    """
    Load and validate a vacation team configuration file.

    Args:
        path: Location of the JSON configuration

    Returns:
        VacationConfig: Validated configuration

    Raises:
        ConfigNotFoundError: If the file does not exist or cannot be parsed
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigNotFoundError(f"Configuration file not found: {config_path}")

    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ConfigNotFoundError(f"Could not parse configuration {config_path}: {e}") from e

    try:
        config = VacationConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigNotFoundError(
            f"Invalid configuration in {config_path}",
            details=e.errors(include_url=False),
        ) from e

    logger.info(
        f"Loaded '{config.name}' from {config_path}: "
        f"{len(config.agents)} agents, {len(config.team)} teams, {len(config.brief)} briefs"
    )
    return config


def get_team(config: VacationConfig, team_id: str) -> TeamDefinition:
    """Return the team with the given id or raise ConfigurationError."""
    team = config.team.get(team_id)
    if team is None:
        raise ConfigurationError(
            f'Team with ID "{team_id}" not found. Available: {", ".join(config.team) or "none"}'
        )
    return team


def get_brief(config: VacationConfig, brief_id: str) -> dict[str, Any]:
    """Return the brief with the given id or raise ConfigurationError."""
    brief = config.brief.get(brief_id)
    if brief is None:
        raise ConfigurationError(
            f'Brief with ID "{brief_id}" not found. Available: {", ".join(config.brief) or "none"}'
        )
    return brief
