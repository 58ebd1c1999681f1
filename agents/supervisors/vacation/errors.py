# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Vacation Planner Errors

Exception hierarchy shared by the config loader, agent runtime,
workflow runner and report sink.

- ConfigurationError: fatal, aborts the run before any job executes
- AgentError: recovered into a Failed outcome for a single job
- ReportError: logged, never changes the outcome of a finished run
"""

from typing import Any, Optional


class VacationPlannerError(Exception):
    """Base class carrying an optional nested provider/tool payload."""

    def __init__(self, message: str, details: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return self.message


class ConfigurationError(VacationPlannerError):
    """Missing credential or unknown identifier in the loaded configuration."""
    pass


class ConfigNotFoundError(ConfigurationError):
    """Configuration file is missing or its content cannot be parsed."""
    pass


class AgentError(VacationPlannerError):
    """An agent invocation failed (provider, tool or malformed output)."""
    pass


class ReportError(VacationPlannerError):
    """Writing or opening the HTML report failed."""
    pass
