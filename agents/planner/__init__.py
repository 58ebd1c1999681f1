# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Planner Agent Package

LLM-backed agents that run individual vacation planning jobs, plus the
webSearch, dateTime and calculator tools they can call.
"""

from agents.planner.agent import PlannerAgent, create_agents, parse_agent_output

__all__ = ["PlannerAgent", "create_agents", "parse_agent_output"]
