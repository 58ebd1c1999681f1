# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Vacation Planner Agents

This package contains the vacation planning team implementation.
A team of LLM-backed agents turns a traveler brief into a budgeted,
reviewed vacation plan that is rendered as an HTML report.

Modules:
- planner: LangGraph planner agents and the tools they can call
- supervisors.vacation: Config loading, workflow graph, report rendering and CLI
"""
