# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Vacation Supervisor Graph Module

Contains the LangGraph implementation for the vacation team workflow:
- graph.py: VacationGraph, which runs the team's jobs
- models.py: Pydantic models for configuration and job outcomes
"""
