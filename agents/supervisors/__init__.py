# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Supervisors Module

This module contains supervisors that orchestrate workflows across agents.
The vacation supervisor runs the vacation planning team and reports results.
"""
