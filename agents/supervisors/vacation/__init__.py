# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Vacation Supervisor

Loads the vacation team configuration, runs the planning workflow and
renders the results as a console transcript and an HTML report.
"""
