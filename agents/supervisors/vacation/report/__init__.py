# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Vacation Report Module

- renderer.py: console transcript and HTML rendering of a results table
- sink.py: writing the HTML report and opening it in a viewer
"""

from agents.supervisors.vacation.report.renderer import (
    Report,
    ReportSection,
    render_console,
    render_html,
    render_report,
    stringify_result,
    titleize,
)
from agents.supervisors.vacation.report.sink import open_report, save_report

__all__ = [
    "Report",
    "ReportSection",
    "render_console",
    "render_html",
    "render_report",
    "stringify_result",
    "titleize",
    "open_report",
    "save_report",
]
