# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Report Sink

Writes the HTML report to disk and opens it with the platform viewer.
"""

import logging
from pathlib import Path
from typing import Union

import click

from agents.supervisors.vacation.errors import ReportError

logger = logging.getLogger("vacation.supervisor.report")


def save_report(content: str, path: Union[str, Path]) -> Path:
    """
    Write the report, replacing any file already at path.

    Raises:
        ReportError: If the file cannot be written
    """
    report_path = Path(path).resolve()
    try:
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(content, encoding="utf-8")
    except OSError as e:
        logger.error(f"Could not write report to {report_path}: {e}")
        raise ReportError(f"Could not write report to {report_path}: {e}") from e

    logger.info(f"Results saved to {report_path}")
    return report_path


def open_report(path: Union[str, Path]) -> None:
    """
    Open the report with the default application for HTML files.

    Raises:
        ReportError: If the viewer cannot be launched
    """
    try:
        exit_code = click.launch(str(path))
    except OSError as e:
        logger.error(f"Could not open report {path}: {e}")
        raise ReportError(f"Could not open report {path}: {e}") from e

    if exit_code:
        raise ReportError(f"Viewer exited with status {exit_code} for {path}")
