# Copyright AGNTCY Contributors (https://github.com/agntcy)
# SPDX-License-Identifier: Apache-2.0

"""
Vacation Report Renderer

Turns a results table into a console transcript and a standalone HTML page.

Sections always follow the declared job order. The header line lists the
keys of the results table in its own order, which is the order outcomes
were recorded and can differ from the section order.
"""

import html
import json
import re
from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, ConfigDict

from agents.supervisors.vacation.graph.models import (
    Failed,
    Ok,
    ResultsTable,
    StructuredResult,
    TextResult,
)

REPORT_TITLE = "Vacation Planning Results"
MISSING_RESULT_TEXT = "No results found for this step."

_UPPERCASE_RUN = re.compile(r"(?<![A-Z])([A-Z]+)")

_HTML_HEAD = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>{title}</title>
<style>
body {{ font-family: Arial, sans-serif; margin: 2em; background: #f9f9f9; }}
h1 {{ color: #2a7ae2; }}
h2 {{ color: #333; border-bottom: 1px solid #eee; padding-bottom: 0.2em; }}
pre {{ background: #f4f4f4; padding: 1em; border-radius: 6px; overflow-x: auto; white-space: pre-wrap; }}
.length {{ font-size: 0.7em; color: #888; }}
.warning {{ color: #b00; font-weight: bold; }}
</style>
</head>
<body>
<h1>{title}</h1>
"""

_HTML_TAIL = "</body>\n</html>\n"


class RenderedResult(NamedTuple):
    text: str
    length: int


class ReportSection(BaseModel):
    """One job's entry in the report."""
    model_config = ConfigDict(frozen=True)

    job_name: str
    title: str
    body: str
    present: bool
    length: Optional[int] = None

    @property
    def heading(self) -> str:
        if self.present:
            return f"{self.title} (length: {self.length} characters)"
        return self.title


class Report(BaseModel):
    """Ordered report sections plus the keys found in the results table."""
    model_config = ConfigDict(frozen=True)

    result_keys: list[str]
    sections: list[ReportSection]

    @property
    def missing(self) -> list[str]:
        return [section.job_name for section in self.sections if not section.present]


def titleize(job_name: str) -> str:
    """
    Split a camelCase job name into words.

    >>> titleize("createBudget")
    'create Budget'
    """
    return _UPPERCASE_RUN.sub(r" \1", job_name).strip()


def utf16_length(text: str) -> int:
    """Length in UTF-16 code units, so astral characters count as two."""
    return len(text.encode("utf-16-le")) // 2


def stringify_result(value: Any) -> RenderedResult:
    """
    Render a job result as report text.

    Text passes through unchanged. Structured values, failed outcomes and
    any other non-text value become JSON indented by two spaces with keys
    in insertion order.
    """
    if isinstance(value, Ok):
        value = value.result
    elif isinstance(value, Failed):
        value = value.payload()

    if isinstance(value, TextResult):
        text = value.text
    elif isinstance(value, StructuredResult):
        text = _to_json(value.value)
    elif isinstance(value, str):
        text = value
    else:
        text = _to_json(value)

    return RenderedResult(text, utf16_length(text))


def _to_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def render_report(job_names: list[str], results: ResultsTable) -> Report:
    """
    Build the report for the given job order.

    Jobs without an entry in results get a warning section; nothing is raised.
    """
    sections = []
    for job_name in job_names:
        title = titleize(job_name)
        if job_name in results:
            rendered = stringify_result(results[job_name])
            sections.append(ReportSection(
                job_name=job_name,
                title=title,
                body=rendered.text,
                length=rendered.length,
                present=True,
            ))
        else:
            sections.append(ReportSection(
                job_name=job_name,
                title=title,
                body=MISSING_RESULT_TEXT,
                present=False,
            ))
    return Report(result_keys=list(results), sections=sections)


def _keys_text(keys: list[str]) -> str:
    return f"[ {', '.join(keys)} ]"


def render_console(report: Report) -> list[str]:
    """Console transcript lines mirroring the HTML report."""
    lines = [f"Results object contains keys: {_keys_text(report.result_keys)}"]
    for section in report.sections:
        if section.present:
            lines.append(f"{section.heading}:")
            lines.append(section.body)
            lines.append("")
        else:
            lines.append(f"WARNING: No {section.title} results found!")
    return lines


def render_html(report: Report, title: str = REPORT_TITLE) -> str:
    """Serialize the report as a standalone HTML document."""
    parts = [
        _HTML_HEAD.format(title=html.escape(title)),
        f"<p><strong>Results object contains keys:</strong> "
        f"{html.escape(_keys_text(report.result_keys))}</p>\n",
    ]
    for section in report.sections:
        heading = html.escape(section.title)
        if section.present:
            parts.append(
                f"<h2>{heading} <span class='length'>(length: {section.length} characters)</span></h2>\n"
                f"<pre>{html.escape(section.body, quote=False)}</pre>\n"
            )
        else:
            parts.append(
                f"<h2>{heading}</h2>\n"
                f"<p class='warning'>WARNING: {html.escape(section.body)}</p>\n"
            )
    parts.append(_HTML_TAIL)
    return "".join(parts)
