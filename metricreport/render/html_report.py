from __future__ import annotations

import html
import logging
import math
from pathlib import Path
from typing import List, Sequence

from ..models.config import DEFAULT_TITLE, ReportConfig
from ..models.numbers import parse_number
from ..models.record import MAINTAINABILITY_INDEX, METRIC_COLUMNS, PROJECT_NAME, MetricRecord

logger = logging.getLogger(__name__)


HEADER_BG = "#92cddc"
HEALTHY_STYLE = "background-color: rgb(154, 205, 50);"
FAILING_STYLE = "background-color: rgb(255, 0, 0);"


def is_maintainability_healthy(value: str | None, threshold: float) -> bool:
    """True iff ``value`` parses as a number that is at least ``threshold``."""
    if value is None:
        return False
    try:
        actual = parse_number(value)
    except ValueError:
        return False
    if math.isnan(actual):
        return False
    return actual >= threshold


def _td(value: str | None, style: str | None = None) -> str:
    text = html.escape(value or "")
    if style:
        return f"<td style='{style}'>{text}</td>"
    return f"<td>{text}</td>"


def _row(record: MetricRecord, threshold: float) -> str:
    cells = [_td(record.project_name)]
    for _, key in METRIC_COLUMNS:
        value = record.get(key)
        if key == MAINTAINABILITY_INDEX:
            healthy = is_maintainability_healthy(value, threshold)
            cells.append(_td(value, HEALTHY_STYLE if healthy else FAILING_STYLE))
        else:
            cells.append(_td(value))
    return "<tr>" + "".join(cells) + "</tr>"


def build_html(records: Sequence[MetricRecord], threshold: float, title: str = DEFAULT_TITLE) -> str:
    head_cells = "".join(
        f"<th>{html.escape(label)}</th>" for label in [PROJECT_NAME] + [c[0] for c in METRIC_COLUMNS]
    )
    rows: List[str] = [_row(r, threshold) for r in records]
    safe_title = html.escape(title)
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        f"<head><meta charset='utf-8'><title>{safe_title}</title></head>\n"
        "<body>\n"
        f"<h2>{safe_title}</h2>\n"
        "<table border='1'>\n"
        f"<tr bgcolor='{HEADER_BG}'>{head_cells}</tr>\n"
        + "".join(row + "\n" for row in rows)
        + "</table>\n"
        "</body>\n"
        "</html>\n"
    )


def write_html_report(records: Sequence[MetricRecord], config: ReportConfig) -> Path:
    out_path = config.html_report
    out_path.parent.mkdir(parents=True, exist_ok=True)
    text = build_html(records, config.threshold, config.title)
    out_path.write_text(text, encoding="utf-8")
    logger.info("Wrote %d row(s) to %s", len(records), out_path)
    return out_path
