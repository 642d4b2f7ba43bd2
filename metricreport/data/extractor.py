from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as ET

from ..models.record import PROJECT_NAME, ExtractionResult, MetricRecord

logger = logging.getLogger(__name__)

ROOT_TAG = "CodeMetricsReport"
TARGET_PATH = "Targets/Target"
METRIC_PATH = "Assembly/Metrics/Metric"


class ExtractionError(Exception):
    pass


def _read_record(path: Path) -> MetricRecord:
    try:
        tree = ET.parse(path)
    except ET.ParseError as e:
        raise ExtractionError(f"malformed XML: {e}") from e
    except DefusedXmlException as e:
        raise ExtractionError(f"rejected XML: {e}") from e
    except ValueError as e:
        raise ExtractionError(f"unsupported XML: {e}") from e
    except OSError as e:
        raise ExtractionError(f"could not read file: {e}") from e

    root = tree.getroot()
    if root.tag != ROOT_TAG:
        raise ExtractionError(f"expected <{ROOT_TAG}> root element, found <{root.tag}>")
    targets = root.findall(TARGET_PATH)
    if not targets:
        raise ExtractionError(f"missing node {ROOT_TAG}/{TARGET_PATH}")
    if len(targets) > 1:
        logger.debug("%s: %d targets found, using the first", path, len(targets))
    target = targets[0]

    record = MetricRecord(project_name=target.get("Name", ""))
    for metric in target.findall(METRIC_PATH):
        name = metric.get("Name")
        if name is None:
            raise ExtractionError("metric element without a Name attribute")
        if name == PROJECT_NAME or name in record.metrics:
            raise ExtractionError(f"duplicate metric {name!r}")
        record.add(name, metric.get("Value", ""))
    return record


def extract_report(path: Path) -> ExtractionResult:
    try:
        record = _read_record(path)
    except ExtractionError as e:
        logger.warning("Skipping %s: %s", path, e)
        return ExtractionResult(path=path, error=str(e))
    logger.debug("Parsed %s: project %r, %d metric(s)", path, record.project_name, len(record.metrics))
    return ExtractionResult(path=path, record=record)


def extract_reports(paths: Iterable[Path]) -> List[ExtractionResult]:
    return [extract_report(p) for p in paths]


def successful_records(results: Iterable[ExtractionResult]) -> List[MetricRecord]:
    return [r.record for r in results if r.record is not None]
