# Re-export common types
from .config import DEFAULT_THRESHOLD, DEFAULT_TITLE, ReportConfig
from .numbers import parse_number
from .record import (
    METRIC_COLUMNS,
    MAINTAINABILITY_INDEX,
    PROJECT_NAME,
    ExtractionResult,
    MetricRecord,
)

__all__ = [
    "DEFAULT_THRESHOLD",
    "DEFAULT_TITLE",
    "ReportConfig",
    "parse_number",
    "METRIC_COLUMNS",
    "MAINTAINABILITY_INDEX",
    "PROJECT_NAME",
    "ExtractionResult",
    "MetricRecord",
]
