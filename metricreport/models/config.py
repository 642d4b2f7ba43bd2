from dataclasses import dataclass
from pathlib import Path


DEFAULT_THRESHOLD = 80.0
DEFAULT_TITLE = "Code Metrics Report"


@dataclass(frozen=True)
class ReportConfig:
    result_dir: Path
    result_pattern: str
    html_report: Path
    threshold: float = DEFAULT_THRESHOLD
    title: str = DEFAULT_TITLE
    log_level: str = "INFO"
