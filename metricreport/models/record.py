from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterator, List, Tuple


PROJECT_NAME = "Project Name"
MAINTAINABILITY_INDEX = "MaintainabilityIndex"

# (header label, metric name in the XML), in rendered order
METRIC_COLUMNS: List[Tuple[str, str]] = [
    ("Maintainability Index", MAINTAINABILITY_INDEX),
    ("Cyclomatic Complexity", "CyclomaticComplexity"),
    ("Class Coupling", "ClassCoupling"),
    ("Depth Of Inheritance", "DepthOfInheritance"),
    ("Source Lines", "SourceLines"),
    ("Executable Lines", "ExecutableLines"),
]


@dataclass
class MetricRecord:
    project_name: str = ""
    metrics: Dict[str, str] = field(default_factory=dict)

    def add(self, name: str, value: str) -> None:
        self.metrics[name] = value

    def get(self, name: str) -> str | None:
        if name == PROJECT_NAME:
            return self.project_name
        return self.metrics.get(name)

    def items(self) -> Iterator[Tuple[str, str]]:
        yield PROJECT_NAME, self.project_name
        yield from self.metrics.items()


@dataclass(frozen=True)
class ExtractionResult:
    """Outcome of reading one result file: a record, or the reason it was skipped."""

    path: Path
    record: MetricRecord | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.record is not None
