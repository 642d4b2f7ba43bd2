from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict

import pytest


DEFAULT_METRICS = {
    "MaintainabilityIndex": "90",
    "CyclomaticComplexity": "12",
    "ClassCoupling": "7",
    "DepthOfInheritance": "2",
    "SourceLines": "340",
    "ExecutableLines": "120",
}


def metrics_xml(project: str | None = "Foo", metrics: Dict[str, str] | None = None) -> str:
    if metrics is None:
        metrics = DEFAULT_METRICS
    name_attr = f' Name="{project}"' if project is not None else ""
    rows = "".join(f'<Metric Name="{k}" Value="{v}" />' for k, v in metrics.items())
    return (
        '<?xml version="1.0" encoding="utf-8"?>'
        "<CodeMetricsReport Version=\"1.0\"><Targets>"
        f"<Target{name_attr}><Assembly Name=\"{project}, Version=1.0.0.0\">"
        f"<Metrics>{rows}</Metrics>"
        "</Assembly></Target>"
        "</Targets></CodeMetricsReport>"
    )


@pytest.fixture(autouse=True)
def _reset_logging():
    yield
    # main() binds a stderr handler to the capture stream of the current test
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)


@pytest.fixture
def write_result(tmp_path: Path) -> Callable[..., Path]:
    results_dir = tmp_path / "results"
    results_dir.mkdir()

    def _write(filename: str, text: str | None = None, **kwargs: object) -> Path:
        path = results_dir / filename
        path.write_text(text if text is not None else metrics_xml(**kwargs), encoding="utf-8")
        return path

    return _write
