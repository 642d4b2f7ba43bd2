from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, List

from ..data.config_file import ConfigFileError, load_config_file
from ..models.config import DEFAULT_THRESHOLD, DEFAULT_TITLE, ReportConfig
from ..models.numbers import parse_number


ARGS_HELP = "/?"
ARGS_THRESHOLD = "/threshold"
ARGS_METRICS_RESULT_DIR = "/metricResultDir"
ARGS_METRICS_RESULT_PATTERN = "/metricResultPattern"
ARGS_HTML_REPORT = "/htmlReport"
ARGS_TITLE = "/title"
ARGS_LOG_LEVEL = "/logLevel"
ARGS_CONFIG = "/config"

REQUIRED_ARGS = [ARGS_HTML_REPORT, ARGS_METRICS_RESULT_DIR, ARGS_METRICS_RESULT_PATTERN]
KNOWN_ARGS = set(REQUIRED_ARGS) | {ARGS_THRESHOLD, ARGS_TITLE, ARGS_LOG_LEVEL, ARGS_CONFIG}

HELP_TEXT = """Code Metrics Reporter for metrics.exe results

Example: code-metric-report /metricResultDir:C:\\temp\\metrics /metricResultPattern:*_metrics.xml /htmlReport:C:\\temp\\finalReport.html /threshold:80

Notes:
- Every file matching /metricResultPattern directly under /metricResultDir is parsed.
- The assembly level metrics of all parsed results are aggregated into one HTML table.
- A project whose MaintainabilityIndex is below the threshold is marked with a RED background.

Arguments:
/threshold:<number>          Threshold for the MaintainabilityIndex metric. Optional, defaults to 80.
/metricResultDir:<path>      The directory that holds the code metric results.
/metricResultPattern:<glob>  The file name pattern of the metrics.exe results.
/htmlReport:<path>           The HTML report to write (overwritten if it exists).
/title:<text>                Report heading. Optional.
/logLevel:<level>            DEBUG, INFO, WARNING or ERROR. Optional, defaults to INFO.
/config:<path>               TOML file supplying defaults for the arguments above. Optional."""


class HelpRequested(Exception):
    pass


class UsageError(Exception):
    pass


def _usage(detail: str) -> UsageError:
    required = ", ".join(REQUIRED_ARGS)
    return UsageError(
        f"Invalid arguments: {detail}. The following arguments are required: {required}. "
        f"Use {ARGS_HELP} for details."
    )


def split_tokens(argv: List[str]) -> Dict[str, str]:
    """Split ``/name:value`` tokens on the first colon."""
    values: Dict[str, str] = {}
    for token in argv:
        key, sep, value = token.partition(":")
        if not sep:
            raise _usage(f"expected /name:value, got {token!r}")
        if key not in KNOWN_ARGS:
            raise _usage(f"unknown argument {key!r}")
        if key in values:
            raise _usage(f"{key} given more than once")
        values[key] = value
    return values


def _parse_threshold(raw: str) -> float:
    try:
        threshold = parse_number(raw)
    except ValueError:
        raise _usage(f"{ARGS_THRESHOLD} must be a number, got {raw!r}") from None
    if not math.isfinite(threshold):
        raise _usage(f"{ARGS_THRESHOLD} must be a finite number, got {raw!r}")
    return threshold


def _parse_log_level(raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise _usage(f"unknown log level {raw!r}")
    return level


def parse_arguments(argv: List[str]) -> ReportConfig:
    if len(argv) == 1 and argv[0] == ARGS_HELP:
        raise HelpRequested()

    values = split_tokens(argv)
    if ARGS_CONFIG in values:
        try:
            file_values = load_config_file(Path(values[ARGS_CONFIG]))
        except ConfigFileError as e:
            raise _usage(str(e)) from e
        # command line wins over the config file
        values = {f"/{k}": v for k, v in file_values.items()} | values

    missing = [k for k in REQUIRED_ARGS if not values.get(k)]
    if missing:
        raise _usage(f"missing {', '.join(missing)}")

    threshold = DEFAULT_THRESHOLD
    if ARGS_THRESHOLD in values:
        threshold = _parse_threshold(values[ARGS_THRESHOLD])

    return ReportConfig(
        result_dir=Path(values[ARGS_METRICS_RESULT_DIR]),
        result_pattern=values[ARGS_METRICS_RESULT_PATTERN],
        html_report=Path(values[ARGS_HTML_REPORT]),
        threshold=threshold,
        title=values.get(ARGS_TITLE) or DEFAULT_TITLE,
        log_level=_parse_log_level(values.get(ARGS_LOG_LEVEL, "INFO")),
    )
