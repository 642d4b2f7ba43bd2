from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional

import typer

from ..data.extractor import extract_reports, successful_records
from ..data.locator import MissingDirectoryError, NoResultFilesError, locate_result_files
from ..models.config import ReportConfig
from ..models.record import MetricRecord
from ..render.html_report import write_html_report
from .args import HELP_TEXT, HelpRequested, UsageError, parse_arguments

logger = logging.getLogger(__name__)


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def collect_records(config: ReportConfig) -> tuple[List[MetricRecord], List[str]]:
    paths = locate_result_files(config.result_dir, config.result_pattern)
    results = extract_reports(paths)
    skipped = [f"Skipping {r.path}: {r.error}" for r in results if not r.ok]
    records = successful_records(results)
    logger.info("Extracted %d record(s), skipped %d file(s)", len(records), len(skipped))
    return records, skipped


def run_pipeline(config: ReportConfig) -> tuple[Path, List[MetricRecord], List[str]]:
    """Locate, extract and render. Returns (report path, rendered records, skip messages)."""
    records, skipped = collect_records(config)
    return write_html_report(records, config), records, skipped


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        config = parse_arguments(args)
    except HelpRequested:
        print(HELP_TEXT)
        return 0
    except UsageError as e:
        print(e)
        return 2

    _setup_logging(config.log_level)
    try:
        records, skipped = collect_records(config)
    except MissingDirectoryError as e:
        print(e)
        return 1
    except NoResultFilesError as e:
        print(e)
        return 0

    for line in skipped:
        print(line)
    try:
        out_path = write_html_report(records, config)
    except OSError as e:
        print(f"Could not write report {config.html_report}: {e}")
        return 1
    print(f"Wrote {len(records)} project(s) to {out_path}")
    return 0


app = typer.Typer(add_completion=False, help="Aggregate metrics.exe results into an HTML report")


@app.command()
def cli_report(
    tokens: Optional[List[str]] = typer.Argument(
        None, help="/name:value arguments; pass /? for details", show_default=False
    ),
) -> None:
    raise typer.Exit(code=main(tokens or []))


def run() -> None:
    app()


if __name__ == "__main__":
    raise SystemExit(main())
