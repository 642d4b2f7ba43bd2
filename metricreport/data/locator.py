from __future__ import annotations

import fnmatch
import logging
from pathlib import Path
from typing import List

logger = logging.getLogger(__name__)


class MissingDirectoryError(Exception):
    def __init__(self, directory: Path):
        super().__init__(f"The directory does not exist: {directory}")
        self.directory = directory


class NoResultFilesError(Exception):
    def __init__(self, directory: Path, pattern: str):
        super().__init__(
            f"No code metric result file under {directory} with the pattern {pattern}."
        )
        self.directory = directory
        self.pattern = pattern


def locate_result_files(directory: Path, pattern: str) -> List[Path]:
    """Files directly under ``directory`` whose names match ``pattern``, sorted by name."""
    if not directory.is_dir():
        raise MissingDirectoryError(directory)
    matches = sorted(
        (p for p in directory.iterdir() if p.is_file() and fnmatch.fnmatch(p.name, pattern)),
        key=lambda p: p.name,
    )
    if not matches:
        raise NoResultFilesError(directory, pattern)
    logger.info("Found %d result file(s) in %s matching %s", len(matches), directory, pattern)
    return matches
