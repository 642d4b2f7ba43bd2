from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any, Dict


KNOWN_KEYS = {
    "threshold",
    "metricResultDir",
    "metricResultPattern",
    "htmlReport",
    "title",
    "logLevel",
}


class ConfigFileError(Exception):
    pass


def load_config_file(path: Path) -> Dict[str, str]:
    """Load report defaults from a TOML file.

    Keys may sit at the top level or under a [report] table; the table wins
    when both are present. Values are returned as strings so they go through
    the same validation as command-line tokens.
    """
    if not path.is_file():
        raise ConfigFileError(f"config file not found: {path}")
    try:
        data: Dict[str, Any] = tomllib.loads(path.read_text(encoding="utf-8"))
    except (OSError, tomllib.TOMLDecodeError) as e:
        raise ConfigFileError(f"could not read config file {path}: {e}") from e
    section = data.get("report") if isinstance(data.get("report"), dict) else data
    out: Dict[str, str] = {}
    for key, value in section.items():
        if key not in KNOWN_KEYS:
            continue
        out[key] = str(value)
    return out
