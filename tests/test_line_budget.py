from __future__ import annotations

from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

# max lines per file
BUDGETS = {"metricreport": 150, "scripts": 50, "tests": 250}


def _modules(subdir: str) -> list[Path]:
    return sorted(p for p in (ROOT / subdir).rglob("*.py") if p.name != "__init__.py")


@pytest.mark.parametrize("subdir", sorted(BUDGETS))
def test_modules_within_budget(subdir: str) -> None:
    budget = BUDGETS[subdir]
    sizes = {p.relative_to(ROOT).as_posix(): len(p.read_text(encoding="utf-8").splitlines()) for p in _modules(subdir)}
    assert sizes, f"no modules found under {subdir}"
    over = {name: n for name, n in sizes.items() if n > budget}
    assert not over, f"{subdir} modules over {budget} lines: {over}"
