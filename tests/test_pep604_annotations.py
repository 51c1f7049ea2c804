from __future__ import annotations

import re
from pathlib import Path

import pytest

DISALLOWED = [
    re.compile(r"\bOptional\["),
    re.compile(r"\btyping\.Optional\b"),
    re.compile(r"\bUnion\[[^\]]*\bNone\b"),
]


def _python_files() -> list[Path]:
    files = sorted(Path("hexgrid").rglob("*.py")) + sorted(Path("tests").rglob("*.py"))
    return [path for path in files if path.name != Path(__file__).name]


@pytest.mark.parametrize("path", _python_files(), ids=str)
def test_no_typing_optional_usage(path: Path) -> None:
    text = path.read_text(encoding="utf-8")
    matches = [pattern.pattern for pattern in DISALLOWED if pattern.search(text)]
    assert not matches, f"PEP 604 violations in {path}: {matches}"
