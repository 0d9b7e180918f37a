"""Regression tests for project version consistency."""

from __future__ import annotations

from pathlib import Path

import dns_probe


def test_project_version_references_are_consistent() -> None:
    """Keep pyproject and the source fallback in sync."""
    root = Path(__file__).resolve().parents[1]
    pyproject_text = (root / "pyproject.toml").read_text(encoding="utf-8")
    source_version = dns_probe._SOURCE_VERSION
    expected_line = f'version = "{source_version}"'
    assert expected_line in pyproject_text

    assert dns_probe.__version__ == source_version
