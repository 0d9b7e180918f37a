"""Packaging layout regression tests."""

from __future__ import annotations

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def _pyproject() -> dict:
    with (ROOT / "pyproject.toml").open("rb") as handle:
        return tomllib.load(handle)


def test_setuptools_uses_src_layout_only() -> None:
    """Ensure setuptools installs dns_probe from src/ and nothing else."""
    setuptools = _pyproject().get("tool", {}).get("setuptools", {})
    assert setuptools.get("package-dir") == {"": "src"}
    assert setuptools.get("packages", {}).get("find", {}).get("where") == ["src"]
    assert (ROOT / "src" / "dns_probe" / "__init__.py").is_file()


def test_checks_schema_is_packaged() -> None:
    """Ensure the checks JSON Schema ships as package data."""
    package_data = _pyproject().get("tool", {}).get("setuptools", {}).get("package-data", {})
    assert "resources/*.json" in package_data.get("dns_probe", [])
    assert (ROOT / "src" / "dns_probe" / "resources" / "checks.schema.json").is_file()


def test_console_script_points_at_cli_main() -> None:
    """Ensure the dns-probe command runs the CLI entrypoint."""
    scripts = _pyproject()["project"]["scripts"]
    assert scripts == {"dns-probe": "dns_probe.cli:main"}


def test_runtime_dependencies_cover_imported_libraries() -> None:
    """Ensure every third-party library imported by dns_probe is declared."""
    dependencies = " ".join(_pyproject()["project"]["dependencies"])
    for distribution in ("dnspython", "PyYAML", "jsonschema"):
        assert distribution in dependencies
    assert "pytest" in " ".join(_pyproject()["project"]["optional-dependencies"]["test"])
