"""Version resolution regression tests."""

from __future__ import annotations

from pathlib import Path

import dns_probe


def test_source_checkout_prefers_source_version() -> None:
    assert dns_probe._is_source_checkout(Path(dns_probe.__file__))
    assert dns_probe.__version__ == "0.3.0"


def test_resolve_version_uses_metadata_outside_source_checkout(monkeypatch) -> None:
    monkeypatch.setattr(dns_probe, "_is_source_checkout", lambda _path: False)
    monkeypatch.setattr(dns_probe, "version", lambda _name: "9.9.9")

    assert dns_probe._resolve_version() == "9.9.9"


def test_resolve_version_falls_back_when_metadata_missing(monkeypatch) -> None:
    monkeypatch.setattr(dns_probe, "_is_source_checkout", lambda _path: False)

    def _raise(_name: str) -> str:
        raise dns_probe.PackageNotFoundError

    monkeypatch.setattr(dns_probe, "version", _raise)

    assert dns_probe._resolve_version() == "0.3.0"
