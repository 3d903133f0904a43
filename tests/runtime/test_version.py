"""Tests for runtime.version helpers."""

from __future__ import annotations

from pathlib import Path

import pytest

from imagegrid.runtime import version as runtime_version


def test_resolve_version_from_distribution(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        runtime_version.importlib_metadata,
        "version",
        lambda _name: "9.9.9",
    )
    assert runtime_version.resolve_project_version() == "9.9.9"


def _raise_missing(_: str) -> None:
    raise runtime_version.importlib_metadata.PackageNotFoundError


def test_resolve_version_from_pyproject(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pyproject.toml").write_text(
        "[project]\nversion = '1.2.3'\n",
        encoding="utf-8",
    )
    monkeypatch.setattr(
        runtime_version.importlib_metadata, "version", _raise_missing,
    )
    monkeypatch.setattr(
        runtime_version, "__file__", str(tmp_path / "pkg" / "version.py"),
    )

    assert runtime_version.resolve_project_version() == "1.2.3"


def test_resolve_version_fallback_on_read_error(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pyproject.toml").write_text("[project]\n", encoding="utf-8")
    monkeypatch.setattr(
        runtime_version.importlib_metadata, "version", _raise_missing,
    )

    def raise_os_error(handle: object) -> None:
        raise OSError("boom")

    monkeypatch.setattr(runtime_version.tomllib, "load", raise_os_error)
    monkeypatch.setattr(
        runtime_version, "__file__", str(tmp_path / "pkg" / "version.py"),
    )

    with caplog.at_level("WARNING"):
        assert runtime_version.resolve_project_version() == "0.0.0"

    assert any("Error reading" in rec.message for rec in caplog.records)


def test_resolve_version_malformed_pyproject(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    (tmp_path / "pkg").mkdir()
    (tmp_path / "pyproject.toml").write_text(
        "[project\nversion = ", encoding="utf-8",
    )
    monkeypatch.setattr(
        runtime_version.importlib_metadata, "version", _raise_missing,
    )
    monkeypatch.setattr(
        runtime_version, "__file__", str(tmp_path / "pkg" / "version.py"),
    )

    with caplog.at_level("WARNING"):
        version = runtime_version.resolve_project_version()

    assert version == runtime_version.FALLBACK_VERSION
    assert "Error reading" in caplog.text


def test_nearest_pyproject_without_version_falls_back(
    tmp_path: Path,
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    inner = tmp_path / "outer" / "inner"
    (inner / "pkg").mkdir(parents=True)
    (tmp_path / "outer" / "pyproject.toml").write_text(
        "[project]\nversion = '5.0.0'\n", encoding="utf-8",
    )
    (inner / "pyproject.toml").write_text(
        "[tool.other]\nkey = 1\n", encoding="utf-8",
    )
    monkeypatch.setattr(
        runtime_version.importlib_metadata, "version", _raise_missing,
    )
    monkeypatch.setattr(
        runtime_version, "__file__", str(inner / "pkg" / "version.py"),
    )

    assert runtime_version.resolve_project_version() == "0.0.0"
