"""Version lookup backing the --version flag."""

from __future__ import annotations

import tomllib
from importlib import metadata as importlib_metadata
from pathlib import Path

from imagegrid.logging_utils import logger

DIST_NAME = "imagegrid"
FALLBACK_VERSION = "0.0.0"


def _installed_version() -> str | None:
    try:
        return importlib_metadata.version(DIST_NAME)
    except importlib_metadata.PackageNotFoundError:
        return None


def _nearest_pyproject(start: Path) -> Path | None:
    for parent in start.parents:
        candidate = parent / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _pyproject_version(pyproject: Path) -> str | None:
    try:
        with pyproject.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        logger.warning("Error reading %s: %s", pyproject, exc)
        return None
    version = data.get("project", {}).get("version")
    if isinstance(version, str) and version.strip():
        return version.strip()
    return None


def resolve_project_version() -> str:
    """
    Return the version of the running copy of imagegrid.

    Installed distribution metadata wins. A source checkout falls back to
    project.version in the nearest enclosing pyproject.toml, and anything
    else reports FALLBACK_VERSION.
    """
    version = _installed_version()
    if version is None:
        pyproject = _nearest_pyproject(Path(__file__).resolve())
        if pyproject is not None:
            version = _pyproject_version(pyproject)
    return version or FALLBACK_VERSION
