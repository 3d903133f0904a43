"""
Test configuration and shared fixtures for imagegrid.

This module defines reusable pytest fixtures for building rasters,
writing image files, and creating configs. These fixtures support all
test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any

import pytest
from PIL import Image

from imagegrid.config import ImageGridConfig
from imagegrid.logging_utils import logger
from imagegrid.raster import Raster

OPAQUE_RED = (65535, 0, 0, 65535)


@pytest.fixture
def make_raster() -> Callable[..., Raster]:
    """Factory for solid-color rasters of a given size."""

    def _make(
        width: int,
        height: int,
        color: tuple[int, int, int, int] = OPAQUE_RED,
    ) -> Raster:
        return Raster.new(width, height, color)

    return _make


@pytest.fixture
def make_image_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory that saves a solid-color image and returns its path."""

    def _make(
        name: str,
        size: tuple[int, int],
        color: str | tuple[int, ...] = "red",
    ) -> Path:
        path = tmp_path / name
        Image.new("RGB", size, color=color).save(path)
        return path

    return _make


@pytest.fixture
def sample_image() -> Image.Image:
    """Create a sample 10x8 red RGB PIL image."""
    return Image.new("RGB", (10, 8), color="red")


@pytest.fixture
def make_grid_config(tmp_path: Path) -> Callable[..., ImageGridConfig]:
    """
    Build ImageGridConfig instances with optional section overrides.

    The output file always lands under tmp_path unless a filename is
    given explicitly.
    """

    def _build(
        *,
        layout: dict[str, Any] | None = None,
        output: dict[str, Any] | None = None,
    ) -> ImageGridConfig:
        effective_output = dict(output or {})
        effective_output.setdefault("filename", str(tmp_path / "grid.png"))
        return ImageGridConfig.model_validate(
            {"layout": dict(layout or {}), "output": effective_output},
        )

    return _build


@pytest.fixture(autouse=True)
def enable_logger_propagation(
    monkeypatch: pytest.MonkeyPatch,
) -> Iterator[None]:
    """Enable propagation for the imagegrid logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)
    level = logger.level
    yield
    logger.setLevel(level)
