"""Public package exports for the image grid tool."""

from __future__ import annotations

from .config import ImageGridConfig
from .errors import GeometryError, ImageGridError
from .main import build_image_grid, compose_grid
from .raster import Raster

__all__ = [
    "GeometryError",
    "ImageGridConfig",
    "ImageGridError",
    "Raster",
    "build_image_grid",
    "compose_grid",
]
