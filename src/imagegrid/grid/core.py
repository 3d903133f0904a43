"""Geometry primitives and sizing helpers shared by the grid layout."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from imagegrid.constants import PERCENT
from imagegrid.errors import GeometryError

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable, Sequence

    from imagegrid.raster import Raster
    from imagegrid.type_defs import PixelArray


@dataclass(frozen=True)
class Rect:
    """Simple rectangle with convenience accessors."""

    x0: int
    y0: int
    x1: int
    y1: int

    @property
    def w(self) -> int:
        """Width."""
        return self.x1 - self.x0

    @property
    def h(self) -> int:
        """Height."""
        return self.y1 - self.y0

    def size(self) -> tuple[int, int]:
        """Return (w, h)."""
        return self.w, self.h

    def move_to(self, x: int, y: int) -> Rect:
        """Return a copy moved so its top left is at (x, y)."""
        return Rect(x, y, x + self.w, y + self.h)

    def contains(self, other: Rect) -> bool:
        """Return True if other lies entirely inside this rectangle."""
        return (
            self.x0 <= other.x0
            and self.y0 <= other.y0
            and other.x1 <= self.x1
            and other.y1 <= self.y1
        )


@dataclass(frozen=True)
class Offset:
    """Top-left placement of an image on the canvas."""

    x: int
    y: int


def check_origin(image: Raster) -> None:
    """Raise GeometryError unless the image bounds start at (0, 0)."""
    bounds = image.bounds
    if bounds.x0 != 0 or bounds.y0 != 0:
        msg = (
            f"Image bounds must start at (0, 0), "
            f"got ({bounds.x0}, {bounds.y0})"
        )
        raise GeometryError(msg)


def max_height(images: Iterable[Raster]) -> int:
    """Return the tallest height among images, 0 when there are none."""
    tallest = 0
    for image in images:
        check_origin(image)
        tallest = max(tallest, image.bounds.y1)
    return tallest


def sum_widths(images: Iterable[Raster]) -> int:
    """Return the total width of images laid side by side with no gap."""
    total = 0
    for image in images:
        check_origin(image)
        total += image.bounds.x1
    return total


def calculate_margin(images: Sequence[Raster], margin_percent: float) -> int:
    """
    Return the margin in pixels for a set of images.

    The margin is a percentage of the tallest image across all inputs,
    rounded down to whole pixels.
    """
    if not math.isfinite(margin_percent):
        msg = f"margin_percent must be a finite number, got {margin_percent}"
        raise ValueError(msg)
    if margin_percent < 0:
        msg = f"margin_percent must be non-negative, got {margin_percent}"
        raise ValueError(msg)
    return math.floor(max_height(images) * margin_percent / PERCENT)


def insert_image(canvas: PixelArray, offset: Offset, image: Raster) -> None:
    """Copy every pixel of image onto canvas with its top left at offset."""
    canvas_rect = Rect(0, 0, canvas.shape[1], canvas.shape[0])
    target = image.bounds.move_to(offset.x, offset.y)
    if not canvas_rect.contains(target):
        msg = (
            f"Image of size {target.w}x{target.h} at "
            f"({offset.x}, {offset.y}) does not fit a "
            f"{canvas_rect.w}x{canvas_rect.h} canvas"
        )
        raise GeometryError(msg)
    canvas[target.y0:target.y1, target.x0:target.x1] = image.pixels
