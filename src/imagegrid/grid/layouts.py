"""Row partitioning, layout calculation, and compositing for image grids."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

import numpy as np

from imagegrid.constants import CHANNELS
from imagegrid.grid.core import (
    Offset,
    calculate_margin,
    insert_image,
    max_height,
    sum_widths,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from imagegrid.raster import Raster
    from imagegrid.type_defs import ImageGroup, PixelArray


@dataclass(frozen=True)
class GridLayout:
    """Canvas size and per-image offsets for a partitioned grid."""

    width: int
    height: int
    margin: int
    offsets: tuple[Offset, ...]
    row_count: int

    def size(self) -> tuple[int, int]:
        """Return (width, height)."""
        return self.width, self.height


def partition_rows(images: Sequence[Raster], cols: int) -> list[ImageGroup]:
    """
    Split images into rows of at most cols images, row-major.

    A non-positive cols puts every image on one row. The last row may be
    short. An empty input still yields a single empty row.
    """
    if not images:
        return [[]]
    per_row = cols if cols > 0 else len(images)
    row_count = math.ceil(len(images) / per_row)
    return [
        list(images[row * per_row:(row + 1) * per_row])
        for row in range(row_count)
    ]


def _row_width(group: ImageGroup, margin: int) -> int:
    return sum_widths(group) + margin * (len(group) - 1)


def compute_layout(groups: Sequence[ImageGroup], margin: int) -> GridLayout:
    """
    Compute the canvas size and the offset of every image.

    Rows are left-aligned and stacked top to bottom, each as tall as its
    tallest image. Images inside a row are top-aligned. Offsets follow the
    flattened, row-major input order.
    """
    height = sum(max_height(group) for group in groups)
    height += margin * max(0, len(groups) - 1)
    width = max((_row_width(group, margin) for group in groups), default=0)
    width = max(0, width)

    offsets: list[Offset] = []
    y = 0
    for group in groups:
        x = 0
        for image in group:
            offsets.append(Offset(x, y))
            x += image.bounds.x1 + margin
        y += max_height(group) + margin

    return GridLayout(
        width=width,
        height=height,
        margin=margin,
        offsets=tuple(offsets),
        row_count=len(groups),
    )


def composite(
    size: tuple[int, int],
    images: Sequence[Raster],
    offsets: Sequence[Offset],
) -> PixelArray:
    """
    Allocate a transparent canvas and paste every image at its offset.

    Pixels are copied as-is, all four channels, with no blending.
    """
    if len(images) != len(offsets):
        msg = (
            f"Got {len(images)} images but {len(offsets)} offsets"
        )
        raise ValueError(msg)
    width, height = size
    canvas = np.zeros((height, width, CHANNELS), dtype=np.uint16)
    for image, offset in zip(images, offsets, strict=True):
        insert_image(canvas, offset, image)
    return canvas


def make_grid(
    images: Sequence[Raster],
    *,
    margin_percent: float,
    cols: int,
) -> tuple[PixelArray, GridLayout]:
    """
    Lay images out in a grid and composite them onto one canvas.

    Returns the populated canvas together with the layout used to build it.
    Geometry errors surface before the canvas is allocated.
    """
    margin = calculate_margin(images, margin_percent)
    groups = partition_rows(images, cols)
    layout = compute_layout(groups, margin)
    canvas = composite(layout.size(), images, layout.offsets)
    return canvas, layout
