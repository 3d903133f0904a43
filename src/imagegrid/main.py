"""Top-level orchestration for building a grid image from files."""

from __future__ import annotations

from typing import TYPE_CHECKING

import imagegrid.image_io as ig_image_io
import imagegrid.runtime as ig_runtime
from imagegrid.grid import make_grid, resolve_output_path
from imagegrid.logging_utils import logger

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence
    from pathlib import Path

    from imagegrid.config import ImageGridConfig, LayoutConfig
    from imagegrid.raster import Raster
    from imagegrid.type_defs import PixelArray


def compose_grid(
    images: Sequence[Raster],
    layout_config: LayoutConfig,
) -> PixelArray:
    """Partition, lay out, and composite decoded images into one canvas."""
    canvas, layout = make_grid(
        images,
        margin_percent=layout_config.margin_percent,
        cols=layout_config.cols,
    )
    logger.info(
        "Grid: %d image(s) in %d row(s), canvas %dx%d, margin %d px",
        len(images),
        layout.row_count,
        layout.width,
        layout.height,
        layout.margin,
    )
    for index, offset in enumerate(layout.offsets):
        logger.debug("Image %d placed at (%d, %d)", index, offset.x, offset.y)
    return canvas


def build_image_grid(
    paths: Sequence[str | Path],
    config: ImageGridConfig,
) -> Path:
    """
    Top level entry point: load, compose, and save a grid image.

    Every image is decoded before layout starts. The first failure aborts
    the run and propagates to the caller.
    """
    ig_runtime.validate_input_paths(paths)
    out_path = resolve_output_path(config.output.filename)

    images = ig_image_io.load_images(list(paths))
    canvas = compose_grid(images, config.layout)

    saved = ig_image_io.save_png(
        canvas,
        out_path,
        bit_depth=config.output.bit_depth,
    )
    logger.info("Grid image saved to: %s", saved)
    return saved
