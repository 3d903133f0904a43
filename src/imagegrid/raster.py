"""In-memory image model used by the grid layout and compositor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np
from PIL import Image

from imagegrid.constants import (
    CHANNELS,
    COLOR_MODE_RGBA,
    SAMPLE_MAX_16,
    SAMPLE_SCALE_8_TO_16,
    WIDE_GREY_MODES,
)
from imagegrid.grid.core import Rect

if TYPE_CHECKING:  # pragma: no cover
    from imagegrid.type_defs import RGBA64, PixelArray


@dataclass(frozen=True, eq=False)
class Raster:
    """
    Read-only grid of 16-bit RGBA pixels with explicit bounds.

    ``pixels`` has shape (height, width, 4) and holds straight
    (non-premultiplied) samples. ``origin`` is the bounds coordinate of
    ``pixels[0, 0]``; decoded images always start at (0, 0), while
    sub-images keep the coordinates they were cut from.
    """

    pixels: PixelArray
    origin: tuple[int, int] = field(default=(0, 0))

    def __post_init__(self) -> None:
        arr = self.pixels
        if arr.ndim != 3 or arr.shape[2] != CHANNELS:  # noqa: PLR2004
            msg = f"Expected a (height, width, 4) array, got {arr.shape}"
            raise ValueError(msg)
        if arr.dtype != np.uint16:
            msg = f"Expected uint16 samples, got {arr.dtype}"
            raise ValueError(msg)
        if arr.flags.writeable:
            frozen = arr.copy()
            frozen.setflags(write=False)
            object.__setattr__(self, "pixels", frozen)

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        color: RGBA64 = (0, 0, 0, 0),
    ) -> Raster:
        """Return a raster of the given size filled with one color."""
        arr = np.empty((height, width, CHANNELS), dtype=np.uint16)
        arr[...] = color
        return cls(arr)

    @classmethod
    def from_pil(cls, img: Image.Image) -> Raster:
        """
        Convert a decoded PIL image to 16-bit RGBA samples.

        8-bit modes are widened by 257 so 0xff maps to 0xffff. 16-bit
        greyscale modes keep their full depth and become opaque.
        """
        if img.mode in WIDE_GREY_MODES:
            grey = np.clip(np.asarray(img), 0, SAMPLE_MAX_16).astype(np.uint16)
            arr = np.empty((*grey.shape, CHANNELS), dtype=np.uint16)
            arr[..., :3] = grey[..., np.newaxis]
            arr[..., 3] = SAMPLE_MAX_16
            return cls(arr)
        rgba = np.asarray(img.convert(COLOR_MODE_RGBA), dtype=np.uint16)
        return cls(rgba * SAMPLE_SCALE_8_TO_16)

    def to_pil(self) -> Image.Image:
        """Return an 8-bit RGBA PIL image, rounding each sample."""
        wide = self.pixels.astype(np.uint32)
        narrow = (wide + SAMPLE_SCALE_8_TO_16 // 2) // SAMPLE_SCALE_8_TO_16
        return Image.fromarray(narrow.astype(np.uint8))

    @property
    def bounds(self) -> Rect:
        """Rectangle covered by the pixels, in bounds coordinates."""
        x0, y0 = self.origin
        height, width = self.pixels.shape[:2]
        return Rect(x0, y0, x0 + width, y0 + height)

    @property
    def width(self) -> int:
        return self.pixels.shape[1]

    @property
    def height(self) -> int:
        return self.pixels.shape[0]

    def rgba64(self, x: int, y: int) -> RGBA64:
        """Return the (r, g, b, a) samples at (x, y); transparent outside."""
        bounds = self.bounds
        if not (bounds.x0 <= x < bounds.x1 and bounds.y0 <= y < bounds.y1):
            return 0, 0, 0, 0
        r, g, b, a = (int(v) for v in self.pixels[y - bounds.y0, x - bounds.x0])
        return r, g, b, a

    def sub_image(self, rect: Rect) -> Raster:
        """
        Return the part of the raster inside rect, sharing pixel data.

        The result keeps rect's coordinates, so its bounds usually do not
        start at (0, 0).
        """
        bounds = self.bounds
        x0, y0 = max(rect.x0, bounds.x0), max(rect.y0, bounds.y0)
        x1, y1 = min(rect.x1, bounds.x1), min(rect.y1, bounds.y1)
        x1, y1 = max(x0, x1), max(y0, y1)
        view = self.pixels[
            y0 - bounds.y0:y1 - bounds.y0,
            x0 - bounds.x0:x1 - bounds.x0,
        ]
        return Raster(view, origin=(x0, y0))
