"""
Defines shared type aliases for the image grid tool.

Centralizes reusable type hints to improve consistency and readability.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Literal

import numpy as np
import numpy.typing as npt

if TYPE_CHECKING:  # pragma: no cover
    from imagegrid.raster import Raster

BitDepth = Literal[8, 16]
RGBA64 = tuple[int, int, int, int]
# (height, width, 4) array of uint16 samples
PixelArray = npt.NDArray[np.uint16]
ImageGroup = list["Raster"]
