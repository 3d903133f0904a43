"""Image decoding into rasters and PNG encoding of composited canvases."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import png
from PIL import Image

from imagegrid.constants import (
    BIT_DEPTH_8,
    BIT_DEPTH_16,
    CHANNELS,
    OUTPUT_FORMAT,
    SAMPLE_MAX_16,
)
from imagegrid.logging_utils import logger
from imagegrid.raster import Raster

if TYPE_CHECKING:  # pragma: no cover
    from imagegrid.type_defs import BitDepth, PixelArray


def _read_png16(path: str | Path) -> Raster | None:
    """
    Decode a 16-bit PNG at full depth, or return None for other depths.

    Pillow narrows 16-bit colour PNGs to 8 bits, so these are read with
    pypng instead. A tRNS colour key becomes alpha 0 on matching pixels.
    """
    reader = png.Reader(bytes=Path(path).read_bytes())
    width, height, rows, info = reader.read()
    if info["bitdepth"] != BIT_DEPTH_16:
        return None
    logger.debug("Decoding %s at 16 bits per sample", path)

    planes = info["planes"]
    samples = np.vstack([np.asarray(row, dtype=np.uint16) for row in rows])
    samples = samples.reshape(height, width, planes)
    color = samples[..., :planes - 1] if info["alpha"] else samples

    arr = np.empty((height, width, CHANNELS), dtype=np.uint16)
    arr[..., :3] = color
    if info["alpha"]:
        arr[..., 3] = samples[..., -1]
    else:
        arr[..., 3] = SAMPLE_MAX_16
        key = info.get("transparent")
        if key is not None:
            arr[np.all(color == np.asarray(key), axis=-1), 3] = 0
    return Raster(arr)


def load_image(path: str | Path) -> Raster:
    """
    Load an image file and decode it fully into a Raster.

    The format is detected from the file content. The file handle is
    closed as soon as decoding finishes, whether or not it succeeded.
    16-bit PNG files keep every bit of their samples.

    Args:
        path: Path to the image file

    Returns:
        Raster with bounds starting at (0, 0)

    Raises:
        FileNotFoundError: If the image file does not exist
        OSError: If the file cannot be read, is not a valid image, or is
            larger than the decoder's pixel limit

    """
    try:
        with Image.open(path) as img:
            img.load()
            raster = None
            if img.format == OUTPUT_FORMAT:
                raster = _read_png16(path)
            if raster is None:
                raster = Raster.from_pil(img)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise FileNotFoundError(msg) from e
    except (OSError, png.Error, Image.DecompressionBombError) as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise OSError(msg) from e

    logger.info("Loaded image %s (%dx%d)", path, raster.width, raster.height)
    return raster


def load_images(paths: list[str] | list[Path]) -> list[Raster]:
    """Decode every path in order, stopping at the first failure."""
    return [load_image(p) for p in paths]


def _write_png16(canvas: PixelArray, out_path: Path) -> None:
    height, width = canvas.shape[:2]
    rows = canvas.reshape(height, width * CHANNELS)
    writer = png.Writer(
        width=width,
        height=height,
        bitdepth=BIT_DEPTH_16,
        greyscale=False,
        alpha=True,
    )
    with out_path.open("wb") as f:
        writer.write(f, (row.tolist() for row in rows))


def save_png(
    canvas: PixelArray,
    out_path: str | Path,
    *,
    bit_depth: BitDepth = BIT_DEPTH_16,
) -> Path:
    """
    Encode a composited canvas as an RGBA PNG at out_path.

    A 16-bit file keeps every sample exactly; an 8-bit file rounds each
    sample to the nearest 8-bit value. The file is written in place, so a
    failure part way through can leave a partial file behind.

    Raises:
        ValueError: If bit_depth is not 8 or 16
        OSError: If the file cannot be created or written

    """
    out_path = Path(out_path)
    if bit_depth == BIT_DEPTH_16:
        _write_png16(canvas, out_path)
    elif bit_depth == BIT_DEPTH_8:
        Raster(canvas).to_pil().save(out_path, format=OUTPUT_FORMAT)
    else:
        msg = f"bit_depth must be 8 or 16, got {bit_depth}"
        raise ValueError(msg)
    return out_path
