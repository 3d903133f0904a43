"""Path helpers for grid image outputs."""

from __future__ import annotations

from datetime import date
from pathlib import Path

from imagegrid.config_defaults import default_output_filename
from imagegrid.constants import OUTPUT_SUFFIX
from imagegrid.logging_utils import logger


def default_grid_name(out_dir: Path, today: date | None = None) -> Path:
    """Build the dated default filename inside out_dir."""
    return out_dir / default_output_filename(today)


def resolve_output_path(filename: str | Path | None) -> Path:
    """
    Return the destination path for the grid image.

    Falls back to the dated default name in the working directory. The
    path is kept as given even when its suffix is not ``.png``, since the
    output is always encoded as PNG.
    """
    if filename is None or str(filename) == "":
        return default_grid_name(Path())
    path = Path(filename)
    if path.suffix.lower() != OUTPUT_SUFFIX:
        logger.warning(
            "Output %s does not end in %s; writing PNG data anyway.",
            path,
            OUTPUT_SUFFIX,
        )
    return path
