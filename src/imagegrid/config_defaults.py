"""Shared default values for user-facing configuration settings."""
from datetime import date

from imagegrid.constants import (
    BIT_DEPTH_16,
    OUTPUT_DATE_FORMAT,
    OUTPUT_NAME_PREFIX,
    OUTPUT_SUFFIX,
)

# Layout
DEFAULT_MARGIN_PERCENT = 5.0
# Zero or negative puts every image on the same row
DEFAULT_COLS = -1

# Output
DEFAULT_BIT_DEPTH = BIT_DEPTH_16


def default_output_filename(today: date | None = None) -> str:
    """Return the dated default output name, e.g. imagegrid-image-2024-01-31.png."""
    day = today or date.today()
    return (
        f"{OUTPUT_NAME_PREFIX}-{day.strftime(OUTPUT_DATE_FORMAT)}"
        f"{OUTPUT_SUFFIX}"
    )
