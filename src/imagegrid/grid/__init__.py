"""
Grid layout split into geometry primitives, layouts, and naming helpers.

The package exposes the most commonly used entry points directly so
callers do not need to know which submodule holds them.
"""

from __future__ import annotations

from . import core, layouts, naming
from .core import (
    Offset,
    Rect,
    calculate_margin,
    check_origin,
    insert_image,
    max_height,
    sum_widths,
)
from .layouts import (
    GridLayout,
    composite,
    compute_layout,
    make_grid,
    partition_rows,
)
from .naming import default_grid_name, resolve_output_path

__all__ = [
    "GridLayout",
    "Offset",
    "Rect",
    "calculate_margin",
    "check_origin",
    "composite",
    "compute_layout",
    "core",
    "default_grid_name",
    "insert_image",
    "layouts",
    "make_grid",
    "max_height",
    "naming",
    "partition_rows",
    "resolve_output_path",
    "sum_widths",
]
