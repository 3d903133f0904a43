"""Input validation helpers for runtime configuration."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def validate_input_paths(paths: Sequence[str | Path]) -> None:
    """Ensure at least one path is given and every path points to a file."""
    if not paths:
        msg = "No input images provided"
        raise ValueError(msg)
    for path in paths:
        if not Path(path).is_file():
            msg = f"Image file not found: '{path}'"
            raise FileNotFoundError(msg)
