"""
Configuration schema and loader for the image grid tool.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support. CLI values are
layered on top of a loaded file by build_config_from_cli.
"""

from pathlib import Path
from typing import Any, Literal

import tomlkit
from pydantic import BaseModel, Field

from imagegrid.config_defaults import (
    DEFAULT_BIT_DEPTH,
    DEFAULT_COLS,
    DEFAULT_MARGIN_PERCENT,
    default_output_filename,
)


class LayoutConfig(BaseModel):
    """Control spacing and row size of the grid."""

    margin_percent: float = Field(
        DEFAULT_MARGIN_PERCENT, ge=0, allow_inf_nan=False)
    # Zero or negative puts every image on one row
    cols: int = DEFAULT_COLS


class OutputConfig(BaseModel):
    """Configure the output file."""

    filename: str = Field(default_factory=default_output_filename)
    bit_depth: Literal[8, 16] = DEFAULT_BIT_DEPTH


class ImageGridConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of the TOML config file.
    """

    layout: LayoutConfig = Field(
        default_factory=lambda: LayoutConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> ImageGridConfig:
        """
        Load a grid configuration from a TOML file.

        Returns a validated ImageGridConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return ImageGridConfig.model_validate(doc.unwrap())


# CLI argument name -> (config section, field)
_CLI_FIELDS: dict[str, tuple[str, str]] = {
    "margin": ("layout", "margin_percent"),
    "cols": ("layout", "cols"),
    "output_filename": ("output", "filename"),
    "bit_depth": ("output", "bit_depth"),
}


def build_config_from_cli(
    args: dict[str, Any],
    base_config: ImageGridConfig | None = None,
) -> ImageGridConfig:
    """
    Merge explicitly given CLI values over a base configuration.

    Arguments that are missing or None leave the base value untouched.
    The merged result is validated again so CLI values obey the same
    constraints as file values.
    """
    base = base_config or ImageGridConfig.model_validate({})
    data = base.model_dump()
    for arg_name, (section, key) in _CLI_FIELDS.items():
        value = args.get(arg_name)
        if value is not None:
            data[section][key] = value
    return ImageGridConfig.model_validate(data)
