"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

import imagegrid.config as ig_config
import imagegrid.main as ig_main
from imagegrid.config_defaults import (
    DEFAULT_BIT_DEPTH,
    DEFAULT_COLS,
    DEFAULT_MARGIN_PERCENT,
)
from imagegrid.constants import BIT_DEPTH_8, BIT_DEPTH_16
from imagegrid.errors import ImageGridError
from imagegrid.logging_utils import logger, set_verbosity
from imagegrid.runtime import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="imagegrid",
        description="Arrange images into a grid and save it as one PNG.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "imagegrid a.png b.jpg c.gif\n"
            "imagegrid --cols 2 --margin 10 a.png b.png c.png d.png\n"
            "imagegrid --output-filename sheet.png --margin 0 *.png"
        ),
    )
    p.add_argument(
        "images", nargs="*", type=Path,
        help="Image files, placed left to right and then top to bottom")
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--margin", type=float,
        help=("Margin size as a percentage of the tallest image's height "
              f"(default: {DEFAULT_MARGIN_PERCENT:g})"),
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--cols", type=int,
        help=("Number of images per row. Zero or a negative number puts "
              f"all images on the same row (default: {DEFAULT_COLS})"),
        default=argparse.SUPPRESS)

    output = p.add_argument_group("output")
    output.add_argument(
        "--output-filename", type=str,
        help="Name of the file to save the image to "
             "(default: imagegrid-image-<date>.png)",
        default=argparse.SUPPRESS)
    output.add_argument(
        "--bit-depth", type=int, choices=[BIT_DEPTH_8, BIT_DEPTH_16],
        help=f"Bits per PNG sample (default: {DEFAULT_BIT_DEPTH})",
        default=argparse.SUPPRESS)

    cfg = p.add_argument_group("config")
    cfg.add_argument(
        "--config", type=str,
        help="Path to a TOML config file")
    cfg.add_argument(
        "--validate-config-only", action="store_true",
        help="Validate config file and exit without building a grid")

    log = p.add_argument_group("logging").add_mutually_exclusive_group()
    log.add_argument(
        "-v", "--verbose", action="store_true",
        help="Also log per-image placement details")
    log.add_argument(
        "-q", "--quiet", action="store_true",
        help="Only log warnings and errors")

    return p


def log_parameters(
    images: Sequence[Path],
    cfg: ig_config.ImageGridConfig,
    args: argparse.Namespace,
) -> None:
    """Log the effective parameters for this run."""
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Input Images: %d", len(images))
    logger.info("Margin: %g%%", cfg.layout.margin_percent)
    logger.info("Columns: %s",
                cfg.layout.cols if cfg.layout.cols > 0 else "single row")
    logger.info("Output File: %s", cfg.output.filename)
    logger.info("Bit Depth: %d", cfg.output.bit_depth)


def run_from_args(args: argparse.Namespace) -> Path | None:
    """Build a grid image from parsed command-line arguments."""
    base_cfg: ig_config.ImageGridConfig | None = None
    if args.config:
        base_cfg = ig_config.ConfigLoader.load(args.config)
        if args.validate_config_only:
            logger.info("Config %s validated successfully.", args.config)
            return None

    cfg = ig_config.build_config_from_cli(vars(args), base_config=base_cfg)
    log_parameters(args.images, cfg, args)
    return ig_main.build_image_grid(args.images, cfg)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface and return the exit status."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)
    if args.validate_config_only and not args.config:
        arg_parser.error("--validate-config-only requires --config")
    if not args.validate_config_only and not args.images:
        arg_parser.error("the following arguments are required: images")
    set_verbosity(verbose=args.verbose, quiet=args.quiet)

    try:
        run_from_args(args)
    except (ImageGridError, OSError, ValueError) as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
