"""
run_imagegrid.py — CLI Entry Point

This script serves as the command-line interface entry point for the
image grid tool. It forwards execution to the CLI logic defined in
`src/imagegrid/cli.py`.

Usage:
    python run_imagegrid.py [--cols N] [--margin PCT] image1 image2 ...

This wrapper allows you to run the tool directly without needing to
modify PYTHONPATH or install the project as a package.

For help on available options, run:
    python run_imagegrid.py --help
"""
import sys
# Source code in src/ subdirectory
from pathlib import Path
sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

import imagegrid.cli as ig_cli

if __name__ == "__main__":
    sys.exit(ig_cli.main())
