"""
This test dynamically loads the run_imagegrid.py script using importlib.
"""
import importlib
import subprocess
import sys
from pathlib import Path
from unittest import mock

import pytest
from PIL import Image

SCRIPT = Path(__file__).resolve().parents[1] / "run_imagegrid.py"

# run_imagegrid.py is a top-level script rather than part of the src/
# package, so it is loaded with importlib instead of a regular import.


@pytest.mark.integration
def test_script_main_entry(tmp_path: Path) -> None:
    """Integration test: execute script via subprocess with real images."""
    first = tmp_path / "first.png"
    second = tmp_path / "second.gif"
    out = tmp_path / "grid.png"
    Image.new("RGB", (20, 10), color="blue").save(first)
    Image.new("RGB", (10, 20), color="green").save(second)

    result = subprocess.run(
        [
            sys.executable,
            str(SCRIPT),
            "--cols", "1",
            "--margin", "10",
            "--output-filename", str(out),
            str(first),
            str(second),
        ],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        timeout=120,
        check=False,
    )

    assert result.returncode == 0, (
        f"Script failed:\nSTDOUT: {result.stdout}\nSTDERR: {result.stderr}"
    )
    assert "Grid image saved to" in result.stderr
    with Image.open(out) as img:
        assert img.size == (20, 32)


@pytest.mark.integration
def test_script_reports_failure(tmp_path: Path) -> None:
    result = subprocess.run(
        [sys.executable, str(SCRIPT), str(tmp_path / "missing.png")],
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        timeout=120,
        check=False,
        cwd=tmp_path,
    )
    assert result.returncode == 1
    assert "[ERROR]" in result.stderr


def test_run_imagegrid_not_main() -> None:
    """Ensure run_imagegrid.py does nothing when not executed as __main__."""
    if "run_imagegrid" in sys.modules:
        del sys.modules["run_imagegrid"]

    with mock.patch("imagegrid.cli.main") as mock_main, \
         mock.patch.object(sys, "path", [str(SCRIPT.parent), *sys.path]):
        module = importlib.import_module("run_imagegrid")
        mock_main.assert_not_called()
        assert module.__name__ != "__main__"
