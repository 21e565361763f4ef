"""Integration test for the run_packer.py wrapper script."""
import subprocess
import sys
from pathlib import Path

import pytest
from PIL import Image

SCRIPT = Path(__file__).resolve().parent.parent / "run_packer.py"


@pytest.mark.integration
def test_script_packs_atlas(tmp_path: Path) -> None:
    """Execute the script via subprocess with real images."""
    frames = []
    for index, color in enumerate(["red", "green", "blue"]):
        path = tmp_path / f"frame_{index}.png"
        Image.new("RGBA", (48, 64), color=color).save(path)
        frames.append(str(path))
    out = tmp_path / "atlas.png"

    result = subprocess.run(
        [sys.executable, str(SCRIPT), "pack", "--sequence", *frames,
         "--out", str(out)],
        capture_output=True,
        text=True,
        timeout=120,
        check=False,
    )

    assert result.returncode == 0, (
        f"Script failed:\nSTDOUT: {result.stdout}\nSTDERR: {result.stderr}"
    )
    assert "Packed 3 frames" in result.stderr
    with Image.open(out) as img:
        assert img.size == (1024, 1024)
