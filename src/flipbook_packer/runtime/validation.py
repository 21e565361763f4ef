"""Input validation helpers for runtime parameters."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from flipbook_packer.constants import GRID_MAX, GRID_MIN, MAX_ATLAS_FRAMES
from flipbook_packer.type_defs import GridSpec

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable


def validate_input_paths(paths: Iterable[str | Path]) -> None:
    """Ensure every provided path points to a file."""
    for path in paths:
        if not Path(path).is_file():
            msg = f"Input image not found: {path}"
            raise FileNotFoundError(msg)


def validate_grid(rows: int, columns: int) -> GridSpec:
    """Validate rows and columns and bundle them as a GridSpec."""
    for label, value in (("Rows", rows), ("Columns", columns)):
        if value < GRID_MIN or value > GRID_MAX:
            msg = (f"{label} must be between {GRID_MIN} and {GRID_MAX}, "
                   f"got {value}")
            raise ValueError(msg)
    return GridSpec(rows=rows, columns=columns)


def validate_frame_count(frame_count: int) -> None:
    """Validate that the frames fit on a single atlas."""
    if frame_count < 1:
        msg = "At least one frame is required"
        raise ValueError(msg)
    if frame_count > MAX_ATLAS_FRAMES:
        msg = (f"Atlas holds at most {MAX_ATLAS_FRAMES} frames, "
               f"got {frame_count}")
        raise ValueError(msg)
