"""
Defines shared types for the flipbook packer.

Frames are plain Pillow images in RGBA mode; the dataclasses here carry
the grid and tier geometry between the sizing, slicing, and atlas steps.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from PIL import Image

Frame = Image.Image
FrameSet = list[Image.Image]
DestinationPicker = Callable[[], Path | None]


@dataclass(frozen=True, slots=True)
class Tier:
    """Per-frame edge length and atlas slot geometry for a frame count."""

    frame_size: int
    slots_per_row: int
    total_slots: int


@dataclass(frozen=True, slots=True)
class GridSpec:
    """How a grid sheet maps to rows and columns of cells."""

    rows: int
    columns: int

    @property
    def frame_count(self) -> int:
        """Return the number of cells in the grid."""
        return self.rows * self.columns


@dataclass(frozen=True, slots=True)
class Placement:
    """Where one frame lands on the atlas canvas."""

    index: int
    x: int
    y: int
    width: int
    height: int
