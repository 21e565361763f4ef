"""
Grid sheet slicing.

Cells are addressed row-major from the top-left corner: frame ``i``
sits at ``row = i // columns`` and ``column = i % columns``. Cell sizes
use integer division, so trailing pixels on the right and bottom edges
of a sheet that is not evenly divisible are dropped.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from flipbook_packer.flipbook.sizing import RESAMPLE_FILTER, fit_long_edge

if TYPE_CHECKING:  # pragma: no cover
    from PIL import Image

    from flipbook_packer.type_defs import FrameSet, GridSpec, Tier


def cell_size(width: int, height: int, grid: GridSpec) -> tuple[int, int]:
    """Return the truncated cell dimensions of a sheet."""
    if grid.rows < 1 or grid.columns < 1:
        msg = (f"Rows and columns must be positive, got "
               f"{grid.rows}x{grid.columns}")
        raise ValueError(msg)
    cell_w = width // grid.columns
    cell_h = height // grid.rows
    if cell_w == 0 or cell_h == 0:
        msg = (f"Image {width}x{height} is too small for "
               f"{grid.rows} rows and {grid.columns} columns")
        raise ValueError(msg)
    return cell_w, cell_h


def crop_cells(
    image: Image.Image,
    grid: GridSpec,
    cell_w: int,
    cell_h: int,
) -> FrameSet:
    """Crop every grid cell of ``cell_w`` x ``cell_h`` in row-major order."""
    frames: FrameSet = []
    for index in range(grid.frame_count):
        row, column = divmod(index, grid.columns)
        left = column * cell_w
        top = row * cell_h
        frames.append(image.crop((left, top, left + cell_w, top + cell_h)))
    return frames


def slice_with_resize(
    image: Image.Image,
    grid: GridSpec,
    tier: Tier,
) -> FrameSet:
    """
    Slice a grid sheet into frames sized for the atlas tier.

    The whole sheet is resized once so every cell's long edge becomes
    ``tier.frame_size``, then the cells are cropped from the result.
    """
    old_w, old_h = cell_size(image.width, image.height, grid)
    new_w, new_h = fit_long_edge(old_w, old_h, tier.frame_size)
    resized = image.resize(
        (new_w * grid.columns, new_h * grid.rows),
        RESAMPLE_FILTER,
    )
    return crop_cells(resized, grid, new_w, new_h)


def slice_lossless(image: Image.Image, grid: GridSpec) -> FrameSet:
    """Slice a grid sheet into full-resolution frames without resampling."""
    cell_w, cell_h = cell_size(image.width, image.height, grid)
    return crop_cells(image, grid, cell_w, cell_h)
