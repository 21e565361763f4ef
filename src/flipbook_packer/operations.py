"""
Pack and export-to-sequence operations.

Each operation is a stateless function: inputs come in as explicit
parameters and the destination is asked for through a picker callable.
A picker returning ``None`` means the user cancelled; the operation
then writes nothing and returns ``None``.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import flipbook_packer.image_io as fp_image_io
from flipbook_packer import flipbook
from flipbook_packer.logging_utils import logger
from flipbook_packer.runtime.validation import validate_frame_count

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

    from flipbook_packer.type_defs import (
        DestinationPicker,
        FrameSet,
        GridSpec,
    )


def frames_from_sequence(paths: Sequence[str | Path]) -> FrameSet:
    """Load independent frame files sized for their shared tier."""
    validate_frame_count(len(paths))
    tier = flipbook.tier_for(len(paths))
    logger.debug("Sequence of %d frames uses %dpx frames",
                 len(paths), tier.frame_size)
    return fp_image_io.load_sequence(paths, tier)


def frames_from_grid(path: str | Path, grid: GridSpec) -> FrameSet:
    """Load a grid sheet and slice it into frames sized for its tier."""
    validate_frame_count(grid.frame_count)
    tier = flipbook.tier_for(grid.frame_count)
    logger.debug("Grid %dx%d uses %dpx frames",
                 grid.rows, grid.columns, tier.frame_size)
    sheet = fp_image_io.load_frame(path)
    return flipbook.slice_with_resize(sheet, grid, tier)


def export_packed(
    frames: FrameSet,
    choose_destination: DestinationPicker,
) -> Path | None:
    """
    Pack frames onto the atlas and save it where the picker says.

    Returns the written path, or ``None`` if no destination was chosen.
    """
    canvas = flipbook.pack(frames)
    destination = choose_destination()
    if destination is None:
        logger.info("Pack cancelled, no destination selected")
        return None

    saved = fp_image_io.save_png(canvas, flipbook.ensure_png(destination))
    logger.info("Packed %d frames into: %s", len(frames), saved)
    return saved


def export_sequence(
    path: str | Path,
    grid: GridSpec,
    choose_directory: DestinationPicker,
) -> list[Path] | None:
    """
    Slice a grid sheet losslessly and write one numbered PNG per cell.

    Files are written in frame order. If a write fails, the files that
    were already written stay on disk and the error propagates.

    Returns the written paths, or ``None`` if no directory was chosen.
    """
    source = Path(path)
    frames = flipbook.slice_lossless(fp_image_io.load_frame(source), grid)
    directory = choose_directory()
    if directory is None:
        logger.info("Export cancelled, no directory selected")
        return None

    base_name = flipbook.sequence_base_name(source)
    written = [
        fp_image_io.save_png(
            frame,
            Path(directory) / flipbook.sequence_frame_name(base_name, index),
        )
        for index, frame in enumerate(frames)
    ]
    logger.info("Exported %d frames to: %s", len(written), directory)
    return written
