"""Atlas composition: laying frames out on the fixed square canvas."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image

from flipbook_packer.constants import (
    CANVAS_SIZE,
    COLOR_MODE_RGBA,
    COLOR_TRANSPARENT,
)
from flipbook_packer.flipbook.sizing import tier_for
from flipbook_packer.type_defs import Placement

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence


def layout(frames: Sequence[Image.Image]) -> list[Placement]:
    """
    Compute where each frame is pasted on the atlas.

    Frames fill the tier's slots row-major and are centered in their
    cell; odd leftover pixels go to the right and bottom.

    Raises:
        ValueError: If there are more frames than tier slots, or a frame
            is larger than its cell.

    """
    tier = tier_for(len(frames))
    if len(frames) > tier.total_slots:
        msg = (f"{len(frames)} frames do not fit the "
               f"{tier.total_slots}-slot atlas")
        raise ValueError(msg)

    placements: list[Placement] = []
    for index, frame in enumerate(frames):
        if frame.width > tier.frame_size or frame.height > tier.frame_size:
            msg = (f"Frame {index} is {frame.width}x{frame.height}, larger "
                   f"than the {tier.frame_size}px cell")
            raise ValueError(msg)
        row, column = divmod(index, tier.slots_per_row)
        x = column * tier.frame_size + (tier.frame_size - frame.width) // 2
        y = row * tier.frame_size + (tier.frame_size - frame.height) // 2
        placements.append(
            Placement(
                index=index,
                x=x,
                y=y,
                width=frame.width,
                height=frame.height,
            ),
        )
    return placements


def new_canvas() -> Image.Image:
    """Return a fully transparent atlas canvas."""
    return Image.new(
        COLOR_MODE_RGBA,
        (CANVAS_SIZE, CANVAS_SIZE),
        COLOR_TRANSPARENT,
    )


def pack(frames: Sequence[Image.Image]) -> Image.Image:
    """Composite frames onto a new canvas with source-over blending."""
    canvas = new_canvas()
    for placement, frame in zip(layout(frames), frames, strict=True):
        if frame.mode != COLOR_MODE_RGBA:
            frame = frame.convert(COLOR_MODE_RGBA)  # noqa: PLW2901
        canvas.alpha_composite(frame, dest=(placement.x, placement.y))
    return canvas
