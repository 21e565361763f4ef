"""Frame sizing tiers and aspect-preserving resize primitives."""

from __future__ import annotations

from PIL import Image

from flipbook_packer.constants import (
    LARGE_TIER_MIN_FRAMES,
    MEDIUM_TIER_MIN_FRAMES,
)
from flipbook_packer.type_defs import Frame, Tier

LARGE_TIER = Tier(frame_size=128, slots_per_row=8, total_slots=64)
MEDIUM_TIER = Tier(frame_size=256, slots_per_row=4, total_slots=16)
SMALL_TIER = Tier(frame_size=512, slots_per_row=2, total_slots=4)

# Catmull-Rom equivalent cubic filter
RESAMPLE_FILTER = Image.Resampling.BICUBIC


def tier_for(frame_count: int) -> Tier:
    """
    Select the sizing tier for a number of frames.

    Both the per-frame resize target and the atlas slot grid come from
    this function, so the two can never disagree.

    Raises:
        ValueError: If ``frame_count`` is less than one.

    """
    if frame_count < 1:
        msg = f"Frame count must be at least 1, got {frame_count}"
        raise ValueError(msg)
    if frame_count >= LARGE_TIER_MIN_FRAMES:
        return LARGE_TIER
    if frame_count >= MEDIUM_TIER_MIN_FRAMES:
        return MEDIUM_TIER
    return SMALL_TIER


def fit_long_edge(width: int, height: int, target: int) -> tuple[int, int]:
    """
    Return output dimensions whose long edge equals ``target``.

    The short edge is scaled by the source ratio and truncated toward
    zero, with a floor of one pixel for extreme aspect ratios. Square
    sources take the height branch, which yields ``(target, target)``.
    """
    if width <= 0 or height <= 0:
        msg = f"Source dimensions must be positive, got {width}x{height}"
        raise ValueError(msg)
    if target <= 0:
        msg = f"Target edge must be positive, got {target}"
        raise ValueError(msg)

    smaller = float(min(width, height))
    larger = float(max(width, height))
    short_edge = max(1, int(target * smaller / larger))
    if width > height:
        return target, short_edge
    return short_edge, target


def resize_preserving_aspect(image: Image.Image, target: int) -> Frame:
    """Resample ``image`` so its long edge is ``target`` pixels."""
    size = fit_long_edge(image.width, image.height, target)
    return image.resize(size, RESAMPLE_FILTER)
