"""
Flipbook geometry split into sizing, slicing, atlas, and naming helpers.

Everything here is a pure function over Pillow images; reading and
writing files lives in ``flipbook_packer.image_io``.
"""

from __future__ import annotations

from . import atlas, naming, sizing, slicing
from .atlas import layout, new_canvas, pack
from .naming import ensure_png, sequence_base_name, sequence_frame_name
from .sizing import (
    LARGE_TIER,
    MEDIUM_TIER,
    SMALL_TIER,
    fit_long_edge,
    resize_preserving_aspect,
    tier_for,
)
from .slicing import cell_size, slice_lossless, slice_with_resize

__all__ = [
    "LARGE_TIER",
    "MEDIUM_TIER",
    "SMALL_TIER",
    "atlas",
    "cell_size",
    "ensure_png",
    "fit_long_edge",
    "layout",
    "naming",
    "new_canvas",
    "pack",
    "resize_preserving_aspect",
    "sequence_base_name",
    "sequence_frame_name",
    "sizing",
    "slice_lossless",
    "slice_with_resize",
    "slicing",
    "tier_for",
]
