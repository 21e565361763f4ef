"""Public package exports for the flipbook packer."""

from __future__ import annotations

from .errors import DecodeError, FlipbookError, WriteError
from .operations import (
    export_packed,
    export_sequence,
    frames_from_grid,
    frames_from_sequence,
)
from .type_defs import GridSpec, Placement, Tier

__all__ = [
    "DecodeError",
    "FlipbookError",
    "GridSpec",
    "Placement",
    "Tier",
    "WriteError",
    "export_packed",
    "export_sequence",
    "frames_from_grid",
    "frames_from_sequence",
]
