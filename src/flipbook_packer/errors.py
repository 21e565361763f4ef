"""Exception types raised by the flipbook packer."""

from __future__ import annotations


class FlipbookError(Exception):
    """Base class for flipbook packer failures."""


class DecodeError(FlipbookError, OSError):
    """A source image could not be read or decoded."""


class WriteError(FlipbookError, OSError):
    """An output image could not be persisted."""
