"""Image loading and saving with the packer's error types."""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from PIL import Image

from flipbook_packer.constants import COLOR_MODE_RGBA, IMAGE_FORMAT_PNG
from flipbook_packer.errors import DecodeError, WriteError
from flipbook_packer.flipbook.sizing import resize_preserving_aspect

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Iterable

    from flipbook_packer.type_defs import Frame, FrameSet, Tier


def load_frame(path: str | Path) -> Frame:
    """
    Load an image from a file path and convert to RGBA.

    Args:
        path: Path to the image file

    Returns:
        PIL Image in RGBA mode, fully decoded

    Raises:
        DecodeError: If the file is missing, unreadable or not an image

    """
    try:
        with Image.open(path) as img:
            return img.convert(COLOR_MODE_RGBA)
    except FileNotFoundError as e:
        msg = f"Image file not found: '{path}'"
        raise DecodeError(msg) from e
    except (OSError, Image.DecompressionBombError) as e:
        msg = f"Error loading image '{path}': {e!s}"
        raise DecodeError(msg) from e


def load_sequence(paths: Iterable[str | Path], tier: Tier) -> FrameSet:
    """
    Decode files in order, resizing each to the tier's frame size.

    Every frame keeps its own aspect ratio. The first failure aborts the
    whole load so no partial sequence is ever returned.
    """
    return [
        resize_preserving_aspect(load_frame(path), tier.frame_size)
        for path in paths
    ]


def save_png(image: Image.Image, path: str | Path) -> Path:
    """
    Write ``image`` as a PNG and return the written path.

    Raises:
        WriteError: If the file cannot be created or written

    """
    out_path = Path(path)
    try:
        image.save(out_path, format=IMAGE_FORMAT_PNG)
    except OSError as e:
        msg = f"Error writing image '{out_path}': {e!s}"
        raise WriteError(msg) from e
    return out_path
