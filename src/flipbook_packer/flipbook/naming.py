"""Filename helpers for packed atlases and exported frame sequences."""

from __future__ import annotations

from pathlib import Path

from flipbook_packer.constants import PNG_SUFFIX, STEM_STRIP_CHARS


def sequence_base_name(source_path: Path) -> str:
    """Return the source stem with surrounding quote characters removed."""
    return Path(source_path).stem.strip(STEM_STRIP_CHARS)


def sequence_frame_name(base_name: str, index: int) -> str:
    """Return the 1-based file name for the frame at ``index``."""
    return f"{base_name} ({index + 1}){PNG_SUFFIX}"


def ensure_png(path: Path) -> Path:
    """Return a path that ends with ``.png`` for output consistency."""
    path = Path(path)
    if path.suffix.lower() == PNG_SUFFIX:
        return path
    return path.with_suffix(PNG_SUFFIX)
