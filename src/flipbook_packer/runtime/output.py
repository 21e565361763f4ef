"""Helpers for managing output locations."""

from __future__ import annotations

from pathlib import Path

from flipbook_packer.errors import WriteError
from flipbook_packer.flipbook.naming import ensure_png
from flipbook_packer.logging_utils import logger


def prepare_output_directory(directory: str | Path) -> Path:
    """
    Create the output directory if needed and return it.

    Raises:
        WriteError: If the directory cannot be created.

    """
    resolved_path = Path(directory)
    if resolved_path.is_dir():
        return resolved_path
    try:
        resolved_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        msg = f"Failed to create output directory '{resolved_path}': {exc}"
        raise WriteError(msg) from exc
    logger.info("Created output directory: %s", resolved_path)
    return resolved_path


def atlas_output_path(directory: str | Path, atlas_name: str) -> Path:
    """Return the default atlas path inside ``directory``."""
    return ensure_png(Path(directory) / atlas_name)
