"""Runtime utilities for output, validation, and version helpers."""

from .output import atlas_output_path, prepare_output_directory
from .validation import (
    validate_frame_count,
    validate_grid,
    validate_input_paths,
)
from .version import resolve_project_version

__all__ = [
    "atlas_output_path",
    "prepare_output_directory",
    "resolve_project_version",
    "validate_frame_count",
    "validate_grid",
    "validate_input_paths",
]
