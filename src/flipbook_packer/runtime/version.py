"""Installed package version lookup."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

DISTRIBUTION_NAME = "flipbook-packer"
UNKNOWN_VERSION = "0.0.0"


def resolve_project_version() -> str:
    """Return the installed version, or ``"0.0.0"`` in a source checkout."""
    try:
        return importlib_metadata.version(DISTRIBUTION_NAME)
    except importlib_metadata.PackageNotFoundError:
        return UNKNOWN_VERSION
