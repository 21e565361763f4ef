"""
Test configuration and shared fixtures for flipbook_packer.

This module defines reusable pytest fixtures for building in-memory and
on-disk test images and for capturing the shared logger. These fixtures
support all test modules in the test suite.

Note:
    This file is automatically loaded by pytest and should not be
    renamed.

"""
from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
from PIL import Image

from flipbook_packer.constants import COLOR_MODE_RGBA
from flipbook_packer.logging_utils import logger


def _gradient_image(width: int, height: int) -> Image.Image:
    """Build an RGBA image whose pixels encode their own coordinates."""
    ys, xs = np.mgrid[0:height, 0:width]
    data = np.stack(
        [
            (xs % 256).astype(np.uint8),
            (ys % 256).astype(np.uint8),
            ((xs + ys) % 256).astype(np.uint8),
            np.full((height, width), 255, dtype=np.uint8),
        ],
        axis=-1,
    )
    return Image.fromarray(data)


@pytest.fixture
def make_image_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory that saves a solid-color image and returns its path."""
    counter = {"n": 0}

    def _make(
        size: tuple[int, int],
        color: str | tuple[int, ...] = "red",
        *,
        name: str | None = None,
        mode: str = COLOR_MODE_RGBA,
    ) -> Path:
        counter["n"] += 1
        path = tmp_path / (name or f"frame_{counter['n']:03d}.png")
        Image.new(mode, size, color=color).save(path)
        return path

    return _make


@pytest.fixture
def gradient_sheet_file(tmp_path: Path) -> Callable[..., Path]:
    """Factory that saves a coordinate gradient sheet to disk."""

    def _make(width: int, height: int, name: str = "sheet.png") -> Path:
        path = tmp_path / name
        _gradient_image(width, height).save(path)
        return path

    return _make


@pytest.fixture
def output_dir(tmp_path: Path) -> Path:
    """Provide an empty directory for written outputs."""
    target = tmp_path / "out"
    target.mkdir()
    return target


@pytest.fixture
def sample_frame() -> Image.Image:
    """Create a 100x50 opaque blue RGBA frame."""
    return Image.new(COLOR_MODE_RGBA, (100, 50), color=(0, 0, 255, 255))


@pytest.fixture(autouse=True)
def enable_logger_propagation(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enable propagation for the packer logger to allow caplog to work."""
    monkeypatch.setattr(logger, "propagate", True)


@pytest.fixture
def make_gradient() -> Callable[[int, int], Image.Image]:
    """Factory for in-memory coordinate gradient images."""
    return _gradient_image
