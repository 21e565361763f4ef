"""
End-to-end tests for the pack and export-to-sequence operations.

Destination pickers are plain callables, so cancellation is tested by
returning ``None`` instead of driving a dialog.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import numpy as np
import pytest
from PIL import Image
from pytest_mock import MockerFixture

import flipbook_packer.operations as fp_operations
from flipbook_packer.constants import CANVAS_SIZE
from flipbook_packer.errors import WriteError
from flipbook_packer.type_defs import GridSpec


class TestFramesFromSequence:
    def test_sizes_for_tier(
        self,
        make_image_file: Callable[..., Path],
    ) -> None:
        paths = [make_image_file((1000, 1000)) for _ in range(5)]
        frames = fp_operations.frames_from_sequence(paths)
        assert [f.size for f in frames] == [(256, 256)] * 5

    def test_rejects_empty_sequence(self) -> None:
        with pytest.raises(ValueError, match="At least one frame"):
            fp_operations.frames_from_sequence([])

    def test_rejects_more_than_atlas_capacity(
        self,
        make_image_file: Callable[..., Path],
    ) -> None:
        path = make_image_file((8, 8))
        with pytest.raises(ValueError, match="at most 64"):
            fp_operations.frames_from_sequence([path] * 65)


class TestFramesFromGrid:
    def test_slices_sheet(
        self,
        gradient_sheet_file: Callable[..., Path],
    ) -> None:
        sheet = gradient_sheet_file(2048, 512)
        frames = fp_operations.frames_from_grid(
            sheet, GridSpec(rows=2, columns=4))
        assert [f.size for f in frames] == [(256, 128)] * 8

    def test_rejects_grid_over_capacity(
        self,
        gradient_sheet_file: Callable[..., Path],
    ) -> None:
        sheet = gradient_sheet_file(100, 100)
        with pytest.raises(ValueError, match="at most 64"):
            fp_operations.frames_from_grid(sheet, GridSpec(rows=10, columns=10))


class TestExportPacked:
    def test_writes_atlas(
        self,
        make_image_file: Callable[..., Path],
        output_dir: Path,
    ) -> None:
        frames = fp_operations.frames_from_sequence(
            [make_image_file((1000, 1000)) for _ in range(5)])
        saved = fp_operations.export_packed(
            frames, lambda: output_dir / "atlas.png")
        assert saved == output_dir / "atlas.png"
        with Image.open(saved) as img:
            assert img.size == (CANVAS_SIZE, CANVAS_SIZE)
            assert img.mode == "RGBA"
            assert img.getpixel((800, 100))[3] == 255  # noqa: PLR2004
            assert img.getpixel((800, 800)) == (0, 0, 0, 0)

    def test_enforces_png_suffix(
        self,
        sample_frame: Image.Image,
        output_dir: Path,
    ) -> None:
        saved = fp_operations.export_packed(
            [sample_frame], lambda: output_dir / "atlas.tga")
        assert saved == output_dir / "atlas.png"
        assert saved.is_file()

    def test_cancelled_destination_writes_nothing(
        self,
        sample_frame: Image.Image,
        output_dir: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level("INFO"):
            result = fp_operations.export_packed([sample_frame], lambda: None)
        assert result is None
        assert list(output_dir.iterdir()) == []
        assert "cancelled" in caplog.text

    def test_write_failure_propagates(
        self,
        sample_frame: Image.Image,
        tmp_path: Path,
    ) -> None:
        with pytest.raises(WriteError):
            fp_operations.export_packed(
                [sample_frame], lambda: tmp_path / "nodir" / "atlas.png")


class TestExportSequence:
    def test_writes_numbered_quadrants(
        self,
        gradient_sheet_file: Callable[..., Path],
        output_dir: Path,
    ) -> None:
        sheet = gradient_sheet_file(800, 800, "walk.png")
        written = fp_operations.export_sequence(
            sheet, GridSpec(rows=2, columns=2), lambda: output_dir)
        assert written == [output_dir / f"walk ({n}).png" for n in range(1, 5)]

        with Image.open(sheet) as img:
            source = np.asarray(img)
        quadrants = [
            source[:400, :400],
            source[:400, 400:],
            source[400:, :400],
            source[400:, 400:],
        ]
        for path, expected in zip(written, quadrants, strict=True):
            with Image.open(path) as img:
                assert img.size == (400, 400)
                np.testing.assert_array_equal(np.asarray(img), expected)

    def test_strips_quotes_from_stem(
        self,
        gradient_sheet_file: Callable[..., Path],
        output_dir: Path,
    ) -> None:
        sheet = gradient_sheet_file(20, 10, '"run".png')
        written = fp_operations.export_sequence(
            sheet, GridSpec(rows=1, columns=2), lambda: output_dir)
        assert [p.name for p in written] == ["run (1).png", "run (2).png"]

    def test_cancelled_directory_writes_nothing(
        self,
        gradient_sheet_file: Callable[..., Path],
        output_dir: Path,
    ) -> None:
        sheet = gradient_sheet_file(20, 20)
        result = fp_operations.export_sequence(
            sheet, GridSpec(rows=2, columns=2), lambda: None)
        assert result is None
        assert list(output_dir.iterdir()) == []

    def test_invalid_grid_is_value_error(
        self,
        gradient_sheet_file: Callable[..., Path],
        output_dir: Path,
    ) -> None:
        sheet = gradient_sheet_file(20, 20)
        with pytest.raises(ValueError, match="must be positive"):
            fp_operations.export_sequence(
                sheet, GridSpec(rows=0, columns=1), lambda: output_dir)
        assert list(output_dir.iterdir()) == []

    def test_partial_files_remain_after_write_error(
        self,
        gradient_sheet_file: Callable[..., Path],
        output_dir: Path,
        mocker: MockerFixture,
    ) -> None:
        """Frames written before a failure are left on disk."""
        real_save = fp_operations.fp_image_io.save_png
        calls = {"n": 0}

        def flaky_save(image: Image.Image, path: Path) -> Path:
            calls["n"] += 1
            if calls["n"] == 3:  # noqa: PLR2004
                msg = "disk full"
                raise WriteError(msg)
            return real_save(image, path)

        mocker.patch.object(
            fp_operations.fp_image_io, "save_png", side_effect=flaky_save)
        sheet = gradient_sheet_file(40, 40, "sheet.png")
        with pytest.raises(WriteError, match="disk full"):
            fp_operations.export_sequence(
                sheet, GridSpec(rows=2, columns=2), lambda: output_dir)
        assert sorted(p.name for p in output_dir.iterdir()) == [
            "sheet (1).png",
            "sheet (2).png",
        ]
