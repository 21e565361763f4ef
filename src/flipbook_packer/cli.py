"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

import flipbook_packer.config as fp_config
import flipbook_packer.operations as fp_operations
from flipbook_packer import flipbook
from flipbook_packer.constants import GRID_MAX, GRID_MIN
from flipbook_packer.errors import FlipbookError
from flipbook_packer.logging_utils import logger, set_log_level
from flipbook_packer.runtime import (
    atlas_output_path,
    prepare_output_directory,
    resolve_project_version,
    validate_grid,
    validate_input_paths,
)

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Callable, Sequence

    from flipbook_packer.type_defs import DestinationPicker, FrameSet

CANCEL_ANSWERS = frozenset({"q", "quit", "cancel"})


def _add_source_arguments(
    parser: argparse.ArgumentParser,
    *,
    allow_sequence: bool,
) -> None:
    """Register the input image arguments shared by the subcommands."""
    source = parser.add_argument_group("input")
    if allow_sequence:
        group = source.add_mutually_exclusive_group(required=True)
        group.add_argument(
            "--sequence", type=Path, nargs="+", metavar="FILE",
            help="Ordered frame images, one file per frame")
        group.add_argument(
            "--sheet", type=Path, metavar="FILE",
            help="Single grid sheet image sliced into rows x columns")
    else:
        source.add_argument(
            "--sheet", type=Path, metavar="FILE", required=True,
            help="Grid sheet image sliced into rows x columns")
    source.add_argument(
        "--rows", type=int, default=None,
        help=f"Grid rows ({GRID_MIN}-{GRID_MAX}, default from config)")
    source.add_argument(
        "--columns", type=int, default=None,
        help=f"Grid columns ({GRID_MIN}-{GRID_MAX}, default from config)")


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="flipbook-packer",
        description="Pack flipbook frames into a 1024x1024 texture atlas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "flipbook-packer pack --sequence f1.png f2.png f3.png "
            "--out atlas.png\n"
            "flipbook-packer pack --sheet sheet.png --rows 2 --columns 4\n"
            "flipbook-packer export-sequence --sheet sheet.png --rows 2 "
            "--columns 4 --out-dir frames\n\n"
            "Note:\n"
            "  Without --out or --out-dir you are prompted for a "
            "destination; answer q to cancel."
        ),
    )
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")
    p.add_argument(
        "--config", type=str,
        help="Path to config.toml file")
    p.add_argument(
        "--log-level", type=str, default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default from config)")

    commands = p.add_subparsers(dest="command", required=True)

    pack = commands.add_parser(
        "pack", help="Pack frames into a single atlas PNG")
    _add_source_arguments(pack, allow_sequence=True)
    pack.add_argument(
        "--out", type=Path, default=None,
        help="Atlas PNG path (prompted for when omitted)")

    plan = commands.add_parser(
        "plan", help="Show the tier and frame placements without writing")
    _add_source_arguments(plan, allow_sequence=True)

    export = commands.add_parser(
        "export-sequence",
        help="Write each grid cell of a sheet to its own lossless PNG")
    _add_source_arguments(export, allow_sequence=False)
    export.add_argument(
        "--out-dir", type=Path, default=None,
        help="Destination directory (prompted for when omitted)")

    return p


def prompt_for_path(
    label: str,
    default: Path,
    input_fn: Callable[[str], str] | None = None,
) -> Path | None:
    """
    Ask for a destination on stdin.

    An empty answer accepts ``default``. A cancel word, end of input, or
    Ctrl-C returns ``None``. ``input_fn`` defaults to :func:`input`.
    """
    read = input_fn or input
    try:
        answer = read(f"{label} [{default}] (q to cancel): ").strip()
    except (EOFError, KeyboardInterrupt):
        return None
    if answer.lower() in CANCEL_ANSWERS:
        return None
    return Path(answer) if answer else default


def _atlas_picker(
    args: argparse.Namespace,
    cfg: fp_config.FlipbookConfig,
) -> DestinationPicker:
    """Return the destination picker for the packed atlas."""
    def pick() -> Path | None:
        destination = args.out
        if destination is None:
            destination = prompt_for_path(
                "Save atlas to",
                atlas_output_path(cfg.output.directory, cfg.output.atlas_name),
            )
        if destination is not None:
            prepare_output_directory(Path(destination).parent)
        return destination

    return pick


def _directory_picker(
    args: argparse.Namespace,
    cfg: fp_config.FlipbookConfig,
) -> DestinationPicker:
    """Return the destination picker for exported frame files."""
    def pick() -> Path | None:
        directory = args.out_dir
        if directory is None:
            directory = prompt_for_path(
                "Export frames to", Path(cfg.output.directory))
        if directory is not None:
            prepare_output_directory(directory)
        return directory

    return pick


def log_parameters(
    args: argparse.Namespace,
    cfg: fp_config.FlipbookConfig,
) -> None:
    """Log all user-provided parameters."""
    if getattr(args, "config", None):
        logger.info("Loaded config from: %s", args.config)
    logger.info("Command: %s", args.command)
    if getattr(args, "sequence", None):
        logger.info("Sequence frames: %d", len(args.sequence))
    else:
        logger.info("Grid sheet: %s", args.sheet)
        logger.info("Rows: %d", cfg.grid.rows)
        logger.info("Columns: %d", cfg.grid.columns)


def _load_frames(
    args: argparse.Namespace,
    cfg: fp_config.FlipbookConfig,
) -> FrameSet:
    """Load frames from either the sequence or the grid sheet arguments."""
    if getattr(args, "sequence", None):
        validate_input_paths(args.sequence)
        return fp_operations.frames_from_sequence(args.sequence)
    validate_input_paths([args.sheet])
    grid = validate_grid(cfg.grid.rows, cfg.grid.columns)
    return fp_operations.frames_from_grid(args.sheet, grid)


def print_plan(frames: FrameSet) -> None:
    """Print the tier and atlas placement of every frame."""
    tier = flipbook.tier_for(len(frames))
    print(f"Frames: {len(frames)}")  # noqa: T201
    print(  # noqa: T201
        f"Tier: {tier.frame_size}px frames, {tier.slots_per_row} per row, "
        f"{tier.total_slots} slots")
    for placement in flipbook.layout(frames):
        print(  # noqa: T201
            f"  #{placement.index + 1}: {placement.width}x{placement.height}"
            f" at ({placement.x}, {placement.y})")


def run_from_args(args: argparse.Namespace) -> int:
    """Run the selected command and return the process exit status."""
    base_cfg: fp_config.FlipbookConfig | None = None
    if args.config:
        base_cfg = fp_config.ConfigLoader.load(args.config)

    cfg = fp_config.build_config_from_cli(vars(args), base_config=base_cfg)
    set_log_level(cfg.logging.level)
    log_parameters(args, cfg)

    if args.command == "export-sequence":
        validate_input_paths([args.sheet])
        grid = validate_grid(cfg.grid.rows, cfg.grid.columns)
        fp_operations.export_sequence(
            args.sheet, grid, _directory_picker(args, cfg))
        return 0

    frames = _load_frames(args, cfg)
    if args.command == "plan":
        print_plan(frames)
        return 0

    fp_operations.export_packed(frames, _atlas_picker(args, cfg))
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command-line interface."""
    arg_parser = build_arg_parser()
    args = arg_parser.parse_args(argv)

    try:
        return run_from_args(args)
    except ValueError as exc:
        arg_parser.error(str(exc))
    except (FlipbookError, FileNotFoundError) as exc:
        logger.error("%s", exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
