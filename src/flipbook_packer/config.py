"""
Configuration schema and loader for the flipbook packer.

Defines Pydantic models representing structured configuration sections
and a TOML-based config loader with validation support.
"""

from pathlib import Path
from typing import Any

import tomlkit
from pydantic import BaseModel, Field

from flipbook_packer.config_defaults import (
    DEFAULT_ATLAS_NAME,
    DEFAULT_COLUMNS,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_ROWS,
)
from flipbook_packer.constants import GRID_MAX, GRID_MIN


class GridConfig(BaseModel):
    """Default rows and columns used to slice a grid sheet."""

    rows: int = Field(DEFAULT_ROWS, ge=GRID_MIN, le=GRID_MAX)
    columns: int = Field(DEFAULT_COLUMNS, ge=GRID_MIN, le=GRID_MAX)


class OutputConfig(BaseModel):
    """Configure where packed atlases and exported frames are written."""

    directory: str = Field(DEFAULT_OUTPUT_DIR)
    atlas_name: str = Field(DEFAULT_ATLAS_NAME, min_length=1)


class LoggingConfig(BaseModel):
    """Select the verbosity of the shared logger."""

    level: str = Field(DEFAULT_LOG_LEVEL)


class FlipbookConfig(BaseModel):
    """
    Root configuration object combining all supported sections.

    Mirrors the structure of config.toml, grouping related parameters
    under logical categories.
    """

    grid: GridConfig = Field(
        default_factory=lambda: GridConfig.model_validate({}),
    )
    output: OutputConfig = Field(
        default_factory=lambda: OutputConfig.model_validate({}),
    )
    logging: LoggingConfig = Field(
        default_factory=lambda: LoggingConfig.model_validate({}),
    )


class ConfigLoader:
    """
    Loads and parses a TOML configuration file into a typed config object.

    Falls back to defaults for any missing subsections or fields.
    """

    @staticmethod
    def load(path: str) -> FlipbookConfig:
        """
        Load a flipbook configuration from a TOML file.

        Returns a validated FlipbookConfig instance based on the file
        contents.
        """
        config_path = Path(path)
        if not config_path.is_file():
            msg = f"Config file not found: {path}"
            raise FileNotFoundError(msg)

        with config_path.open("r", encoding="utf-8") as f:
            doc = tomlkit.load(f)

        return FlipbookConfig.model_validate(doc)


# CLI argument name -> (config section, field)
_CLI_FIELDS: dict[str, tuple[str, str]] = {
    "rows": ("grid", "rows"),
    "columns": ("grid", "columns"),
    "log_level": ("logging", "level"),
}


def build_config_from_cli(
    args: dict[str, Any],
    base_config: FlipbookConfig | None = None,
) -> FlipbookConfig:
    """
    Overlay explicitly provided CLI values on top of a base config.

    Arguments that are missing or ``None`` keep the base value, so a
    config file supplies defaults and the command line wins.
    """
    base = base_config or FlipbookConfig.model_validate({})
    data = base.model_dump()
    for arg_name, (section, field) in _CLI_FIELDS.items():
        value = args.get(arg_name)
        if value is not None:
            data[section][field] = value
    return FlipbookConfig.model_validate(data)
