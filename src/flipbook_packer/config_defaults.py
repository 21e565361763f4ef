"""Shared default values for user-facing configuration settings."""

# Grid
DEFAULT_ROWS = 1
DEFAULT_COLUMNS = 1

# Output
DEFAULT_OUTPUT_DIR = "out"
DEFAULT_ATLAS_NAME = "atlas.png"

# Logging
DEFAULT_LOG_LEVEL = "INFO"
