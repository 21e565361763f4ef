"""
Constants used internally by the flipbook packer.

These are implementation-level values that should not be overridden
via config files or CLI arguments.
"""

# Packed atlas canvas (single fixed square)
CANVAS_SIZE = 1024

# Frame count thresholds for the sizing tiers
LARGE_TIER_MIN_FRAMES = 17
MEDIUM_TIER_MIN_FRAMES = 5
MAX_ATLAS_FRAMES = 64

# Grid bounds (rows and columns each)
GRID_MIN = 1
GRID_MAX = 256

# Internal color/format constants
COLOR_MODE_RGBA = "RGBA"
COLOR_TRANSPARENT = (0, 0, 0, 0)
IMAGE_FORMAT_PNG = "PNG"
PNG_SUFFIX = ".png"

# Characters trimmed from source stems before numbering exported frames
STEM_STRIP_CHARS = '"'
