"""Configuration constants for pcb_canvas."""
from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent

# Where renders land when no path is given
OUTPUT_DIR = PROJECT_ROOT / "output"

# Default surface size (pixels)
DEFAULT_CANVAS_WIDTH = 800
DEFAULT_CANVAS_HEIGHT = 600

# Empty border kept around fitted elements (pixels)
DEFAULT_PADDING = 20.0

# Rasterization scale applied when converting SVG to PNG
DEFAULT_PNG_SCALE = 1.0
