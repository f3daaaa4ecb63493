"""SVG to PNG rendering utilities."""
import logging
from io import BytesIO
from pathlib import Path
from typing import Any, Iterable

import cairosvg
from PIL import Image

from pcb_canvas.config import (
    DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH, DEFAULT_PADDING, DEFAULT_PNG_SCALE,
)
from pcb_canvas.drawer import DEFAULT_PCB_COLOR_MAP, PcbColorMap
from pcb_canvas.pcb import CircuitParser

from .generator import SVGGenerator

logger = logging.getLogger(__name__)


def render_svg_to_png(
    svg_content: str,
    output_path: str | Path | None = None,
    scale: float = DEFAULT_PNG_SCALE,
) -> Image.Image:
    """
    Render SVG content to a PNG image.

    Args:
        svg_content: SVG document as a string
        output_path: Optional path to save the PNG file
        scale: Scale factor for rendering

    Returns:
        PIL Image object
    """
    png_bytes = cairosvg.svg2png(
        bytestring=svg_content.encode("utf-8"),
        scale=scale,
    )

    image = Image.open(BytesIO(png_bytes))

    if output_path:
        image.save(str(output_path))
        logger.info("Saved %dx%d render to %s", image.width, image.height, output_path)

    return image


def render_circuit_to_png(
    source: str | Path | Iterable[dict[str, Any]],
    output_path: str | Path | None = None,
    width: float = DEFAULT_CANVAS_WIDTH,
    height: float = DEFAULT_CANVAS_HEIGHT,
    padding: float = DEFAULT_PADDING,
    color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP,
    scale: float = DEFAULT_PNG_SCALE,
) -> Image.Image:
    """
    Render circuit JSON to PNG.

    Args:
        source: Path to a circuit JSON file, or its decoded records
        output_path: Optional path to save the PNG file
        width, height: Output size in pixels
        padding: Empty border around the elements (pixels)
        color_map: Layer colors
        scale: Scale factor for rasterizing

    Returns:
        PIL Image object
    """
    generator = SVGGenerator(CircuitParser(source), color_map)
    svg_content = generator.generate(width, height, padding)

    return render_svg_to_png(svg_content, output_path, scale)
