"""Keepout zone rendering: clipped diagonal hatch plus a dashed border."""
import logging
import math

from pcb_canvas.pcb.models import PcbKeepout
from pcb_canvas.pcb.transform import Matrix

from .colors import DEFAULT_PCB_COLOR_MAP, PcbColorMap
from .shapes import draw_circle, draw_rect
from .styles import KEEPOUT_BORDER_WIDTH, KEEPOUT_HATCH_SPACING, KEEPOUT_HATCH_WIDTH
from .surface import DrawingSurface, surface_state

logger = logging.getLogger(__name__)


def hatch_offsets(diagonal: float, spacing: float) -> list[float]:
    """
    Offsets of the hatch lines: from -diagonal up to (not including)
    2 x diagonal, stepping by spacing. Non-positive spacing gives no lines.
    """
    if spacing <= 0:
        return []
    offsets = []
    offset = -diagonal
    while offset < diagonal * 2:
        offsets.append(offset)
        offset += spacing
    return offsets


def _stroke_hatch(
    surface: DrawingSurface,
    lines: list[tuple[float, float, float, float]],
    color: str,
    width: float,
) -> None:
    surface.set_line_dash([])
    for x1, y1, x2, y2 in lines:
        surface.begin_path()
        surface.move_to(x1, y1)
        surface.line_to(x2, y2)
        surface.stroke(color, width)


def _draw_rect_keepout(
    surface: DrawingSurface, keepout: PcbKeepout, real_to_canvas: Matrix, color: str
) -> None:
    cx, cy = real_to_canvas.apply(*keepout.center)
    scale = real_to_canvas.scale_factor
    width = keepout.width * scale
    height = keepout.height * scale
    half_w, half_h = width / 2, height / 2
    diagonal = math.hypot(width, height)

    with surface_state(surface):
        surface.translate(cx, cy)
        if keepout.rotation:
            surface.rotate(-math.radians(keepout.rotation))

        surface.begin_path()
        surface.rect(-half_w, -half_h, width, height)
        surface.clip()

        # Each line spans the full diagonal so the clip always trims it
        lines = [
            (-half_w + offset, -half_h, -half_w + offset + diagonal, -half_h + diagonal)
            for offset in hatch_offsets(diagonal, KEEPOUT_HATCH_SPACING * scale)
        ]
        _stroke_hatch(surface, lines, color, KEEPOUT_HATCH_WIDTH * scale)

    draw_rect(
        surface, keepout.center, keepout.width, keepout.height, real_to_canvas,
        stroke=color,
        stroke_width=KEEPOUT_BORDER_WIDTH,
        rotation=keepout.rotation,
        is_stroke_dashed=True,
    )


def _draw_circle_keepout(
    surface: DrawingSurface, keepout: PcbKeepout, real_to_canvas: Matrix, color: str
) -> None:
    cx, cy = real_to_canvas.apply(*keepout.center)
    scale = real_to_canvas.scale_factor
    radius = keepout.radius * scale
    diagonal = radius * 2

    with surface_state(surface):
        surface.translate(cx, cy)

        surface.begin_path()
        surface.arc(0, 0, radius, 0, 2 * math.pi)
        surface.clip()

        lines = [
            (offset - diagonal, -diagonal, offset + diagonal, diagonal)
            for offset in hatch_offsets(diagonal, KEEPOUT_HATCH_SPACING * scale)
        ]
        _stroke_hatch(surface, lines, color, KEEPOUT_HATCH_WIDTH * scale)

    draw_circle(
        surface, keepout.center, keepout.radius, real_to_canvas,
        stroke=color,
        stroke_width=KEEPOUT_BORDER_WIDTH,
        is_stroke_dashed=True,
    )


def draw_pcb_keepout(
    surface: DrawingSurface,
    keepout: PcbKeepout,
    real_to_canvas: Matrix,
    color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP,
) -> None:
    """
    Draw a keepout zone.

    Rect and circle keepouts get a 45 degree hatch clipped to their outline and
    a dashed border. Other shapes draw nothing.
    """
    if keepout.shape == "rect":
        _draw_rect_keepout(surface, keepout, real_to_canvas, color_map.keepout)
    elif keepout.shape == "circle":
        _draw_circle_keepout(surface, keepout, real_to_canvas, color_map.keepout)
    else:
        logger.debug("Skipping keepout %s with shape %r", keepout.pcb_keepout_id, keepout.shape)
