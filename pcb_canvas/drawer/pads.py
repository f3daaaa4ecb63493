"""SMT pad rendering."""
import logging
from typing import Callable, Optional

from pcb_canvas.pcb.models import (
    CircleSmtPad, PillSmtPad, PolygonSmtPad, RectSmtPad, RotatedPillSmtPad,
    RotatedRectSmtPad, SmtPad, SoldermaskMargins, resolve_margins,
)
from pcb_canvas.pcb.transform import Matrix

from .colors import DEFAULT_PCB_COLOR_MAP, PcbColorMap
from .commands import DrawCommand, DrawStage, emit_commands, order_commands
from .shapes import CircleGeometry, Geometry, PillGeometry, PolygonGeometry, RectGeometry
from .soldermask import soldermask_commands
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


def _rect_geometry(pad: RectSmtPad) -> RectGeometry:
    return RectGeometry(pad.center, pad.width, pad.height, border_radius=pad.corner_radius)


def _rotated_rect_geometry(pad: RotatedRectSmtPad) -> RectGeometry:
    return RectGeometry(
        pad.center, pad.width, pad.height,
        rotation=pad.ccw_rotation,
        border_radius=pad.corner_radius,
    )


def _circle_geometry(pad: CircleSmtPad) -> CircleGeometry:
    return CircleGeometry(pad.center, pad.radius)


def _pill_geometry(pad: PillSmtPad) -> PillGeometry:
    return PillGeometry(pad.center, pad.width, pad.height)


def _rotated_pill_geometry(pad: RotatedPillSmtPad) -> PillGeometry:
    return PillGeometry(pad.center, pad.width, pad.height, rotation=pad.ccw_rotation)


def _polygon_geometry(pad: PolygonSmtPad) -> Optional[PolygonGeometry]:
    if len(pad.points) < 3:
        return None
    return PolygonGeometry(tuple(pad.points))


# One handler per pad variant, keyed by exact type
PAD_GEOMETRY_HANDLERS: dict[type, Callable[..., Optional[Geometry]]] = {
    RectSmtPad: _rect_geometry,
    RotatedRectSmtPad: _rotated_rect_geometry,
    CircleSmtPad: _circle_geometry,
    PillSmtPad: _pill_geometry,
    RotatedPillSmtPad: _rotated_pill_geometry,
    PolygonSmtPad: _polygon_geometry,
}


def pad_geometry(pad: SmtPad) -> Optional[Geometry]:
    """
    Copper outline of a pad.

    Returns None for polygons with fewer than 3 points.

    Raises:
        TypeError: If ``pad`` is not an SMT pad variant
    """
    handler = PAD_GEOMETRY_HANDLERS.get(type(pad))
    if handler is None:
        raise TypeError(f"No geometry handler for {type(pad).__name__}")
    return handler(pad)


def pad_commands(
    geometry: Geometry,
    margins: SoldermaskMargins,
    is_covered: bool,
    layer: str,
    color_map: PcbColorMap,
) -> list[DrawCommand]:
    """
    Draw commands for one copper shape with its soldermask treatment.

    Covered pads skip relief and ring and get a soldermask overlay instead.
    """
    copper = color_map.copper_color(layer)
    soldermask = color_map.soldermask_color(layer)

    commands = [DrawCommand(DrawStage.COPPER, geometry, copper)]
    if is_covered:
        commands.append(DrawCommand(DrawStage.OVERLAY, geometry, soldermask))
    else:
        commands.extend(
            soldermask_commands(geometry, margins, copper, soldermask, color_map.substrate)
        )
    return commands


def smtpad_commands(
    pad: SmtPad, color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP
) -> list[DrawCommand]:
    """Draw commands for an SMT pad, in canonical stage order."""
    geometry = pad_geometry(pad)
    if geometry is None:
        logger.debug("Skipping polygon pad %s with fewer than 3 points", pad.pcb_smtpad_id)
        return []

    commands = pad_commands(
        geometry,
        resolve_margins(pad),
        pad.is_covered_with_solder_mask,
        pad.layer,
        color_map,
    )
    return order_commands(commands)


def draw_pcb_smtpad(
    surface: DrawingSurface,
    pad: SmtPad,
    real_to_canvas: Matrix,
    color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP,
) -> None:
    """
    Draw an SMT pad with its soldermask relief, ring or overlay.

    Args:
        surface: Target surface
        pad: Pad to draw
        real_to_canvas: Real-to-surface transform
        color_map: Layer colors
    """
    emit_commands(surface, smtpad_commands(pad, color_map), real_to_canvas)
