"""Plated through-hole rendering."""
from typing import Callable

from pcb_canvas.pcb.models import (
    CirclePlatedHole, CircularHoleWithRectPad, PillHoleWithRectPad,
    PillPlatedHole, PlatedHole, Point, resolve_margins,
)
from pcb_canvas.pcb.transform import Matrix

from .colors import DEFAULT_PCB_COLOR_MAP, PcbColorMap
from .commands import DrawCommand, DrawStage, emit_commands, order_commands
from .pads import pad_commands
from .shapes import CircleGeometry, Geometry, PillGeometry, RectGeometry
from .surface import DrawingSurface


def _circle_hole(hole: CirclePlatedHole) -> tuple[Geometry, Geometry]:
    return (
        CircleGeometry(hole.center, hole.outer_diameter / 2),
        CircleGeometry(hole.center, hole.hole_diameter / 2),
    )


def _pill_hole(hole: PillPlatedHole) -> tuple[Geometry, Geometry]:
    return (
        PillGeometry(hole.center, hole.outer_width, hole.outer_height, rotation=hole.ccw_rotation),
        PillGeometry(hole.center, hole.hole_width, hole.hole_height, rotation=hole.ccw_rotation),
    )


def _rect_pad(hole: CircularHoleWithRectPad | PillHoleWithRectPad) -> RectGeometry:
    return RectGeometry(
        hole.center,
        hole.rect_pad_width,
        hole.rect_pad_height,
        border_radius=hole.rect_border_radius,
    )


def _drill_center(hole: CircularHoleWithRectPad | PillHoleWithRectPad) -> Point:
    return Point(hole.x + hole.hole_offset_x, hole.y + hole.hole_offset_y)


def _circular_hole_with_rect_pad(hole: CircularHoleWithRectPad) -> tuple[Geometry, Geometry]:
    return _rect_pad(hole), CircleGeometry(_drill_center(hole), hole.hole_diameter / 2)


def _pill_hole_with_rect_pad(hole: PillHoleWithRectPad) -> tuple[Geometry, Geometry]:
    return (
        _rect_pad(hole),
        PillGeometry(_drill_center(hole), hole.hole_width, hole.hole_height),
    )


# (copper outline, drilled hole) per variant
HOLE_GEOMETRY_HANDLERS: dict[type, Callable[..., tuple[Geometry, Geometry]]] = {
    CirclePlatedHole: _circle_hole,
    PillPlatedHole: _pill_hole,
    CircularHoleWithRectPad: _circular_hole_with_rect_pad,
    PillHoleWithRectPad: _pill_hole_with_rect_pad,
}


def plated_hole_geometry(hole: PlatedHole) -> tuple[Geometry, Geometry]:
    """
    Copper outline and drilled hole of a plated hole.

    Raises:
        TypeError: If ``hole`` is not a plated hole variant
    """
    handler = HOLE_GEOMETRY_HANDLERS.get(type(hole))
    if handler is None:
        raise TypeError(f"No geometry handler for {type(hole).__name__}")
    return handler(hole)


def plated_hole_commands(
    hole: PlatedHole, color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP
) -> list[DrawCommand]:
    """Draw commands for a plated hole: the pad stages, then the drill."""
    outer, drill = plated_hole_geometry(hole)
    commands = pad_commands(
        outer, resolve_margins(hole), hole.is_covered_with_solder_mask, hole.layer, color_map
    )
    commands.append(DrawCommand(DrawStage.DRILL, drill, color_map.drill))
    return order_commands(commands)


def draw_pcb_plated_hole(
    surface: DrawingSurface,
    hole: PlatedHole,
    real_to_canvas: Matrix,
    color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP,
) -> None:
    """Draw a plated hole's copper, soldermask treatment and drill."""
    emit_commands(surface, plated_hole_commands(hole, color_map), real_to_canvas)
