"""Filled and stroked shape primitives drawn through a real-to-canvas transform."""
import math
from dataclasses import dataclass
from typing import Optional, Sequence, Union

from pcb_canvas.pcb.models import Point
from pcb_canvas.pcb.transform import Matrix

from .styles import DASH_PATTERN
from .surface import DrawingSurface, surface_state


@dataclass(frozen=True)
class RectGeometry:
    """Rectangle centered on ``center``, rotated counter-clockwise in degrees."""
    center: Point
    width: float
    height: float
    rotation: float = 0.0
    border_radius: float = 0.0


@dataclass(frozen=True)
class CircleGeometry:
    center: Point
    radius: float


@dataclass(frozen=True)
class PillGeometry:
    """Rectangle whose short ends are fully rounded."""
    center: Point
    width: float
    height: float
    rotation: float = 0.0


@dataclass(frozen=True)
class PolygonGeometry:
    points: tuple[Point, ...]


Geometry = Union[RectGeometry, CircleGeometry, PillGeometry, PolygonGeometry]


def _rounded_rect_path(
    surface: DrawingSurface, width: float, height: float, radius: float
) -> None:
    """Add an origin-centered rectangle with rounded corners to the current path."""
    radius = max(0.0, min(radius, abs(width) / 2, abs(height) / 2))
    x0, y0 = -width / 2, -height / 2
    x1, y1 = width / 2, height / 2

    if radius == 0:
        surface.rect(x0, y0, width, height)
        return

    surface.move_to(x0 + radius, y0)
    surface.line_to(x1 - radius, y0)
    surface.arc(x1 - radius, y0 + radius, radius, -math.pi / 2, 0)
    surface.line_to(x1, y1 - radius)
    surface.arc(x1 - radius, y1 - radius, radius, 0, math.pi / 2)
    surface.line_to(x0 + radius, y1)
    surface.arc(x0 + radius, y1 - radius, radius, math.pi / 2, math.pi)
    surface.line_to(x0, y0 + radius)
    surface.arc(x0 + radius, y0 + radius, radius, math.pi, 3 * math.pi / 2)
    surface.close_path()


def _paint(
    surface: DrawingSurface,
    scale: float,
    fill: Optional[str],
    stroke: Optional[str],
    stroke_width: Optional[float],
    is_stroke_dashed: bool,
) -> None:
    """Fill and/or stroke the current path. Must run inside a saved state."""
    if fill:
        surface.fill(fill)
    if stroke:
        width = (stroke_width if stroke_width is not None else 1.0) * scale
        if is_stroke_dashed:
            surface.set_line_dash([width * DASH_PATTERN[0], width * DASH_PATTERN[1]])
        surface.stroke(stroke, width)


def draw_rect(
    surface: DrawingSurface,
    center: Point,
    width: float,
    height: float,
    real_to_canvas: Matrix,
    fill: Optional[str] = None,
    stroke: Optional[str] = None,
    stroke_width: Optional[float] = None,
    rotation: float = 0.0,
    border_radius: float = 0.0,
    is_stroke_dashed: bool = False,
) -> None:
    """
    Draw a rectangle.

    Args:
        surface: Target surface
        center: Center in real units
        width, height: Size in real units
        real_to_canvas: Real-to-surface transform
        fill: Fill color, or None for no fill
        stroke: Stroke color, or None for no stroke
        stroke_width: Stroke width in real units
        rotation: Counter-clockwise rotation in degrees
        border_radius: Corner radius in real units
        is_stroke_dashed: Dash the stroke
    """
    cx, cy = real_to_canvas.apply(center[0], center[1])
    scale = real_to_canvas.scale_factor

    with surface_state(surface):
        surface.translate(cx, cy)
        if rotation:
            surface.rotate(-math.radians(rotation))
        surface.begin_path()
        _rounded_rect_path(surface, width * scale, height * scale, border_radius * scale)
        _paint(surface, scale, fill, stroke, stroke_width, is_stroke_dashed)


def draw_pill(
    surface: DrawingSurface,
    center: Point,
    width: float,
    height: float,
    real_to_canvas: Matrix,
    fill: Optional[str] = None,
    stroke: Optional[str] = None,
    stroke_width: Optional[float] = None,
    rotation: float = 0.0,
    is_stroke_dashed: bool = False,
) -> None:
    """Draw a pill: a rectangle with corner radius of half its smaller side."""
    draw_rect(
        surface, center, width, height, real_to_canvas,
        fill=fill,
        stroke=stroke,
        stroke_width=stroke_width,
        rotation=rotation,
        border_radius=min(width, height) / 2,
        is_stroke_dashed=is_stroke_dashed,
    )


def draw_circle(
    surface: DrawingSurface,
    center: Point,
    radius: float,
    real_to_canvas: Matrix,
    fill: Optional[str] = None,
    stroke: Optional[str] = None,
    stroke_width: Optional[float] = None,
    is_stroke_dashed: bool = False,
) -> None:
    """Draw a circle."""
    cx, cy = real_to_canvas.apply(center[0], center[1])
    scale = real_to_canvas.scale_factor

    with surface_state(surface):
        surface.begin_path()
        surface.arc(cx, cy, max(radius, 0.0) * scale, 0, 2 * math.pi)
        _paint(surface, scale, fill, stroke, stroke_width, is_stroke_dashed)


def draw_polygon(
    surface: DrawingSurface,
    points: Sequence[Point],
    real_to_canvas: Matrix,
    fill: Optional[str] = None,
    stroke: Optional[str] = None,
    stroke_width: Optional[float] = None,
    is_stroke_dashed: bool = False,
) -> None:
    """Draw a closed polygon. Empty point lists draw nothing."""
    if not points:
        return
    scale = real_to_canvas.scale_factor

    with surface_state(surface):
        surface.begin_path()
        for index, (x, y) in enumerate(points):
            px, py = real_to_canvas.apply(x, y)
            if index == 0:
                surface.move_to(px, py)
            else:
                surface.line_to(px, py)
        surface.close_path()
        _paint(surface, scale, fill, stroke, stroke_width, is_stroke_dashed)


def draw_geometry(
    surface: DrawingSurface,
    geometry: Geometry,
    real_to_canvas: Matrix,
    fill: Optional[str] = None,
    stroke: Optional[str] = None,
    stroke_width: Optional[float] = None,
    is_stroke_dashed: bool = False,
) -> None:
    """Draw any geometry variant."""
    paint = {
        "fill": fill,
        "stroke": stroke,
        "stroke_width": stroke_width,
        "is_stroke_dashed": is_stroke_dashed,
    }

    if isinstance(geometry, RectGeometry):
        draw_rect(
            surface, geometry.center, geometry.width, geometry.height, real_to_canvas,
            rotation=geometry.rotation, border_radius=geometry.border_radius, **paint,
        )
    elif isinstance(geometry, CircleGeometry):
        draw_circle(surface, geometry.center, geometry.radius, real_to_canvas, **paint)
    elif isinstance(geometry, PillGeometry):
        draw_pill(
            surface, geometry.center, geometry.width, geometry.height, real_to_canvas,
            rotation=geometry.rotation, **paint,
        )
    elif isinstance(geometry, PolygonGeometry):
        draw_polygon(surface, geometry.points, real_to_canvas, **paint)
    else:
        raise TypeError(f"Unsupported geometry: {type(geometry).__name__}")
