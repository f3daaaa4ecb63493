"""
Soldermask margin geometry.

A pad's soldermask opening may be larger than the pad (positive margin), which
exposes a band of bare substrate around it, or smaller (negative margin), in
which case the mask covers the pad edges. The first is drawn as a relief: an
enlarged substrate-colored shape under the copper. The second is drawn as a
ring: the pad outline filled with the mask color over the copper, with the
inset outline re-filled with copper so only the edge band shows mask.
"""
import logging
from dataclasses import replace
from typing import Optional, Sequence

import numpy as np

from pcb_canvas.pcb.models import Point, SoldermaskMargins
from pcb_canvas.pcb.transform import rotate_point

from .commands import DrawCommand, DrawStage
from .shapes import CircleGeometry, Geometry, PillGeometry, PolygonGeometry, RectGeometry

logger = logging.getLogger(__name__)

# Below this, 1 + cos(turn angle) is treated as a full reversal
_MITER_EPSILON = 1e-9


def _signed_area(pts: np.ndarray) -> float:
    """Shoelace area; positive for counter-clockwise (y-up) winding."""
    x, y = pts[:, 0], pts[:, 1]
    return 0.5 * float(np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def offset_polygon_points(points: Sequence[Point], offset: float) -> list[Point]:
    """
    Offset a closed polygon along its outward edge normals.

    Every edge moves outward by ``offset`` (inward when negative) and adjacent
    edges are joined with a miter. The result has one point per input point,
    in the same order and winding.

    Args:
        points: Polygon vertices (closing edge implied)
        offset: Distance to move each edge, in the points' units

    Returns:
        The offset polygon
    """
    if offset == 0 or len(points) < 2:
        return [Point(float(x), float(y)) for x, y in points]

    pts = np.asarray(points, dtype=float)
    orientation = 1.0 if _signed_area(pts) >= 0 else -1.0

    # Edge i runs from vertex i to vertex i + 1
    edges = np.roll(pts, -1, axis=0) - pts
    lengths = np.hypot(edges[:, 0], edges[:, 1])
    valid = np.flatnonzero(lengths > 0)
    if valid.size == 0:
        return [Point(float(x), float(y)) for x, y in points]

    safe_lengths = np.where(lengths > 0, lengths, 1.0)
    normals = orientation * np.column_stack((edges[:, 1], -edges[:, 0])) / safe_lengths[:, None]

    # Zero-length edges are skipped: each vertex joins the nearest real edge
    # entering it with the nearest real edge leaving it
    vertex_indices = np.arange(len(pts))
    leaving = valid[np.searchsorted(valid, vertex_indices) % valid.size]
    entering = valid[np.searchsorted(valid, vertex_indices) - 1]
    incoming = normals[entering]
    outgoing = normals[leaving]

    denominator = 1.0 + np.sum(incoming * outgoing, axis=1)
    reversed_turn = denominator < _MITER_EPSILON
    miter = (incoming + outgoing) / np.where(reversed_turn, 1.0, denominator)[:, None]
    miter[reversed_turn] = outgoing[reversed_turn]

    result = pts + offset * miter
    return [Point(float(x), float(y)) for x, y in result]


def _inset_collapsed(original: Sequence[Point], inset: Sequence[Point]) -> bool:
    """True if insetting turned any edge around or left no area."""
    before = np.asarray(original, dtype=float)
    after = np.asarray(inset, dtype=float)
    if abs(_signed_area(after)) == 0:
        return True

    edges_before = np.roll(before, -1, axis=0) - before
    edges_after = np.roll(after, -1, axis=0) - after
    real_edges = np.hypot(edges_before[:, 0], edges_before[:, 1]) > 0
    dots = np.sum(edges_before * edges_after, axis=1)
    return bool(np.any(dots[real_edges] <= 0))


def _rect_center_offset(geometry: RectGeometry, dx: float, dy: float) -> Point:
    """Shift a rect center by a vector given in the rect's own frame."""
    gx, gy = rotate_point(dx, dy, geometry.rotation)
    return Point(geometry.center[0] + gx, geometry.center[1] + gy)


def relief_geometry(geometry: Geometry, margins: SoldermaskMargins) -> Geometry:
    """
    Soldermask opening for a positive margin.

    Rects grow per side and are re-centered by the per-side asymmetry; other
    shapes use the uniform margin (``margins.left``).
    """
    if isinstance(geometry, RectGeometry):
        return replace(
            geometry,
            center=_rect_center_offset(
                geometry,
                (margins.right - margins.left) / 2,
                (margins.top - margins.bottom) / 2,
            ),
            width=geometry.width + margins.left + margins.right,
            height=geometry.height + margins.top + margins.bottom,
        )

    margin = margins.left
    if isinstance(geometry, CircleGeometry):
        return replace(geometry, radius=geometry.radius + margin)
    if isinstance(geometry, PillGeometry):
        return replace(
            geometry,
            width=geometry.width + 2 * margin,
            height=geometry.height + 2 * margin,
        )
    if isinstance(geometry, PolygonGeometry):
        return PolygonGeometry(tuple(offset_polygon_points(geometry.points, margin)))
    raise TypeError(f"Unsupported geometry: {type(geometry).__name__}")


def _inset_geometry(geometry: Geometry, margins: SoldermaskMargins) -> Optional[Geometry]:
    """The pad shrunk by every negative margin, or None if nothing is left."""
    if isinstance(geometry, RectGeometry):
        left = max(0.0, -margins.left)
        right = max(0.0, -margins.right)
        top = max(0.0, -margins.top)
        bottom = max(0.0, -margins.bottom)
        width = geometry.width - left - right
        height = geometry.height - top - bottom
        if width <= 0 or height <= 0:
            return None
        return replace(
            geometry,
            center=_rect_center_offset(geometry, (left - right) / 2, (bottom - top) / 2),
            width=width,
            height=height,
            border_radius=max(0.0, geometry.border_radius - max(left, right, top, bottom)),
        )

    inset = max(0.0, -margins.left)
    if isinstance(geometry, CircleGeometry):
        radius = geometry.radius - inset
        return replace(geometry, radius=radius) if radius > 0 else None
    if isinstance(geometry, PillGeometry):
        width = geometry.width - 2 * inset
        height = geometry.height - 2 * inset
        if width <= 0 or height <= 0:
            return None
        return replace(geometry, width=width, height=height)
    if isinstance(geometry, PolygonGeometry):
        points = offset_polygon_points(geometry.points, -inset)
        if _inset_collapsed(geometry.points, points):
            logger.debug("Polygon inset by %s collapsed; covering whole pad", inset)
            return None
        return PolygonGeometry(tuple(points))
    raise TypeError(f"Unsupported geometry: {type(geometry).__name__}")


def ring_geometry(
    geometry: Geometry, margins: SoldermaskMargins
) -> tuple[Geometry, Optional[Geometry]]:
    """
    Soldermask ring for a negative margin.

    Returns:
        (outer, inner): ``outer`` is the pad outline, filled with mask color;
        ``inner`` is the inset outline re-filled with copper, or None when the
        margin swallows the whole pad
    """
    return geometry, _inset_geometry(geometry, margins)


def soldermask_commands(
    geometry: Geometry,
    margins: SoldermaskMargins,
    copper_color: str,
    soldermask_color: str,
    substrate_color: str,
) -> list[DrawCommand]:
    """
    Relief and ring commands for a pad's margins.

    A positive side yields a RELIEF command, a negative side yields RING
    commands; zero margins yield nothing.
    """
    commands: list[DrawCommand] = []

    if margins.any_positive:
        commands.append(
            DrawCommand(DrawStage.RELIEF, relief_geometry(geometry, margins), substrate_color)
        )

    if margins.any_negative:
        outer, inner = ring_geometry(geometry, margins)
        commands.append(DrawCommand(DrawStage.RING, outer, soldermask_color))
        if inner is not None:
            commands.append(DrawCommand(DrawStage.RING, inner, copper_color))

    return commands
