"""Circuit JSON parser producing typed PCB element records."""
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Optional

from .models import (
    CircleSmtPad, CirclePlatedHole, CircularHoleWithRectPad, Element,
    PcbComponent, PcbKeepout, PillHoleWithRectPad, PillPlatedHole, PillSmtPad,
    PlatedHole, Point, PolygonSmtPad, RectSmtPad, RotatedPillSmtPad,
    RotatedRectSmtPad, SmtPad, SoldermaskMargins, is_plated_hole, is_smtpad,
    resolve_margins,
)
from .transform import rotate_point

logger = logging.getLogger(__name__)

RawElement = dict[str, Any]


def _num(raw: RawElement, key: str, default: float = 0.0) -> float:
    """Read a numeric field, treating missing/null as the default."""
    value = raw.get(key)
    return default if value is None else float(value)


def _opt_num(raw: RawElement, key: str) -> Optional[float]:
    value = raw.get(key)
    return None if value is None else float(value)


def _point(raw: Any) -> Point:
    if raw is None:
        return Point(0.0, 0.0)
    if isinstance(raw, dict):
        return Point(_num(raw, "x"), _num(raw, "y"))
    x, y = raw
    return Point(0.0 if x is None else float(x), 0.0 if y is None else float(y))


def _common_pad_fields(raw: RawElement) -> dict[str, Any]:
    return {
        "x": _num(raw, "x"),
        "y": _num(raw, "y"),
        "pcb_component_id": raw.get("pcb_component_id"),
        "soldermask_margin": _num(raw, "soldermask_margin"),
        "is_covered_with_solder_mask": raw.get("is_covered_with_solder_mask") is True,
    }


def _rect_pad_fields(raw: RawElement) -> dict[str, Any]:
    # corner_radius wins over the older rect_border_radius field
    corner_radius = raw.get("corner_radius")
    if corner_radius is None:
        corner_radius = raw.get("rect_border_radius")
    return {
        "width": _num(raw, "width"),
        "height": _num(raw, "height"),
        "corner_radius": 0.0 if corner_radius is None else float(corner_radius),
        "soldermask_margin_left": _opt_num(raw, "soldermask_margin_left"),
        "soldermask_margin_right": _opt_num(raw, "soldermask_margin_right"),
        "soldermask_margin_top": _opt_num(raw, "soldermask_margin_top"),
        "soldermask_margin_bottom": _opt_num(raw, "soldermask_margin_bottom"),
    }


def parse_smtpad(raw: RawElement) -> Optional[SmtPad]:
    """Build the SMT pad variant for a ``pcb_smtpad`` record."""
    shape = raw.get("shape")
    base = {
        "pcb_smtpad_id": str(raw.get("pcb_smtpad_id", "")),
        "layer": raw.get("layer") or "top",
        **_common_pad_fields(raw),
    }

    if shape == "rect":
        return RectSmtPad(**base, **_rect_pad_fields(raw))
    if shape == "rotated_rect":
        return RotatedRectSmtPad(
            **base, **_rect_pad_fields(raw), ccw_rotation=_num(raw, "ccw_rotation")
        )
    if shape == "circle":
        return CircleSmtPad(**base, radius=_num(raw, "radius"))
    if shape == "pill":
        return PillSmtPad(**base, width=_num(raw, "width"), height=_num(raw, "height"))
    if shape == "rotated_pill":
        return RotatedPillSmtPad(
            **base,
            width=_num(raw, "width"),
            height=_num(raw, "height"),
            ccw_rotation=_num(raw, "ccw_rotation"),
        )
    if shape == "polygon":
        points = [_point(p) for p in raw.get("points") or []]
        return PolygonSmtPad(**base, points=points)

    logger.debug("Skipping smtpad %s with unknown shape %r", base["pcb_smtpad_id"], shape)
    return None


def parse_plated_hole(raw: RawElement) -> Optional[PlatedHole]:
    """Build the plated hole variant for a ``pcb_plated_hole`` record."""
    shape = raw.get("shape")
    base = {
        "pcb_plated_hole_id": str(raw.get("pcb_plated_hole_id", "")),
        "layers": list(raw.get("layers") or ["top", "bottom"]),
        **_common_pad_fields(raw),
    }

    if shape == "circle":
        return CirclePlatedHole(
            **base,
            outer_diameter=_num(raw, "outer_diameter"),
            hole_diameter=_num(raw, "hole_diameter"),
        )
    if shape in ("pill", "oval"):
        return PillPlatedHole(
            **base,
            outer_width=_num(raw, "outer_width"),
            outer_height=_num(raw, "outer_height"),
            hole_width=_num(raw, "hole_width"),
            hole_height=_num(raw, "hole_height"),
            ccw_rotation=_num(raw, "ccw_rotation"),
        )
    if shape == "circular_hole_with_rect_pad":
        return CircularHoleWithRectPad(
            **base,
            hole_diameter=_num(raw, "hole_diameter"),
            rect_pad_width=_num(raw, "rect_pad_width"),
            rect_pad_height=_num(raw, "rect_pad_height"),
            rect_border_radius=_num(raw, "rect_border_radius"),
            hole_offset_x=_num(raw, "hole_offset_x"),
            hole_offset_y=_num(raw, "hole_offset_y"),
        )
    if shape == "pill_hole_with_rect_pad":
        return PillHoleWithRectPad(
            **base,
            hole_width=_num(raw, "hole_width"),
            hole_height=_num(raw, "hole_height"),
            rect_pad_width=_num(raw, "rect_pad_width"),
            rect_pad_height=_num(raw, "rect_pad_height"),
            rect_border_radius=_num(raw, "rect_border_radius"),
            hole_offset_x=_num(raw, "hole_offset_x"),
            hole_offset_y=_num(raw, "hole_offset_y"),
        )

    logger.debug(
        "Skipping plated hole %s with unknown shape %r", base["pcb_plated_hole_id"], shape
    )
    return None


def parse_component(raw: RawElement) -> PcbComponent:
    return PcbComponent(
        pcb_component_id=str(raw.get("pcb_component_id", "")),
        center=_point(raw.get("center")),
        width=_num(raw, "width"),
        height=_num(raw, "height"),
        layer=raw.get("layer") or "top",
        rotation=_num(raw, "rotation"),
    )


def parse_keepout(raw: RawElement) -> PcbKeepout:
    # Unknown shapes are kept; the keepout renderer ignores them
    return PcbKeepout(
        pcb_keepout_id=str(raw.get("pcb_keepout_id", "")),
        shape=str(raw.get("shape", "")),
        center=_point(raw.get("center")),
        width=_num(raw, "width"),
        height=_num(raw, "height"),
        radius=_num(raw, "radius"),
        rotation=_num(raw, "rotation"),
        layers=list(raw.get("layers") or ["top"]),
    )


ELEMENT_PARSERS: dict[str, Callable[[RawElement], Optional[Element]]] = {
    "pcb_component": parse_component,
    "pcb_smtpad": parse_smtpad,
    "pcb_plated_hole": parse_plated_hole,
    "pcb_keepout": parse_keepout,
}


def parse_element(raw: RawElement) -> Optional[Element]:
    """
    Convert one circuit JSON record into an element model.

    Returns None for element types and shapes the renderer does not draw.
    """
    element_parser = ELEMENT_PARSERS.get(raw.get("type", ""))
    if element_parser is None:
        return None
    return element_parser(raw)


def parse_circuit_json(source: str | Path | Iterable[RawElement]) -> list[Element]:
    """
    Parse circuit JSON into element models, in document order.

    Args:
        source: Path to a JSON file, or an already-decoded list of records

    Raises:
        json.JSONDecodeError: If the file is not valid JSON
    """
    if isinstance(source, (str, Path)):
        with open(source, encoding="utf-8") as f:
            records = json.load(f)
    else:
        records = list(source)

    elements: list[Element] = []
    for raw in records:
        element = parse_element(raw)
        if element is not None:
            elements.append(element)

    logger.debug("Parsed %d elements (%d skipped)", len(elements), len(records) - len(elements))
    return elements


@dataclass
class Bounds:
    """Bounding box of a set of elements (mm)."""
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y


class CircuitParser:
    """Parser for circuit JSON documents."""

    def __init__(self, source: str | Path | Iterable[RawElement]):
        """
        Load circuit JSON.

        Args:
            source: Path to a JSON file, or an already-decoded list of records
        """
        self.source_path: Optional[Path] = (
            Path(source) if isinstance(source, (str, Path)) else None
        )
        self._elements = parse_circuit_json(source)

    @property
    def elements(self) -> list[Element]:
        """All parsed elements in document order."""
        return self._elements

    @property
    def components(self) -> list[PcbComponent]:
        return [e for e in self._elements if isinstance(e, PcbComponent)]

    @property
    def smtpads(self) -> list[SmtPad]:
        return [e for e in self._elements if is_smtpad(e)]

    @property
    def plated_holes(self) -> list[PlatedHole]:
        return [e for e in self._elements if is_plated_hole(e)]

    @property
    def keepouts(self) -> list[PcbKeepout]:
        return [e for e in self._elements if isinstance(e, PcbKeepout)]

    def get_bounds(self) -> Bounds:
        """Bounding box over every drawable element (zero box if empty)."""
        xs: list[float] = []
        ys: list[float] = []

        for element in self._elements:
            for x, y in _element_extent(element):
                xs.append(x)
                ys.append(y)

        if not xs:
            return Bounds(0.0, 0.0, 0.0, 0.0)
        return Bounds(min(xs), min(ys), max(xs), max(ys))


def _box_corners(
    center: Point,
    half_w: float,
    half_h: float,
    rotation: float = 0.0,
    margins: SoldermaskMargins = SoldermaskMargins(),
) -> list[tuple[float, float]]:
    """Corners of a box grown by its positive margins, rotated CCW about ``center``."""
    left = half_w + max(0.0, margins.left)
    right = half_w + max(0.0, margins.right)
    bottom = half_h + max(0.0, margins.bottom)
    top = half_h + max(0.0, margins.top)

    corners = []
    for x, y in ((-left, -bottom), (right, -bottom), (right, top), (-left, top)):
        rx, ry = rotate_point(x, y, rotation)
        corners.append((center.x + rx, center.y + ry))
    return corners


def _element_extent(element: Element) -> list[tuple[float, float]]:
    """Points enclosing everything drawn for an element, soldermask relief included."""
    if isinstance(element, PcbComponent):
        return _box_corners(
            element.center, element.width / 2, element.height / 2, element.rotation
        )

    if isinstance(element, PcbKeepout):
        if element.shape == "circle":
            return _box_corners(element.center, element.radius, element.radius)
        return _box_corners(
            element.center, element.width / 2, element.height / 2, element.rotation
        )

    margins = resolve_margins(element)

    if isinstance(element, PolygonSmtPad):
        grow = max(0.0, margins.left)
        extent = []
        for p in element.points:
            extent.extend([(p.x - grow, p.y - grow), (p.x + grow, p.y + grow)])
        return extent

    if isinstance(element, CircleSmtPad):
        half_w = half_h = element.radius
    elif isinstance(element, CirclePlatedHole):
        half_w = half_h = element.outer_diameter / 2
    elif isinstance(element, PillPlatedHole):
        half_w, half_h = element.outer_width / 2, element.outer_height / 2
    elif isinstance(element, (CircularHoleWithRectPad, PillHoleWithRectPad)):
        half_w, half_h = element.rect_pad_width / 2, element.rect_pad_height / 2
    else:
        half_w, half_h = element.width / 2, element.height / 2

    rotation = getattr(element, "ccw_rotation", 0.0)
    return _box_corners(element.center, half_w, half_h, rotation, margins)
