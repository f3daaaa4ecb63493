from .parser import Bounds, CircuitParser, parse_circuit_json, parse_element
from .models import (
    Element, Point, SoldermaskMargins,
    SmtPad, RectSmtPad, RotatedRectSmtPad, CircleSmtPad,
    PillSmtPad, RotatedPillSmtPad, PolygonSmtPad,
    PlatedHole, CirclePlatedHole, PillPlatedHole,
    CircularHoleWithRectPad, PillHoleWithRectPad,
    PcbComponent, PcbKeepout, resolve_margins,
)
from .transform import Matrix, fit_real_to_canvas, rotate_point

__all__ = [
    "Bounds", "CircuitParser", "parse_circuit_json", "parse_element",
    "Element", "Point", "SoldermaskMargins",
    "SmtPad", "RectSmtPad", "RotatedRectSmtPad", "CircleSmtPad",
    "PillSmtPad", "RotatedPillSmtPad", "PolygonSmtPad",
    "PlatedHole", "CirclePlatedHole", "PillPlatedHole",
    "CircularHoleWithRectPad", "PillHoleWithRectPad",
    "PcbComponent", "PcbKeepout", "resolve_margins",
    "Matrix", "fit_real_to_canvas", "rotate_point",
]
