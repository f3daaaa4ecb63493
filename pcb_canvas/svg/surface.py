"""SVG-backed drawing surface."""
import math
from pathlib import Path
from typing import Optional, Sequence
from xml.etree.ElementTree import Element, SubElement, tostring

TWO_PI = 2 * math.pi


def _fmt(value: float) -> str:
    return f"{value:.4f}"


class SvgSurface:
    """
    Drawing surface that builds an SVG document.

    Transforms and clips open nested ``<g>`` groups; ``save``/``restore``
    remember which group is current, so everything drawn after a restore lands
    back in the group that was current at the matching save.
    """

    def __init__(self, width: float, height: float, background: Optional[str] = None):
        """
        Args:
            width, height: Surface size in pixels
            background: Optional background fill color
        """
        self.width = width
        self.height = height
        self.root = Element("svg", {
            "xmlns": "http://www.w3.org/2000/svg",
            "width": _fmt(width),
            "height": _fmt(height),
            "viewBox": f"0 0 {_fmt(width)} {_fmt(height)}",
        })
        self._defs = SubElement(self.root, "defs")

        if background:
            SubElement(self.root, "rect", {
                "class": "background",
                "x": "0",
                "y": "0",
                "width": _fmt(width),
                "height": _fmt(height),
                "fill": background,
            })

        self._group = self.root
        self._dash: tuple[float, ...] = ()
        self._stack: list[tuple[Element, tuple[float, ...]]] = []
        self._path: list[str] = []
        self._current: Optional[tuple[float, float]] = None
        self._clip_count = 0

    # -- state -------------------------------------------------------------

    def save(self) -> None:
        self._stack.append((self._group, self._dash))

    def restore(self) -> None:
        if not self._stack:
            raise RuntimeError("restore() without matching save()")
        self._group, self._dash = self._stack.pop()

    def translate(self, x: float, y: float) -> None:
        self._group = SubElement(self._group, "g", {"transform": f"translate({_fmt(x)} {_fmt(y)})"})

    def rotate(self, angle: float) -> None:
        transform = f"rotate({_fmt(math.degrees(angle))})"
        self._group = SubElement(self._group, "g", {"transform": transform})

    def set_line_dash(self, pattern: Sequence[float]) -> None:
        self._dash = tuple(pattern)

    def clip(self) -> None:
        if not self._path:
            return
        self._clip_count += 1
        clip_id = f"clip-{self._clip_count}"
        clip_path = SubElement(self._defs, "clipPath", {
            "id": clip_id,
            "clipPathUnits": "userSpaceOnUse",
        })
        SubElement(clip_path, "path", {"d": " ".join(self._path)})
        self._group = SubElement(self._group, "g", {"clip-path": f"url(#{clip_id})"})

    # -- path construction -------------------------------------------------

    def begin_path(self) -> None:
        self._path = []
        self._current = None

    def move_to(self, x: float, y: float) -> None:
        self._path.append(f"M {_fmt(x)} {_fmt(y)}")
        self._current = (x, y)

    def line_to(self, x: float, y: float) -> None:
        if self._current is None:
            self.move_to(x, y)
            return
        self._path.append(f"L {_fmt(x)} {_fmt(y)}")
        self._current = (x, y)

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None:
        """Canvas-style arc: angles in radians, clockwise unless counterclockwise."""
        start = (cx + radius * math.cos(start_angle), cy + radius * math.sin(start_angle))
        if self._current is None:
            self.move_to(*start)
        else:
            self.line_to(*start)

        if radius <= 0:
            return

        sweep = start_angle - end_angle if counterclockwise else end_angle - start_angle
        direction = -1.0 if counterclockwise else 1.0
        sweep_flag = 0 if counterclockwise else 1

        if sweep >= TWO_PI:
            # SVG cannot draw a full circle in one arc command
            halfway = start_angle + direction * math.pi
            self._arc_segment(cx, cy, radius, halfway, 0, sweep_flag)
            self._arc_segment(cx, cy, radius, start_angle, 0, sweep_flag)
            return

        sweep %= TWO_PI
        if sweep == 0:
            return
        large_arc = 1 if sweep > math.pi else 0
        self._arc_segment(cx, cy, radius, start_angle + direction * sweep, large_arc, sweep_flag)

    def _arc_segment(
        self, cx: float, cy: float, radius: float, end_angle: float, large_arc: int, sweep_flag: int
    ) -> None:
        x = cx + radius * math.cos(end_angle)
        y = cy + radius * math.sin(end_angle)
        self._path.append(
            f"A {_fmt(radius)} {_fmt(radius)} 0 {large_arc} {sweep_flag} {_fmt(x)} {_fmt(y)}"
        )
        self._current = (x, y)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._path.append(
            f"M {_fmt(x)} {_fmt(y)} h {_fmt(width)} v {_fmt(height)} h {_fmt(-width)} Z"
        )
        self._current = (x, y)

    def close_path(self) -> None:
        if self._path:
            self._path.append("Z")

    # -- painting ----------------------------------------------------------

    def fill(self, color: str) -> None:
        if not self._path:
            return
        SubElement(self._group, "path", {
            "d": " ".join(self._path),
            "fill": color,
            "stroke": "none",
        })

    def stroke(self, color: str, width: float) -> None:
        if not self._path:
            return
        attrs = {
            "d": " ".join(self._path),
            "fill": "none",
            "stroke": color,
            "stroke-width": _fmt(width),
        }
        if self._dash:
            attrs["stroke-dasharray"] = " ".join(_fmt(v) for v in self._dash)
        SubElement(self._group, "path", attrs)

    # -- output ------------------------------------------------------------

    def to_string(self) -> str:
        """SVG document as a string."""
        return tostring(self.root, encoding="unicode")

    def write(self, output_path: str | Path) -> Path:
        """Write the SVG document to a file."""
        output_path = Path(output_path)
        output_path.write_text(self.to_string(), encoding="utf-8")
        return output_path
