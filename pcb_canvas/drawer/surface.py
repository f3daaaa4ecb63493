"""Drawing surface interface and an operation-recording implementation."""
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Protocol, Sequence


class DrawingSurface(Protocol):
    """
    The 2D drawing primitives the renderers issue.

    Mirrors a canvas-style API: a current path built with move/line/arc/rect,
    filled or stroked with a solid color, and a save/restore stack that covers
    the transform, clip region and dash pattern. Angles are radians, positive
    clockwise (y-down surface coordinates).
    """

    def save(self) -> None: ...

    def restore(self) -> None: ...

    def translate(self, x: float, y: float) -> None: ...

    def rotate(self, angle: float) -> None: ...

    def begin_path(self) -> None: ...

    def move_to(self, x: float, y: float) -> None: ...

    def line_to(self, x: float, y: float) -> None: ...

    def arc(
        self,
        cx: float,
        cy: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        counterclockwise: bool = False,
    ) -> None: ...

    def rect(self, x: float, y: float, width: float, height: float) -> None: ...

    def close_path(self) -> None: ...

    def fill(self, color: str) -> None: ...

    def stroke(self, color: str, width: float) -> None: ...

    def set_line_dash(self, pattern: Sequence[float]) -> None: ...

    def clip(self) -> None: ...


@dataclass(frozen=True)
class Operation:
    """One recorded surface call."""
    name: str
    args: tuple


class RecordingSurface:
    """
    A surface that records every call instead of drawing.

    Useful for tests and for comparing two renders: the operation log is the
    complete observable output of a render.
    """

    def __init__(self):
        self.operations: list[Operation] = []
        self.depth = 0  # Current save() nesting

    def _record(self, name: str, *args) -> None:
        self.operations.append(Operation(name, tuple(args)))

    def save(self) -> None:
        self.depth += 1
        self._record("save")

    def restore(self) -> None:
        if self.depth == 0:
            raise RuntimeError("restore() without matching save()")
        self.depth -= 1
        self._record("restore")

    def translate(self, x: float, y: float) -> None:
        self._record("translate", x, y)

    def rotate(self, angle: float) -> None:
        self._record("rotate", angle)

    def begin_path(self) -> None:
        self._record("begin_path")

    def move_to(self, x: float, y: float) -> None:
        self._record("move_to", x, y)

    def line_to(self, x: float, y: float) -> None:
        self._record("line_to", x, y)

    def arc(self, cx, cy, radius, start_angle, end_angle, counterclockwise=False) -> None:
        self._record("arc", cx, cy, radius, start_angle, end_angle, counterclockwise)

    def rect(self, x: float, y: float, width: float, height: float) -> None:
        self._record("rect", x, y, width, height)

    def close_path(self) -> None:
        self._record("close_path")

    def fill(self, color: str) -> None:
        self._record("fill", color)

    def stroke(self, color: str, width: float) -> None:
        self._record("stroke", color, width)

    def set_line_dash(self, pattern: Sequence[float]) -> None:
        self._record("set_line_dash", tuple(pattern))

    def clip(self) -> None:
        self._record("clip")

    def count(self, name: str) -> int:
        """Number of recorded calls with the given name."""
        return sum(1 for op in self.operations if op.name == name)

    def named(self, name: str) -> list[Operation]:
        """Recorded calls with the given name, in order."""
        return [op for op in self.operations if op.name == name]

    def fill_colors(self) -> list[str]:
        """Colors of every fill, in draw order."""
        return [op.args[0] for op in self.operations if op.name == "fill"]


@contextmanager
def surface_state(surface: DrawingSurface) -> Iterator[DrawingSurface]:
    """
    Scope transform, clip and dash changes to a block.

    The surface state is saved on entry and restored on every exit path.
    """
    surface.save()
    try:
        yield surface
    finally:
        surface.restore()
