"""Coordinate transformation utilities."""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Matrix:
    """
    2D affine transform.

    Maps (x, y) to (a*x + c*y + e, b*x + d*y + f), the same layout a canvas
    ``setTransform(a, b, c, d, e, f)`` call uses.
    """
    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> "Matrix":
        return cls()

    @classmethod
    def translate(cls, tx: float, ty: float) -> "Matrix":
        return cls(e=tx, f=ty)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> "Matrix":
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def compose(cls, *matrices: "Matrix") -> "Matrix":
        """
        Combine transforms left to right.

        ``compose(m1, m2)`` applies m2 first, then m1.
        """
        result = cls.identity()
        for matrix in matrices:
            result = result.multiply(matrix)
        return result

    def multiply(self, other: "Matrix") -> "Matrix":
        """Return self x other (other is applied first)."""
        return Matrix(
            a=self.a * other.a + self.c * other.b,
            b=self.b * other.a + self.d * other.b,
            c=self.a * other.c + self.c * other.d,
            d=self.b * other.c + self.d * other.d,
            e=self.a * other.e + self.c * other.f + self.e,
            f=self.b * other.e + self.d * other.f + self.f,
        )

    def apply(self, x: float, y: float) -> tuple[float, float]:
        """Transform a point."""
        return self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f

    @property
    def scale_factor(self) -> float:
        """Uniform linear scale, read from the horizontal scale component."""
        return abs(self.a)


def rotate_point(x: float, y: float, angle_deg: float) -> tuple[float, float]:
    """
    Rotate a point around the origin by the given angle.

    Args:
        x: X coordinate
        y: Y coordinate
        angle_deg: Rotation angle in degrees (counterclockwise positive)

    Returns:
        Tuple of (rotated_x, rotated_y)
    """
    if angle_deg == 0:
        return x, y

    angle_rad = math.radians(angle_deg)
    cos_a = math.cos(angle_rad)
    sin_a = math.sin(angle_rad)

    rotated_x = x * cos_a - y * sin_a
    rotated_y = x * sin_a + y * cos_a

    return rotated_x, rotated_y


def fit_real_to_canvas(
    min_x: float,
    min_y: float,
    max_x: float,
    max_y: float,
    width: float,
    height: float,
    padding: float = 0.0,
) -> Matrix:
    """
    Build the real-to-canvas transform that fits a bounding box onto a canvas.

    Real coordinates are y-up, canvas coordinates are y-down, so the result
    flips the y axis. The scale is uniform and the box is centered.

    Args:
        min_x, min_y, max_x, max_y: Bounds in real units (mm)
        width, height: Canvas size in pixels
        padding: Empty border kept on every side of the canvas (pixels)

    Returns:
        The real-to-canvas matrix
    """
    real_width = max(max_x - min_x, 1e-9)
    real_height = max(max_y - min_y, 1e-9)
    usable_width = max(width - 2 * padding, 0.0)
    usable_height = max(height - 2 * padding, 0.0)

    scale = min(usable_width / real_width, usable_height / real_height)

    center_x = (min_x + max_x) / 2
    center_y = (min_y + max_y) / 2

    return Matrix.compose(
        Matrix.translate(width / 2, height / 2),
        Matrix.scale(scale, -scale),
        Matrix.translate(-center_x, -center_y),
    )
