"""Data models for PCB elements."""
from dataclasses import dataclass, field
from typing import ClassVar, NamedTuple, Optional, Union


class Point(NamedTuple):
    """A point in real-world units (mm)."""
    x: float
    y: float


@dataclass(frozen=True)
class SoldermaskMargins:
    """Per-side soldermask margins (mm). Positive exposes, negative covers."""
    left: float = 0.0
    right: float = 0.0
    top: float = 0.0
    bottom: float = 0.0

    @classmethod
    def uniform(cls, margin: float) -> "SoldermaskMargins":
        """Same margin on every side."""
        return cls(margin, margin, margin, margin)

    @property
    def any_positive(self) -> bool:
        return self.left > 0 or self.right > 0 or self.top > 0 or self.bottom > 0

    @property
    def any_negative(self) -> bool:
        return self.left < 0 or self.right < 0 or self.top < 0 or self.bottom < 0


# ---------------------------------------------------------------------------
# SMT pads
# ---------------------------------------------------------------------------

@dataclass(kw_only=True)
class _SmtPadBase:
    """Fields shared by every SMT pad shape."""
    shape: ClassVar[str] = ""
    pcb_smtpad_id: str
    x: float  # Center X (mm)
    y: float  # Center Y (mm)
    layer: str = "top"
    pcb_component_id: Optional[str] = None  # Owning component, if any
    soldermask_margin: float = 0.0
    is_covered_with_solder_mask: bool = False

    @property
    def element_id(self) -> str:
        return self.pcb_smtpad_id

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)


@dataclass(kw_only=True)
class RectSmtPad(_SmtPadBase):
    """Axis-aligned rectangular pad with optional corner radius."""
    shape: ClassVar[str] = "rect"
    width: float
    height: float
    corner_radius: float = 0.0
    # Per-side overrides; None falls back to soldermask_margin
    soldermask_margin_left: Optional[float] = None
    soldermask_margin_right: Optional[float] = None
    soldermask_margin_top: Optional[float] = None
    soldermask_margin_bottom: Optional[float] = None


@dataclass(kw_only=True)
class RotatedRectSmtPad(RectSmtPad):
    """Rectangular pad rotated counter-clockwise about its center."""
    shape: ClassVar[str] = "rotated_rect"
    ccw_rotation: float = 0.0  # Degrees


@dataclass(kw_only=True)
class CircleSmtPad(_SmtPadBase):
    """Circular pad."""
    shape: ClassVar[str] = "circle"
    radius: float


@dataclass(kw_only=True)
class PillSmtPad(_SmtPadBase):
    """Stadium-shaped pad, short ends fully rounded."""
    shape: ClassVar[str] = "pill"
    width: float
    height: float


@dataclass(kw_only=True)
class RotatedPillSmtPad(PillSmtPad):
    """Pill pad rotated counter-clockwise about its center."""
    shape: ClassVar[str] = "rotated_pill"
    ccw_rotation: float = 0.0  # Degrees


@dataclass(kw_only=True)
class PolygonSmtPad(_SmtPadBase):
    """Arbitrary polygon pad. x/y are informational; points are absolute."""
    shape: ClassVar[str] = "polygon"
    x: float = 0.0
    y: float = 0.0
    points: list[Point] = field(default_factory=list)


SmtPad = Union[
    RectSmtPad, RotatedRectSmtPad, CircleSmtPad,
    PillSmtPad, RotatedPillSmtPad, PolygonSmtPad,
]


# ---------------------------------------------------------------------------
# Plated holes
# ---------------------------------------------------------------------------

@dataclass(kw_only=True)
class _PlatedHoleBase:
    """Fields shared by every plated hole shape."""
    shape: ClassVar[str] = ""
    pcb_plated_hole_id: str
    x: float
    y: float
    layers: list[str] = field(default_factory=lambda: ["top", "bottom"])
    pcb_component_id: Optional[str] = None
    soldermask_margin: float = 0.0
    is_covered_with_solder_mask: bool = False

    @property
    def element_id(self) -> str:
        return self.pcb_plated_hole_id

    @property
    def center(self) -> Point:
        return Point(self.x, self.y)

    @property
    def layer(self) -> str:
        """Layer used for color lookup: the first listed copper layer."""
        return self.layers[0] if self.layers else "top"


@dataclass(kw_only=True)
class CirclePlatedHole(_PlatedHoleBase):
    """Round annular ring around a round drill."""
    shape: ClassVar[str] = "circle"
    outer_diameter: float
    hole_diameter: float


@dataclass(kw_only=True)
class PillPlatedHole(_PlatedHoleBase):
    """Pill (or oval) annular ring around a slotted drill."""
    shape: ClassVar[str] = "pill"
    outer_width: float
    outer_height: float
    hole_width: float
    hole_height: float
    ccw_rotation: float = 0.0


@dataclass(kw_only=True)
class CircularHoleWithRectPad(_PlatedHoleBase):
    """Rectangular copper pad around a round drill."""
    shape: ClassVar[str] = "circular_hole_with_rect_pad"
    hole_diameter: float
    rect_pad_width: float
    rect_pad_height: float
    rect_border_radius: float = 0.0
    hole_offset_x: float = 0.0
    hole_offset_y: float = 0.0


@dataclass(kw_only=True)
class PillHoleWithRectPad(_PlatedHoleBase):
    """Rectangular copper pad around a slotted drill."""
    shape: ClassVar[str] = "pill_hole_with_rect_pad"
    hole_width: float
    hole_height: float
    rect_pad_width: float
    rect_pad_height: float
    rect_border_radius: float = 0.0
    hole_offset_x: float = 0.0
    hole_offset_y: float = 0.0


PlatedHole = Union[
    CirclePlatedHole, PillPlatedHole, CircularHoleWithRectPad, PillHoleWithRectPad,
]


# ---------------------------------------------------------------------------
# Components and keepouts
# ---------------------------------------------------------------------------

@dataclass
class PcbComponent:
    """A placed component. Owns the pads/holes that reference its id."""
    pcb_component_id: str
    center: Point = Point(0.0, 0.0)
    width: float = 0.0
    height: float = 0.0
    layer: str = "top"
    rotation: float = 0.0

    @property
    def element_id(self) -> str:
        return self.pcb_component_id


@dataclass
class PcbKeepout:
    """A keepout zone. Only "rect" and "circle" shapes are drawn."""
    pcb_keepout_id: str
    shape: str
    center: Point = Point(0.0, 0.0)
    width: float = 0.0  # rect only
    height: float = 0.0  # rect only
    radius: float = 0.0  # circle only
    rotation: float = 0.0  # Degrees, rect only
    layers: list[str] = field(default_factory=lambda: ["top"])

    @property
    def element_id(self) -> str:
        return self.pcb_keepout_id


Element = Union[PcbComponent, SmtPad, PlatedHole, PcbKeepout]

SMT_PAD_TYPES: tuple[type, ...] = (
    RectSmtPad, RotatedRectSmtPad, CircleSmtPad,
    PillSmtPad, RotatedPillSmtPad, PolygonSmtPad,
)
PLATED_HOLE_TYPES: tuple[type, ...] = (
    CirclePlatedHole, PillPlatedHole, CircularHoleWithRectPad, PillHoleWithRectPad,
)


def is_smtpad(element: object) -> bool:
    return isinstance(element, SMT_PAD_TYPES)


def is_plated_hole(element: object) -> bool:
    return isinstance(element, PLATED_HOLE_TYPES)


def resolve_margins(element: Union[SmtPad, PlatedHole]) -> SoldermaskMargins:
    """
    Effective soldermask margins of a pad or plated hole.

    Covered elements get zero margins. Rect pads may override each side,
    falling back to the scalar margin; every other shape uses the scalar margin.
    """
    if element.is_covered_with_solder_mask:
        return SoldermaskMargins()

    margin = element.soldermask_margin or 0.0
    if isinstance(element, RectSmtPad):
        return SoldermaskMargins(
            left=_side(element.soldermask_margin_left, margin),
            right=_side(element.soldermask_margin_right, margin),
            top=_side(element.soldermask_margin_top, margin),
            bottom=_side(element.soldermask_margin_bottom, margin),
        )
    return SoldermaskMargins.uniform(margin)


def _side(value: Optional[float], default: float) -> float:
    return default if value is None else value
