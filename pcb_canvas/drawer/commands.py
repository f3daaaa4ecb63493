"""Ordered draw commands and the sequencer that layers them."""
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

from pcb_canvas.pcb.transform import Matrix

from .shapes import Geometry, draw_geometry
from .surface import DrawingSurface


class DrawStage(IntEnum):
    """Layering order of a pad's geometry, bottom first."""
    RELIEF = 0   # Substrate exposed by a positive soldermask margin
    COPPER = 1   # The pad itself
    RING = 2     # Soldermask covering pad edges (negative margin)
    OVERLAY = 3  # Soldermask covering the whole pad
    DRILL = 4    # Drilled hole of a plated hole


@dataclass(frozen=True)
class DrawCommand:
    """Fill one geometry with one color at a given stage."""
    stage: DrawStage
    geometry: Geometry
    fill: str


def order_commands(commands: Iterable[DrawCommand]) -> list[DrawCommand]:
    """Sort by stage, keeping the given order within a stage."""
    return sorted(commands, key=lambda command: command.stage)


def emit_commands(
    surface: DrawingSurface,
    commands: Iterable[DrawCommand],
    real_to_canvas: Matrix,
) -> None:
    """Draw commands in canonical stage order."""
    for command in order_commands(commands):
        draw_geometry(surface, command.geometry, real_to_canvas, fill=command.fill)
