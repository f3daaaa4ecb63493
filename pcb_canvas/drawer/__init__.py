from .colors import DEFAULT_PCB_COLOR_MAP, PcbColorMap
from .commands import DrawCommand, DrawStage, emit_commands
from .component import draw_pcb_component, find_component_children, owned_element_ids
from .drawer import CircuitDrawer
from .keepout import draw_pcb_keepout
from .pads import draw_pcb_smtpad, smtpad_commands
from .plated_holes import draw_pcb_plated_hole, plated_hole_commands
from .shapes import draw_circle, draw_pill, draw_polygon, draw_rect
from .soldermask import offset_polygon_points
from .surface import DrawingSurface, RecordingSurface, surface_state

__all__ = [
    "DEFAULT_PCB_COLOR_MAP", "PcbColorMap",
    "DrawCommand", "DrawStage", "emit_commands",
    "draw_pcb_component", "find_component_children", "owned_element_ids",
    "CircuitDrawer",
    "draw_pcb_keepout",
    "draw_pcb_smtpad", "smtpad_commands",
    "draw_pcb_plated_hole", "plated_hole_commands",
    "draw_circle", "draw_pill", "draw_polygon", "draw_rect",
    "offset_polygon_points",
    "DrawingSurface", "RecordingSurface", "surface_state",
]
