"""Top-level drawer dispatching circuit elements to their renderers."""
import logging
from typing import Iterable, Optional

from pcb_canvas.pcb.models import Element, PcbComponent, PcbKeepout, is_plated_hole, is_smtpad
from pcb_canvas.pcb.transform import Matrix, fit_real_to_canvas

from .colors import DEFAULT_PCB_COLOR_MAP, PcbColorMap
from .component import component_ids, draw_pcb_component, is_owned
from .keepout import draw_pcb_keepout
from .pads import draw_pcb_smtpad
from .plated_holes import draw_pcb_plated_hole
from .surface import DrawingSurface

logger = logging.getLogger(__name__)


class CircuitDrawer:
    """Draw circuit elements onto a drawing surface."""

    def __init__(
        self,
        surface: DrawingSurface,
        real_to_canvas: Optional[Matrix] = None,
        color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP,
    ):
        """
        Args:
            surface: Target surface
            real_to_canvas: Real-to-surface transform, identity if omitted
            color_map: Layer colors
        """
        self.surface = surface
        self.real_to_canvas = real_to_canvas or Matrix.identity()
        self.color_map = color_map

    def set_camera_bounds(
        self,
        min_x: float,
        max_x: float,
        min_y: float,
        max_y: float,
        width: float,
        height: float,
        padding: float = 0.0,
    ) -> Matrix:
        """Fit the given real-world box onto a width x height surface."""
        self.real_to_canvas = fit_real_to_canvas(min_x, min_y, max_x, max_y, width, height, padding)
        return self.real_to_canvas

    def draw_elements(self, elements: Iterable[Element]) -> None:
        """
        Draw elements in order.

        Components draw their own pads and holes; those are skipped when met
        on their own so each is drawn exactly once. A component id listed
        more than once runs its pass only the first time.
        """
        elements = list(elements)
        present = component_ids(elements)
        visited: set[str] = set()
        drawn = 0

        for element in elements:
            if isinstance(element, PcbComponent):
                if element.pcb_component_id in visited:
                    logger.debug("Skipping repeated component %s", element.pcb_component_id)
                    continue
                visited.add(element.pcb_component_id)
                draw_pcb_component(
                    self.surface, element, elements, self.real_to_canvas, self.color_map
                )
            elif is_owned(element, present):
                continue
            elif is_smtpad(element):
                draw_pcb_smtpad(self.surface, element, self.real_to_canvas, self.color_map)
            elif is_plated_hole(element):
                draw_pcb_plated_hole(self.surface, element, self.real_to_canvas, self.color_map)
            elif isinstance(element, PcbKeepout):
                draw_pcb_keepout(self.surface, element, self.real_to_canvas, self.color_map)
            else:
                logger.debug("No renderer for %s", type(element).__name__)
                continue
            drawn += 1

        logger.debug("Drew %d of %d elements", drawn, len(elements))
