"""SVG document generator for circuit JSON."""
from pcb_canvas.config import DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH, DEFAULT_PADDING
from pcb_canvas.drawer import DEFAULT_PCB_COLOR_MAP, CircuitDrawer, PcbColorMap
from pcb_canvas.pcb import CircuitParser

from .surface import SvgSurface


class SVGGenerator:
    """Generate an SVG picture of a circuit's pads, holes and keepouts."""

    def __init__(self, parser: CircuitParser, color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP):
        """Initialize with parsed circuit JSON."""
        self.parser = parser
        self.color_map = color_map
        self.bounds = parser.get_bounds()

    def generate(
        self,
        width: float = DEFAULT_CANVAS_WIDTH,
        height: float = DEFAULT_CANVAS_HEIGHT,
        padding: float = DEFAULT_PADDING,
    ) -> str:
        """
        Generate SVG document.

        Args:
            width, height: Output size in pixels
            padding: Empty border around the elements (pixels)

        Returns:
            SVG document as string
        """
        surface = SvgSurface(width, height, background=self.color_map.background)
        drawer = CircuitDrawer(surface, color_map=self.color_map)
        drawer.set_camera_bounds(
            self.bounds.min_x, self.bounds.max_x,
            self.bounds.min_y, self.bounds.max_y,
            width, height, padding,
        )
        drawer.draw_elements(self.parser.elements)

        return surface.to_string()
