from .surface import SvgSurface
from .generator import SVGGenerator

# PNG export lives in .render, which needs the cairo system library
__all__ = ["SvgSurface", "SVGGenerator"]
