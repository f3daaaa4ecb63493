"""Command line entry point: render a circuit JSON file to PNG or SVG."""
import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import (
    DEFAULT_CANVAS_HEIGHT, DEFAULT_CANVAS_WIDTH, DEFAULT_PADDING, DEFAULT_PNG_SCALE, OUTPUT_DIR,
)
from .drawer import DEFAULT_PCB_COLOR_MAP, PcbColorMap
from .pcb import CircuitParser
from .svg import SVGGenerator

logger = logging.getLogger(__name__)


def _parse_color_overrides(values: Sequence[str]) -> dict[str, str]:
    overrides = {}
    for value in values:
        key, sep, color = value.partition("=")
        if not sep or not key or not color:
            raise SystemExit(f"Color override must look like KEY=COLOR, got {value!r}")
        overrides[key] = color
    return overrides


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render circuit JSON pads, holes and keepouts to an image."
    )
    parser.add_argument("source", type=Path, help="Path to the circuit JSON file")
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=None,
        help="Output file (.png or .svg). Defaults to output/<source>.png",
    )
    parser.add_argument("--width", type=int, default=DEFAULT_CANVAS_WIDTH)
    parser.add_argument("--height", type=int, default=DEFAULT_CANVAS_HEIGHT)
    parser.add_argument("--padding", type=float, default=DEFAULT_PADDING)
    parser.add_argument(
        "--scale",
        type=float,
        default=DEFAULT_PNG_SCALE,
        help="Rasterization scale for PNG output",
    )
    parser.add_argument(
        "--colors",
        type=Path,
        default=None,
        help="JSON file with a full or partial color map",
    )
    parser.add_argument(
        "--color",
        action="append",
        default=[],
        metavar="KEY=COLOR",
        help="Override one color, e.g. copper.top=#ff0000 (repeatable)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    source = args.source.resolve()
    if not source.exists():
        raise SystemExit(f"Circuit JSON not found: {source}")

    color_map = DEFAULT_PCB_COLOR_MAP
    if args.colors:
        color_map = PcbColorMap.model_validate_json(args.colors.read_text(encoding="utf-8"))
    if args.color:
        try:
            color_map = color_map.with_overrides(_parse_color_overrides(args.color))
        except ValueError as exc:
            raise SystemExit(str(exc)) from exc

    output = args.output
    if output is None:
        OUTPUT_DIR.mkdir(exist_ok=True)
        output = OUTPUT_DIR / f"{source.stem}.png"

    generator = SVGGenerator(CircuitParser(source), color_map)
    svg_content = generator.generate(args.width, args.height, args.padding)

    if output.suffix.lower() == ".svg":
        output.write_text(svg_content, encoding="utf-8")
        logger.info("Saved SVG render to %s", output)
    else:
        # Imported late so SVG output works without the cairo system library
        from .svg.render import render_svg_to_png
        render_svg_to_png(svg_content, output, args.scale)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
