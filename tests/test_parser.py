"""Tests for the circuit JSON parser."""
import json
import math

import pytest

from pcb_canvas.pcb import (
    CircleSmtPad, CirclePlatedHole, CircuitParser, PcbComponent, PcbKeepout,
    PillPlatedHole, PolygonSmtPad, RectSmtPad, RotatedRectSmtPad, parse_circuit_json,
    Point, parse_element,
)


CIRCUIT = [
    {"type": "source_component", "source_component_id": "sc1", "name": "R1"},
    {
        "type": "pcb_component",
        "pcb_component_id": "c1",
        "center": {"x": 0, "y": 0},
        "width": 20,
        "height": 10,
        "layer": "top",
        "rotation": 0,
    },
    {
        "type": "pcb_smtpad",
        "pcb_smtpad_id": "p1",
        "pcb_component_id": "c1",
        "shape": "rect",
        "x": -5,
        "y": 0,
        "width": 4,
        "height": 2,
        "layer": "top",
        "soldermask_margin": 0.1,
        "soldermask_margin_left": -0.2,
    },
    {
        "type": "pcb_smtpad",
        "pcb_smtpad_id": "p2",
        "shape": "circle",
        "x": 5,
        "y": 0,
        "radius": 1,
        "layer": "bottom",
    },
    {
        "type": "pcb_plated_hole",
        "pcb_plated_hole_id": "h1",
        "shape": "circle",
        "x": 0,
        "y": 4,
        "outer_diameter": 2,
        "hole_diameter": 1,
        "layers": ["top", "bottom"],
    },
    {
        "type": "pcb_keepout",
        "pcb_keepout_id": "k1",
        "shape": "circle",
        "center": {"x": 0, "y": -10},
        "radius": 3,
        "layers": ["top"],
    },
]


@pytest.fixture
def parser():
    return CircuitParser(CIRCUIT)


def test_parser_ignores_unrendered_types(parser):
    assert len(parser.elements) == 5


def test_parser_groups_elements(parser):
    assert [c.pcb_component_id for c in parser.components] == ["c1"]
    assert [p.pcb_smtpad_id for p in parser.smtpads] == ["p1", "p2"]
    assert [h.pcb_plated_hole_id for h in parser.plated_holes] == ["h1"]
    assert [k.pcb_keepout_id for k in parser.keepouts] == ["k1"]


def test_rect_pad_fields(parser):
    pad = parser.smtpads[0]
    assert isinstance(pad, RectSmtPad)
    assert pad.pcb_component_id == "c1"
    assert pad.soldermask_margin == pytest.approx(0.1)
    assert pad.soldermask_margin_left == pytest.approx(-0.2)
    # Unspecified sides fall back later, at render time
    assert pad.soldermask_margin_right is None


def test_missing_optional_fields_default(parser):
    pad = parser.smtpads[1]
    assert isinstance(pad, CircleSmtPad)
    assert pad.pcb_component_id is None
    assert pad.soldermask_margin == 0
    assert pad.is_covered_with_solder_mask is False


def test_bounds_cover_all_elements(parser):
    bounds = parser.get_bounds()
    assert bounds.min_x == pytest.approx(-10)
    assert bounds.max_x == pytest.approx(10)
    assert bounds.min_y == pytest.approx(-13)
    assert bounds.max_y == pytest.approx(5)


def test_parser_loads_file(tmp_path):
    path = tmp_path / "circuit.json"
    path.write_text(json.dumps(CIRCUIT))

    parser = CircuitParser(path)

    assert parser.source_path == path
    assert len(parser.elements) == 5


def test_rotated_rect_reads_rotation_and_legacy_radius():
    pad = parse_element({
        "type": "pcb_smtpad",
        "pcb_smtpad_id": "r",
        "shape": "rotated_rect",
        "x": 1, "y": 2, "width": 3, "height": 1,
        "ccw_rotation": 30,
        "rect_border_radius": 0.25,
    })
    assert isinstance(pad, RotatedRectSmtPad)
    assert pad.ccw_rotation == 30
    assert pad.corner_radius == 0.25


def test_polygon_points_accept_dicts_and_pairs():
    pad = parse_element({
        "type": "pcb_smtpad",
        "pcb_smtpad_id": "poly",
        "shape": "polygon",
        "points": [{"x": 0, "y": 0}, [1, 0], {"x": 1, "y": 1}],
    })
    assert isinstance(pad, PolygonSmtPad)
    assert [tuple(p) for p in pad.points] == [(0, 0), (1, 0), (1, 1)]


def test_unknown_pad_shape_is_skipped():
    assert parse_element({"type": "pcb_smtpad", "pcb_smtpad_id": "x", "shape": "hexagon"}) is None


def test_oval_plated_hole_maps_to_pill():
    hole = parse_element({
        "type": "pcb_plated_hole",
        "pcb_plated_hole_id": "h",
        "shape": "oval",
        "x": 0, "y": 0,
        "outer_width": 3, "outer_height": 2, "hole_width": 2, "hole_height": 1,
    })
    assert isinstance(hole, PillPlatedHole)
    assert hole.layer == "top"


def test_unknown_keepout_shape_is_kept():
    keepout = parse_element({"type": "pcb_keepout", "pcb_keepout_id": "k", "shape": "polygon"})
    assert isinstance(keepout, PcbKeepout)
    assert keepout.shape == "polygon"


def test_component_center_defaults_to_origin():
    component = parse_element({"type": "pcb_component", "pcb_component_id": "c"})
    assert isinstance(component, PcbComponent)
    assert component.center == (0, 0)


def test_circle_plated_hole_fields(parser):
    hole = parser.plated_holes[0]
    assert isinstance(hole, CirclePlatedHole)
    assert hole.outer_diameter == 2
    assert hole.hole_diameter == 1


def test_parse_circuit_json_keeps_document_order(tmp_path):
    path = tmp_path / "circuit.json"
    path.write_text(json.dumps(CIRCUIT), encoding="utf-8")

    from_file = parse_circuit_json(path)
    from_records = parse_circuit_json(CIRCUIT)

    assert from_file == from_records
    assert [type(e) for e in from_records] == [type(e) for e in CircuitParser(CIRCUIT).elements]


def test_parse_circuit_json_rejects_bad_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("[{", encoding="utf-8")

    with pytest.raises(json.JSONDecodeError):
        parse_circuit_json(path)


def test_bounds_cover_rotated_rect_corners():
    parser = CircuitParser([{
        "type": "pcb_smtpad", "pcb_smtpad_id": "r", "shape": "rotated_rect",
        "x": 0, "y": 0, "width": 10, "height": 10, "ccw_rotation": 45,
    }])
    bounds = parser.get_bounds()

    half_diagonal = 5 * math.sqrt(2)
    assert bounds.max_x == pytest.approx(half_diagonal)
    assert bounds.min_y == pytest.approx(-half_diagonal)


def test_bounds_include_positive_soldermask_relief():
    parser = CircuitParser([{
        "type": "pcb_smtpad", "pcb_smtpad_id": "p", "shape": "rect",
        "x": 0, "y": 0, "width": 2, "height": 2, "soldermask_margin": 1,
    }])
    bounds = parser.get_bounds()

    assert (bounds.min_x, bounds.min_y, bounds.max_x, bounds.max_y) == (-2, -2, 2, 2)


def test_bounds_use_per_side_margins_and_ignore_negative_ones():
    parser = CircuitParser([{
        "type": "pcb_smtpad", "pcb_smtpad_id": "p", "shape": "rect",
        "x": 0, "y": 0, "width": 2, "height": 2,
        "soldermask_margin": -0.5, "soldermask_margin_right": 0.5,
    }])
    bounds = parser.get_bounds()

    assert (bounds.min_x, bounds.max_x) == (-1, 1.5)
    assert (bounds.min_y, bounds.max_y) == (-1, 1)


def test_bounds_skip_margins_of_covered_pads():
    parser = CircuitParser([{
        "type": "pcb_smtpad", "pcb_smtpad_id": "c", "shape": "circle",
        "x": 0, "y": 0, "radius": 1, "soldermask_margin": 2,
        "is_covered_with_solder_mask": True,
    }])

    assert parser.get_bounds().max_x == 1


def test_bounds_cover_rotated_pill_hole_with_margin():
    parser = CircuitParser([{
        "type": "pcb_plated_hole", "pcb_plated_hole_id": "h", "shape": "pill",
        "x": 0, "y": 0, "outer_width": 4, "outer_height": 2,
        "hole_width": 3, "hole_height": 1, "ccw_rotation": 90, "soldermask_margin": 0.5,
    }])
    bounds = parser.get_bounds()

    assert bounds.max_x == pytest.approx(1.5)
    assert bounds.max_y == pytest.approx(2.5)


def test_null_coordinates_default_to_zero():
    keepout = parse_element({
        "type": "pcb_keepout", "pcb_keepout_id": "k", "shape": "rect",
        "center": {"x": None, "y": 2},
    })
    pad = parse_element({
        "type": "pcb_smtpad", "pcb_smtpad_id": "p", "shape": "polygon",
        "points": [{"x": 1, "y": None}, [None, 3], {"x": 2, "y": 2}],
    })

    assert keepout.center == Point(0, 2)
    assert pad.points == [Point(1, 0), Point(0, 3), Point(2, 2)]
