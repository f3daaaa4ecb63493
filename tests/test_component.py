"""Tests for component ownership and the top-level drawer."""
from pcb_canvas.drawer import CircuitDrawer, draw_pcb_component, find_component_children
from pcb_canvas.drawer.component import component_ids, is_owned, owned_element_ids
from pcb_canvas.pcb import (
    CirclePlatedHole, CircleSmtPad, PcbComponent, PcbKeepout, PillPlatedHole,
    Point, RectSmtPad,
)


def _pad(pad_id, x, component_id=None, width=2):
    return RectSmtPad(pcb_smtpad_id=pad_id, x=x, y=0, width=width, height=1,
                      pcb_component_id=component_id)


def _rect_widths(surface):
    return [op.args[2] for op in surface.named("rect")]


def test_find_component_children_matches_parent_reference():
    c1 = PcbComponent("c1", center=Point(0, 0), width=10, height=10)
    p1 = _pad("p1", 0, "c1")
    p2 = _pad("p2", 1, "c2")
    p3 = _pad("p3", 2)
    h1 = CirclePlatedHole(pcb_plated_hole_id="h1", x=0, y=3, outer_diameter=2,
                          hole_diameter=1, pcb_component_id="c1")
    keepout = PcbKeepout("k", "rect", center=Point(0, 0), width=1, height=1)

    children = find_component_children("c1", [c1, p1, p2, p3, h1, keepout])

    assert children == [p1, h1]


def test_pads_without_parent_are_never_children():
    orphan = _pad("p", 0)
    assert find_component_children("None", [orphan]) == []


def test_is_owned_requires_parent_present():
    present = component_ids([PcbComponent("c1")])

    assert is_owned(_pad("a", 0, "c1"), present)
    assert not is_owned(_pad("b", 0, "missing"), present)
    assert not is_owned(_pad("c", 0), present)
    assert not is_owned(PcbComponent("c1"), present)


def test_draw_component_draws_pads_and_holes(surface, identity, colors):
    component = PcbComponent("c1", center=Point(100, 100), width=80, height=60)
    elements = [
        component,
        RectSmtPad(pcb_smtpad_id="pad1", pcb_component_id="c1", x=70, y=100, width=15, height=8),
        CircleSmtPad(pcb_smtpad_id="pad2", pcb_component_id="c1", x=130, y=100, radius=6),
        CirclePlatedHole(pcb_plated_hole_id="hole1", pcb_component_id="c1", x=100, y=80,
                         outer_diameter=20, hole_diameter=10),
    ]

    draw_pcb_component(surface, component, elements, identity)

    assert surface.fill_colors() == [
        colors["copper"], colors["copper"], colors["copper"], colors["drill"],
    ]


def test_component_pads_drawn_exactly_once(surface, identity):
    """P1, P2 belong to C and draw in its pass; P3 has no parent and draws alone."""
    elements = [
        _pad("p1", 0, "c", width=1),
        PcbComponent("c", center=Point(0, 0), width=10, height=10),
        _pad("p2", 5, "c", width=2),
        _pad("p3", 10, width=3),
    ]

    CircuitDrawer(surface, identity).draw_elements(elements)

    widths = _rect_widths(surface)
    assert sorted(widths) == [1, 2, 3]
    # Component children are drawn in the component's pass, in input order
    assert widths == [1, 2, 3]


def test_pad_with_missing_parent_is_drawn_independently(surface, identity):
    elements = [_pad("p", 0, "ghost", width=4)]

    CircuitDrawer(surface, identity).draw_elements(elements)

    assert _rect_widths(surface) == [4]


def test_plated_holes_follow_the_same_ownership(surface, identity, colors):
    elements = [
        PcbComponent("c", center=Point(0, 0)),
        PillPlatedHole(pcb_plated_hole_id="h1", pcb_component_id="c", x=-2, y=0,
                       outer_width=2, outer_height=1, hole_width=1, hole_height=0.5),
        PillPlatedHole(pcb_plated_hole_id="h2", x=2, y=0,
                       outer_width=2, outer_height=1, hole_width=1, hole_height=0.5),
    ]

    CircuitDrawer(surface, identity).draw_elements(elements)

    assert surface.fill_colors().count(colors["drill"]) == 2


def test_drawer_dispatches_keepouts(surface, identity):
    elements = [PcbKeepout("k", "circle", center=Point(0, 0), radius=2)]
    CircuitDrawer(surface, identity).draw_elements(elements)

    assert surface.count("clip") == 1
    assert surface.depth == 0


def test_drawer_set_camera_bounds(surface):
    drawer = CircuitDrawer(surface)
    matrix = drawer.set_camera_bounds(0, 10, 0, 10, 100, 100)

    assert drawer.real_to_canvas is matrix
    assert matrix.apply(5, 5) == (50, 50)


def test_drawer_defaults_to_identity(surface):
    drawer = CircuitDrawer(surface)
    drawer.draw_elements([_pad("p", 3, width=2)])

    assert surface.named("translate")[0].args == (3, 0)


def test_owned_element_ids_only_counts_present_parents():
    elements = [
        PcbComponent("c"),
        _pad("owned", 0, "c"),
        _pad("ghost", 1, "missing"),
        _pad("free", 2),
        CirclePlatedHole(pcb_plated_hole_id="h", x=0, y=3, outer_diameter=2,
                         hole_diameter=1, pcb_component_id="c"),
    ]

    assert owned_element_ids(elements) == {"owned", "h"}


def test_repeated_component_id_draws_children_once(surface, identity):
    elements = [
        PcbComponent("c"),
        PcbComponent("c"),
        _pad("p", 0, "c", width=2),
    ]

    CircuitDrawer(surface, identity).draw_elements(elements)

    assert surface.count("fill") == 1
    assert _rect_widths(surface) == [2]
