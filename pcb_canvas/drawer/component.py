"""Component rendering and pad/hole ownership."""
from typing import Iterable

from pcb_canvas.pcb.models import (
    Element, PcbComponent, PlatedHole, SmtPad, is_plated_hole, is_smtpad,
)
from pcb_canvas.pcb.transform import Matrix

from .colors import DEFAULT_PCB_COLOR_MAP, PcbColorMap
from .pads import draw_pcb_smtpad
from .plated_holes import draw_pcb_plated_hole
from .surface import DrawingSurface


def find_component_children(
    component_id: str, elements: Iterable[Element]
) -> list[SmtPad | PlatedHole]:
    """Pads and plated holes whose parent reference is ``component_id``, in order."""
    return [
        element for element in elements
        if (is_smtpad(element) or is_plated_hole(element))
        and element.pcb_component_id is not None
        and element.pcb_component_id == component_id
    ]


def component_ids(elements: Iterable[Element]) -> set[str]:
    """Ids of the components present in ``elements``."""
    return {e.pcb_component_id for e in elements if isinstance(e, PcbComponent)}


def is_owned(element: Element, present_component_ids: set[str]) -> bool:
    """
    True if a component pass draws this element.

    Only parents present in the collection count; a pad pointing at a missing
    component is left to the independent pass.
    """
    if not (is_smtpad(element) or is_plated_hole(element)):
        return False
    return (
        element.pcb_component_id is not None
        and element.pcb_component_id in present_component_ids
    )


def owned_element_ids(elements: Iterable[Element]) -> set[str]:
    """Ids of the pads and plated holes a present component draws."""
    elements = list(elements)
    present = component_ids(elements)
    return {e.element_id for e in elements if is_owned(e, present)}


def draw_pcb_component(
    surface: DrawingSurface,
    component: PcbComponent,
    all_elements: Iterable[Element],
    real_to_canvas: Matrix,
    color_map: PcbColorMap = DEFAULT_PCB_COLOR_MAP,
) -> None:
    """Draw every pad and plated hole that belongs to a component."""
    for child in find_component_children(component.pcb_component_id, all_elements):
        if is_smtpad(child):
            draw_pcb_smtpad(surface, child, real_to_canvas, color_map)
        else:
            draw_pcb_plated_hole(surface, child, real_to_canvas, color_map)
