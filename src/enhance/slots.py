"""Merging a custom element's children into its template's slots.

The children a custom element was written with are its *inserts*. Children
carrying a ``slot="name"`` attribute go to the ``<slot name="name">`` of the
expanded template; everything else goes to the unnamed default ``<slot>``.
Slots that receive nothing fall back to their own placeholder content.
"""

from __future__ import annotations

from typing import Any

from .dom import create_element, is_element, replace_with, set_children

DEFAULT_WRAPPER_TAG = "span"


def collect_slots(template: Any) -> list[Any]:
    """Return every ``<slot>`` element under ``template`` in document order."""
    slots: list[Any] = []
    stack: list[Any] = list(reversed(template.children or []))
    while stack:
        node = stack.pop()
        if node.name == "slot":
            slots.append(node)
        if node.children:
            stack.extend(reversed(node.children))
    return slots


def collect_direct_inserts(node: Any) -> list[Any]:
    """Return the direct element children of ``node`` that target a named slot."""
    return [child for child in node.children or [] if is_element(child) and "slot" in child.attrs]


def fill_slots(node: Any, template: Any) -> None:
    """Resolve ``template``'s slots against ``node``'s children, then move the
    template's children into ``node``.

    Named slots are filled first, with every insert naming them in original
    order. Default slots then take the children not claimed by a named slot,
    or keep their own children when there are none. Named slots left over are
    unwrapped, forwarding their name as a ``slot`` attribute so an enclosing
    custom element can route them further.
    """
    slots = collect_slots(template)
    inserts = collect_direct_inserts(node)
    original_children: list[Any] = list(node.children or [])

    used_slots: set[int] = set()
    used_inserts: set[int] = set()
    default_slots: list[Any] = []

    for slot in slots:
        if "name" not in slot.attrs:
            default_slots.append(slot)
            continue
        slot_name = slot.attrs["name"]
        matched = [
            insert for insert in inserts if id(insert) not in used_inserts and insert.attrs.get("slot") == slot_name
        ]
        if not matched:
            continue
        replace_with(slot, matched)
        used_slots.add(id(slot))
        used_inserts.update(id(insert) for insert in matched)

    for slot in default_slots:
        remaining = [child for child in original_children if id(child) not in used_inserts]
        if not remaining:
            replace_with(slot, list(slot.children))
        else:
            replace_with(slot, remaining)
            used_inserts.update(id(child) for child in remaining)
        used_slots.add(id(slot))

    _unwrap_unused_slots([slot for slot in slots if id(slot) not in used_slots])

    set_children(node, list(template.children))


def _unwrap_unused_slots(slots: list[Any]) -> None:
    for slot in slots:
        slot_name = slot.attrs.get("name")
        if not slot_name:
            continue
        element_children = [child for child in slot.children if is_element(child)]
        if len(element_children) == 1:
            element_children[0].attrs["slot"] = slot_name
            replace_with(slot, list(slot.children))
            continue
        wrapper = create_element(slot.attrs.get("as") or DEFAULT_WRAPPER_TAG, {"slot": slot_name})
        set_children(wrapper, list(slot.children))
        replace_with(slot, [wrapper])
