"""Pre-order traversal over element nodes."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .dom import is_element

Visitor = Callable[[Any], None]


def walk(root: Any, visitor: Visitor) -> None:
    """Call ``visitor`` on ``root`` and every element below it, parents first.

    The visitor may replace the children of the node it is given; the walk
    descends into whatever children the node has once the visitor returns.
    Each level is iterated with an index cursor against the live child list,
    so a sibling is visited at most once.
    """
    if not is_element(root) and root.name not in {"#document", "#document-fragment"}:
        return

    # Explicit stack of (node, next child index) instead of recursion.
    if is_element(root):
        visitor(root)
    stack: list[tuple[Any, int]] = [(root, 0)]
    while stack:
        node, index = stack.pop()
        children: list[Any] = node.children or []
        while index < len(children):
            child = children[index]
            index += 1
            if not is_element(child):
                continue
            visitor(child)
            stack.append((node, index))
            stack.append((child, 0))
            break
