"""Thin layer over the justhtml tree.

Documents and fragments are parsed with ``justhtml``; the resulting nodes
(``name``, ordered ``attrs`` dict, ``children`` list, ``parent`` pointer) are
used directly as the tree the expander rewrites. The helpers here keep
parent pointers consistent when children are spliced around.
"""

from __future__ import annotations

from typing import Any

from justhtml import JustHTML
from justhtml.context import FragmentContext
from justhtml.node import ElementNode, TextNode

_FRAGMENT_CONTEXT = FragmentContext("div")


def parse_document(html: str) -> Any:
    """Parse a full document. The root is a ``#document`` node."""
    return JustHTML(html).root


def parse_fragment(html: str) -> Any:
    """Parse markup as a fragment. The root is a ``#document-fragment`` node.

    The markup is parsed as <template> content, so table parts such as
    ``<tr>`` survive and top-level ``<style>``, ``<script>`` and ``<link>``
    stay where they were written.
    """
    root = JustHTML(f"<template>{html}</template>", fragment_context=_FRAGMENT_CONTEXT).root
    template = find_child(root, "template")
    return template.template_content


def is_element(node: Any) -> bool:
    name: str = node.name
    return not name.startswith("#") and name != "!doctype"


def create_element(name: str, attrs: dict[str, str | None] | None = None) -> ElementNode:
    return ElementNode(name, dict(attrs) if attrs else {}, "html")


def create_text(data: str) -> TextNode:
    return TextNode(data)


def find_child(node: Any, name: str) -> Any | None:
    """Return the first direct child element called ``name``."""
    for child in node.children or []:
        if child.name == name:
            return child
    return None


def text_content(node: Any) -> str:
    """Return the node's direct text, the way raw text elements hold it."""
    return "".join(child.data or "" for child in node.children or [] if child.name == "#text")


def set_text_content(node: Any, text: str) -> None:
    """Replace the node's children with a single text node."""
    set_children(node, [create_text(text)] if text else [])


def set_children(node: Any, children: list[Any]) -> None:
    """Replace ``node``'s whole child list, re-parenting each new child."""
    for child in node.children:
        if child.parent is node:
            child.parent = None
    node.children = list(children)
    for child in node.children:
        child.parent = node


def append_children(node: Any, children: list[Any]) -> None:
    for child in children:
        node.append_child(child)


def replace_with(node: Any, replacements: list[Any]) -> None:
    """Splice ``replacements`` into ``node``'s parent at ``node``'s position.

    Siblings of ``node`` keep their relative order.
    """
    parent = node.parent
    if parent is None:
        return
    siblings: list[Any] = parent.children
    index = next(i for i, sibling in enumerate(siblings) if sibling is node)
    siblings[index : index + 1] = replacements
    for replacement in replacements:
        replacement.parent = parent
    node.parent = None
