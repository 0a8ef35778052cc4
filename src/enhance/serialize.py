"""HTML serialization for expanded documents.

Output is compact (no pretty-printing) so that the markup written by render
functions comes back out exactly as structured. Raw text elements such as
``<script>`` and ``<style>`` are emitted without escaping.
"""

from __future__ import annotations

# ruff: noqa: PERF401

from typing import Any

VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "basefont",
        "bgsound",
        "br",
        "col",
        "embed",
        "frame",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

RAW_TEXT_ELEMENTS: frozenset[str] = frozenset(
    {"iframe", "noembed", "noframes", "plaintext", "script", "style", "xmp"}
)


def _escape_text(text: str | None) -> str:
    if not text:
        return ""
    return str(text).replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;").replace("\xa0", "&nbsp;")


def _escape_attr_value(value: str | None) -> str:
    if value is None:
        return ""
    return str(value).replace("&", "&amp;").replace('"', "&quot;").replace("\xa0", "&nbsp;")


def serialize_start_tag(name: str, attrs: dict[str, Any] | None) -> str:
    attrs = attrs or {}
    parts: list[str] = ["<", name]
    for key, value in attrs.items():
        parts.extend([" ", key, '="', _escape_attr_value(value), '"'])
    parts.append(">")
    return "".join(parts)


def serialize_end_tag(name: str) -> str:
    return f"</{name}>"


def serialize(node: Any) -> str:
    """Serialize the children of ``node`` (its inner HTML)."""
    parts: list[str] = []
    children = _content_children(node)
    for child in children:
        parts.append(_node_to_html(child, raw_text=node.name in RAW_TEXT_ELEMENTS))
    return "".join(parts)


def serialize_outer(node: Any) -> str:
    """Serialize ``node`` including its own start and end tags."""
    return _node_to_html(node)


def _content_children(node: Any) -> list[Any]:
    # <template> keeps its children in a separate content fragment.
    template_content = getattr(node, "template_content", None)
    if template_content is not None:
        return list(template_content.children or [])
    return list(node.children or [])


def _node_to_html(node: Any, raw_text: bool = False) -> str:
    name: str = node.name

    if name == "#text":
        if raw_text:
            return node.data or ""
        return _escape_text(node.data)

    if name == "#comment":
        return f"<!--{node.data or ''}-->"

    if name == "!doctype":
        doctype = node.data
        doctype_name = getattr(doctype, "name", None) or "html"
        return f"<!DOCTYPE {doctype_name}>"

    if name in {"#document", "#document-fragment"}:
        return serialize(node)

    open_tag = serialize_start_tag(name, node.attrs)
    if name in VOID_ELEMENTS:
        return open_tag
    return f"{open_tag}{serialize(node)}{serialize_end_tag(name)}"
