"""Rendering one custom element into a template fragment."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from .dom import parse_fragment, set_text_content, text_content
from .errors import UnresolvedTemplateError
from .state import RenderState
from .transcode import ValueCodec

logger = logging.getLogger(__name__)

RenderFunction = Callable[[ValueCodec, RenderState], Any]
Transform = Callable[..., str]

# Context argument style transforms receive for <style> found in markup.
STYLE_TRANSFORM_CONTEXT = "markup"


class Expansion:
    __slots__ = ("fragment", "links", "scripts", "styles")

    fragment: Any
    styles: list[Any]
    scripts: list[Any]
    links: list[Any]

    def __init__(self, fragment: Any, styles: list[Any], scripts: list[Any], links: list[Any]) -> None:
        self.fragment = fragment
        self.styles = styles
        self.scripts = scripts
        self.links = links


def attrs_to_state(attrs: Mapping[str, Any] | None, codec: ValueCodec) -> dict[str, Any]:
    return {name: codec.decode(value) for name, value in (attrs or {}).items()}


def resolve_template(elements: Mapping[str, Any], tag_name: str) -> RenderFunction:
    template = elements.get(tag_name)
    if template is None:
        raise UnresolvedTemplateError("missing-template-function", tag_name)
    if not callable(template):
        raise UnresolvedTemplateError("template-not-callable", tag_name)
    return template


def render_template(node: Any, elements: Mapping[str, Any], state: RenderState, codec: ValueCodec) -> Any:
    """Call the render function registered for ``node`` and parse its markup."""
    state.attrs = attrs_to_state(node.attrs, codec)
    template = resolve_template(elements, node.name)
    markup = template(codec.render, state)
    return parse_fragment(markup or "")


def apply_transforms(node: Any, transforms: Sequence[Transform], tag_name: str, *extra: Any) -> Any:
    """Run ``node``'s text through ``transforms`` left to right.

    Elements without a body (``<script src=...></script>``) are returned
    untouched. Exceptions raised by a transform propagate.
    """
    if not node.children:
        return node
    attrs = node.attrs or {}
    out = text_content(node)
    for transform in transforms:
        out = transform(attrs, out, tag_name, *extra)
    set_text_content(node, out)
    return node


def expand_template(
    node: Any,
    elements: Mapping[str, Any],
    state: RenderState,
    codec: ValueCodec,
    *,
    script_transforms: Sequence[Transform] = (),
    style_transforms: Sequence[Transform] = (),
) -> Expansion:
    """Render ``node`` and split the result into body and side resources.

    Top-level ``<style>``, ``<script>`` and ``<link>`` elements are removed
    from the fragment and returned separately, after transforms are applied
    to style and script bodies.
    """
    tag_name: str = node.name
    fragment = render_template(node, elements, state, codec)

    styles: list[Any] = []
    scripts: list[Any] = []
    links: list[Any] = []
    body: list[Any] = []
    for child in fragment.children:
        if child.name == "script":
            scripts.append(apply_transforms(child, script_transforms, tag_name))
        elif child.name == "style":
            styles.append(apply_transforms(child, style_transforms, tag_name, STYLE_TRANSFORM_CONTEXT))
        elif child.name == "link":
            links.append(child)
        else:
            body.append(child)
            continue
        child.parent = None
    fragment.children = body

    logger.debug(
        "Expanded <%s> (%s): %d styles, %d scripts, %d links",
        tag_name,
        state.instance_id,
        len(styles),
        len(scripts),
        len(links),
    )
    return Expansion(fragment, styles, scripts, links)
