"""Enhancer: the public entry point for expanding custom elements."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, NamedTuple

from .custom_element import is_custom_element
from .dom import find_child, parse_document
from .errors import MalformedDocumentError
from .expand import Transform, expand_template
from .ids import generate_id
from .resources import ResourceCollector
from .serialize import serialize
from .slots import fill_slots
from .state import RenderState
from .transcode import ValueCodec, strip_placeholders
from .walk import walk

logger = logging.getLogger(__name__)

ENHANCED_ATTR = "enhanced"
ENHANCED_ATTR_VALUE = "✨"


class SeparatedHTML(NamedTuple):
    head: str
    body: str


class Enhancer:
    """Expand custom elements in HTML documents into static markup.

    Each call parses a document, replaces every registered custom element in
    ``<body>`` with the output of its render function (filling slots from the
    element's original children), and merges the styles, scripts and links
    those render functions emitted into ``<head>`` and ``<body>``.

    Calls share ``store`` and the placeholder codec; ``context`` is fresh per
    call. Instances are not thread-safe.
    """

    __slots__ = (
        "body_only",
        "codec",
        "elements",
        "enhanced_attr",
        "id_generator",
        "ignore_unknown",
        "script_transforms",
        "separate_content",
        "store",
        "style_transforms",
    )

    body_only: bool
    codec: ValueCodec
    elements: Mapping[str, Any]
    enhanced_attr: bool
    id_generator: Callable[[], str]
    ignore_unknown: bool
    script_transforms: Sequence[Transform]
    separate_content: bool
    store: dict[str, Any]
    style_transforms: Sequence[Transform]

    def __init__(
        self,
        *,
        initial_state: Mapping[str, Any] | None = None,
        elements: Mapping[str, Any] | None = None,
        script_transforms: Sequence[Transform] = (),
        style_transforms: Sequence[Transform] = (),
        id_generator: Callable[[], str] = generate_id,
        body_only: bool = False,
        enhanced_attr: bool = True,
        separate_content: bool = False,
        ignore_unknown: bool = False,
    ) -> None:
        if body_only and separate_content:
            raise ValueError("body_only and separate_content are mutually exclusive")

        self.store = dict(initial_state or {})
        self.elements = elements if elements is not None else {}
        self.script_transforms = tuple(script_transforms)
        self.style_transforms = tuple(style_transforms)
        self.id_generator = id_generator
        self.body_only = bool(body_only)
        self.enhanced_attr = bool(enhanced_attr)
        self.separate_content = bool(separate_content)
        self.ignore_unknown = bool(ignore_unknown)
        self.codec = ValueCodec()

    def __call__(self, strings: Any, *values: Any) -> str | SeparatedHTML:
        return self.html(strings, *values)

    def html(self, strings: Any, *values: Any) -> str | SeparatedHTML:
        """Render a template made of literal ``strings`` and interpolated ``values``.

        Returns the whole document, the inner HTML of ``<body>`` when
        ``body_only`` is set, or a ``SeparatedHTML`` pair when
        ``separate_content`` is set.
        """
        doc = parse_document(self.codec.render(strings, *values))

        html = find_child(doc, "html")
        if html is None:
            raise MalformedDocumentError("missing-html-element")
        head = find_child(html, "head")
        if head is None:
            raise MalformedDocumentError("missing-head-element")
        body = find_child(html, "body")
        if body is None:
            raise MalformedDocumentError("missing-body-element")

        collector = self.process_custom_elements(body)
        collector.splice(head, body)

        if self.separate_content:
            return SeparatedHTML(
                head=strip_placeholders(serialize(head)),
                body=strip_placeholders(serialize(body)),
            )
        if self.body_only:
            return strip_placeholders(serialize(body))
        return strip_placeholders(serialize(doc))

    def process_custom_elements(self, root: Any) -> ResourceCollector:
        """Expand every custom element under ``root`` in place."""
        collector = ResourceCollector()
        context: dict[str, Any] = {}

        def visit(node: Any) -> None:
            tag_name: str = node.name
            if not is_custom_element(tag_name):
                return
            if self.ignore_unknown and tag_name not in self.elements:
                logger.debug("Leaving unregistered <%s> as is", tag_name)
                return

            state = RenderState(context=context, instance_id=self.id_generator(), store=self.store)
            expansion = expand_template(
                node,
                self.elements,
                state,
                self.codec,
                script_transforms=self.script_transforms,
                style_transforms=self.style_transforms,
            )
            if self.enhanced_attr:
                node.attrs[ENHANCED_ATTR] = ENHANCED_ATTR_VALUE
            collector.add(expansion)
            fill_slots(node, expansion.fragment)

        walk(root, visit)
        return collector
