"""Deduplicating and placing the styles, scripts and links of a render call."""

from __future__ import annotations

import logging
from itertools import chain
from typing import TYPE_CHECKING, Any

from .dom import append_children, create_element, set_text_content, text_content

if TYPE_CHECKING:
    from .expand import Expansion

logger = logging.getLogger(__name__)


def normalize_link(node: Any) -> str:
    """Canonical string for a ``<link>``: attributes sorted by name."""
    attrs = sorted((node.attrs or {}).items(), key=lambda item: item[0])
    rendered = " ".join(f'{name}="{"" if value is None else value}"' for name, value in attrs)
    return f"<link {rendered} />"


def _is_import(css: str) -> bool:
    return css.strip().startswith("@import")


class ResourceCollector:
    """Per-call accumulator of the resources each expansion split out.

    One inner list is kept per expansion and kind, in expansion order.
    """

    __slots__ = ("links", "scripts", "styles")

    styles: list[list[Any]]
    scripts: list[list[Any]]
    links: list[list[Any]]

    def __init__(self) -> None:
        self.styles = []
        self.scripts = []
        self.links = []

    def add(self, expansion: Expansion) -> None:
        self.styles.append(expansion.styles)
        self.scripts.append(expansion.scripts)
        self.links.append(expansion.links)

    def unique_scripts(self) -> list[Any]:
        """Scripts keyed by their body, or their ``src`` when the body is empty.

        The first script for each key wins. Scripts with neither are dropped.
        """
        unique: dict[str, Any] = {}
        for script in chain.from_iterable(self.scripts):
            key = text_content(script) or (script.attrs or {}).get("src")
            if key and key not in unique:
                unique[key] = script
        return list(unique.values())

    def merged_css(self) -> str:
        """Distinct non-empty style bodies, ``@import`` bodies first, one per line."""
        bodies: dict[str, None] = {}
        for style in chain.from_iterable(self.styles):
            css = text_content(style)
            if css:
                bodies.setdefault(css, None)
        # sorted() is stable, so order within each group is kept
        return "\n".join(sorted(bodies, key=lambda css: not _is_import(css)))

    def unique_links(self) -> list[Any]:
        unique: dict[str, Any] = {}
        for link in chain.from_iterable(self.links):
            unique.setdefault(normalize_link(link), link)
        return list(unique.values())

    def splice(self, head: Any, body: Any) -> None:
        """Append scripts to ``body`` and the merged style and links to ``head``."""
        scripts = self.unique_scripts()
        if scripts:
            append_children(body, scripts)

        css = self.merged_css()
        if css:
            style = create_element("style")
            set_text_content(style, css)
            head.append_child(style)

        links = self.unique_links()
        if links:
            append_children(head, links)

        logger.debug("Spliced %d scripts, %d links, %d bytes of CSS", len(scripts), len(links), len(css))
