"""Lexical check for custom element tag names."""

from __future__ import annotations

import re

RESERVED_TAGS: frozenset[str] = frozenset(
    {
        "annotation-xml",
        "color-profile",
        "font-face",
        "font-face-src",
        "font-face-uri",
        "font-face-format",
        "font-face-name",
        "missing-glyph",
    }
)

# PCENChar from the HTML "valid custom element name" production
_PCEN_CHAR = (
    "[-._0-9a-z"
    "\u00b7\u00c0-\u00d6\u00d8-\u00f6\u00f8-\u037d\u037f-\u1fff"
    "\u200c-\u200d\u203f-\u2040\u2070-\u218f\u2c00-\u2fef"
    "\u3001-\ud7ff\uf900-\ufdcf\ufdf0-\ufffd"
    "\U00010000-\U000effff]"
)

_CUSTOM_ELEMENT_RE = re.compile(f"[a-z]{_PCEN_CHAR}*-{_PCEN_CHAR}*\\Z")


def is_custom_element(tag_name: str | None) -> bool:
    """Return True if ``tag_name`` is a valid custom element name.

    Valid names start with a lowercase ASCII letter, contain a hyphen, have
    no uppercase ASCII letters and are not one of the reserved hyphenated
    names from SVG and MathML.
    """
    if not tag_name or tag_name in RESERVED_TAGS:
        return False
    return _CUSTOM_ELEMENT_RE.match(tag_name) is not None
