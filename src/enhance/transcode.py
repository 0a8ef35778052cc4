"""Placeholder encoding for values interpolated into markup.

Strings and numbers are embedded in markup directly. Everything else is
parked in the codec under an opaque ``__b_<seq>`` token, which survives
parsing as plain attribute or text content and is turned back into the
original object when a render function reads its attributes.
"""

from __future__ import annotations

import itertools
import re
from collections.abc import Iterator
from typing import Any

PLACEHOLDER_PREFIX = "__b_"
PLACEHOLDER_RE = re.compile(r"__b_\d+")
_TOKEN_RE = re.compile(r"__b_\d+\Z")


def is_primitive(value: Any) -> bool:
    # bool is an int subclass but is not embedded as a number
    if isinstance(value, bool):
        return False
    return isinstance(value, (str, int, float))


def _markup_text(value: Any) -> str:
    # 1.0 is written as 1
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def strip_placeholders(text: str) -> str:
    """Remove any placeholder token text left in serialized output."""
    return PLACEHOLDER_RE.sub("", text)


class ValueCodec:
    __slots__ = ("_counter", "_values")

    _counter: Iterator[int]
    _values: dict[str, Any]

    def __init__(self) -> None:
        self._counter = itertools.count()
        self._values = {}

    def __len__(self) -> int:
        return len(self._values)

    def encode(self, value: Any) -> Any:
        if is_primitive(value):
            return value
        token = f"{PLACEHOLDER_PREFIX}{next(self._counter)}"
        self._values[token] = value
        return token

    def decode(self, value: Any) -> Any:
        if isinstance(value, str) and _TOKEN_RE.match(value) and value in self._values:
            return self._values[value]
        return value

    def render(self, strings: Any, *values: Any) -> str:
        """Join literal segments with encoded values into one markup string.

        ``strings`` is either a plain string (no interpolations), a sequence
        of literal segments one longer than ``values``, or a template object
        exposing ``strings`` and ``interpolations``.
        """
        if isinstance(strings, str):
            if values:
                raise TypeError("render() takes no values when given a single string")
            return strings

        if hasattr(strings, "interpolations") and hasattr(strings, "strings"):
            values = tuple(interp.value for interp in strings.interpolations)
            strings = strings.strings

        segments = list(strings)
        if len(segments) != len(values) + 1:
            raise ValueError(f"Expected {len(values) + 1} literal segments for {len(values)} values, got {len(segments)}")

        parts: list[str] = []
        for segment, value in zip(segments, values):
            parts.append(segment)
            parts.append(_markup_text(self.encode(value)))
        parts.append(segments[-1])
        return "".join(parts)

    __call__ = render
