from __future__ import annotations

from typing import Any


class RenderState:
    """What a render function sees for one custom element instance.

    ``context`` is shared by every expansion within one render call,
    ``store`` by every render call of one ``Enhancer``. ``attrs`` holds the
    element's attributes with placeholder tokens decoded back to values.
    """

    __slots__ = ("attrs", "context", "instance_id", "store")

    attrs: dict[str, Any]
    context: dict[str, Any]
    instance_id: str
    store: dict[str, Any]

    def __init__(
        self,
        *,
        context: dict[str, Any],
        instance_id: str,
        store: dict[str, Any],
        attrs: dict[str, Any] | None = None,
    ) -> None:
        self.context = context
        self.instance_id = instance_id
        self.store = store
        self.attrs = attrs if attrs is not None else {}

    def __repr__(self) -> str:
        return f"RenderState(instance_id={self.instance_id!r}, attrs={self.attrs!r})"
