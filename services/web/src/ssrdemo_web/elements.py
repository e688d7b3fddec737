"""Immutable descriptions of component trees."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Mapping, Union

Component = Callable[[Mapping[str, Any]], Any]
ElementType = Union[str, Component]


@dataclass(frozen=True)
class Element:
    """A node in a component tree.

    ``type`` is either an HTML tag name or a component callable that maps a
    property mapping to another renderable value.
    """

    type: ElementType
    props: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    children: tuple = ()


def create_element(type: ElementType, props: Mapping[str, Any] | None = None, *children: Any) -> Element:
    """Build an :class:`Element`.

    Positional ``children`` take precedence over a ``children`` entry in
    ``props``.
    """
    props = dict(props or {})
    inline = props.pop("children", None)
    if not children and inline is not None:
        children = tuple(inline) if isinstance(inline, (list, tuple)) else (inline,)
    return Element(type, MappingProxyType(props), tuple(children))


h = create_element
