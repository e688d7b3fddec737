"""Render component trees to HTML strings."""

from __future__ import annotations

import math
import re
from typing import Any, Mapping

from markupsafe import escape

from .elements import Element

VOID_ELEMENTS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

ATTRIBUTE_ALIASES = {"className": "class", "htmlFor": "for"}
RESERVED_PROPS = frozenset({"children", "key", "ref", "dangerouslySetInnerHTML"})
TEXT_SEPARATOR = "<!-- -->"

_TAG_RE = re.compile(r"^[a-zA-Z][a-zA-Z0-9:._-]*$")
_ATTR_RE = re.compile(r"^[a-zA-Z_:][a-zA-Z0-9_:.-]*$")
_UPPER_RE = re.compile(r"([A-Z])")


class RenderError(ValueError):
    """Raised when a tree cannot be rendered to markup."""


def format_number(value: float) -> str:
    """Format a float the way JavaScript prints numbers."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _style_name(name: str) -> str:
    if name.startswith("--"):
        return name
    return _UPPER_RE.sub(r"-\1", name).lower()


def _style_value(style: Mapping[str, Any]) -> str:
    return "".join(
        f"{_style_name(k)}:{v};"
        for k, v in style.items()
        if v is not None and v is not False and v != ""
    )


def render_attributes(props: Mapping[str, Any]) -> str:
    """Return the serialized attribute list for ``props``, with a leading space."""
    out = []
    for key, value in props.items():
        if key in RESERVED_PROPS or callable(value):
            continue
        name = ATTRIBUTE_ALIASES.get(key, key)
        if not _ATTR_RE.match(name):
            continue
        if value is None or value is False:
            continue
        if value is True:
            out.append(f" {name}")
            continue
        if name == "style" and isinstance(value, Mapping):
            value = _style_value(value)
            if not value:
                continue
        if isinstance(value, float):
            value = format_number(value)
        out.append(f' {name}="{escape(value)}"')
    return "".join(out)


class _Renderer:
    __slots__ = ("parts", "last_was_text")

    def __init__(self) -> None:
        self.parts: list[str] = []
        self.last_was_text = False

    def render(self, node: Any) -> None:
        if node is None or isinstance(node, bool):
            return
        if isinstance(node, float):
            self.text(format_number(node))
        elif isinstance(node, (str, int)):
            self.text(str(node))
        elif isinstance(node, (list, tuple)):
            for child in node:
                self.render(child)
        elif isinstance(node, Element):
            self.element(node)
        else:
            raise RenderError(f"cannot render object of type {type(node).__name__}")

    def text(self, value: str) -> None:
        if not value:
            return
        if self.last_was_text:
            self.parts.append(TEXT_SEPARATOR)
        self.parts.append(str(escape(value)))
        self.last_was_text = True

    def element(self, element: Element) -> None:
        if callable(element.type):
            props = dict(element.props)
            if element.children:
                props["children"] = (
                    element.children[0]
                    if len(element.children) == 1
                    else element.children
                )
            self.render(element.type(props))
            return
        tag = element.type
        if not isinstance(tag, str) or not _TAG_RE.match(tag):
            raise RenderError(f"invalid element type: {tag!r}")

        inner = element.props.get("dangerouslySetInnerHTML")
        if inner is not None and not isinstance(inner, Mapping):
            raise RenderError("dangerouslySetInnerHTML must be a mapping with an __html key")
        if inner is not None and element.children:
            raise RenderError(
                f"<{tag}> cannot have both children and dangerouslySetInnerHTML"
            )

        self.parts.append(f"<{tag}{render_attributes(element.props)}>")
        self.last_was_text = False
        if tag.lower() in VOID_ELEMENTS:
            if element.children or inner is not None:
                raise RenderError(f"<{tag}> is a void element and cannot have children")
            return
        if inner is not None:
            self.parts.append(str(inner.get("__html", "")))
        else:
            self.render(element.children)
        self.parts.append(f"</{tag}>")
        self.last_was_text = False


def render_to_string(node: Any) -> str:
    """Render ``node`` and everything below it to an HTML string.

    Adjacent text nodes are separated by an empty comment so a client-side
    renderer can hydrate them individually.
    """
    renderer = _Renderer()
    renderer.render(node)
    return "".join(renderer.parts)
