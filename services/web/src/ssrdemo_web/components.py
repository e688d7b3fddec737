from __future__ import annotations

from typing import Any, Mapping

from .elements import Element, h


def hello_world(props: Mapping[str, Any]) -> Element:
    return h("h1", None, "Hello ", props.get("name"))
