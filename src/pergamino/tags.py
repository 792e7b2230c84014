"""Tag formatting and attribute serialization.

``serialize_attrs`` turns a node's ``attrs`` mapping into the attribute
fragment of an opening tag; ``Tag`` wraps already-rendered inner markup in
opening and closing tags.

Formatting rules:
    <p>inner</p>                 no attrs
    <p class="x">inner</p>       attrs, one space after the name
    <img />                      self-closing, no attrs
    <img alt="x" src="y" />      self-closing with attrs

Attribute values are substituted literally unless the active RenderConfig
sets ``escape_attributes``.

Thread Safety:
All functions are pure; Tag is immutable.

"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pergamino.config import get_render_config
from pergamino.nodes import node_attrs
from pergamino.utils.text import escape_html


def format_attr_value(value: Any) -> str:
    """Convert one attribute value to its markup text.

    None becomes the empty string, strings are used as-is, and every other
    value uses its compact JSON literal.

    Examples:
        >>> format_attr_value(None)
        ''
        >>> format_attr_value("photo.jpg")
        'photo.jpg'
        >>> format_attr_value(True)
        'true'
        >>> format_attr_value([1, 2])
        '[1,2]'
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


def serialize_attrs(attrs: Mapping[str, Any]) -> str:
    """Render an attribute mapping as ``key="value"`` pairs.

    Pairs are joined by a single space in the mapping's iteration order.

    Example:
        >>> serialize_attrs({"alt": "x", "src": "y", "title": None})
        'alt="x" src="y" title=""'
    """
    escape = get_render_config().escape_attributes
    parts = []
    for key, value in attrs.items():
        text = format_attr_value(value)
        if escape:
            text = escape_html(text)
        parts.append(f'{key}="{text}"')
    return " ".join(parts)


@dataclass(frozen=True, slots=True)
class Tag:
    """Markup element name plus whether it has a content slot.

    Attributes:
        name: Element name, e.g. "p" or "img"
        is_self_closing: Emit ``<name ... />`` with no closing tag or content
    """

    name: str
    is_self_closing: bool = False

    def render(self, output: str, node: Any) -> str:
        """Wrap rendered inner markup using the node's own ``attrs``.

        A self-closing tag has no content slot, so ``output`` is dropped.
        """
        opening = self.render_opening(node_attrs(node))
        if self.is_self_closing:
            return opening
        return f"{opening}{output}{self.render_closing()}"

    def render_opening(self, attrs: Mapping[str, Any] | None) -> str:
        fragment = serialize_attrs(attrs) if attrs else ""
        if self.is_self_closing:
            if fragment:
                return f"<{self.name} {fragment} />"
            return f"<{self.name} />"
        if fragment:
            return f"<{self.name} {fragment}>"
        return f"<{self.name}>"

    def render_closing(self) -> str:
        if self.is_self_closing:
            return ""
        return f"</{self.name}>"


__all__ = [
    "Tag",
    "format_attr_value",
    "serialize_attrs",
]
