"""Leaf renderer for text nodes."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pergamino.config import get_render_config
from pergamino.nodes import node_text

if TYPE_CHECKING:
    from pergamino.registry import RendererRegistry


class TextRenderer:
    """Render a text leaf as its ``text`` payload, verbatim.

    A missing ``text`` renders as the empty string. The active config's
    ``text_transformer``, if any, is applied to the payload.
    """

    __slots__ = ()

    def render(self, node: Any, registry: RendererRegistry) -> str:
        text = node_text(node)
        transformer = get_render_config().text_transformer
        if transformer is not None:
            return transformer(text)
        return text

    def __repr__(self) -> str:
        return "TextRenderer()"
