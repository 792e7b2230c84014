"""Built-in renderers for common ProseMirror / Tiptap node types.

Covers the core document types (doc, paragraph, image, text) and the simple
container types of Tiptap's StarterKit. Types that need more than a fixed
tag, such as headings with a level attribute, are left to callers.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from pergamino.renderers.container import tag_renderer
from pergamino.renderers.text import TextRenderer

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pergamino.renderers.protocol import NodeRenderer

BUILTIN_RENDERERS: Mapping[str, NodeRenderer] = MappingProxyType(
    {
        "doc": tag_renderer("div"),
        "paragraph": tag_renderer("p"),
        "image": tag_renderer("img", self_closing=True),
        "text": TextRenderer(),
        # StarterKit
        "blockquote": tag_renderer("blockquote"),
        "bulletList": tag_renderer("ul"),
        "orderedList": tag_renderer("ol"),
        "listItem": tag_renderer("li"),
        "codeBlock": tag_renderer("pre"),
        "hardBreak": tag_renderer("br", self_closing=True),
        "horizontalRule": tag_renderer("hr", self_closing=True),
    }
)
