"""Pergamino node renderers.

Available Renderers:
- TextRenderer: Leaf renderer emitting a node's text
- ContainerRenderer: Renders children and wraps them in a fixed tag
- tag_renderer: Factory for ContainerRenderer instances

Thread Safety:
All built-in renderers are immutable and build output in per-call
StringBuilders. Safe to share across threads.

"""

from pergamino.renderers.builtins import BUILTIN_RENDERERS
from pergamino.renderers.container import ContainerRenderer, tag_renderer
from pergamino.renderers.protocol import NodeRenderer
from pergamino.renderers.text import TextRenderer

__all__ = [
    "BUILTIN_RENDERERS",
    "ContainerRenderer",
    "NodeRenderer",
    "TextRenderer",
    "tag_renderer",
]
