"""
Pergamino — ProseMirror / Tiptap document trees to HTML

Renders the JSON node trees produced by rich-text editors into markup through
a registry of per-type renderers. Zero runtime dependencies.

Quick Start:
    >>> from pergamino import render_json
    >>> render_json('{"type": "doc", "content": [{"type": "paragraph",'
    ...             ' "content": [{"type": "text", "text": "Hello"}]}]}')
    '<div><p>Hello</p></div>'

Custom Node Types:
    >>> from pergamino import create_default_registry, render
    >>>
    >>> class MentionRenderer:
    ...     def render(self, node, registry):
    ...         return f'<span class="mention">@{node["attrs"]["label"]}</span>'
    ...
    >>> registry = create_default_registry()
    >>> registry.register("mention", MentionRenderer())
    >>> html = render(doc, registry)

Installation:
    pip install pergamino
"""

from typing import Any

from pergamino.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from pergamino.document import DocumentRenderer
from pergamino.errors import PergaminoError, RenderError, TypeNotFound
from pergamino.nodes import Node
from pergamino.registry import RendererRegistry, create_default_registry
from pergamino.renderers import (
    BUILTIN_RENDERERS,
    ContainerRenderer,
    NodeRenderer,
    TextRenderer,
    tag_renderer,
)
from pergamino.serialization import from_json, to_json
from pergamino.tags import Tag, format_attr_value, serialize_attrs

__version__ = "0.1.0"


def render(
    node: Any,
    registry: RendererRegistry | None = None,
    *,
    config: RenderConfig | None = None,
) -> str:
    """Render a document tree to markup.

    Args:
        node: Root node of the tree
        registry: Renderers to dispatch through (built-ins if None)
        config: Optional render configuration

    Returns:
        Markup string

    Raises:
        TypeNotFound: If the root node's type is missing or unregistered

    Example:
        >>> render({"type": "image", "attrs": {"src": "a.png"}})
        '<img src="a.png" />'
    """
    if registry is None:
        registry = create_default_registry()
    return DocumentRenderer(node, registry, config=config).render()


def render_json(
    source: str | bytes,
    registry: RendererRegistry | None = None,
    *,
    config: RenderConfig | None = None,
) -> str:
    """Load a document tree from JSON text and render it.

    Raises:
        ValueError: If the JSON is invalid or its top level is not an object
        TypeNotFound: If the root node's type is missing or unregistered
    """
    return render(from_json(source), registry, config=config)


__all__ = [
    # Main API
    "render",
    "render_json",
    "DocumentRenderer",
    # Registry
    "RendererRegistry",
    "create_default_registry",
    # Renderers
    "BUILTIN_RENDERERS",
    "ContainerRenderer",
    "NodeRenderer",
    "TextRenderer",
    "tag_renderer",
    # Tags
    "Tag",
    "format_attr_value",
    "serialize_attrs",
    # Tree
    "Node",
    "from_json",
    "to_json",
    # Config
    "RenderConfig",
    "get_render_config",
    "render_config_context",
    "reset_render_config",
    "set_render_config",
    # Errors
    "PergaminoError",
    "RenderError",
    "TypeNotFound",
    "__version__",
]
