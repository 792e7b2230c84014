"""DocumentRenderer — renders one document tree through a registry.

The root node is dispatched strictly: if its type is missing or has no
renderer, rendering fails with TypeNotFound and produces no output. Below
the root, container renderers drop children of unknown types instead.

Example:
    >>> from pergamino import DocumentRenderer, tag_renderer, TextRenderer
    >>> doc = {"type": "paragraph", "content": [{"type": "text", "text": "hi"}]}
    >>> renderer = DocumentRenderer(doc)
    >>> renderer.register("paragraph", tag_renderer("p"))
    >>> renderer.register("text", TextRenderer())
    >>> renderer.render()
    '<p>hi</p>'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pergamino.config import RenderConfig, render_config_context
from pergamino.errors import TypeNotFound
from pergamino.nodes import node_type
from pergamino.registry import RendererRegistry
from pergamino.utils.logger import get_logger

if TYPE_CHECKING:
    from pergamino.renderers.protocol import NodeRenderer

logger = get_logger(__name__)


class DocumentRenderer:
    """Owns a document tree and the registry used to render it.

    Args:
        content: Root node of the document tree
        registry: Registry to dispatch through; a new empty one if omitted
        config: Render configuration applied for the duration of render();
            when omitted the config active in the caller's context is used
    """

    __slots__ = ("_content", "_registry", "_config")

    def __init__(
        self,
        content: Any,
        registry: RendererRegistry | None = None,
        *,
        config: RenderConfig | None = None,
    ) -> None:
        self._content = content
        self._registry = registry if registry is not None else RendererRegistry()
        self._config = config

    @property
    def content(self) -> Any:
        return self._content

    @property
    def registry(self) -> RendererRegistry:
        return self._registry

    def register(self, node_type: str, renderer: NodeRenderer) -> DocumentRenderer:
        """Register a renderer on this document's registry.

        Returns:
            Self for chaining
        """
        self._registry.register(node_type, renderer)
        return self

    def render(self) -> str:
        """Render the document to markup.

        Returns:
            Markup for the whole tree

        Raises:
            TypeNotFound: If the root node has no type, or no renderer is
                registered for it
        """
        root_type = node_type(self._content)
        if root_type is None:
            logger.debug("Root node has no type")
            raise TypeNotFound(None)

        renderer = self._registry.lookup(root_type)
        if renderer is None:
            logger.debug("No renderer registered for root type %r", root_type)
            raise TypeNotFound(root_type)

        if self._config is None:
            return renderer.render(self._content, self._registry)
        with render_config_context(self._config):
            return renderer.render(self._content, self._registry)
