"""Renderer registry for node-type dispatch.

The registry maps a node's ``type`` discriminant to the renderer for it. It
is the extension point of Pergamino: registering a renderer for a new type
is all it takes to support that type.

Thread Safety:
Lookups are read-only. Finish all register() calls before rendering; a
registry shared between threads must not be mutated while renders are in
flight.

Example:
    >>> registry = RendererRegistry()
    >>> registry.register("doc", tag_renderer("div"))
    >>> registry.register("text", TextRenderer())
    >>> registry.lookup("doc")
    ContainerRenderer(tag=Tag(name='div', is_self_closing=False))

"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from pergamino.utils.logger import get_logger

if TYPE_CHECKING:
    from pergamino.renderers.protocol import NodeRenderer

logger = get_logger(__name__)


class RendererRegistry:
    """Mapping from type discriminant to NodeRenderer.

    Registering a type that already has a renderer replaces it.
    """

    __slots__ = ("_by_type",)

    def __init__(self, renderers: Mapping[str, NodeRenderer] | None = None) -> None:
        """Initialize registry, optionally pre-populated.

        Args:
            renderers: Initial type -> renderer mapping
        """
        self._by_type: dict[str, NodeRenderer] = {}
        if renderers:
            self.register_all(renderers)

    def register(self, node_type: str, renderer: NodeRenderer) -> RendererRegistry:
        """Register a renderer for a node type.

        Args:
            node_type: Discriminant matched exactly against a node's ``type``
            renderer: Object implementing the NodeRenderer protocol

        Returns:
            Self for chaining

        Raises:
            TypeError: If node_type is not a string or renderer has no render()
        """
        if not isinstance(node_type, str):
            msg = f"Node type must be a string, got {type(node_type).__name__}"
            raise TypeError(msg)

        if not callable(getattr(renderer, "render", None)):
            msg = f"Renderer {type(renderer).__name__} missing 'render' method"
            raise TypeError(msg)

        existing = self._by_type.get(node_type)
        if existing is not None:
            logger.debug(
                "Replacing renderer for %r: %s -> %s",
                node_type,
                type(existing).__name__,
                type(renderer).__name__,
            )
        self._by_type[node_type] = renderer
        return self

    def register_all(self, renderers: Mapping[str, NodeRenderer]) -> RendererRegistry:
        """Register every type -> renderer pair of a mapping."""
        for node_type, renderer in renderers.items():
            self.register(node_type, renderer)
        return self

    def lookup(self, node_type: str) -> NodeRenderer | None:
        """Get the renderer for a node type.

        Returns:
            Renderer if registered, None otherwise
        """
        return self._by_type.get(node_type)

    def has(self, node_type: str) -> bool:
        """Check if a node type is registered."""
        return node_type in self._by_type

    @property
    def types(self) -> frozenset[str]:
        """Get all registered node types."""
        return frozenset(self._by_type)

    def copy(self) -> RendererRegistry:
        """Return an independent registry with the same registrations."""
        return RendererRegistry(self._by_type)

    def __contains__(self, node_type: object) -> bool:
        """Support 'node_type in registry' syntax."""
        return node_type in self._by_type

    def __len__(self) -> int:
        """Number of registered node types."""
        return len(self._by_type)

    def __repr__(self) -> str:
        return f"RendererRegistry(types={sorted(self._by_type)!r})"


def create_default_registry() -> RendererRegistry:
    """Create a registry with all built-in renderers.

    Returns a fresh registry each call, so callers may extend it freely.
    """
    from pergamino.renderers.builtins import BUILTIN_RENDERERS

    return RendererRegistry(BUILTIN_RENDERERS)
