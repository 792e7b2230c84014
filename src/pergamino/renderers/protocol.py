"""NodeRenderer protocol — the extension contract for node types.

Any object with ``render(node, registry) -> str`` can be registered for a
node type. Container renderers use the registry they are handed to render
their children, so a renderer never needs to know which other types exist.

Thread Safety:
Renderers must be stateless. The same instance may render many nodes, from
many threads, at once.

Example:
    >>> class MentionRenderer:
    ...     def render(self, node, registry):
    ...         label = node.get("attrs", {}).get("label", "")
    ...         return f'<span class="mention">@{label}</span>'
    ...
    >>> registry.register("mention", MentionRenderer())

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pergamino.registry import RendererRegistry


@runtime_checkable
class NodeRenderer(Protocol):
    """Protocol for per-type node renderers."""

    def render(self, node: Any, registry: RendererRegistry) -> str:
        """Render one node to markup.

        Args:
            node: The node mapping to render
            registry: Registry to resolve the node's children through

        Returns:
            Markup for the node and its subtree

        Raises:
            RenderError: Only if the renderer chooses to fail; the built-in
                renderers never do
        """
        ...
