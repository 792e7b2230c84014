"""Container renderer: children in order, wrapped in one tag.

Every simple element type (document, paragraph, image, list, ...) differs only
in its tag, so one parameterized class covers them all:

    >>> paragraph = tag_renderer("p")
    >>> image = tag_renderer("img", self_closing=True)

"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from pergamino.nodes import node_children, node_type
from pergamino.stringbuilder import StringBuilder
from pergamino.tags import Tag
from pergamino.utils.logger import get_logger

if TYPE_CHECKING:
    from pergamino.registry import RendererRegistry

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ContainerRenderer:
    """Render a node's ``content`` children and wrap them in ``tag``.

    Children are looked up in the registry by their ``type``. A child with no
    type, or with a type nothing is registered for, is left out of the output;
    its siblings still render. Errors raised by child renderers propagate.
    """

    tag: Tag

    def render(self, node: Any, registry: RendererRegistry) -> str:
        sb = StringBuilder()
        for child in node_children(node):
            child_type = node_type(child)
            if child_type is None:
                logger.debug("Skipping child of <%s> without a type", self.tag.name)
                continue
            renderer = registry.lookup(child_type)
            if renderer is None:
                logger.debug(
                    "Skipping child of <%s> with unregistered type %r",
                    self.tag.name,
                    child_type,
                )
                continue
            sb.append(renderer.render(child, registry))

        return self.tag.render(sb.build(), node)


def tag_renderer(name: str, self_closing: bool = False) -> ContainerRenderer:
    """Create a container renderer for the given element name.

    Args:
        name: Element name to wrap children in
        self_closing: Emit ``<name ... />`` with no content slot

    Returns:
        ContainerRenderer for that tag
    """
    return ContainerRenderer(Tag(name, self_closing))
