"""Document tree shape for Pergamino.

Input trees are plain mappings as produced by ``json.loads`` on ProseMirror or
Tiptap output, not node classes. ``Node`` documents the expected keys for type
checkers; the accessors below read those keys tolerantly, treating a value of
the wrong kind the same as a missing one.

Example:
    >>> node = {"type": "paragraph", "content": [{"type": "text", "text": "hi"}]}
    >>> node_type(node)
    'paragraph'
    >>> [node_text(child) for child in node_children(node)]
    ['hi']

"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypedDict


class Node(TypedDict, total=False):
    """One element of a document tree.

    A container node carries ``content``; a leaf carries ``text``. Neither is
    required for rendering to succeed.
    """

    type: str
    attrs: dict[str, Any]
    content: list[Node]
    text: str


def node_type(node: Any) -> str | None:
    """Return the node's ``type`` discriminant, or None if it has no string type."""
    if not isinstance(node, Mapping):
        return None
    value = node.get("type")
    return value if isinstance(value, str) else None


def node_attrs(node: Any) -> Mapping[str, Any] | None:
    """Return the node's ``attrs`` mapping, or None if absent."""
    if not isinstance(node, Mapping):
        return None
    value = node.get("attrs")
    return value if isinstance(value, Mapping) else None


def node_children(node: Any) -> Sequence[Any]:
    """Return the node's ``content`` children in order (empty if absent)."""
    if not isinstance(node, Mapping):
        return ()
    value = node.get("content")
    # str is a Sequence too
    if isinstance(value, Sequence) and not isinstance(value, str):
        return value
    return ()


def node_text(node: Any) -> str:
    """Return the node's ``text`` payload (empty if absent)."""
    if not isinstance(node, Mapping):
        return ""
    value = node.get("text")
    return value if isinstance(value, str) else ""


__all__ = [
    "Node",
    "node_attrs",
    "node_children",
    "node_text",
    "node_type",
]
