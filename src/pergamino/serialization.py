"""JSON helpers for document trees.

Editors hand documents over as JSON text. ``from_json`` loads that text into
the plain-mapping tree the renderers read, and ``to_json`` writes a tree back.

Key order is kept as-is in both directions (never sorted): attribute order
decides the order of attributes in rendered markup.

Thread Safety:
    All functions are pure — safe to call from any thread.

"""

import json
from typing import Any

from pergamino.nodes import Node


def from_json(data: str | bytes) -> Node:
    """Load a document tree from JSON text.

    Args:
        data: JSON text whose top level is an object

    Returns:
        Root node mapping.

    Raises:
        json.JSONDecodeError: If the text is not valid JSON.
        ValueError: If the top level is not a JSON object.

    """
    raw: Any = json.loads(data)
    if not isinstance(raw, dict):
        msg = f"Expected a JSON object at the top level, got {type(raw).__name__}"
        raise ValueError(msg)
    return raw


def to_json(node: Node, *, indent: int | None = None) -> str:
    """Serialize a document tree to JSON text.

    Args:
        node: Root node mapping.
        indent: JSON indentation level (None for compact).

    Returns:
        JSON string.

    """
    return json.dumps(node, indent=indent, ensure_ascii=False)
