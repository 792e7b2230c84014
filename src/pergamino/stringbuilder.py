"""StringBuilder for O(n) markup accumulation.

Container renderers collect their children's output here and join once,
instead of concatenating a growing string child by child.

Thread Safety:
StringBuilder instances are local to each render() call.

"""

from __future__ import annotations


class StringBuilder:
    """Efficient string accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append("<p>")
            >>> sb.append("Hello")
            >>> sb.append("</p>")
            >>> sb.build()
            '<p>Hello</p>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append a fragment (empty strings are skipped) and return self."""
        if s:
            self._parts.append(s)
        return self

    def build(self) -> str:
        """Join all fragments into the final string."""
        return "".join(self._parts)

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)

    def __bool__(self) -> bool:
        return bool(self._parts)
