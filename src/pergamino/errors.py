"""Exception classes for Pergamino.

Provides standardized exceptions for error handling throughout Pergamino.
"""

from __future__ import annotations


class PergaminoError(Exception):
    """Base exception for all Pergamino errors.
    
    Subclass this for specific error categories.
    """

    pass


class RenderError(PergaminoError):
    """Error during markup rendering.
    
    Raised when a document tree cannot be turned into markup.
    """

    pass


class TypeNotFound(RenderError):
    """No renderer is registered for the root node's type.
    
    Only the root of a render call is dispatched strictly. Children with
    an unknown type are dropped from their parent's output instead.
    """

    def __init__(self, type_name: str | None = None) -> None:
        """Initialize with the discriminant that could not be resolved.
        
        Args:
            type_name: The node's ``type`` value, or None if the node had none
        """
        self.type_name = type_name
        super().__init__(f"Type not found: {type_name!r}")
