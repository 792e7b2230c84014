"""ContextVar-based render configuration for Pergamino.

Configuration is read by renderers from a ContextVar rather than passed
through every ``render(node, registry)`` call, so custom renderers keep the
two-argument signature.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so concurrent renders with different configs do not see each other's values.

Usage:
    from pergamino.config import RenderConfig, render_config_context

    with render_config_context(RenderConfig(escape_attributes=True)):
        html = DocumentRenderer(doc, registry).render()

    # Or hand the config to the façade, which does the same thing
    DocumentRenderer(doc, registry, config=RenderConfig(escape_attributes=True))

"""

from collections.abc import Callable
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        escape_attributes: HTML-escape attribute values. Off by default, in which
            case values are substituted literally and a ``"`` inside a value
            ends up unescaped in the output.
        text_transformer: Optional callback applied to every text leaf

    """

    escape_attributes: bool = False
    text_transformer: Callable[[str], str] | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "RenderConfig":
        """Create RenderConfig from dictionary.

        Only includes keys that are valid RenderConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "escape_attributes": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.escape_attributes
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration active in the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for the current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(escape_attributes=True)):
        ...     get_render_config().escape_attributes
        True
        >>> get_render_config().escape_attributes
        False

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
