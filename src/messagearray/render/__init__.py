"""Text and HTML renderers for message channels."""

from ..models import RenderMode
from .framework import MessageRenderer
from .html import HtmlRenderer
from .text import TextRenderer

_RENDERERS: dict[RenderMode, type[MessageRenderer]] = {
    RenderMode.TEXT: TextRenderer,
    RenderMode.HTML: HtmlRenderer,
}


def get_renderer(mode: "RenderMode | str") -> MessageRenderer:
    """Return a renderer for the given mode.

    Raises:
        ValueError: If mode is not text or html
    """
    try:
        return _RENDERERS[RenderMode(mode)]()
    except ValueError:
        available = [m.value for m in _RENDERERS]
        raise ValueError(f"Unknown render mode '{mode}'. Available: {available}") from None


__all__ = [
    "MessageRenderer",
    "TextRenderer",
    "HtmlRenderer",
    "get_renderer",
]
