"""Plain-text channel renderer."""

from typing import Any

from ..models import Message, RenderMode, RenderOptions
from ..utils import html_escape
from .framework import MessageRenderer


class TextRenderer(MessageRenderer):
    """Renders a channel as a ``* ``-bulleted list.

    Singular/plural labels are accepted but no heading is printed.
    """

    @property
    def mode(self) -> RenderMode:
        return RenderMode.TEXT

    def resolve_template(self, message: Message, site: Any) -> str | None:
        if site is not None and message.id:
            return site.get_message_text(message)
        if message.text is not None:
            return message.text
        # HTML-only records are shown escaped rather than tag-stripped
        if message.html is not None:
            return html_escape(message.html)
        return None

    def format_block(self, items: list[tuple[Message, str]], options: RenderOptions) -> str:
        return "* " + "\n* ".join(rendered for _, rendered in items) + "\n"
