"""HTML channel renderer."""

from typing import Any

from ..ids import message_output_id
from ..models import Message, RenderMode, RenderOptions
from ..utils import html_escape
from .framework import MessageRenderer


class HtmlRenderer(MessageRenderer):
    """Renders a channel as a classed ``<div>`` holding a ``<ul>``.

    The list is written with no whitespace between ``<ul>``, ``<li>`` and
    ``</ul>`` so the number of messages can be counted from the markup.
    """

    @property
    def mode(self) -> RenderMode:
        return RenderMode.HTML

    def resolve_template(self, message: Message, site: Any) -> str | None:
        if site is not None and message.id:
            return site.get_message_html(message)
        if message.html is not None:
            return message.html
        if message.text is not None:
            return html_escape(message.text)
        return None

    def format_block(self, items: list[tuple[Message, str]], options: RenderOptions) -> str:
        multi = len(items) > 1

        classes = ["messages"]
        if options.channel is not None:
            classes.append(f"messages-{options.channel.value}")
        if not multi:
            classes.append("messages-single")

        parts = [f'<div class="{" ".join(classes)}"{self._render_atts(options.div_atts)}>']

        if options.show_heading:
            label = options.plural if multi else options.singular
            parts.append(f"<h2>{label}</h2>\n")

        parts.append(f"<ul{self._render_atts(options.ul_atts)}>")
        parts.extend(self._render_item(message, rendered, options) for message, rendered in items)
        parts.append("</ul>\n</div>\n")

        return "".join(parts)

    def _render_item(self, message: Message, rendered: str, options: RenderOptions) -> str:
        if message.id is None:
            return f"<li>{rendered}</li>"

        output_id = options.id_prefix + message_output_id(message)
        shown_id = f"[ {output_id} ] " if options.show_msg_ids else ""
        return f'<li id="{output_id}">{shown_id}{rendered}</li>'

    @staticmethod
    def _render_atts(atts: dict[str, Any]) -> str:
        # values are written as given; escaping is the caller's job
        return "".join(f' {name}="{value}"' for name, value in atts.items())
