"""Message store: the errors, warnings and notes channels.

Producers add messages while they run; a later stage renders a channel
as text or HTML. A store is normally created once per logical operation
(or reset with clear()) and handed to the code that reports messages.
"""

import logging
import sys
import threading
from collections.abc import Mapping
from typing import Any, TextIO

from .constants import UNKNOWN_HTML_PLACEHOLDER, UNKNOWN_TEXT_PLACEHOLDER
from .exceptions import ErrorsAbort
from .models import Channel, Message, RenderMode, RenderOptions
from .render import get_renderer
from .tags import process_tags
from .utils import html_escape

logger = logging.getLogger(__name__)


def coerce_message(item: Any = None, **fields: Any) -> Message:
    """Build a Message from the shorthand forms accepted by add_message().

    A string becomes the message text, a Message is used as-is and a
    mapping supplies the fields. With no item, keyword fields are used.
    """
    if item is None:
        return Message(**fields)
    if fields:
        raise TypeError("pass either a single message or keyword fields, not both")
    if isinstance(item, Message):
        return item
    if isinstance(item, Mapping):
        return Message(**item)
    return Message(text=str(item))


class MessageStore:
    """Holds the three message channels and renders them.

    Appends are serialized with a lock and every render works on a
    snapshot of the channel taken when the call starts.
    """

    def __init__(self, fail_on_error_add: bool = False, stream: TextIO | None = None):
        """Initialize an empty store.

        Args:
            fail_on_error_add: Abort with ErrorsAbort on every error added
            stream: Output sink for the output_* methods (sys.stdout if None)
        """
        self.fail_on_error_add = fail_on_error_add
        self.stream = stream
        self._channels: dict[Channel, list[Message]] = {channel: [] for channel in Channel}
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # adding

    def add_message(self, channel: "str | Channel", item: Any = None, **fields: Any) -> Message:
        """Add one message to a channel.

        Examples:
            store.add_message("errors", "Filehandle not open")
            store.add_message("errors", id="no-permission", params={"user": "bob"})

        Returns:
            The stored Message
        """
        channel = Channel.parse(channel)
        message = coerce_message(item, **fields)

        with self._lock:
            self._channels[channel].append(message)

        logger.debug(f"Added message to {channel.value}: {message.id or message.text or message.html}")

        if channel is Channel.ERRORS:
            self._check_fail_on_error()

        return message

    def add_messages(self, channel: "str | Channel", *items: Any) -> list[Message]:
        """Add several messages (strings, Messages or mappings) to a channel."""
        channel = Channel.parse(channel)
        messages = [coerce_message(item) for item in items]

        with self._lock:
            self._channels[channel].extend(messages)

        logger.debug(f"Added {len(messages)} messages to {channel.value}")

        if channel is Channel.ERRORS and messages:
            self._check_fail_on_error()

        return messages

    def add_error(self, item: Any = None, **fields: Any) -> Message:
        return self.add_message(Channel.ERRORS, item, **fields)

    def add_warning(self, item: Any = None, **fields: Any) -> Message:
        return self.add_message(Channel.WARNINGS, item, **fields)

    def add_note(self, item: Any = None, **fields: Any) -> Message:
        return self.add_message(Channel.NOTES, item, **fields)

    def add_errors(self, *items: Any) -> list[Message]:
        return self.add_messages(Channel.ERRORS, *items)

    def add_warnings(self, *items: Any) -> list[Message]:
        return self.add_messages(Channel.WARNINGS, *items)

    def add_notes(self, *items: Any) -> list[Message]:
        return self.add_messages(Channel.NOTES, *items)

    # ------------------------------------------------------------------
    # reading and clearing

    def messages(self, channel: "str | Channel") -> list[Message]:
        """Snapshot of a channel's messages in append order."""
        channel = Channel.parse(channel)
        with self._lock:
            return list(self._channels[channel])

    def errors(self) -> list[Message]:
        return self.messages(Channel.ERRORS)

    def warnings(self) -> list[Message]:
        return self.messages(Channel.WARNINGS)

    def notes(self) -> list[Message]:
        return self.messages(Channel.NOTES)

    def count(self, channel: "str | Channel") -> int:
        return len(self.messages(channel))

    def any_errors(self) -> bool:
        return self.count(Channel.ERRORS) > 0

    def any_warnings(self) -> bool:
        return self.count(Channel.WARNINGS) > 0

    def any_notes(self) -> bool:
        return self.count(Channel.NOTES) > 0

    def clear(self) -> None:
        """Empty all three channels."""
        with self._lock:
            for messages in self._channels.values():
                messages.clear()
        logger.debug("Cleared all message channels")

    def clear_channel(self, channel: "str | Channel") -> None:
        channel = Channel.parse(channel)
        with self._lock:
            self._channels[channel].clear()

    # ------------------------------------------------------------------
    # rendering

    def render_text(self, channel: "str | Channel", /, **options: Any) -> str:
        """Render a channel as a bulleted text list without writing it."""
        return self._render(RenderMode.TEXT, channel, options)

    def render_html(self, channel: "str | Channel", /, **options: Any) -> str:
        """Render a channel as an HTML block without writing it."""
        return self._render(RenderMode.HTML, channel, options)

    def output_text(self, channel: "str | Channel", /, **options: Any) -> None:
        self._write(self.render_text(channel, **options), options)

    def output_html(self, channel: "str | Channel", /, **options: Any) -> None:
        self._write(self.render_html(channel, **options), options)

    def output_errors_text(self, **options: Any) -> None:
        self.output_text(Channel.ERRORS, **options)

    def output_warnings_text(self, **options: Any) -> None:
        self.output_text(Channel.WARNINGS, **options)

    def output_notes_text(self, **options: Any) -> None:
        self.output_text(Channel.NOTES, **options)

    def output_errors_html(self, **options: Any) -> None:
        self.output_html(Channel.ERRORS, **options)

    def output_warnings_html(self, **options: Any) -> None:
        self.output_html(Channel.WARNINGS, **options)

    def output_notes_html(self, **options: Any) -> None:
        self.output_html(Channel.NOTES, **options)

    show_errors = output_errors_text

    def die_errors(self, **options: Any) -> bool:
        """Write the errors as text and abort if there are any.

        Returns:
            True when there are no errors

        Raises:
            ErrorsAbort: If the errors channel is not empty
        """
        if not self.any_errors():
            return True

        self.output_errors_text(**options)
        raise ErrorsAbort(self.errors())

    def get_message_string(self, message: Message, mode: "RenderMode | str", site: Any = None) -> str:
        """Render a single message's string; see get_message_string()."""
        return get_message_string(message, mode, site=site)

    def _render(self, mode: RenderMode, channel: "str | Channel", options: dict[str, Any]) -> str:
        if "channel" in options:
            raise TypeError("channel is set by the render call and cannot be passed as an option")
        render_options = RenderOptions.for_channel(channel, **options)
        return get_renderer(mode).render(self.messages(render_options.channel), render_options)

    def _write(self, rendered: str, options: dict[str, Any]) -> None:
        stream = options.get("stream") or self.stream or sys.stdout
        stream.write(rendered)
        stream.flush()

    def _check_fail_on_error(self) -> None:
        if self.fail_on_error_add:
            self.output_errors_text()
            raise ErrorsAbort(self.errors())


def get_message_string(message: Message, mode: "RenderMode | str", site: Any = None) -> str:
    """Render one message outside of any channel.

    Unlike the channel renderers this never raises for a record without
    content; it returns a bracketed placeholder instead.

    Args:
        message: Record to render
        mode: "text" or "html"
        site: Resolver for id lookup; wins over message.site

    Returns:
        Tag-processed string
    """
    if message is None:
        raise ValueError("no message object")

    mode = RenderMode(mode)
    resolver = site if site is not None else message.site

    if resolver is not None and message.id is not None:
        if mode == RenderMode.TEXT:
            raw = resolver.get_message_text(message)
        else:
            raw = resolver.get_message_html(message)
    elif mode == RenderMode.TEXT:
        if message.text is None:
            return UNKNOWN_TEXT_PLACEHOLDER
        raw = message.text
    else:
        if message.html is not None:
            raw = message.html
        elif message.text is not None:
            raw = html_escape(message.text)
        else:
            return UNKNOWN_HTML_PLACEHOLDER

    return process_tags(message, raw, mode, site)
