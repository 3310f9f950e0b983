"""Rendering framework shared by the text and HTML renderers."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any

from ..exceptions import MessageContractError
from ..models import Message, RenderMode, RenderOptions
from ..site import lookup_site
from ..tags import process_tags

logger = logging.getLogger(__name__)


class MessageRenderer(ABC):
    """Abstract base class for channel renderers.

    Subclasses pick a display template for each record and lay out the
    deduplicated results; resolution order, tag processing and
    deduplication live here.
    """

    @property
    @abstractmethod
    def mode(self) -> RenderMode:
        """Render mode handed to tag processing."""
        pass

    @abstractmethod
    def resolve_template(self, message: Message, site: Any) -> str | None:
        """Pick the raw template for a record.

        Returns:
            Template string, or None if the record has no usable content
        """
        pass

    @abstractmethod
    def format_block(self, items: list[tuple[Message, str]], options: RenderOptions) -> str:
        """Lay out deduplicated (record, rendered string) pairs."""
        pass

    def render(self, messages: Iterable[Message], options: RenderOptions | None = None) -> str:
        """Render a channel's records as one block.

        Args:
            messages: Records in append order
            options: Render options; defaults apply when None

        Returns:
            Rendered block, or "" when there are no records

        Raises:
            MessageContractError: If a record has no renderable content
        """
        options = options or RenderOptions()
        messages = list(messages)

        if not messages:
            return ""

        items = self.unique_messages(messages, options)
        logger.debug(
            f"Rendering {len(items)} unique of {len(messages)} messages as {self.mode.value}"
        )
        return self.format_block(items, options)

    def unique_messages(self, messages: Iterable[Message], options: RenderOptions) -> list[tuple[Message, str]]:
        """Render each record and keep the first occurrence of each string."""
        seen: set[str] = set()
        items: list[tuple[Message, str]] = []

        for message in messages:
            rendered = self.render_message(message, options)
            if rendered not in seen:
                seen.add(rendered)
                items.append((message, rendered))

        return items

    def render_message(self, message: Message, options: RenderOptions) -> str:
        """Resolve and tag-process a single record."""
        template = self.resolve_template(message, lookup_site(message, options.site))

        if template is None:
            self._report_contract_violation(message)

        return process_tags(message, template, self.mode, options.site)

    def _report_contract_violation(self, message: Message) -> None:
        logger.error(
            f"Unrenderable message record: id={message.id!r} params={message.params!r} extra={message.extra_fields()!r}"
        )
        raise MessageContractError(
            message,
            f"Message has neither id with site, text nor html property: {message!r}",
        )
