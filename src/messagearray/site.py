"""Site resolvers: pluggable message catalogs and custom tag handlers.

A site resolver turns message ids into text or HTML, typically from a
localized catalog, and can optionally expand tag markers other than the
built-in ``sub`` tag. Any object with the right methods works; the
protocols below only document the shape.

There are three situations the pipeline distinguishes:

- no resolver at all (``None``): only ``text``/``html`` records render;
- a resolver without ``process_message_tag``: id lookup works, unknown
  tags render as empty strings;
- a full resolver: unknown tags are delegated to it.
"""

import json
import logging
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from .exceptions import UnknownMessageIdError
from .models import Message, RenderMode, TagDescriptor
from .utils import html_escape

logger = logging.getLogger(__name__)


@runtime_checkable
class SiteResolver(Protocol):
    """Resolver capable of looking up message ids."""

    def get_message_text(self, message: Message) -> str:
        """Return the plain-text template for message.id."""
        ...

    def get_message_html(self, message: Message) -> str:
        """Return the HTML template for message.id."""
        ...


@runtime_checkable
class TagProcessor(Protocol):
    """Optional capability: expand non-built-in tag markers.

    The return value is used verbatim, so it must already be escaped
    correctly for the given mode.
    """

    def process_message_tag(self, message: Message, tag: TagDescriptor, mode: RenderMode) -> str:
        ...


def supports_tags(site: Any) -> bool:
    """True if site can process custom tag markers."""
    return site is not None and callable(getattr(site, "process_message_tag", None))


def lookup_site(message: Message, site: Any = None) -> Any:
    """Resolver used to look up a message's display string.

    A resolver attached to the record wins over one given at render time.
    """
    return message.site if message.site is not None else site


def tag_site(message: Message, site: Any = None) -> Any:
    """Resolver used for custom tags: the render-time one wins."""
    return site if site is not None else message.site


class CatalogSite:
    """Site resolver backed by a language-keyed message catalog.

    The catalog maps language to message id to a definition with ``text``
    and optionally ``html``::

        {
            "en": {"no-permission": {"text": "Do not have permission"}},
            "es": {"no-permission": {"text": "No tiene permiso"}}
        }

    Changing ``lang`` switches the language of later renders.
    """

    def __init__(self, catalog: dict[str, dict[str, dict[str, str]]], lang: str):
        if not lang:
            raise ValueError("must have language")
        self.catalog = catalog
        self.lang = lang

    @classmethod
    def from_file(cls, path: str | Path, lang: str) -> "CatalogSite":
        """Load a catalog from a JSON file.

        Raises:
            ValueError: If the file is not valid JSON or not an object
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                catalog = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in catalog file {path}: {e}")

        if not isinstance(catalog, dict):
            raise ValueError(f"Catalog file {path} must contain a JSON object")

        logger.debug(f"Loaded catalog {path} with languages: {', '.join(sorted(catalog))}")
        return cls(catalog, lang)

    def get_message_text(self, message: Message) -> str:
        return self._definition(message).get("text", "")

    def get_message_html(self, message: Message) -> str:
        definition = self._definition(message)

        # fall back to escaped text when there is no HTML form
        if definition.get("html") is not None:
            return definition["html"]
        return html_escape(definition.get("text"))

    def _definition(self, message: Message) -> dict[str, str]:
        definition = self.catalog.get(self.lang, {}).get(message.id)
        if not definition:
            raise UnknownMessageIdError(message.id)
        return definition
