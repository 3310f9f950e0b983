"""messagearray - accumulate errors, warnings and notes; render them later.

Code reports any number of messages while it runs; a separate stage shows
them as plain text or HTML.

Basic usage:
    from messagearray import MessageStore

    store = MessageStore()
    store.add_error("Filehandle not open")
    store.add_warning(id="disk-low", params={"free": "5%"})

    store.output_errors_text()      # * Filehandle not open
    store.output_warnings_html(site=catalog_site)

Module-level functions (add_error(), output_errors_html(), ...) act on a
shared default store.
"""

__version__ = "0.11.0"
__author__ = "messagearray contributors"
__description__ = "Accumulate errors, warnings and notes and render them as text or HTML"

from .attributes import parse_attributes
from .config import MessageArrayConfig, load_config
from .default import (
    add_error,
    add_errors,
    add_message,
    add_note,
    add_notes,
    add_warning,
    add_warnings,
    any_errors,
    any_notes,
    any_warnings,
    clear_global_messages,
    default_store,
    die_errors,
    die_on_error,
    errors,
    get_message_string,
    messages,
    notes,
    output_errors_html,
    output_errors_text,
    output_notes_html,
    output_notes_text,
    output_warnings_html,
    output_warnings_text,
    reset_default_store,
    show_errors,
    warnings,
    xml_to_messages,
)
from .exceptions import (
    ErrorsAbort,
    IngestionError,
    MessageArrayError,
    MessageContractError,
    UnknownChannelError,
    UnknownMessageIdError,
)
from .ids import message_output_id
from .ingest import xml_file_to_messages
from .models import Channel, Message, RenderMode, RenderOptions, TagDescriptor
from .render import HtmlRenderer, MessageRenderer, TextRenderer, get_renderer
from .site import CatalogSite, SiteResolver, TagProcessor, supports_tags
from .store import MessageStore
from .tags import process_tags

__all__ = [
    # Version info
    "__version__",
    "__author__",
    "__description__",

    # Store and models
    "MessageStore",
    "Message",
    "Channel",
    "RenderMode",
    "RenderOptions",
    "TagDescriptor",

    # Rendering pipeline
    "MessageRenderer",
    "TextRenderer",
    "HtmlRenderer",
    "get_renderer",
    "parse_attributes",
    "process_tags",
    "message_output_id",

    # Site resolvers
    "SiteResolver",
    "TagProcessor",
    "CatalogSite",
    "supports_tags",

    # Ingestion
    "xml_to_messages",
    "xml_file_to_messages",

    # Configuration
    "MessageArrayConfig",
    "load_config",

    # Errors
    "MessageArrayError",
    "MessageContractError",
    "UnknownChannelError",
    "IngestionError",
    "UnknownMessageIdError",
    "ErrorsAbort",

    # Default store convenience API
    "default_store",
    "reset_default_store",
    "die_on_error",
    "clear_global_messages",
    "add_message",
    "add_error",
    "add_warning",
    "add_note",
    "add_errors",
    "add_warnings",
    "add_notes",
    "messages",
    "errors",
    "warnings",
    "notes",
    "any_errors",
    "any_warnings",
    "any_notes",
    "output_errors_text",
    "output_warnings_text",
    "output_notes_text",
    "output_errors_html",
    "output_warnings_html",
    "output_notes_html",
    "show_errors",
    "die_errors",
    "get_message_string",
]
