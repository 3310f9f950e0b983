"""Process-wide default store and module-level convenience functions.

Code that does not want to pass a MessageStore around can use these
functions, which all act on one shared store. The default store is
created on first use; call reset_default_store() (or
clear_global_messages()) between logical operations.
"""

from typing import Any

from .ids import message_output_id
from .ingest import xml_to_messages
from .models import Channel, Message, RenderMode
from .store import MessageStore

_default_store: MessageStore | None = None


def default_store() -> MessageStore:
    """Return the shared store, creating it if needed."""
    global _default_store
    if _default_store is None:
        _default_store = MessageStore()
    return _default_store


def reset_default_store(store: MessageStore | None = None) -> MessageStore:
    """Replace the shared store with a fresh one (or the one given)."""
    global _default_store
    _default_store = store if store is not None else MessageStore()
    return _default_store


def die_on_error(flag: bool | None = None) -> bool:
    """Get, and optionally set, the fail-on-error-add flag.

    When enabled, every error added to the default store writes all
    current errors as text and raises ErrorsAbort.
    """
    if flag is not None:
        default_store().fail_on_error_add = bool(flag)
    return default_store().fail_on_error_add


def clear_global_messages() -> bool:
    default_store().clear()
    return True


def add_message(channel: "str | Channel", item: Any = None, **fields: Any) -> Message:
    return default_store().add_message(channel, item, **fields)


def add_error(item: Any = None, **fields: Any) -> Message:
    return default_store().add_error(item, **fields)


def add_warning(item: Any = None, **fields: Any) -> Message:
    return default_store().add_warning(item, **fields)


def add_note(item: Any = None, **fields: Any) -> Message:
    return default_store().add_note(item, **fields)


def add_errors(*items: Any) -> list[Message]:
    return default_store().add_errors(*items)


def add_warnings(*items: Any) -> list[Message]:
    return default_store().add_warnings(*items)


def add_notes(*items: Any) -> list[Message]:
    return default_store().add_notes(*items)


def messages(channel: "str | Channel") -> list[Message]:
    return default_store().messages(channel)


def errors() -> list[Message]:
    return default_store().errors()


def warnings() -> list[Message]:
    return default_store().warnings()


def notes() -> list[Message]:
    return default_store().notes()


def any_errors() -> bool:
    return default_store().any_errors()


def any_warnings() -> bool:
    return default_store().any_warnings()


def any_notes() -> bool:
    return default_store().any_notes()


def output_errors_text(**options: Any) -> None:
    default_store().output_errors_text(**options)


def output_warnings_text(**options: Any) -> None:
    default_store().output_warnings_text(**options)


def output_notes_text(**options: Any) -> None:
    default_store().output_notes_text(**options)


def output_errors_html(**options: Any) -> None:
    default_store().output_errors_html(**options)


def output_warnings_html(**options: Any) -> None:
    default_store().output_warnings_html(**options)


def output_notes_html(**options: Any) -> None:
    default_store().output_notes_html(**options)


def show_errors(**options: Any) -> None:
    default_store().show_errors(**options)


def die_errors(**options: Any) -> bool:
    return default_store().die_errors(**options)


def get_message_string(message: Message, mode: "RenderMode | str", site: Any = None) -> str:
    return default_store().get_message_string(message, mode, site=site)


__all__ = [
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
    "xml_to_messages",
    "get_message_string",
    "message_output_id",
]
