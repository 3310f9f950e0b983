"""Exception hierarchy for messagearray."""

from typing import Any


class MessageArrayError(Exception):
    """Base class for all messagearray errors."""


class MessageContractError(MessageArrayError):
    """A message record has nothing that can be rendered.

    Raised at render time when a record has neither an id resolvable
    through a site resolver, nor text, nor html.
    """

    def __init__(self, message_record: Any, detail: str):
        super().__init__(detail)
        self.message_record = message_record


class UnknownChannelError(MessageArrayError, ValueError):
    """Channel name is not one of errors, warnings, notes."""

    def __init__(self, name: Any):
        super().__init__(f"do not have message type {name}")
        self.name = name


class IngestionError(MessageArrayError):
    """Message document could not be parsed."""


class UnknownMessageIdError(MessageArrayError, KeyError):
    """Site catalog has no entry for a message id."""

    def __init__(self, message_id: str):
        super().__init__(f'do not have message id "{message_id}"')
        self.message_id = message_id

    def __str__(self) -> str:
        return self.args[0]


class ErrorsAbort(MessageArrayError):
    """Errors were reported and the current operation must stop.

    Raised after the errors have been written to the output stream, either
    because fail-on-error-add is enabled or by die_errors().
    """

    def __init__(self, errors: list):
        super().__init__('errors')
        self.errors = errors
