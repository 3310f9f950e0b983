"""Data models for message records and render options."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .constants import CHANNEL_DEFAULTS, ID_PREFIX_SEPARATOR
from .exceptions import UnknownChannelError


class Channel(str, Enum):
    """The three fixed message channels."""
    ERRORS = "errors"
    WARNINGS = "warnings"
    NOTES = "notes"

    @classmethod
    def parse(cls, name: "str | Channel") -> "Channel":
        """Convert a channel name to a Channel.

        Raises:
            UnknownChannelError: If name is not errors, warnings or notes
        """
        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError:
            raise UnknownChannelError(name) from None


class RenderMode(str, Enum):
    """Output media for rendering and tag processing."""
    TEXT = "text"
    HTML = "html"


class Message(BaseModel):
    """A single error, warning or note.

    A record is displayable through its ``id`` (with a site resolver),
    its ``text`` or its ``html``. Nothing is checked at creation time;
    a record with none of them fails when it is rendered.

    Fields other than the five below are kept as extra attributes, so
    ingested ``property`` keys and caller data reach the site resolver.
    """
    text: str | None = None
    html: str | None = None
    id: str | None = None
    site: Any = None  # Per-record resolver, see messagearray.site
    params: dict[str, Any] | None = None

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    def extra_fields(self) -> dict[str, Any]:
        """Fields set on the record beyond the standard five."""
        return dict(self.model_extra or {})


@dataclass
class TagDescriptor:
    """Parsed tag marker handed to a site resolver."""
    name: str
    atts: dict[str, str | None] = field(default_factory=dict)


class RenderOptions(BaseModel):
    """Options for one render call.

    Unknown keys are accepted and passed through untouched so callers
    can hand extra data to their site resolver.
    """
    site: Any = None
    channel: Channel | None = None
    singular: str = ""
    plural: str = ""
    h2: bool | None = None
    prefix: str | None = None
    show_msg_ids: bool = False
    div_atts: dict[str, Any] = Field(default_factory=dict)
    ul_atts: dict[str, Any] = Field(default_factory=dict)
    stream: Any = None  # Output sink; sys.stdout when unset

    model_config = ConfigDict(extra="allow", arbitrary_types_allowed=True)

    @classmethod
    def for_channel(cls, channel: "str | Channel", **overrides: Any) -> "RenderOptions":
        """Build options with the channel's default labels and heading."""
        channel = Channel.parse(channel)
        values = {**CHANNEL_DEFAULTS[channel.value], "channel": channel}
        values.update(overrides)
        return cls(**values)

    @property
    def show_heading(self) -> bool:
        """Heading is shown unless h2 was explicitly turned off."""
        return self.h2 is None or bool(self.h2)

    @property
    def id_prefix(self) -> str:
        if self.prefix:
            return f"{self.prefix}{ID_PREFIX_SEPARATOR}"
        return ""
