"""Tag substitution for message templates.

Templates may contain markers of the form ``[: name attr=val ... :]``.
The built-in ``sub`` tag inserts one of the message's params; every other
tag is handed to the site resolver when it can process tags, and renders
as nothing otherwise.
"""

import logging
import re
from typing import Any

from .attributes import parse_attributes
from .constants import SUB_TAG, TAG_PATTERN
from .models import Message, RenderMode, TagDescriptor
from .site import supports_tags, tag_site
from .utils import html_escape

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r'\s+')


def process_tags(message: Message, template: str, mode: RenderMode, site: Any = None) -> str:
    """Replace every tag marker in template.

    Args:
        message: Record the template belongs to
        template: Text or HTML template, chosen for mode
        mode: Render mode; HTML mode escapes substituted params
        site: Render-time resolver, wins over message.site for tags

    Returns:
        Template with all markers substituted
    """
    segments = TAG_PATTERN.split(template)

    # split() with a capturing group alternates literal text and markers
    for index in range(1, len(segments), 2):
        segments[index] = process_tag(message, segments[index][2:-2], mode, site)

    return "".join(segments)


def process_tag(message: Message, tag_body: str, mode: RenderMode, site: Any = None) -> str:
    """Render a single tag body (the marker without its delimiters)."""
    parts = _WHITESPACE.split(tag_body.strip(), maxsplit=1)
    tag_name = parts[0].lower()
    atts = parse_attributes(parts[1] if len(parts) > 1 else None)

    if tag_name == SUB_TAG:
        return _substitute_param(message, atts.get("param"), mode)

    resolver = tag_site(message, site)
    if supports_tags(resolver):
        result = resolver.process_message_tag(message, TagDescriptor(tag_name, atts), RenderMode(mode))
        return "" if result is None else result

    return ""


def _substitute_param(message: Message, param: str | None, mode: RenderMode) -> str:
    value = (message.params or {}).get(param) if param is not None else None

    if value is None:
        logger.warning(f"do not have param {param}")
        return ""

    if mode == RenderMode.HTML:
        return html_escape(value)
    return str(value)
