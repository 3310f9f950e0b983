"""Ingestion of message documents.

A message document looks like::

    <messages>
        <message list="errors">
            <property key="text" value="Error in attribute"/>
        </message>
        <message list="warnings">
            <property key="text">Warning in contents</property>
            <property key="id">disk-low</property>
        </message>
    </messages>

Each ``message`` element becomes one Message in the channel named by its
``list`` attribute; each ``property`` sets the field named by ``key``.
"""

import logging
import re
from pathlib import Path
from xml.etree.ElementTree import Element, ParseError

from defusedxml import DefusedXmlException
from defusedxml.ElementTree import fromstring as defused_fromstring
from pydantic import ValidationError

from .exceptions import IngestionError
from .models import Channel, Message

logger = logging.getLogger(__name__)

_LEADING_JUNK = re.compile(r'^.*?<', re.DOTALL)
_TRAILING_JUNK = re.compile(r'^(.*</messages>).*', re.DOTALL)


def xml_to_messages(raw: str, store=None, strip: bool = False) -> list[Message]:
    """Parse a message document and add its messages to a store.

    The whole document is checked before anything is added, so an
    unknown channel name leaves the store untouched.

    Args:
        raw: Document text
        store: Target MessageStore; the default store when None
        strip: Drop text before the first tag and after </messages>

    Returns:
        The added messages in document order

    Raises:
        IngestionError: If the document is not well-formed XML
        UnknownChannelError: If a message names an unknown channel
    """
    if store is None:
        from .default import default_store
        store = default_store()

    if strip:
        raw = _LEADING_JUNK.sub('<', raw, count=1)
        raw = _TRAILING_JUNK.sub(r'\1', raw, count=1)

    try:
        root = defused_fromstring(raw)
    except ParseError as e:
        raise IngestionError(f"XML parse error: {e}") from e
    except DefusedXmlException as e:
        raise IngestionError(f"Forbidden XML construct: {e}") from e

    parsed = [(Channel.parse(el.get('list')), _element_to_message(el)) for el in root.findall('message')]

    for channel, message in parsed:
        store.add_message(channel, message)

    logger.debug(f"Ingested {len(parsed)} messages from document <{root.tag}>")
    return [message for _, message in parsed]


def xml_file_to_messages(file_path: str | Path, store=None, strip: bool = False) -> list[Message]:
    """Read a message document from disk; see xml_to_messages()."""
    content = Path(file_path).read_text(encoding='utf-8')
    return xml_to_messages(content, store=store, strip=strip)


def _element_to_message(element: Element) -> Message:
    fields = {}

    for prop in element.findall('property'):
        key = prop.get('key')
        if key is None:
            logger.warning("Skipping property without key attribute")
            continue

        # value attribute wins over element content
        if 'value' in prop.attrib:
            fields[key] = prop.get('value')
        else:
            fields[key] = prop.text

    try:
        return Message(**fields)
    except ValidationError as e:
        raise IngestionError(f"Invalid message properties {sorted(fields)}: {e}") from e
