"""Parsing of tag attribute strings such as ``param="name" lang=en``."""

import re

from .constants import ATTRIBUTE_TOKEN_PATTERN

_KEY_VALUE_SPLIT = re.compile(r'\s*=\s*', re.DOTALL)


def parse_attributes(raw: str | None) -> dict[str, str | None]:
    """Parse a tag's attribute string into a mapping.

    Tokens are ``key="quoted value"``, ``key=value`` or a bare ``key``.
    Keys are lower-cased and a later duplicate replaces an earlier one.
    Bare keys map to None.

    Args:
        raw: Attribute string, may be None or blank

    Returns:
        Mapping of attribute name to value

    Examples:
        >>> parse_attributes('param="first name" Lang=en flag')
        {'param': 'first name', 'lang': 'en', 'flag': None}
    """
    atts: dict[str, str | None] = {}

    if raw is None or not raw.strip():
        return atts

    for token in ATTRIBUTE_TOKEN_PATTERN.findall(raw):
        parts = _KEY_VALUE_SPLIT.split(token, maxsplit=1)
        name = parts[0].lower()
        value = _unquote(parts[1].strip()) if len(parts) > 1 else None
        atts[name] = value

    return atts


def _unquote(value: str) -> str:
    """Remove one layer of matching single or double quotes."""
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ('"', "'"):
        return value[1:-1]
    return value
