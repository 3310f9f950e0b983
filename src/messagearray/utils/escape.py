"""HTML escaping for message content."""

from typing import Any

_HTML_ESCAPES = (
    ("&", "&amp;"),
    ('"', "&quot;"),
    ("<", "&lt;"),
    (">", "&gt;"),
)


def html_escape(value: Any) -> str:
    """Escape &, ", < and > for use in HTML.

    Single quotes are left alone, unlike html.escape(). None becomes
    the empty string.

    Examples:
        >>> html_escape('<em>"a" & b</em>')
        '&lt;em&gt;&quot;a&quot; &amp; b&lt;/em&gt;'
    """
    if value is None:
        return ""

    escaped = str(value)
    for char, entity in _HTML_ESCAPES:
        escaped = escaped.replace(char, entity)
    return escaped
