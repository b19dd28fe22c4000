# core/templatetags/auto_link.py
"""
Template filter turning web and e-mail addresses into links.

Usage in templates::

    {% load auto_link %}
    {{ event.description|auto_link }}

Only addresses starting with a scheme (``http``, ``https``, ``ftp``,
``ftps``) or with ``www.`` are linked; bare host names such as
``abc.example.ch`` stay plain text. The surrounding text is escaped.
"""

import re

from django import template
from django.utils.html import escape
from django.utils.safestring import mark_safe

register = template.Library()

# Trailing punctuation is not part of the address
_URL = r"(?:https?|ftps?)://[^\s<>\"']*[^\s<>\"'.,;:!?)]"
_WWW = r"(?<![\w./@-])www\.[^\s<>\"']*[^\s<>\"'.,;:!?)]"
_EMAIL = r"(?<![^\s(])[A-Za-z0-9._%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)+"

LINK_RE = re.compile(rf"(?P<url>{_URL})|(?P<www>{_WWW})|(?P<email>{_EMAIL})")


def _link(match) -> str:
    text = escape(match.group(0))
    if match.group("email"):
        return f'<a href="mailto:{text}">{text}</a>'
    href = text if match.group("url") else f"http://{text}"
    return f'<a href="{href}" target="_blank">{text}</a>'


@register.filter(name="auto_link")
def auto_link(value) -> str:
    """
    Replace web and e-mail addresses in ``value`` with HTML links.

    Parameters
    ----------
    value : str
        Plain text, possibly containing addresses.

    Returns
    -------
    SafeString
        The escaped text with ``<a>`` tags around recognized addresses.
    """
    if value is None:
        return ""
    text = str(value)
    parts = []
    last = 0
    for match in LINK_RE.finditer(text):
        parts.append(escape(text[last:match.start()]))
        parts.append(_link(match))
        last = match.end()
    parts.append(escape(text[last:]))
    return mark_safe("".join(parts))
