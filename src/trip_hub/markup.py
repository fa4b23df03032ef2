"""Escaping helpers for text that ends up inside generated HTML.

Every value that comes from the source tree (slugs, titles, file names) passes
through one of these before it reaches a template. Templates are rendered with
autoescaping off, so these filters are the only escaping that happens.
"""

from __future__ import annotations

import json
import re
from typing import Any
from urllib.parse import quote

_HTML_ESCAPES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#039;",
}
_HTML_ESCAPE_RE = re.compile("[&<>\"']")
_LABEL_SPLIT_RE = re.compile(r"[-_\s]+")
_HTML_SUFFIX_RE = re.compile(r"\.html$", re.IGNORECASE)


def escape_html(value: Any) -> str:
    """Escape the five HTML-reserved characters in ``value``."""
    return _HTML_ESCAPE_RE.sub(lambda match: _HTML_ESCAPES[match.group(0)], str(value))


def serialize_json(value: Any) -> str:
    """Return compact JSON that is safe to place inside a ``<script>`` element.

    Every ``<`` is written as ``\\u003c`` so a ``</script>`` sequence inside the
    data can never close the element early.
    """
    text = json.dumps(value, ensure_ascii=False, separators=(",", ":"))
    return text.replace("<", "\\u003c")


def url_segment(value: str) -> str:
    """Percent-encode a single path segment (slug or file name)."""
    return quote(value, safe="")


def format_agent_label(filename: str) -> str:
    """Turn ``gpt-4o_mini.html`` into ``Gpt 4o Mini``."""
    base = _HTML_SUFFIX_RE.sub("", filename)
    parts = [part for part in _LABEL_SPLIT_RE.split(base) if part]
    return " ".join(part[:1].upper() + part[1:] for part in parts)
