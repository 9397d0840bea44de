"""Input validators guarding what reaches Home Assistant and the page."""

from __future__ import annotations

import re
from typing import Any

from yarl import URL

from .const import ALLOWED_URL_SCHEMES, MAX_ENTITY_ID_LENGTH

ENTITY_ID_PATTERN = re.compile(r"^[a-z_][a-z0-9_]*\.[a-z0-9_]+$")

# Ampersand first so entities produced by later replacements are not escaped again
_HTML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def sanitize_text(value: Any) -> str:
    """Escape the HTML significant characters of any value.

    None becomes an empty string, everything else is converted with str().
    """
    if value is None:
        return ""
    text = str(value)
    for char, entity in _HTML_ESCAPES:
        text = text.replace(char, entity)
    return text


def is_valid_entity_id(value: Any) -> bool:
    """Check that value looks like a Home Assistant entity id (domain.object_id)."""
    if not value or not isinstance(value, str):
        return False
    return bool(ENTITY_ID_PATTERN.match(value)) and len(value) <= MAX_ENTITY_ID_LENGTH


def _parse_absolute_url(value: Any) -> URL | None:
    if not isinstance(value, str):
        return None
    try:
        url = URL(value)
    except (TypeError, ValueError):
        return None
    if not url.is_absolute() or not url.host:
        return None
    return url


def is_valid_url(value: Any) -> bool:
    """Check that value is empty or an absolute http(s) URL.

    An empty value is valid: no server URL means same origin.
    """
    if value is None or value == "":
        return True
    url = _parse_absolute_url(value)
    return url is not None and url.scheme in ALLOWED_URL_SCHEMES


def is_secure_url(value: Any) -> bool:
    """Check that value is empty or an absolute https URL."""
    if value is None or value == "":
        return True
    url = _parse_absolute_url(value)
    return url is not None and url.scheme == "https"
