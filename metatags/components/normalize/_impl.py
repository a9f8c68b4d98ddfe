"""
Value normalizer.

Pipeline applied to every tag value on `set`, in order:
1. date coercion (datetime/date -> ISO-8601 string)
2. URL resolution and validation for tags ending in url/image/video
3. markup stripping
4. printable-ASCII filtering (0x20-0x7E)
5. whitespace collapsing and trimming

Truncation runs later, at render time.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import UTC, date, datetime
from html.parser import HTMLParser
from typing import Any

from metatags.components.validation import validate_url

AssetResolver = Callable[[str], str]

ELLIPSIS = "..."

_URL_TAG = re.compile(r"(url|image|video)$", re.IGNORECASE)
_ABSOLUTE = re.compile(r"^https?://")
_NON_PRINTABLE = re.compile(r"[^\x20-\x7E]")
_WHITESPACE = re.compile(r"\s+")
_UNCLOSED_TAG = re.compile(r"<[a-zA-Z/!]")


# --- Dates ---


def coerce_date(value: Any) -> Any:
    """Format datetimes as ISO-8601 (naive values are taken as UTC)."""
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.strftime("%Y-%m-%dT%H:%M:%S%z")
    if isinstance(value, date):
        return value.isoformat()
    return value


# --- URLs ---


def is_url_tag(name: str) -> bool:
    return _URL_TAG.search(name) is not None


def resolve_url(
    value: str,
    tag_name: str,
    asset_resolver: AssetResolver | None = None,
    validate: bool = False,
) -> str:
    """
    Rewrite relative values through the asset resolver, then validate.

    Raises ValidationError when `validate` is on and the result is not an
    absolute URL.
    """
    if not _ABSOLUTE.match(value) and asset_resolver is not None:
        value = asset_resolver(value)

    if validate:
        validate_url(value, tag_name)

    return value


# --- Text ---


class _TagStripper(HTMLParser):
    """Collects text content, dropping tags and comments."""

    def __init__(self) -> None:
        super().__init__(convert_charrefs=False)
        self.parts: list[str] = []

    def handle_data(self, data: str) -> None:
        self.parts.append(data)

    def handle_entityref(self, name: str) -> None:
        self.parts.append(f"&{name};")

    def handle_charref(self, name: str) -> None:
        self.parts.append(f"&#{name};")


def strip_tags(value: str) -> str:
    if "<" not in value:
        return value
    stripper = _TagStripper()
    stripper.feed(value)
    flushed = len(stripper.parts)
    stripper.close()

    # An unterminated tag comes back from close() as text
    tail = "".join(stripper.parts[flushed:])
    if _UNCLOSED_TAG.match(tail):
        del stripper.parts[flushed:]

    return "".join(stripper.parts)


def filter_printable(value: str) -> str:
    return _NON_PRINTABLE.sub("", value)


def collapse_whitespace(value: str) -> str:
    return _WHITESPACE.sub(" ", value).strip()


def sanitize_text(value: Any) -> str:
    """Steps 3-5 of the pipeline; non-string values are stringified first."""
    if value is None:
        return ""
    text = value if isinstance(value, str) else str(coerce_date(value))
    return collapse_whitespace(filter_printable(strip_tags(text)))


def normalize_value(
    tag_name: str,
    value: Any,
    asset_resolver: AssetResolver | None = None,
    validate: bool = False,
) -> str:
    """Run the full pipeline on a raw tag value."""
    value = coerce_date(value)
    # Namespace-like tags carry attributes only
    if value is None:
        return ""

    text = str(value)
    if is_url_tag(tag_name):
        text = resolve_url(text, tag_name, asset_resolver, validate)

    return sanitize_text(text)


# --- Truncation ---


def truncate(text: str, limit: int = 160) -> str:
    """
    Cut `text` so that, with the ellipsis, it fits in `limit` characters.

    Strings of at most `limit - 3` characters are returned unchanged.
    """
    keep = max(limit - len(ELLIPSIS), 0)
    if len(text) > keep:
        return text[:keep] + ELLIPSIS
    return text
