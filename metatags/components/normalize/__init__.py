"""
Normalize component - value sanitizing and truncation.

Pure functions; nothing here touches the tag tree.
"""

from ._impl import (
    ELLIPSIS,
    AssetResolver,
    coerce_date,
    collapse_whitespace,
    filter_printable,
    is_url_tag,
    normalize_value,
    resolve_url,
    sanitize_text,
    strip_tags,
    truncate,
)

__all__ = [
    "ELLIPSIS",
    "AssetResolver",
    "coerce_date",
    "collapse_whitespace",
    "filter_printable",
    "is_url_tag",
    "normalize_value",
    "resolve_url",
    "sanitize_text",
    "strip_tags",
    "truncate",
]
