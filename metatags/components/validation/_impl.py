"""
Open Graph validation tables and checks.

Key behaviors:
- `type` values must come from a fixed enum
- attribute names are checked against the table for the tag's content type
- composite types ("video.episode") also accept the base type's names
- a type with no table entry accepts any attribute
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any
from urllib.parse import urlparse

from metatags.domain.errors import ValidationError

logger = logging.getLogger(__name__)

TYPES: tuple[str, ...] = (
    "article",
    "book",
    "profile",
    "website",
    "music.song",
    "music.album",
    "music.playlist",
    "music.radio_station",
    "video.movie",
    "video.episode",
    "video.tv_show",
    "video.other",
)

VALIDATORS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "type": TYPES,
        "article": (
            "published_time",
            "modified_time",
            "expiration_time",
            "author",
            "section",
            "tag",
        ),
        "audio": (
            "secure_url",
            "type",
        ),
        "book": (
            "author",
            "isbn",
            "release_date",
            "tag",
        ),
        "music.song": (
            "duration",
            "album",
            "album:disc",
            "album:track",
            "musician",
        ),
        "music.album": (
            "song",
            "song:disc",
            "song:track",
            "musician",
            "release_date",
        ),
        "music.playlist": (
            "song",
            "song:disc",
            "song:track",
            "creator",
        ),
        "music.radio_station": ("creator",),
        "profile": (
            "first_name",
            "last_name",
            "username",
            "gender",
        ),
        "video": (
            "secure_url",
            "type",
            "width",
            "height",
            "actor",
            "role",
            "director",
            "writer",
            "duration",
            "release_date",
            "tag",
        ),
        "video.episode": ("video:series",),
    }
)


def allowed_attributes(content_type: str) -> tuple[str, ...]:
    """Attribute names allowed for a content type (empty if unknown)."""
    return VALIDATORS.get(content_type, ())


def validate_attributes(content_type: str, attributes: Mapping[str, Any]) -> bool:
    """
    Check every attribute name against the content type's table.

    Raises ValidationError on the first disallowed name.
    """
    allowed = allowed_attributes(content_type)

    # Composite types also accept the base type's names
    base, dot, _ = content_type.partition(".")
    if dot:
        allowed = allowed + allowed_attributes(base)

    if not allowed:
        return True

    for name in attributes:
        if name not in allowed:
            message = f"Open Graph: Invalid attribute '{name}' ({content_type})"
            logger.warning(message)
            raise ValidationError(message, code="invalid_attribute", field=name)

    return True


def validate_type(content_type: str) -> bool:
    """Raises ValidationError unless `content_type` is a known Open Graph type."""
    if content_type not in TYPES:
        message = f"Open Graph: Invalid type value '{content_type}' (unknown type)"
        logger.warning(message)
        raise ValidationError(message, code="invalid_type", field="type")
    return True


def is_valid_url(value: str) -> bool:
    """Absolute URL check: a scheme and a host, no whitespace."""
    if not value or any(c.isspace() for c in value):
        return False
    try:
        result = urlparse(value)
    except ValueError:
        return False
    return bool(result.scheme) and result.scheme.isalpha() and bool(result.netloc)


def validate_url(value: str, tag_name: str) -> bool:
    if not is_valid_url(value):
        message = f"Open Graph: Invalid {tag_name} URL '{value}'"
        logger.warning(message)
        raise ValidationError(message, code="invalid_url", field=tag_name)
    return True
