"""
Meta component input/output models.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# --- Validation Error ---


@dataclass(frozen=True)
class RenderValidationError:
    """Validation failure reported by the declarative entry point."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class RenderMetaTagsInput:
    """
    Declarative description of a page's tags.

    `tags` values are either plain values or mappings with "value" and
    "attributes" keys. `namespaces` holds attribute maps for the
    namespace-only tags (article, book, profile).
    """

    tags: Mapping[str, Any] = field(default_factory=dict)
    config: Mapping[str, Any] = field(default_factory=dict)
    content_type: str | None = None
    url: str | None = None
    namespaces: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    twitter: Mapping[str, Any] = field(default_factory=dict)


# --- Output Models ---


@dataclass(frozen=True)
class RenderMetaTagsOutput:
    """Rendered markup, or the errors that prevented it."""

    html: str = ""
    lines: tuple[str, ...] = ()
    errors: list[RenderValidationError] = field(default_factory=list)
    success: bool = True
