"""
Error types raised by the tag manager.

ValidationError is only raised while the `validate` option is on.
ArityError is always raised; it flags a programming mistake.
"""

from __future__ import annotations


class MetaTagsError(Exception):
    """Base class for all meta tag errors."""


class ValidationError(MetaTagsError, ValueError):
    """A tag type, attribute name or URL failed Open Graph validation."""

    def __init__(self, message: str, code: str = "invalid", field: str | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.field = field


class ArityError(MetaTagsError, TypeError):
    """A dynamic tag setter was called without its value argument."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Missing value argument in the creation of the [{tag}] tag.")
        self.tag = tag
