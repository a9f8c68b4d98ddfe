"""
Validation component - Open Graph vocabulary tables.

Consulted by the tag manager only while the `validate` option is on.
"""

from ._impl import (
    TYPES,
    VALIDATORS,
    allowed_attributes,
    validate_attributes,
    validate_type,
    validate_url,
)

__all__ = [
    "TYPES",
    "VALIDATORS",
    "allowed_attributes",
    "validate_attributes",
    "validate_type",
    "validate_url",
]
