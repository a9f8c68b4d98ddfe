"""
metatags - Open Graph and Twitter Card meta tag builder.

Public surface:
- Manager: fluent tag builder and renderer
- ConfigStore: runtime options with dotted-path lookup
- ValidationError / ArityError: failures surfaced to the caller
"""

from metatags.components.config import DEFAULT_CONFIG, ConfigStore
from metatags.components.meta import (
    Manager,
    RenderMetaTagsInput,
    RenderMetaTagsOutput,
    run,
)
from metatags.components.tags import TagEntry
from metatags.domain.errors import ArityError, MetaTagsError, ValidationError

__all__ = [
    "DEFAULT_CONFIG",
    "ArityError",
    "ConfigStore",
    "Manager",
    "MetaTagsError",
    "RenderMetaTagsInput",
    "RenderMetaTagsOutput",
    "TagEntry",
    "ValidationError",
    "run",
]
