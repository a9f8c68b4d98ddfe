"""
Meta component - fluent tag manager.
"""

from ._impl import NAMESPACE_TAGS, Manager, snake_case
from .component import run
from .models import RenderMetaTagsInput, RenderMetaTagsOutput, RenderValidationError
from .ports import AssetResolverPort, RequestContextPort, ViewContentPort

__all__ = [
    # Entry points
    "Manager",
    "run",
    # Models
    "RenderMetaTagsInput",
    "RenderMetaTagsOutput",
    "RenderValidationError",
    # Ports
    "AssetResolverPort",
    "RequestContextPort",
    "ViewContentPort",
    # Helpers
    "NAMESPACE_TAGS",
    "snake_case",
]
