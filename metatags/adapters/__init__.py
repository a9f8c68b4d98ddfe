"""
Concrete collaborators for the tag manager.
"""

from .assets import BaseUrlAssetResolver
from .request_context import StarletteRequestContext, StaticRequestContext
from .view_content import StaticViewContent

__all__ = [
    "BaseUrlAssetResolver",
    "StarletteRequestContext",
    "StaticRequestContext",
    "StaticViewContent",
]
