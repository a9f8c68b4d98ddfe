"""
Tags component - the two-namespace tag tree.
"""

from ._impl import GENERAL, NAMESPACES, TWITTER, TagEntry, TagStore

__all__ = [
    "GENERAL",
    "NAMESPACES",
    "TWITTER",
    "TagEntry",
    "TagStore",
]
